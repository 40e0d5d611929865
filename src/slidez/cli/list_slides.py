from pathlib import Path

from . import app


@app.command(name="list")
def list_slides(*, workdir: Path = Path()) -> None:
    """List the slides of the deck in WORKDIR as thumbnails.

    Args:
        workdir: Path to move into before running the command

    """
    from rich.console import Console

    from ..configuring.settings import Settings
    from ..pipelines import list_slides

    list_slides(Settings.from_yaml(workdir), Console())
