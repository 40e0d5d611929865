from pathlib import Path

from . import app


@app.command()
def export(*, output: Path | None = None, workdir: Path = Path()) -> None:
    """Export the deck in WORKDIR as a standalone HTML page.

    Args:
        output: Path of the HTML page, defaults to the html_output setting
        workdir: Path to move into before running the command

    """
    from ..configuring.settings import Settings
    from ..pipelines import export

    export(Settings.from_yaml(workdir), output)
