from pathlib import Path

from ..models import ViewContext
from . import app


@app.command()
def show(
    position: int = 1,
    /,
    *,
    view: ViewContext = ViewContext.FULL,
    workdir: Path = Path(),
) -> None:
    """Show the slide at POSITION.

    Args:
        position: 1-based position of the slide in the deck
        view: Render the whole slide or only its thumbnail
        workdir: Path to move into before running the command

    """
    from rich.console import Console

    from ..configuring.settings import Settings
    from ..pipelines import show

    show(Settings.from_yaml(workdir), position, view, Console())
