from pathlib import Path

from . import app


@app.command()
def move(source: int, destination: int, /, *, workdir: Path = Path()) -> None:
    """Move the slide at SOURCE to DESTINATION and renumber the deck.

    Args:
        source: 1-based position of the slide to move
        destination: 1-based position the slide will have after the move
        workdir: Path to move into before running the command

    """
    from ..configuring.settings import Settings
    from ..pipelines import open_host

    open_host(Settings.from_yaml(workdir)).move_slide(source - 1, destination - 1)
