from pathlib import Path

from . import app


@app.command()
def delete(position: int, /, *, workdir: Path = Path()) -> None:
    """Delete the slide at POSITION.

    Args:
        position: 1-based position of the slide in the deck
        workdir: Path to move into before running the command

    """
    from ..configuring.settings import Settings
    from ..pipelines import open_host, select

    host = open_host(Settings.from_yaml(workdir))
    select(host, position)
    host.delete_current()
