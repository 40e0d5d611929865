from pathlib import Path

from . import app


@app.command()
def watch(*, output: Path | None = None, workdir: Path = Path()) -> None:
    """Export the deck in WORKDIR to HTML every time its file changes.

    Args:
        output: Path of the HTML page, defaults to the html_output setting
        workdir: Path to move into before running the command

    """
    from logging import getLogger

    from ..configuring.settings import Settings
    from ..pipelines import export, watch

    logger = getLogger(__name__)
    settings = Settings.from_yaml(workdir)
    logger.info(f"Watching {settings.deck}")
    watch(settings.deck, export, settings, output)
