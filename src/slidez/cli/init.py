from pathlib import Path

from . import app


@app.command()
def init(*, force: bool = False, workdir: Path = Path()) -> None:
    """Write a starter deck in WORKDIR.

    Args:
        force: Overwrite an existing deck file
        workdir: Path to move into before running the command

    """
    from logging import getLogger

    from ..configuring.settings import Settings
    from ..store import YamlSlideStore, seed

    logger = getLogger(__name__)
    settings = Settings.from_yaml(workdir)
    if settings.deck.exists():
        if not force:
            logger.info(f"Nothing to do: {settings.deck} already exists")
            return
        settings.deck.unlink()
    slides = seed(YamlSlideStore(settings.deck))
    logger.info(f"Wrote {len(slides)} slides to {settings.deck}")
