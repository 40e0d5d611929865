from pathlib import Path

from . import app


@app.command()
def add(
    title: str | None = None,
    /,
    *,
    content: str | None = None,
    workdir: Path = Path(),
) -> None:
    """Append a slide to the deck.

    Args:
        title: Title of the new slide, defaults to the new_slide_title setting
        content: Content of the new slide, defaults to the new_slide_content setting
        workdir: Path to move into before running the command

    """
    from ..configuring.settings import Settings
    from ..pipelines import open_host

    open_host(Settings.from_yaml(workdir)).add_slide(title, content)
