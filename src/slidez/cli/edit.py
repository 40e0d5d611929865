from pathlib import Path

from . import app


@app.command()
def edit(
    position: int,
    /,
    *,
    title: str | None = None,
    content: str | None = None,
    workdir: Path = Path(),
) -> None:
    """Edit the slide at POSITION, or print its raw text if nothing is given.

    Args:
        position: 1-based position of the slide in the deck
        title: New title
        content: New content
        workdir: Path to move into before running the command

    """
    from rich.console import Console
    from rich.syntax import Syntax

    from ..configuring.settings import Settings
    from ..pipelines import open_host, select

    host = open_host(Settings.from_yaml(workdir))
    select(host, position)
    edit_view = host.start_editing()
    if title is None and content is None:
        host.cancel_editing()
        console = Console()
        console.print(edit_view.title, markup=False, style="bold")
        console.print(Syntax(edit_view.content, "markdown", word_wrap=True))
        return
    host.save_edit(title=title, content=content)
