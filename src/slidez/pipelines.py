from collections.abc import Callable
from logging import getLogger
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from watchfiles import watch as watchfiles_watch

from .configuring.settings import Settings
from .exceptions import SlidezError
from .models import RenderedSlide, ViewContext
from .presenting import PresentationHost
from .processing.html_formatter import render_deck_html
from .processing.rich_formatter import RichFormatter
from .rendering import render_slide
from .store import YamlSlideStore

_logger = getLogger(__name__)


def open_host(settings: Settings) -> PresentationHost:
    return PresentationHost(
        YamlSlideStore(settings.deck),
        new_slide_title=settings.new_slide_title,
        new_slide_content=settings.new_slide_content,
    )


def select(host: PresentationHost, position: int) -> None:
    """Make the slide at the 1-based `position` current.

    Raises:
        SlidezError: Raised if there is no slide at this position.
    """
    if not 1 <= position <= len(host.slides):
        msg = f"no slide at position {position}, the deck has {len(host.slides)}"
        raise SlidezError(msg)
    host.go_to(position - 1)


def slide_panel(rendered: RenderedSlide, position: int, total: int) -> Panel:
    compact = rendered.view is ViewContext.THUMBNAIL
    return Panel(
        RichFormatter(rendered.view).format(rendered.blocks),
        title=f"{position}/{total}",
        title_align="left",
        subtitle=Text(rendered.title),
        border_style="green" if compact else "blue",
        padding=(0, 1) if compact else (1, 4),
    )


def show(settings: Settings, position: int, view: ViewContext, console: Console) -> None:
    """Print the slide at the 1-based `position`."""
    host = open_host(settings)
    if not host.slides:
        console.print("No slides yet, create one with [bold]slidez add[/]")
        return
    select(host, position)
    rendered = host.view(view)
    assert isinstance(rendered, RenderedSlide)
    console.print(slide_panel(rendered, host.current_index + 1, len(host.slides)))


def list_slides(settings: Settings, console: Console) -> None:
    host = open_host(settings)
    thumbnails = host.thumbnails()
    if not thumbnails:
        console.print("No slides yet, create one with [bold]slidez add[/]")
        return
    for position, (slide, thumbnail) in enumerate(
        zip(host.slides, thumbnails, strict=True), start=1
    ):
        console.print(f"[dim]id {slide.id}, order {slide.order}[/]")
        console.print(slide_panel(thumbnail, position, len(thumbnails)))


def export(settings: Settings, output: Path | None = None) -> Path:
    """Write the deck as a standalone HTML page.

    Args:
        settings: Resolved settings, giving the deck file and the default output.
        output: Path of the HTML page, overriding the settings.

    Returns:
        Path of the written page.
    """
    output = settings.html_output if output is None else output
    slides = YamlSlideStore(settings.deck).list_all()
    html = render_deck_html(
        [render_slide(slide, ViewContext.FULL) for slide in slides],
        [render_slide(slide, ViewContext.THUMBNAIL) for slide in slides],
        title=settings.html_title,
    )
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf8")
    _logger.info("Exported %d slides to %s", len(slides), output)
    return output


def watch[**P](
    file: Path,
    function: Callable[P, Any],
    *function_args: P.args,
    **function_kwargs: P.kwargs,
) -> None:
    """Run `function` once, then again every time `file` changes.

    The parent directory is watched rather than the file itself so that editors \
    replacing the file on save are handled. Exceptions raised by `function` are \
    logged and watching goes on.
    """
    file = file.resolve()
    _logger.info("Initial build")
    try:
        function(*function_args, **function_kwargs)
        _logger.info("Initial build finished")
    except Exception as e:
        _logger.exception(str(e))

    for _ in watchfiles_watch(
        file.parent,
        watch_filter=lambda _, path: Path(path).resolve() == file,
        raise_interrupt=False,
        recursive=False,
    ):
        _logger.info("Detected changes, starting a new build")
        try:
            function(*function_args, **function_kwargs)
            _logger.info("Build finished")
        except Exception as e:
            _logger.exception(str(e))
