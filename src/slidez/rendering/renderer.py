"""Render slide content into blocks for a given view."""

from ..models.blocks import Block
from ..models.scalars import ViewContext
from ..models.slides import RenderedSlide, Slide
from .grouping import group_lines
from .lines import split_lines

THUMBNAIL_MAX_BLOCKS = 12
"""Number of blocks kept by thumbnail renders. Later blocks are dropped."""


def render(content: str, view: ViewContext = ViewContext.FULL) -> list[Block]:
    """Render raw slide content into blocks.

    Every call parses the content from scratch: there is no cache and no state \
    shared between calls. Any string is accepted, the empty string renders to no \
    block, and malformed markers are kept as literal text.

    Args:
        content: Raw slide content, newline-delimited.
        view: Consumption mode. Thumbnails only keep the first \
            [`THUMBNAIL_MAX_BLOCKS`][slidez.rendering.renderer.THUMBNAIL_MAX_BLOCKS] \
            blocks.

    Returns:
        The blocks, in content order.
    """
    blocks = list(group_lines(split_lines(content)))
    match ViewContext(view):
        case ViewContext.THUMBNAIL:
            return blocks[:THUMBNAIL_MAX_BLOCKS]
        case ViewContext.FULL:
            return blocks


def render_slide(slide: Slide, view: ViewContext = ViewContext.FULL) -> RenderedSlide:
    return RenderedSlide(
        title=slide.title, blocks=render(slide.content, view), view=ViewContext(view)
    )
