"""Model classes.

- Scalars: [`SlideId`][slidez.models.scalars.SlideId] and \
    [`ViewContext`][slidez.models.scalars.ViewContext].
- Rendered content: blocks and inline spans, see [`slidez.models.blocks`].
- Stored slides and render results, see [`slidez.models.slides`].
"""

from .blocks import (
    Block,
    Emphasis,
    InlineText,
    ListBlock,
    OrderedItem,
    Paragraph,
    SectionHeader,
    Span,
    Strong,
    SubsectionHeader,
    Text,
    Title,
    plain_text,
)
from .scalars import SlideId, ViewContext
from .slides import EditView, RenderedSlide, Slide, SlideDraft, SlidePatch

__all__ = [
    "Block",
    "EditView",
    "Emphasis",
    "InlineText",
    "ListBlock",
    "OrderedItem",
    "Paragraph",
    "RenderedSlide",
    "SectionHeader",
    "Slide",
    "SlideDraft",
    "SlideId",
    "SlidePatch",
    "Span",
    "Strong",
    "SubsectionHeader",
    "Text",
    "Title",
    "ViewContext",
    "plain_text",
]
