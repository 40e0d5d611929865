from collections.abc import Sequence
from functools import cache
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from ..models.blocks import (
    Block,
    InlineText,
    ListBlock,
    OrderedItem,
    Paragraph,
    SectionHeader,
    SubsectionHeader,
    Title,
)
from ..models.scalars import ViewContext
from ..models.slides import RenderedSlide
from . import BlockVisitor, Formatter

_CSS_PREFIXES = {ViewContext.FULL: "slide", ViewContext.THUMBNAIL: "thumb"}


@cache
def environment() -> Environment:
    """Jinja2 environment loading the templates shipped with slidez.

    Autoescaping is on for every template: slide text always reaches the output \
    escaped, only the templates produce tags.
    """
    return Environment(
        loader=PackageLoader("slidez", "templates"),
        autoescape=select_autoescape(default=True, default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class HtmlFormatter(Formatter[Markup]):
    """Format blocks as an HTML fragment.

    CSS classes are prefixed per view (`slide-` or `thumb-`) so that a single \
    stylesheet can style full slides and thumbnails differently.
    """

    def __init__(self, view: ViewContext = ViewContext.FULL) -> None:
        self._view = ViewContext(view)
        self._visitor = _TemplateDataVisitor()

    def format(self, blocks: Sequence[Block]) -> Markup:
        template = environment().get_template("blocks.html.jinja")
        return Markup(
            template.render(
                prefix=_CSS_PREFIXES[self._view],
                blocks=[block.accept(self._visitor) for block in blocks],
            )
        )


def render_deck_html(
    slides: Sequence[RenderedSlide], thumbnails: Sequence[RenderedSlide], title: str
) -> str:
    """Render a standalone HTML page with the full slides and a thumbnail sidebar."""
    template = environment().get_template("deck.html.jinja")
    full_formatter = HtmlFormatter(ViewContext.FULL)
    thumbnail_formatter = HtmlFormatter(ViewContext.THUMBNAIL)
    return template.render(
        title=title,
        slides=[
            {
                "title": slide.title,
                "heading": slide.heading,
                "body": full_formatter.format(slide.blocks),
            }
            for slide in slides
        ],
        thumbnails=[
            {"title": slide.title, "body": thumbnail_formatter.format(slide.blocks)}
            for slide in thumbnails
        ],
    )


class _TemplateDataVisitor(BlockVisitor[[], dict[str, Any]]):
    def visit_title(self, block: Title) -> dict[str, Any]:
        return {"kind": "title", "text": _spans(block.text)}

    def visit_section_header(self, block: SectionHeader) -> dict[str, Any]:
        return {"kind": "section_header", "text": _spans(block.text)}

    def visit_subsection_header(self, block: SubsectionHeader) -> dict[str, Any]:
        return {"kind": "subsection_header", "text": _spans(block.text)}

    def visit_list(self, block: ListBlock) -> dict[str, Any]:
        return {"kind": "list", "items": [_spans(item) for item in block.items]}

    def visit_ordered_item(self, block: OrderedItem) -> dict[str, Any]:
        return {
            "kind": "ordered_item",
            "index": block.index,
            "text": _spans(block.text),
        }

    def visit_paragraph(self, block: Paragraph) -> dict[str, Any]:
        return {"kind": "paragraph", "text": _spans(block.text)}


def _spans(inline: InlineText) -> list[dict[str, str]]:
    return [
        {"kind": type(span).__name__.lower(), "text": span.text} for span in inline
    ]
