from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.rule import Rule
from rich.text import Text as RichText

from ..models.blocks import (
    Block,
    Emphasis,
    InlineText,
    ListBlock,
    OrderedItem,
    Paragraph,
    SectionHeader,
    Strong,
    SubsectionHeader,
    Title,
)
from ..models.scalars import ViewContext
from . import BlockVisitor, Formatter


@dataclass(frozen=True)
class _Styles:
    accent: str
    title: str
    section_header: str
    subsection_header: str
    body: str
    bullet: str
    title_rule: bool


_STYLES = {
    ViewContext.FULL: _Styles(
        accent="blue",
        title="bold bright_white",
        section_header="bold underline",
        subsection_header="bold",
        body="",
        bullet="  • ",
        title_rule=True,
    ),
    ViewContext.THUMBNAIL: _Styles(
        accent="green",
        title="bold",
        section_header="bold",
        subsection_header="",
        body="dim",
        bullet=" · ",
        title_rule=False,
    ),
}


class RichFormatter(Formatter[Group]):
    """Format blocks as rich renderables for terminal display.

    Span texts are appended as plain strings, so square brackets in slide content \
    are never interpreted as rich markup.
    """

    def __init__(self, view: ViewContext = ViewContext.FULL) -> None:
        self._visitor = _RichBlockVisitor(_STYLES[ViewContext(view)])

    def format(self, blocks: Sequence[Block]) -> Group:
        return Group(*(block.accept(self._visitor) for block in blocks))


class _RichBlockVisitor(BlockVisitor[[], RenderableType]):
    def __init__(self, styles: _Styles) -> None:
        self._styles = styles

    def visit_title(self, block: Title) -> RenderableType:
        text = self._inline(block.text, self._styles.title)
        text.justify = "center"
        if self._styles.title_rule:
            return Group(text, Rule(style=self._styles.accent))
        return text

    def visit_section_header(self, block: SectionHeader) -> RenderableType:
        return self._inline(block.text, self._styles.section_header)

    def visit_subsection_header(self, block: SubsectionHeader) -> RenderableType:
        text = RichText("▍", style=self._styles.accent)
        text.append_text(self._inline(block.text, self._styles.subsection_header))
        return text

    def visit_list(self, block: ListBlock) -> RenderableType:
        lines = []
        for item in block.items:
            line = RichText(self._styles.bullet, style=self._styles.accent)
            line.append_text(self._inline(item, self._styles.body))
            lines.append(line)
        return Group(*lines)

    def visit_ordered_item(self, block: OrderedItem) -> RenderableType:
        text = RichText(f" {block.index} ", style=f"bold white on {self._styles.accent}")
        text.append(" ")
        text.append_text(self._inline(block.text, self._styles.body))
        return text

    def visit_paragraph(self, block: Paragraph) -> RenderableType:
        return self._inline(block.text, self._styles.body)

    def _inline(self, inline: InlineText, style: str) -> RichText:
        text = RichText(style=style)
        for span in inline:
            match span:
                case Strong():
                    text.append(span.text, style="bold")
                case Emphasis():
                    text.append(span.text, style="italic")
                case _:
                    text.append(span.text)
        return text
