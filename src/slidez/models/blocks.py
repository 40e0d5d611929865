"""Model classes for rendered slide content.

A slide body is rendered into a sequence of [`Block`][slidez.models.blocks.Block]s. \
Text carried by blocks is [`InlineText`][slidez.models.blocks.InlineText]: a flat \
tuple of [`Text`][slidez.models.blocks.Text], [`Strong`][slidez.models.blocks.Strong] \
and [`Emphasis`][slidez.models.blocks.Emphasis] spans. No markup is ever embedded in \
span texts, formatters decide how each span kind is displayed.

Every block has an [`accept`][slidez.models.blocks.BlockBase.accept] method to allow \
visitors to be defined.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..processing import BlockVisitor


@dataclass(frozen=True)
class Text:
    """Literal text run."""

    text: str


@dataclass(frozen=True)
class Strong:
    """Bold span, from `**text**`."""

    text: str


@dataclass(frozen=True)
class Emphasis:
    """Italic span, from `*text*`."""

    text: str


Span = Text | Strong | Emphasis
"""Alias to any inline span."""

InlineText = tuple[Span, ...]
"""Alias to the inline-span sequence carried by blocks."""


def plain_text(inline: InlineText) -> str:
    """Concatenate the texts of the spans, dropping the emphasis information."""
    return "".join(span.text for span in inline)


@dataclass(frozen=True)
class BlockBase(ABC):
    @abstractmethod
    def accept[**P, T](
        self, visitor: BlockVisitor[P, T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        """Dispatch method for visitors.

        Args:
            visitor: The visitor asking for the dispatch
            args: Arguments to send back to the visitor untouched
            kwargs: Keyword arguments to send back to the visitor untouched

        Returns:
            The return type is the same as the return type of the corresponding \
            `visit_*` method of the visitor.
        """
        raise NotImplementedError


@dataclass(frozen=True)
class Title(BlockBase):
    """Slide title, from a `# ` line."""

    text: InlineText

    def accept[**P, T](
        self, visitor: BlockVisitor[P, T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        return visitor.visit_title(self, *args, **kwargs)


@dataclass(frozen=True)
class SectionHeader(BlockBase):
    """Section header, from a `## ` line."""

    text: InlineText

    def accept[**P, T](
        self, visitor: BlockVisitor[P, T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        return visitor.visit_section_header(self, *args, **kwargs)


@dataclass(frozen=True)
class SubsectionHeader(BlockBase):
    """Subsection header, from a `### ` line."""

    text: InlineText

    def accept[**P, T](
        self, visitor: BlockVisitor[P, T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        return visitor.visit_subsection_header(self, *args, **kwargs)


@dataclass(frozen=True)
class ListBlock(BlockBase):
    """Bullet list built from one maximal run of `- ` or `• ` lines."""

    items: tuple[InlineText, ...]

    def accept[**P, T](
        self, visitor: BlockVisitor[P, T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        return visitor.visit_list(self, *args, **kwargs)


@dataclass(frozen=True)
class OrderedItem(BlockBase):
    """Single numbered item, from a `N. ` line.

    Numbered lines are never grouped: each one is its own block and keeps the \
    number written by the author.
    """

    index: int
    text: InlineText

    def accept[**P, T](
        self, visitor: BlockVisitor[P, T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        return visitor.visit_ordered_item(self, *args, **kwargs)


@dataclass(frozen=True)
class Paragraph(BlockBase):
    """Any other non-blank line."""

    text: InlineText

    def accept[**P, T](
        self, visitor: BlockVisitor[P, T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        return visitor.visit_paragraph(self, *args, **kwargs)


Block = Title | SectionHeader | SubsectionHeader | ListBlock | OrderedItem | Paragraph
"""Alias to any renderable block."""
