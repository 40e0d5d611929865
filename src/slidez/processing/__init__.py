"""Provide protocols to better type-check block processing code."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

# Necessary to avoid circular imports with ..models.blocks
if TYPE_CHECKING:
    from ..models.blocks import (
        Block,
        ListBlock,
        OrderedItem,
        Paragraph,
        SectionHeader,
        SubsectionHeader,
        Title,
    )


class BlockVisitor[**P, T](Protocol):
    """Dispatch actions on [`Block`][slidez.models.blocks.Block]s."""

    def visit_title(self, block: "Title", *args: P.args, **kwargs: P.kwargs) -> T: ...

    def visit_section_header(
        self, block: "SectionHeader", *args: P.args, **kwargs: P.kwargs
    ) -> T: ...

    def visit_subsection_header(
        self, block: "SubsectionHeader", *args: P.args, **kwargs: P.kwargs
    ) -> T: ...

    def visit_list(self, block: "ListBlock", *args: P.args, **kwargs: P.kwargs) -> T:
        ...

    def visit_ordered_item(
        self, block: "OrderedItem", *args: P.args, **kwargs: P.kwargs
    ) -> T: ...

    def visit_paragraph(
        self, block: "Paragraph", *args: P.args, **kwargs: P.kwargs
    ) -> T: ...


class Formatter[T](Protocol):
    def format(self, blocks: Sequence["Block"]) -> T:
        """Turn rendered blocks into something a presentation layer can display."""
        ...
