"""Turn classified lines into blocks, gathering bullet runs into lists."""

from collections.abc import Iterator, Sequence

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
from .inline import resolve_inline
from .lines import ClassifiedLine, LineKind, classify_line, is_bullet

_SIMPLE_BLOCKS = {
    LineKind.TITLE: Title,
    LineKind.SECTION_HEADER: SectionHeader,
    LineKind.SUBSECTION_HEADER: SubsectionHeader,
    LineKind.PARAGRAPH: Paragraph,
}


def group_lines(lines: Sequence[str]) -> Iterator[Block]:
    """Yield the blocks of a sequence of non-blank lines.

    Bullet lines are buffered until the last line of their run, i.e. until the next \
    line is not a bullet or there is no next line, and then yielded as a single \
    [`ListBlock`][slidez.models.blocks.ListBlock]. Blank lines are expected to be \
    filtered out beforehand, so they never break a run. Every other line yields \
    exactly one block.

    Args:
        lines: Non-blank lines, as returned by \
            [`split_lines`][slidez.rendering.lines.split_lines].

    Yields:
        The blocks, in line order.
    """
    pending: list[InlineText] = []
    for i, line in enumerate(lines):
        classified = classify_line(line)
        if classified.kind is LineKind.BULLET:
            pending.append(resolve_inline(classified.text))
            if i + 1 == len(lines) or not is_bullet(lines[i + 1]):
                yield ListBlock(tuple(pending))
                pending = []
        else:
            yield _to_block(classified)


def _to_block(classified: ClassifiedLine) -> Block:
    text = resolve_inline(classified.text)
    if classified.kind is LineKind.ORDERED_ITEM:
        assert classified.index is not None
        return OrderedItem(classified.index, text)
    return _SIMPLE_BLOCKS[classified.kind](text)
