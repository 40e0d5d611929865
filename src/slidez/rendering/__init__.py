"""Markdown-subset renderer turning slide content into typed blocks.

The pipeline is [`split_lines`][slidez.rendering.lines.split_lines], then \
[`group_lines`][slidez.rendering.grouping.group_lines] which classifies every line \
with [`classify_line`][slidez.rendering.lines.classify_line] and resolves inline \
emphasis with [`resolve_inline`][slidez.rendering.inline.resolve_inline], then the \
view truncation of [`render`][slidez.rendering.renderer.render].
"""

from .grouping import group_lines
from .inline import resolve_inline
from .lines import ClassifiedLine, LineKind, classify_line, split_lines
from .renderer import THUMBNAIL_MAX_BLOCKS, render, render_slide

__all__ = [
    "THUMBNAIL_MAX_BLOCKS",
    "ClassifiedLine",
    "LineKind",
    "classify_line",
    "group_lines",
    "render",
    "render_slide",
    "resolve_inline",
    "split_lines",
]
