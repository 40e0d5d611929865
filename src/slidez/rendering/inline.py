"""Resolve `**bold**` and `*italic*` markers into typed inline spans."""

from re import Pattern
from re import compile as re_compile

from ..models.blocks import Emphasis, InlineText, Span, Strong, Text

_STRONG_RE = re_compile(r"\*\*(.*?)\*\*")
_EMPHASIS_RE = re_compile(r"\*(.*?)\*")


def resolve_inline(text: str) -> InlineText:
    """Split text into literal, strong and emphasis spans.

    Two passes run one after the other. The first one turns every `**...**` pair \
    into a [`Strong`][slidez.models.blocks.Strong] span, the second one turns every \
    `*...*` pair left in the literal runs into an \
    [`Emphasis`][slidez.models.blocks.Emphasis] span. Both use the shortest match \
    between two markers. Strong span contents are not scanned again, and unpaired \
    asterisks stay literal.

    Args:
        text: Text of a single line or list item.

    Returns:
        The spans, in order. Empty literal runs are omitted.
    """
    spans: list[Span] = []
    for span in _split(text, _STRONG_RE, Strong):
        if isinstance(span, Text):
            spans.extend(_split(span.text, _EMPHASIS_RE, Emphasis))
        else:
            spans.append(span)
    return tuple(spans)


def _split(
    text: str, pattern: Pattern[str], span_type: type[Strong] | type[Emphasis]
) -> list[Span]:
    spans: list[Span] = []
    position = 0
    for match in pattern.finditer(text):
        if match.start() > position:
            spans.append(Text(text[position : match.start()]))
        spans.append(span_type(match.group(1)))
        position = match.end()
    if position < len(text):
        spans.append(Text(text[position:]))
    return spans
