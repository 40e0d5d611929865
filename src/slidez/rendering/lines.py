"""Split slide content into lines and classify each of them."""

from dataclasses import dataclass
from enum import Enum, auto
from re import compile as re_compile

_ORDERED_ITEM_RE = re_compile(r"^([0-9]+)\.[ ]+")

BULLET_PREFIXES = ("- ", "• ")


class LineKind(Enum):
    TITLE = auto()
    SECTION_HEADER = auto()
    SUBSECTION_HEADER = auto()
    BULLET = auto()
    ORDERED_ITEM = auto()
    PARAGRAPH = auto()


_HEADER_PREFIXES = (
    ("# ", LineKind.TITLE),
    ("## ", LineKind.SECTION_HEADER),
    ("### ", LineKind.SUBSECTION_HEADER),
)


@dataclass(frozen=True)
class ClassifiedLine:
    """A content line, its kind and the text left once its prefix is removed."""

    kind: LineKind
    text: str
    index: int | None = None
    """Number written in front of an ordered item, None for other kinds."""


def split_lines(content: str) -> list[str]:
    """Split content into its non-blank lines.

    A single trailing carriage return is dropped from each line so that CRLF input \
    renders like LF input. Whitespace-only lines are discarded.
    """
    lines = []
    for line in content.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line.strip():
            lines.append(line)
    return lines


def is_bullet(line: str) -> bool:
    return line.startswith(BULLET_PREFIXES)


def classify_line(line: str) -> ClassifiedLine:
    """Classify a non-blank line.

    Rules are checked in order and the first one matching wins. Prefixes must be \
    followed by a space: `#Heading` is a paragraph.

    Args:
        line: Line to classify, as returned by [`split_lines`][slidez.rendering.lines.split_lines].

    Returns:
        The kind of the line and its text without the prefix.
    """
    for prefix, kind in _HEADER_PREFIXES:
        if line.startswith(prefix):
            return ClassifiedLine(kind, line[len(prefix) :])
    if is_bullet(line):
        return ClassifiedLine(LineKind.BULLET, line[2:])
    if match := _ORDERED_ITEM_RE.match(line):
        return ClassifiedLine(
            LineKind.ORDERED_ITEM, line[match.end() :], int(match.group(1))
        )
    return ClassifiedLine(LineKind.PARAGRAPH, line)
