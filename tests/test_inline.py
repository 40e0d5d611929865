from pytest import mark

from slidez.models import Emphasis, InlineText, Strong, Text, plain_text
from slidez.rendering import resolve_inline


@mark.parametrize(
    ("text", "expected"),
    [
        ("plain", (Text("plain"),)),
        ("", ()),
        (
            "**bold** and *italic*",
            (Strong("bold"), Text(" and "), Emphasis("italic")),
        ),
        ("**a** **b**", (Strong("a"), Text(" "), Strong("b"))),
        ("before *it* after", (Text("before "), Emphasis("it"), Text(" after"))),
        ("* unmatched", (Text("* unmatched"),)),
        ("*a* and *b", (Emphasis("a"), Text(" and *b"))),
        ("2 * 3 = 6", (Text("2 * 3 = 6"),)),
        ("<b>not html</b>", (Text("<b>not html</b>"),)),
    ],
)
def test_resolve_inline(text: str, expected: InlineText) -> None:
    assert resolve_inline(text) == expected


def test_strong_content_is_not_rescanned() -> None:
    assert resolve_inline("**a *b* c**") == (Strong("a *b* c"),)


def test_shortest_match_between_markers() -> None:
    assert resolve_inline("*a* b *c*") == (Emphasis("a"), Text(" b "), Emphasis("c"))


def test_plain_text_drops_markers() -> None:
    assert plain_text(resolve_inline("**bold** and *italic*")) == "bold and italic"
