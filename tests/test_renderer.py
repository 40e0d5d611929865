from pytest import mark

from slidez.models import (
    Emphasis,
    ListBlock,
    OrderedItem,
    Paragraph,
    SectionHeader,
    Slide,
    SlideId,
    Strong,
    SubsectionHeader,
    Text,
    Title,
    ViewContext,
)
from slidez.rendering import THUMBNAIL_MAX_BLOCKS, render, render_slide

SAMPLE = """# PowerPoint Clone

## Full-Stack Presentation Platform

**Built with Modern Technology Stack**

• Next.js 14 with React 18
• TypeScript for type safety

### Backend
- Express.js API server
- *Soft* deletes

1. First
2. Second

*Stripped-down PowerPoint with Markdown support*"""


def test_render_sample() -> None:
    assert render(SAMPLE) == [
        Title((Text("PowerPoint Clone"),)),
        SectionHeader((Text("Full-Stack Presentation Platform"),)),
        Paragraph((Strong("Built with Modern Technology Stack"),)),
        ListBlock(
            (
                (Text("Next.js 14 with React 18"),),
                (Text("TypeScript for type safety"),),
            )
        ),
        SubsectionHeader((Text("Backend"),)),
        ListBlock(
            (
                (Text("Express.js API server"),),
                (Emphasis("Soft"), Text(" deletes")),
            )
        ),
        OrderedItem(1, (Text("First"),)),
        OrderedItem(2, (Text("Second"),)),
        Paragraph((Emphasis("Stripped-down PowerPoint with Markdown support"),)),
    ]


def test_empty_content() -> None:
    assert render("") == []
    assert render("\n  \n\n") == []


def test_single_bullet_is_a_list() -> None:
    assert render("- only") == [ListBlock(((Text("only"),),))]


def test_blank_lines_do_not_break_runs() -> None:
    assert render("- a\n\n- b") == [ListBlock(((Text("a"),), (Text("b"),)))]


def test_both_bullet_prefixes_share_a_run() -> None:
    assert render("- a\n• b") == [ListBlock(((Text("a"),), (Text("b"),)))]


def test_paragraph_splits_runs() -> None:
    assert render("- a\ntext\n- b\n- c") == [
        ListBlock(((Text("a"),),)),
        Paragraph((Text("text"),)),
        ListBlock(((Text("b"),), (Text("c"),))),
    ]


def test_ordered_items_are_not_grouped() -> None:
    assert render("1. First\n2. Second") == [
        OrderedItem(1, (Text("First"),)),
        OrderedItem(2, (Text("Second"),)),
    ]


def test_ordered_items_keep_written_numbers() -> None:
    assert [block.index for block in render("3. c\n1. a")] == [3, 1]  # type: ignore[union-attr]


def test_heading_without_space_is_paragraph() -> None:
    assert render("#Heading") == [Paragraph((Text("#Heading"),))]


def test_headers_resolve_emphasis() -> None:
    assert render("# **Big** title") == [Title((Strong("Big"), Text(" title")))]


def test_unmatched_marker_stays_literal() -> None:
    assert render("* unmatched") == [Paragraph((Text("* unmatched"),))]


def test_render_is_idempotent() -> None:
    assert render(SAMPLE) == render(SAMPLE)


@mark.parametrize(
    ("content", "n_blocks"),
    [
        ("a\nb\nc", 3),
        ("- a\n- b\n- c", 1),
        ("- a\nb\n- c", 3),
        ("# t\n- a\n\n- b\n1. x\n2. y\n- c", 5),
        ("- a\n\n\n", 1),
    ],
)
def test_one_block_per_segment(content: str, n_blocks: int) -> None:
    assert len(render(content)) == n_blocks


def test_thumbnail_keeps_first_blocks() -> None:
    content = "\n".join(f"Paragraph {i}" for i in range(15))
    full = render(content, ViewContext.FULL)
    thumbnail = render(content, ViewContext.THUMBNAIL)
    assert len(full) == 15
    assert THUMBNAIL_MAX_BLOCKS == 12
    assert thumbnail == full[:12]


def test_thumbnail_counts_lists_as_one_block() -> None:
    content = "\n".join(
        [*(f"p{i}" for i in range(11)), "- a", "- b", "- c", "after"]
    )
    thumbnail = render(content, ViewContext.THUMBNAIL)
    assert len(thumbnail) == 12
    assert thumbnail[-1] == ListBlock(((Text("a"),), (Text("b"),), (Text("c"),)))


def test_view_accepts_strings() -> None:
    content = "\n".join(f"p{i}" for i in range(13))
    assert len(render(content, "thumbnail")) == 12  # type: ignore[arg-type]


@mark.parametrize(
    "content",
    ["*", "**", "***", "- ", "• ", "1.", "#", "# ", "\r\n", "****", "**a*", "\x00"],
)
def test_render_never_fails(content: str) -> None:
    assert isinstance(render(content), list)
    assert isinstance(render(content, ViewContext.THUMBNAIL), list)


def test_render_slide() -> None:
    slide = Slide(id=SlideId(1), title="Intro", content="# Hello\n- a")
    rendered = render_slide(slide, ViewContext.THUMBNAIL)
    assert rendered.title == "Intro"
    assert rendered.view is ViewContext.THUMBNAIL
    assert rendered.blocks == [Title((Text("Hello"),)), ListBlock(((Text("a"),),))]


def test_rendered_heading_uses_first_title() -> None:
    slide = Slide(
        id=SlideId(1), title="Intro", content="Lead\n# **Big** *idea*\n# Other"
    )
    assert render_slide(slide).heading == "Big idea"


def test_rendered_heading_falls_back_to_slide_title() -> None:
    slide = Slide(id=SlideId(1), title="Intro", content="## Section\n- a")
    assert render_slide(slide).heading == "Intro"
