from collections.abc import Iterable, Mapping
from typing import Any

from ..models import Slide
from .protocols import SlideStoreProtocol

STARTER_SLIDES: list[dict[str, Any]] = [
    {
        "title": "Welcome",
        "content": (
            "# Welcome to slidez\n"
            "\n"
            "## Slides written in plain text\n"
            "\n"
            "**Everything you need, nothing more**\n"
            "\n"
            "• Titles with `#`, `##` and `###`\n"
            "• Bullet lists with `-` or `•`\n"
            "• Numbered items with `1.`\n"
            "\n"
            "*Edit slides.yml or use slidez edit*"
        ),
        "order": 0,
    },
    {
        "title": "Workflow",
        "content": (
            "# Workflow\n"
            "\n"
            "1. Write your slides\n"
            "2. Check them with **slidez show**\n"
            "3. Export them with **slidez export**\n"
            "\n"
            "### Tips\n"
            "- Use *slidez watch* to export on every save\n"
            "- Use *slidez move* to reorder slides"
        ),
        "order": 1,
    },
]


def seed(
    store: SlideStoreProtocol, slides: Iterable[Mapping[str, Any]] = STARTER_SLIDES
) -> list[Slide]:
    """Create the given slides in the store, in order."""
    return [
        store.create(slide["title"], slide["content"], slide.get("order", 0))
        for slide in slides
    ]
