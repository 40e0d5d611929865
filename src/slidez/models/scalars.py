"""Model NewTypes and enums to disambiguate multi-usage types."""

from enum import StrEnum
from typing import NewType

SlideId = NewType("SlideId", int)
"""Derived from int to represent specifically a slide identifier."""


class ViewContext(StrEnum):
    """Consumption mode of a render, deciding the post-render truncation."""

    FULL = "full"
    """Whole slide, every block is kept."""

    THUMBNAIL = "thumbnail"
    """Sidebar preview, only the first blocks are kept."""
