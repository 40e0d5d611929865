"""Model classes for stored slides and render results."""

from dataclasses import dataclass, field
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

from .blocks import Block, Title, plain_text
from .scalars import SlideId, ViewContext

SlideTitle = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]
SlideContent = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Slide(BaseModel):
    """One stored slide.

    Title and content are stripped on validation. Inactive slides are soft-deleted: \
    they stay in the store but are never listed nor returned.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: SlideId
    title: SlideTitle
    content: SlideContent
    order: int = 0
    is_active: bool = True


class SlidePatch(BaseModel):
    """Partial update of a slide. Unset fields are left untouched."""

    title: SlideTitle | None = None
    content: SlideContent | None = None
    order: int | None = None


class SlideDraft(BaseModel):
    """Slide fields before the store assigns an identifier."""

    title: SlideTitle
    content: SlideContent
    order: int = 0


@dataclass(frozen=True)
class RenderedSlide:
    """Blocks of a slide rendered for a given view, along with its title."""

    title: str
    blocks: list[Block] = field(default_factory=list)
    view: ViewContext = ViewContext.FULL

    @property
    def heading(self) -> str:
        """Plain text of the first title block, or the slide title without one."""
        for block in self.blocks:
            if isinstance(block, Title):
                return plain_text(block.text)
        return self.title


@dataclass(frozen=True)
class EditView:
    """Raw slide fields shown instead of rendered blocks while editing."""

    title: str
    content: str
