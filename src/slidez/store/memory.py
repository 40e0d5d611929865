from logging import getLogger

from pydantic import ValidationError

from ..exceptions import InvalidSlideError, SlideNotFoundError
from ..models import Slide, SlideDraft, SlideId, SlidePatch
from .protocols import SlideStoreProtocol

_logger = getLogger(__name__)


class InMemorySlideStore(SlideStoreProtocol):
    """Keep slides in a dict indexed by identifier.

    Identifiers are assigned incrementally, starting at 1, and never reused even \
    after a deletion.
    """

    def __init__(self, slides: list[Slide] | None = None) -> None:
        self._slides: dict[SlideId, Slide] = {}
        for slide in slides or []:
            self._slides[slide.id] = slide
        self._next_id = max(self._slides, default=0) + 1

    def list_all(self) -> list[Slide]:
        return sorted(
            (slide for slide in self._slides.values() if slide.is_active),
            key=lambda slide: (slide.order, slide.id),
        )

    def get(self, slide_id: SlideId) -> Slide:
        slide = self._slides.get(slide_id)
        if slide is None:
            msg = f"slide {slide_id} not found"
            raise SlideNotFoundError(msg)
        if not slide.is_active:
            msg = f"slide {slide_id} not available"
            raise SlideNotFoundError(msg)
        return slide.model_copy()

    def create(self, title: str, content: str, order: int = 0) -> Slide:
        try:
            draft = SlideDraft(title=title, content=content, order=order)
        except ValidationError as e:
            raise InvalidSlideError(str(e)) from e
        slide = Slide(id=SlideId(self._next_id), **draft.model_dump())
        self._next_id += 1
        self._slides[slide.id] = slide
        self._committed()
        _logger.debug("Created slide %d (%s)", slide.id, slide.title)
        return slide.model_copy()

    def update(self, slide_id: SlideId, patch: SlidePatch) -> Slide:
        slide = self._get_row(slide_id)
        try:
            updated = Slide.model_validate(
                slide.model_dump() | patch.model_dump(exclude_none=True)
            )
        except ValidationError as e:
            raise InvalidSlideError(str(e)) from e
        self._slides[slide_id] = updated
        self._committed()
        _logger.debug(
            "Updated slide %d with %s", slide_id, sorted(patch.model_fields_set)
        )
        return updated.model_copy()

    def delete(self, slide_id: SlideId) -> None:
        slide = self._get_row(slide_id)
        self._slides[slide_id] = slide.model_copy(update={"is_active": False})
        self._committed()
        _logger.debug("Deleted slide %d", slide_id)

    def reorder(self, slide_id: SlideId, new_order: int) -> Slide:
        slide = self._get_row(slide_id)
        reordered = slide.model_copy(update={"order": new_order})
        self._slides[slide_id] = reordered
        self._committed()
        _logger.debug("Moved slide %d to order %d", slide_id, new_order)
        return reordered.model_copy()

    def _get_row(self, slide_id: SlideId) -> Slide:
        # Updates reach inactive rows too, only reads hide them.
        try:
            return self._slides[slide_id]
        except KeyError:
            msg = f"slide {slide_id} not found"
            raise SlideNotFoundError(msg) from None

    def _committed(self) -> None:
        """Hook called after every mutation."""
