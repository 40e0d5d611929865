from logging import getLogger

from ..exceptions import SlidezError
from ..models import (
    EditView,
    RenderedSlide,
    Slide,
    SlideId,
    SlidePatch,
    ViewContext,
)
from ..rendering import render_slide
from ..store import SlideStoreProtocol
from .events import DeckAction, EventChannel, GoToSlide, SlideChanged, SlidesChanged

_logger = getLogger(__name__)

DEFAULT_NEW_SLIDE_TITLE = "New Slide"
DEFAULT_NEW_SLIDE_CONTENT = "# New Slide\n\nAdd your content here..."


class PresentationHost:
    """Own the navigation and edit state of a deck presentation.

    The host keeps a snapshot of the active slides of the store, refreshed after \
    each of its own mutations and whenever a \
    [`SlidesChanged`][slidez.presenting.events.SlidesChanged] message is published \
    on the channel. It also follows \
    [`GoToSlide`][slidez.presenting.events.GoToSlide] requests and publishes a \
    [`SlideChanged`][slidez.presenting.events.SlideChanged] message each time its \
    current index actually changes.
    """

    def __init__(
        self,
        store: SlideStoreProtocol,
        channel: EventChannel | None = None,
        new_slide_title: str = DEFAULT_NEW_SLIDE_TITLE,
        new_slide_content: str = DEFAULT_NEW_SLIDE_CONTENT,
    ) -> None:
        self._store = store
        self._channel = channel if channel is not None else EventChannel()
        self._new_slide_title = new_slide_title
        self._new_slide_content = new_slide_content
        self._slides = store.list_all()
        self._current_index = 0
        self._editing = False
        self._unsubscribers = [
            self._channel.subscribe(GoToSlide, lambda m: self.go_to(m.index)),
            self._channel.subscribe(SlidesChanged, lambda _: self.refresh()),
        ]

    @property
    def channel(self) -> EventChannel:
        return self._channel

    @property
    def slides(self) -> list[Slide]:
        return list(self._slides)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_slide(self) -> Slide | None:
        if not self._slides:
            return None
        return self._slides[self._current_index]

    @property
    def editing(self) -> bool:
        return self._editing

    def close(self) -> None:
        """Stop listening to the channel."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    # Navigation

    def next(self) -> None:
        if self._current_index < len(self._slides) - 1:
            self._set_index(self._current_index + 1)

    def previous(self) -> None:
        if self._current_index > 0:
            self._set_index(self._current_index - 1)

    def first(self) -> None:
        if self._slides:
            self._set_index(0)

    def last(self) -> None:
        if self._slides:
            self._set_index(len(self._slides) - 1)

    def go_to(self, index: int) -> None:
        if 0 <= index < len(self._slides):
            self._set_index(index)
        else:
            _logger.debug("Ignoring navigation to out of range slide %d", index)

    def refresh(self) -> None:
        """Reload the slides from the store and keep the current index in range."""
        self._slides = self._store.list_all()
        if not self._slides:
            self._set_index(0)
        elif self._current_index >= len(self._slides):
            self._set_index(len(self._slides) - 1)

    # Display

    def view(
        self, view: ViewContext = ViewContext.FULL
    ) -> RenderedSlide | EditView | None:
        """Return what to display for the current slide.

        Returns:
            None if the deck is empty, the raw slide fields while editing, the \
            rendered slide otherwise.
        """
        slide = self.current_slide
        if slide is None:
            return None
        if self._editing:
            return EditView(title=slide.title, content=slide.content)
        return render_slide(slide, view)

    def thumbnails(self) -> list[RenderedSlide]:
        return [render_slide(slide, ViewContext.THUMBNAIL) for slide in self._slides]

    # Editing

    def start_editing(self) -> EditView:
        slide = self._require_current()
        self._editing = True
        return EditView(title=slide.title, content=slide.content)

    def cancel_editing(self) -> None:
        self._editing = False

    def save_edit(self, title: str | None = None, content: str | None = None) -> Slide:
        """Persist new fields for the current slide and leave edit mode."""
        slide = self._require_current()
        updated = self._store.update(slide.id, SlidePatch(title=title, content=content))
        self._editing = False
        _logger.info("Saved slide %d", slide.id)
        self._publish_change(DeckAction.UPDATED, slide.id)
        return updated

    # Deck modifications

    def add_slide(self, title: str | None = None, content: str | None = None) -> Slide:
        """Append a slide at the end of the deck and make it current."""
        slide = self._store.create(
            self._new_slide_title if title is None else title,
            self._new_slide_content if content is None else content,
            order=max((s.order for s in self._slides), default=-1) + 1,
        )
        _logger.info("Added slide %d (%s)", slide.id, slide.title)
        self._publish_change(DeckAction.CREATED, slide.id)
        self.go_to(self._position(slide.id))
        return slide

    def delete_current(self) -> None:
        self.delete(self._require_current().id)

    def delete(self, slide_id: SlideId) -> None:
        """Soft-delete a slide, keeping the current slide selected if possible.

        Deleting the current slide selects the one that followed it, or the new \
        last slide if it was the last one, and counts as a slide change even when \
        the index stays the same.
        """
        deleted_index = self._position(slide_id)
        self._store.delete(slide_id)
        _logger.info("Deleted slide %d", slide_id)
        self._slides = self._store.list_all()
        if deleted_index < self._current_index:
            self._set_index(self._current_index - 1)
        elif deleted_index == self._current_index:
            self._set_index(
                max(min(self._current_index, len(self._slides) - 1), 0), force=True
            )
        self._publish_change(DeckAction.DELETED, slide_id)

    def move_slide(self, from_index: int, to_index: int) -> None:
        """Move a slide to another position and renumber the whole deck.

        Every slide whose position changed gets its new position as order, so that \
        orders stay contiguous. The current slide stays selected: the index follows \
        the moved slide or shifts by one when the moved slide crossed it.

        Raises:
            SlidezError: Raised if one of the indices is out of range.
        """
        if not (0 <= from_index < len(self._slides)) or not (
            0 <= to_index < len(self._slides)
        ):
            msg = (
                f"cannot move slide {from_index + 1} to {to_index + 1} in a deck of "
                f"{len(self._slides)} slides"
            )
            raise SlidezError(msg)
        if from_index == to_index:
            return
        slides = list(self._slides)
        moved = slides.pop(from_index)
        slides.insert(to_index, moved)
        for order, slide in enumerate(slides):
            if slide.order != order:
                self._store.reorder(slide.id, order)

        current = self._current_index
        if from_index == current:
            current = to_index
        elif from_index < current <= to_index:
            current -= 1
        elif to_index <= current < from_index:
            current += 1
        _logger.info("Moved slide %d to position %d", moved.id, to_index + 1)
        self._slides = self._store.list_all()
        self._set_index(current)
        self._publish_change(DeckAction.REORDERED, moved.id)

    def _publish_change(self, action: DeckAction, slide_id: SlideId) -> None:
        self.refresh()
        self._channel.publish(SlidesChanged(action=action, slide_id=slide_id))

    def _set_index(self, index: int, force: bool = False) -> None:
        if index == self._current_index and not force:
            return
        previous = self._current_index
        self._current_index = index
        if self._editing:
            _logger.debug("Leaving edit mode of slide at index %d", previous)
            self._editing = False
        self._channel.publish(SlideChanged(index=index, previous_index=previous))

    def _position(self, slide_id: SlideId) -> int:
        for i, slide in enumerate(self._slides):
            if slide.id == slide_id:
                return i
        msg = f"slide {slide_id} is not part of the deck"
        raise SlidezError(msg)

    def _require_current(self) -> Slide:
        slide = self.current_slide
        if slide is None:
            msg = "the deck is empty"
            raise SlidezError(msg)
        return slide
