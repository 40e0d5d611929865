from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import Slide, SlideId, SlidePatch


class SlideStoreProtocol(Protocol):
    """Persist slides with an explicit order.

    Deletion is soft: deleted slides keep their row but are never listed nor \
    returned again.
    """

    def list_all(self) -> list["Slide"]:
        """List active slides by ascending order, ties broken by ascending id."""
        ...

    def get(self, slide_id: "SlideId") -> "Slide":
        """Get an active slide.

        Raises:
            SlideNotFoundError: Raised if the slide doesn't exist or was deleted.
        """
        ...

    def create(self, title: str, content: str, order: int = 0) -> "Slide":
        """Create a slide and assign it an identifier.

        Raises:
            InvalidSlideError: Raised if the title or content is empty once stripped.
        """
        ...

    def update(self, slide_id: "SlideId", patch: "SlidePatch") -> "Slide": ...

    def delete(self, slide_id: "SlideId") -> None: ...

    def reorder(self, slide_id: "SlideId", new_order: int) -> "Slide":
        """Set the order of a single slide.

        Other slides are not renumbered: callers wanting contiguous orders must \
        reorder every slide.
        """
        ...
