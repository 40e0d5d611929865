"""Typed messages and the channel used to broadcast them.

Components never talk through global state: whoever needs to know that the current \
slide changed, or that the deck was modified, subscribes to the message type on a \
shared [`EventChannel`][slidez.presenting.events.EventChannel].
"""

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger

from ..models import SlideId

_logger = getLogger(__name__)


@dataclass(frozen=True)
class SlideChanged:
    """The current slide of a host changed."""

    index: int
    previous_index: int | None = None


@dataclass(frozen=True)
class GoToSlide:
    """Request to navigate to the slide at `index`."""

    index: int


class DeckAction(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    REORDERED = "reordered"


@dataclass(frozen=True)
class SlidesChanged:
    """The stored deck was modified."""

    action: DeckAction
    slide_id: SlideId


Message = SlideChanged | GoToSlide | SlidesChanged


class EventChannel:
    """Synchronous publish/subscribe channel dispatching on the message type.

    Handlers are called in subscription order, in the publisher's thread. An \
    exception raised by a handler propagates to the publisher and the remaining \
    handlers are not called.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[type, list[Callable[[object], None]]] = (
            defaultdict(list)
        )

    def subscribe[M: Message](
        self, message_type: type[M], handler: Callable[[M], None]
    ) -> Callable[[], None]:
        """Register `handler` for messages of type `message_type`.

        Returns:
            A function removing the subscription. Calling it twice is a no-op.
        """
        handlers = self._handlers[message_type]
        handlers.append(handler)  # type: ignore[arg-type]

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)  # type: ignore[arg-type]

        return unsubscribe

    def publish(self, message: Message) -> None:
        handlers = list(self._handlers.get(type(message), ()))
        _logger.debug("Publishing %s to %d handler(s)", message, len(handlers))
        for handler in handlers:
            handler(message)
