from .events import (
    DeckAction,
    EventChannel,
    GoToSlide,
    Message,
    SlideChanged,
    SlidesChanged,
)
from .host import PresentationHost

__all__ = [
    "DeckAction",
    "EventChannel",
    "GoToSlide",
    "Message",
    "PresentationHost",
    "SlideChanged",
    "SlidesChanged",
]
