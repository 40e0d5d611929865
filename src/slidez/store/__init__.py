"""Slide persistence with an explicit order and soft deletion."""

from .memory import InMemorySlideStore
from .protocols import SlideStoreProtocol
from .seeding import STARTER_SLIDES, seed
from .yaml_store import DeckFile, YamlSlideStore

__all__ = [
    "STARTER_SLIDES",
    "DeckFile",
    "InMemorySlideStore",
    "SlideStoreProtocol",
    "YamlSlideStore",
    "seed",
]
