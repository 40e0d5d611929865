from logging import getLogger
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from yaml import SafeDumper, ScalarNode
from yaml import dump as yaml_dump

from ..exceptions import InvalidSlideError
from ..models import Slide
from ..utils import load_yaml
from .memory import InMemorySlideStore

_logger = getLogger(__name__)


class DeckFile(BaseModel):
    """Content of a deck file, typically `slides.yml`."""

    slides: list[Slide] = Field(default_factory=list)


class _DeckDumper(SafeDumper):
    pass


def _represent_str(dumper: SafeDumper, value: str) -> ScalarNode:
    # Multi-line contents are easier to edit by hand as literal blocks.
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


_DeckDumper.add_representer(str, _represent_str)


class YamlSlideStore(InMemorySlideStore):
    """Slide store persisted to a YAML file.

    The whole file is loaded once at initialization and rewritten after every \
    mutation. A missing file is an empty deck, it is created on the first write.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        super().__init__(self._load(path))

    @property
    def path(self) -> Path:
        return self._path

    def _committed(self) -> None:
        deck = DeckFile(slides=sorted(self._slides.values(), key=lambda s: s.id))
        content: dict[str, Any] = deck.model_dump(mode="json")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            yaml_dump(
                content, Dumper=_DeckDumper, sort_keys=False, allow_unicode=True
            ),
            encoding="utf8",
        )
        _logger.debug("Wrote %d slides to %s", len(deck.slides), self._path)

    @staticmethod
    def _load(path: Path) -> list[Slide]:
        if not path.is_file():
            _logger.debug("%s doesn't exist, starting from an empty deck", path)
            return []
        try:
            return DeckFile.model_validate(load_yaml(path) or {}).slides
        except ValidationError as e:
            msg = f"invalid deck file {path}: {e}"
            raise InvalidSlideError(msg) from e
