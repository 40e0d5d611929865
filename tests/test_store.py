from pathlib import Path

from pytest import FixtureRequest, fixture, raises

from slidez.exceptions import InvalidSlideError, SlideNotFoundError
from slidez.models import SlideId, SlidePatch
from slidez.store import (
    STARTER_SLIDES,
    InMemorySlideStore,
    SlideStoreProtocol,
    YamlSlideStore,
    seed,
)
from slidez.utils import load_yaml


@fixture(params=["memory", "yaml"])
def store(request: FixtureRequest, tmp_path: Path) -> SlideStoreProtocol:
    if request.param == "memory":
        return InMemorySlideStore()
    return YamlSlideStore(tmp_path / "slides.yml")


def test_create_assigns_ids(store: SlideStoreProtocol) -> None:
    first = store.create("First", "# One")
    second = store.create("Second", "# Two", order=1)
    assert (first.id, second.id) == (1, 2)
    assert store.get(SlideId(2)) == second


def test_create_strips_fields(store: SlideStoreProtocol) -> None:
    slide = store.create("  Title  ", "\n# Content\n\n")
    assert slide.title == "Title"
    assert slide.content == "# Content"


def test_create_validates_fields(store: SlideStoreProtocol) -> None:
    with raises(InvalidSlideError):
        store.create("   ", "content")
    with raises(InvalidSlideError):
        store.create("title", "")
    with raises(InvalidSlideError):
        store.create("x" * 256, "content")


def test_list_all_orders_by_order_then_id(store: SlideStoreProtocol) -> None:
    store.create("c", "c", order=2)
    store.create("a", "a", order=0)
    store.create("b1", "b", order=1)
    store.create("b2", "b", order=1)
    assert [slide.title for slide in store.list_all()] == ["a", "b1", "b2", "c"]


def test_delete_is_soft(store: SlideStoreProtocol) -> None:
    slide = store.create("Doomed", "content")
    store.create("Kept", "content")
    store.delete(slide.id)
    assert [s.title for s in store.list_all()] == ["Kept"]
    with raises(SlideNotFoundError, match="not available"):
        store.get(slide.id)


def test_missing_slide(store: SlideStoreProtocol) -> None:
    with raises(SlideNotFoundError, match="not found"):
        store.get(SlideId(42))
    with raises(SlideNotFoundError):
        store.update(SlideId(42), SlidePatch(title="x"))
    with raises(SlideNotFoundError):
        store.delete(SlideId(42))
    with raises(SlideNotFoundError):
        store.reorder(SlideId(42), 3)


def test_update_is_partial(store: SlideStoreProtocol) -> None:
    slide = store.create("Title", "content", order=3)
    updated = store.update(slide.id, SlidePatch(content=" new content "))
    assert updated.title == "Title"
    assert updated.content == "new content"
    assert updated.order == 3
    assert store.get(slide.id) == updated


def test_update_validates_fields(store: SlideStoreProtocol) -> None:
    slide = store.create("Title", "content")
    with raises(InvalidSlideError):
        store.update(slide.id, SlidePatch.model_construct(content="  "))
    assert store.get(slide.id).content == "content"


def test_reorder_does_not_renumber(store: SlideStoreProtocol) -> None:
    a = store.create("a", "a", order=0)
    b = store.create("b", "b", order=1)
    store.reorder(a.id, 1)
    assert [(s.title, s.order) for s in store.list_all()] == [("a", 1), ("b", 1)]
    assert store.get(b.id).order == 1


def test_returned_slides_are_copies(store: SlideStoreProtocol) -> None:
    slide = store.create("Title", "content")
    slide.title = "Changed"
    assert store.get(slide.id).title == "Title"


def test_seed(store: SlideStoreProtocol) -> None:
    slides = seed(store)
    assert len(slides) == len(STARTER_SLIDES)
    assert [s.title for s in store.list_all()] == [s["title"] for s in STARTER_SLIDES]


def test_yaml_store_persists(tmp_path: Path) -> None:
    path = tmp_path / "deck" / "slides.yml"
    store = YamlSlideStore(path)
    first = store.create("First", "# One\n\n- a\n- b")
    second = store.create("Second", "Two", order=1)
    store.delete(first.id)

    reloaded = YamlSlideStore(path)
    assert reloaded.list_all() == [second]
    assert reloaded.create("Third", "Three").id == 3
    raw = load_yaml(path)
    assert [s["is_active"] for s in raw["slides"]] == [False, True, True]


def test_yaml_store_writes_literal_blocks(tmp_path: Path) -> None:
    path = tmp_path / "slides.yml"
    YamlSlideStore(path).create("Title", "# One\n- a")
    assert "content: |-\n    # One\n    - a\n" in path.read_text(encoding="utf8")


def test_yaml_store_missing_file_is_empty(tmp_path: Path) -> None:
    store = YamlSlideStore(tmp_path / "nothing.yml")
    assert store.list_all() == []
    assert not store.path.exists()


def test_yaml_store_rejects_invalid_file(tmp_path: Path) -> None:
    path = tmp_path / "slides.yml"
    path.write_text("slides:\n  - id: 1\n    title: ''\n    content: x\n")
    with raises(InvalidSlideError, match="invalid deck file"):
        YamlSlideStore(path)


def test_memory_store_from_slides() -> None:
    source = InMemorySlideStore()
    source.create("a", "a")
    source.create("b", "b")
    copy = InMemorySlideStore(source.list_all())
    assert copy.create("c", "c").id == 3
