"""Unit tests for section-scoped page resolution."""

from __future__ import annotations

import typing as typ

import pytest

from dochub.content import Page
from dochub.routing import PageNotFoundError, qualify, resolve, section_params

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from dochub.config import SectionConfig
    from dochub.content import ContentStore, PathKey

    SectionFactory = cabc.Callable[..., SectionConfig]


class RecordingStore:
    """In-memory store recording every key it is asked for."""

    def __init__(self, *keys: PathKey) -> None:
        self.pages = {
            key: Page(key=key, title="/".join(key), description="", body="")
            for key in keys
        }
        self.requested: list[PathKey] = []

    def get_page(self, key: cabc.Sequence[str]) -> Page | None:
        self.requested.append(tuple(key))
        return self.pages.get(tuple(key))

    def generate_params(self) -> list[PathKey]:
        return list(self.pages)


class AliasingStore(RecordingStore):
    """Store that answers every lookup with the same foreign page."""

    def get_page(self, key: cabc.Sequence[str]) -> Page | None:
        self.requested.append(tuple(key))
        return Page(key=("devops", "day-0"), title="DevOps", description="", body="")


def test_empty_segments_resolve_to_default_key(make_section: SectionFactory) -> None:
    """A bare section request resolves the same page as its default key."""
    store = RecordingStore(("python", "day-0"))
    section = make_section("python")
    assert resolve(section, [], store) == resolve(section, ["day-0"], store)
    assert store.requested == [("python", "day-0"), ("python", "day-0")]


def test_unknown_page_raises_not_found(make_section: SectionFactory) -> None:
    """Keys missing from the store surface as PageNotFoundError."""
    store = RecordingStore(("python", "day-0"))
    with pytest.raises(PageNotFoundError) as excinfo:
        resolve(make_section("python"), ["day-99"], store)
    assert excinfo.value.key == ("python", "day-99")
    assert excinfo.value.section == "python"
    assert isinstance(excinfo.value, LookupError)


@pytest.mark.parametrize(
    "segments",
    [["day-3"], ["day-3", "variables"], ["..", "devops", "day-0"], [""]],
)
def test_store_receives_prefix_plus_segments(
    make_section: SectionFactory, segments: list[str]
) -> None:
    """The store is queried with exactly ``prefix + segments``, unsanitised."""
    store = RecordingStore()
    with pytest.raises(PageNotFoundError):
        resolve(make_section("python"), segments, store)
    assert store.requested == [("python", *segments)]


def test_custom_prefix_and_default_key(make_section: SectionFactory) -> None:
    """Sections may map onto a deeper prefix and a different index page."""
    section = make_section(
        "python", prefix=("courses", "python"), default_key=("intro",)
    )
    assert qualify(section, []) == ("courses", "python", "intro")
    assert qualify(section, ("day-1",)) == ("courses", "python", "day-1")


def test_sections_never_alias_each_other(make_section: SectionFactory) -> None:
    """The same segments resolve to different pages under different sections."""
    store = RecordingStore(("python", "day-1"), ("javascript", "day-1"))
    python_page = resolve(make_section("python"), ["day-1"], store)
    javascript_page = resolve(make_section("javascript"), ["day-1"], store)
    assert python_page.key == ("python", "day-1")
    assert javascript_page.key == ("javascript", "day-1")


def test_foreign_page_from_store_is_not_found(make_section: SectionFactory) -> None:
    """A page whose key lies outside the prefix is never handed back."""
    with pytest.raises(PageNotFoundError):
        resolve(make_section("python"), ["day-0"], AliasingStore())


def test_top_level_pages_are_not_reachable_from_a_section(
    store: ContentStore, make_section: SectionFactory
) -> None:
    """Shared top-level pages do not resolve through a section prefix."""
    assert store.get_page(("day-1",)) is not None
    with pytest.raises(PageNotFoundError):
        resolve(make_section("javascript"), ["day-1"], store)


def test_section_params_lists_relative_keys(
    store: ContentStore, make_section: SectionFactory
) -> None:
    """Static params cover every page under the prefix, relative to it."""
    assert section_params(make_section("python"), store) == [
        ("day-0",),
        ("day-1",),
        ("day-10",),
        ("notes",),
    ]
    assert section_params(make_section("javascript"), store) == [("day-0",)]


def test_resolve_against_loaded_store(
    store: ContentStore, make_section: SectionFactory
) -> None:
    """End to end: the python index shows day-0 and day-99 is missing."""
    section = make_section("python")
    assert resolve(section, [], store).title == "Python Day 0"
    with pytest.raises(PageNotFoundError):
        resolve(section, ["day-99"], store)
