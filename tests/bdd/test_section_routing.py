"""Behaviour tests for section-scoped routing and navigation.

These scenarios are driven by ``features/section_routing.feature``. They load
the two-section fixture site from ``tests/conftest.py``, resolve requests the
way the preview server and static build do, and check which page comes back
and which navigation entries a section's sidebar shows.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_section_routing.py -v
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from dochub.navigation import filter_tree
from dochub.routing import PageNotFoundError, resolve

if typ.TYPE_CHECKING:
    from dochub.config import SiteConfig
    from dochub.content import ContentStore

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "section_routing.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given("a two-section site with shared content")
def given_site(
    site_config: SiteConfig, store: ContentStore, scenario_state: ScenarioState
) -> None:
    """Record the fixture site and its content store for later steps."""
    scenario_state["site"] = site_config
    scenario_state["store"] = store


def _request(scenario_state: ScenarioState, key: str, segments: list[str]) -> None:
    site: SiteConfig = scenario_state["site"]
    section = site.get_section(key)
    try:
        scenario_state["page"] = resolve(section, segments, scenario_state["store"])
    except PageNotFoundError as exc:
        scenario_state["error"] = exc


@when(parsers.parse('I request the "{key}" section with no page'))
def when_request_index(scenario_state: ScenarioState, key: str) -> None:
    """Resolve the bare section URL."""
    _request(scenario_state, key, [])


@when(parsers.parse('I request the "{key}" section page "{slug}"'))
def when_request_page(scenario_state: ScenarioState, key: str, slug: str) -> None:
    """Resolve a slash-separated slug inside a section."""
    _request(scenario_state, key, slug.split("/"))


@when(parsers.parse('I filter the navigation for the "{key}" section'))
def when_filter_nav(scenario_state: ScenarioState, key: str) -> None:
    """Filter the shared page tree for one section."""
    site: SiteConfig = scenario_state["site"]
    store: ContentStore = scenario_state["store"]
    scenario_state["nav"] = filter_tree(
        store.page_tree, site.get_section(key), depth=site.nav_depth
    )


@then(parsers.parse('the page titled "{title}" is shown'))
def then_page_shown(scenario_state: ScenarioState, title: str) -> None:
    """Verify the resolved page's title."""
    assert "error" not in scenario_state, f"unexpected {scenario_state.get('error')}"
    assert scenario_state["page"].title == title


@then(parsers.parse('the request fails with a not-found error for "{path}"'))
def then_not_found(scenario_state: ScenarioState, path: str) -> None:
    """Verify resolution raised PageNotFoundError for the qualified key."""
    error = scenario_state.get("error")
    assert isinstance(error, PageNotFoundError), (
        f"expected PageNotFoundError, got page {scenario_state.get('page')!r}"
    )
    assert error.key == tuple(path.split("/"))


@then(parsers.parse('the navigation lists "{names}" in order'))
def then_nav_lists(scenario_state: ScenarioState, names: str) -> None:
    """Verify the top-level entries of the filtered navigation tree."""
    expected = [name.strip() for name in names.split(",")]
    assert scenario_state["nav"].child_names() == expected
