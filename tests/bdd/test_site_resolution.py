"""Behaviour tests for resolving site configuration using pytest-bdd.

These scenarios build raw configurations step by step inside a temporary
site directory, resolve them once, and check either the resulting descriptor
or the error kind and field path reported.

Usage
-----
Run ``pytest tests/bdd/test_site_resolution.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from docsite.config import BrokenLinkPolicy, ConfigResolver, SiteConfigError

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "site_resolution.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given(
    parsers.parse('a site config with origin "{origin}" and base path "{base_path}"')
)
def given_site_config(
    scenario_state: ScenarioState, tmp_path: Path, origin: str, base_path: str
) -> None:
    scenario_state["raw"] = {"url": origin, "base_url": base_path}
    scenario_state["site_dir"] = tmp_path


@given(parsers.parse('the locale list is empty with default locale "{locale}"'))
def given_empty_locales(scenario_state: ScenarioState, locale: str) -> None:
    scenario_state["raw"]["i18n"] = {"default_locale": locale, "locales": []}


@given("two footer groups where the second has an item with both targets")
def given_ambiguous_footer(scenario_state: ScenarioState) -> None:
    scenario_state["raw"]["theme_config"] = {
        "footer": {
            "links": [
                {"title": "Docs", "items": [{"label": "Intro", "to": "/intro"}]},
                {
                    "title": "More",
                    "items": [
                        {
                            "label": "Blog",
                            "to": "/blog",
                            "href": "https://example.org/blog",
                        }
                    ],
                },
            ]
        }
    }


@given("a classic preset whose sidebar file does not exist")
def given_missing_sidebar(scenario_state: ScenarioState) -> None:
    scenario_state["raw"]["presets"] = [
        ["classic", {"docs": {"sidebar_path": "./sidebars.js"}}]
    ]


@given(parsers.parse('the broken-link policy is "{token}"'))
def given_policy(scenario_state: ScenarioState, token: str) -> None:
    scenario_state["raw"]["on_broken_links"] = token


@given("the broken-link override flag is set")
def given_override(scenario_state: ScenarioState) -> None:
    scenario_state["raw"]["ignore_broken_links"] = True


@when("I resolve the site config")
def when_resolve(scenario_state: ScenarioState) -> None:
    resolver = ConfigResolver(scenario_state["site_dir"])
    try:
        scenario_state["site"] = resolver.resolve(scenario_state["raw"])
    except SiteConfigError as exc:
        scenario_state["error"] = exc


@then("resolution succeeds")
def then_succeeds(scenario_state: ScenarioState) -> None:
    assert "error" not in scenario_state, scenario_state.get("error")
    assert scenario_state["site"] is not None


@then(parsers.parse('the locales are exactly "{locale}"'))
def then_locales(scenario_state: ScenarioState, locale: str) -> None:
    site = scenario_state["site"]
    assert site.locales == (locale,)
    assert site.default_locale in site.locales


@then(parsers.parse('internal link "{target}" resolves to "{expected}"'))
def then_internal_link(scenario_state: ScenarioState, target: str, expected: str) -> None:
    assert scenario_state["site"].url_for(target) == expected


@then(parsers.parse('resolution fails with "{kind}" at "{field}"'))
def then_fails(scenario_state: ScenarioState, kind: str, field: str) -> None:
    assert "site" not in scenario_state
    error = scenario_state["error"]
    assert type(error).__name__ == kind
    assert error.field == field


@then(parsers.parse('both broken-link policies are "{token}"'))
def then_policies(scenario_state: ScenarioState, token: str) -> None:
    settings = scenario_state["site"].broken_links
    assert settings.links is BrokenLinkPolicy(token)
    assert settings.markdown_links is BrokenLinkPolicy(token)
