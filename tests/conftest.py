"""Shared fixtures for docsite configuration tests."""

from __future__ import annotations

import copy
import datetime as dt
import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

SAMPLE_CONFIG: dict[str, typ.Any] = {
    "title": "My Docs",
    "tagline": "Documentation hub",
    "favicon": "img/favicon.ico",
    "future": {"v4": True},
    "url": "https://example.github.io",
    "base_url": "/docs/",
    "organization_name": "example",
    "project_name": "docs",
    "deployment_branch": "gh-pages",
    "on_broken_links": "fail",
    "on_broken_markdown_links": "warn",
    "i18n": {"default_locale": "en", "locales": ["en"]},
    "presets": [
        [
            "classic",
            {
                "docs": {
                    "sidebar_path": "sidebars.js",
                    "edit_url": "https://github.com/example/docs/tree/main/",
                },
                "blog": {
                    "show_reading_time": True,
                    "edit_url": "https://github.com/example/docs/tree/main/",
                },
                "theme": {"custom_css": "src/css/custom.css"},
            },
        ]
    ],
    "theme_config": {
        "image": "img/social-card.jpg",
        "navbar": {
            "title": "My Docs",
            "logo": {"alt": "Logo My Docs", "src": "img/logo.svg"},
            "items": [
                {
                    "type": "doc_sidebar",
                    "sidebar_id": "tutorialSidebar",
                    "position": "left",
                    "label": "Docs",
                },
                {"to": "/blog", "label": "Blog", "position": "left"},
                {
                    "href": "https://github.com/example/docs",
                    "label": "GitHub",
                    "position": "right",
                },
            ],
        },
        "footer": {
            "style": "dark",
            "links": [
                {"title": "Docs", "items": [{"label": "Intro", "to": "/docs/intro"}]},
                {
                    "title": "Community",
                    "items": [
                        {"label": "Discord", "href": "https://discord.example.com"},
                        {"label": "X", "href": "https://x.com/example"},
                    ],
                },
            ],
            "copyright": "Copyright © {{ year }} My Docs. Built with docsite.",
        },
        "prism": {"theme": "default", "dark_theme": "monokai"},
    },
}


def fixed_clock(year: int) -> typ.Callable[[], dt.datetime]:
    """Return a clock frozen at noon on 1 June of ``year``."""
    moment = dt.datetime(year, 6, 1, 12, tzinfo=dt.UTC)
    return lambda: moment


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a site directory holding the referenced sidebar and stylesheet."""
    (tmp_path / "sidebars.js").write_text("export default {};\n", encoding="utf-8")
    css_dir = tmp_path / "src" / "css"
    css_dir.mkdir(parents=True)
    (css_dir / "custom.css").write_text(":root {}\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def raw_config() -> dict[str, typ.Any]:
    """Return a deep copy of the sample configuration for mutation in tests."""
    return copy.deepcopy(SAMPLE_CONFIG)


@pytest.fixture
def make_clock() -> typ.Callable[[int], typ.Callable[[], dt.datetime]]:
    """Expose :func:`fixed_clock` to tests."""
    return fixed_clock
