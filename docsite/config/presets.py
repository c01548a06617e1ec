"""Preset builders keyed by preset kind.

A preset entry is either the two-element list ``[kind, options]`` or a
mapping carrying a ``kind`` key next to its options. Each known kind maps to
a builder producing a typed preset; unknown kinds are rejected rather than
passed through.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .helpers import (
    _external_url,
    _field,
    _flag,
    _mapping,
    _optional_str,
    _resolve_reference,
    _sequence,
    _string,
)
from .models import (
    BlogSection,
    ClassicPreset,
    DocsSection,
    InvalidFieldError,
    Preset,
    ThemeSection,
    UnknownPresetKindError,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

DOCS_KEYS = ("path", "route_base_path", "sidebar_path", "sidebars", "edit_url")
BLOG_KEYS = ("path", "route_base_path", "show_reading_time", "edit_url")
THEME_KEYS = ("custom_css",)
CLASSIC_KEYS = ("kind", "docs", "blog", "theme")

PresetBuilder = typ.Callable[[typ.Mapping[str, typ.Any], str, "Path"], Preset]


def _split_entry(entry: object, field: str) -> tuple[str, typ.Mapping[str, typ.Any]]:
    """Return the kind and options of a raw preset entry."""
    match entry:
        case str() as kind:
            return kind.strip(), {}
        case [str() as kind]:
            return kind.strip(), {}
        case [str() as kind, options]:
            return kind.strip(), _mapping(options, _field(field, 1))
        case {"kind": str() as kind}:
            return kind.strip(), entry
        case _:
            msg = "preset entries must be '[kind, options]' or a mapping with 'kind'"
            raise InvalidFieldError(field, msg)


def _build_docs_section(
    value: object, field: str, base_dir: Path
) -> DocsSection | None:
    """Build docs options, returning None when the section is disabled."""
    if value is False:
        return None
    data = _mapping(value, field, known=DOCS_KEYS)
    base = DocsSection()
    sidebar_raw = data.get("sidebar_path")
    sidebar_path = (
        _resolve_reference(sidebar_raw, _field(field, "sidebar_path"), base_dir)
        if sidebar_raw is not None
        else None
    )
    sidebars_field = _field(field, "sidebars")
    sidebars = tuple(
        _string(item, _field(sidebars_field, index))
        for index, item in enumerate(_sequence(data.get("sidebars"), sidebars_field))
    )
    edit_url = data.get("edit_url")
    return DocsSection(
        path=_string(data.get("path"), _field(field, "path"), default=base.path),
        route_base_path=_string(
            data.get("route_base_path"),
            _field(field, "route_base_path"),
            default=base.route_base_path,
        ).strip("/"),
        sidebar_path=sidebar_path,
        sidebars=sidebars,
        edit_url=(
            _external_url(edit_url, _field(field, "edit_url"))
            if _optional_str(edit_url)
            else None
        ),
    )


def _build_blog_section(value: object, field: str) -> BlogSection | None:
    """Build blog options, returning None when the section is disabled."""
    if value is False:
        return None
    data = _mapping(value, field, known=BLOG_KEYS)
    base = BlogSection()
    edit_url = data.get("edit_url")
    return BlogSection(
        path=_string(data.get("path"), _field(field, "path"), default=base.path),
        route_base_path=_string(
            data.get("route_base_path"),
            _field(field, "route_base_path"),
            default=base.route_base_path,
        ).strip("/"),
        show_reading_time=_flag(
            data.get("show_reading_time"), _field(field, "show_reading_time")
        ),
        edit_url=(
            _external_url(edit_url, _field(field, "edit_url"))
            if _optional_str(edit_url)
            else None
        ),
    )


def _build_theme_section(value: object, field: str, base_dir: Path) -> ThemeSection:
    """Build theme options, resolving every custom stylesheet."""
    data = _mapping(value, field, known=THEME_KEYS)
    css_field = _field(field, "custom_css")
    match data.get("custom_css"):
        case None:
            return ThemeSection()
        case str() as single:
            return ThemeSection(
                custom_css=(_resolve_reference(single, css_field, base_dir),)
            )
        case raw:
            entries = _sequence(raw, css_field)
    return ThemeSection(
        custom_css=tuple(
            _resolve_reference(entry, _field(css_field, index), base_dir)
            for index, entry in enumerate(entries)
        )
    )


def _build_classic_preset(
    options: typ.Mapping[str, typ.Any], field: str, base_dir: Path
) -> ClassicPreset:
    """Build the ``classic`` preset, defaulting any missing section."""
    data = _mapping(options, field, known=CLASSIC_KEYS)
    return ClassicPreset(
        docs=_build_docs_section(data.get("docs"), _field(field, "docs"), base_dir),
        blog=_build_blog_section(data.get("blog"), _field(field, "blog")),
        theme=_build_theme_section(data.get("theme"), _field(field, "theme"), base_dir),
    )


PRESET_BUILDERS: dict[str, PresetBuilder] = {
    "classic": _build_classic_preset,
}


def _build_presets(value: object, field: str, base_dir: Path) -> tuple[Preset, ...]:
    """Build every preset entry in declaration order."""
    presets: list[Preset] = []
    for index, entry in enumerate(_sequence(value, field)):
        entry_field = _field(field, index)
        kind, options = _split_entry(entry, entry_field)
        builder = PRESET_BUILDERS.get(kind)
        if builder is None:
            known = ", ".join(sorted(PRESET_BUILDERS))
            msg = f"unknown preset kind '{kind}'. Known kinds: {known}"
            raise UnknownPresetKindError(entry_field, msg)
        options_field = (
            entry_field if isinstance(entry, cabc.Mapping) else _field(entry_field, 1)
        )
        presets.append(builder(options, options_field, base_dir))
    return tuple(presets)


__all__ = [
    "PRESET_BUILDERS",
    "_build_blog_section",
    "_build_classic_preset",
    "_build_docs_section",
    "_build_presets",
    "_build_theme_section",
]
