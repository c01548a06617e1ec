"""Navbar and footer configuration builders."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from jinja2 import StrictUndefined, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from .helpers import _field, _is_absolute_url, _mapping, _optional_str, _sequence
from .models import (
    FooterConfig,
    FooterGroup,
    FooterLink,
    FooterStyle,
    InvalidFieldError,
    InvalidTemplateError,
    MalformedFooterItemError,
    MalformedNavItemError,
    NavbarConfig,
    NavbarLogo,
    NavItem,
    NavItemKind,
    NavPosition,
)

DEFAULT_COPYRIGHT = "Copyright © {{ year }}{% if title %} {{ title }}{% endif %}."
SIDEBAR_ITEM_TYPES = ("doc_sidebar", "docSidebar", "sidebar")

NAVBAR_KEYS = ("title", "logo", "items")
FOOTER_KEYS = ("style", "links", "copyright")

_TEMPLATES = SandboxedEnvironment(autoescape=False, undefined=StrictUndefined)  # noqa: S701 - plain text


def _build_navbar(value: object, field: str) -> NavbarConfig:
    """Build the navbar title, logo and items."""
    data = _mapping(value, field, known=NAVBAR_KEYS)
    items_field = _field(field, "items")
    items = tuple(
        _build_nav_item(entry, _field(items_field, index))
        for index, entry in enumerate(_sequence(data.get("items"), items_field))
    )
    return NavbarConfig(
        title=_optional_str(data.get("title")),
        logo=_build_logo(data.get("logo"), _field(field, "logo")),
        items=items,
    )


def _build_logo(value: object, field: str) -> NavbarLogo | None:
    match value:
        case None:
            return None
        case {"src": src, **rest} if _optional_str(src):
            return NavbarLogo(alt=str(rest.get("alt") or ""), src=str(src).strip())
        case _:
            msg = "navbar logo requires a 'src'"
            raise InvalidFieldError(field, msg)


def _build_nav_item(entry: object, field: str) -> NavItem:
    """Build one navbar item, classifying it by the target it carries."""
    match entry:
        case cabc.Mapping() as data:
            pass
        case _:
            msg = "navbar items must be mappings"
            raise MalformedNavItemError(field, msg)
    label = _optional_str(data.get("label"))
    if not label:
        msg = "navbar items require a non-empty 'label'"
        raise MalformedNavItemError(field, msg)
    position = _nav_position(data.get("position"), field)

    item_type = _optional_str(data.get("type"))
    if item_type in SIDEBAR_ITEM_TYPES:
        sidebar_id = _optional_str(data.get("sidebar_id"))
        if not sidebar_id:
            msg = "sidebar items require a 'sidebar_id'"
            raise MalformedNavItemError(field, msg)
        return NavItem(NavItemKind.SIDEBAR, label, sidebar_id, position)
    if item_type is not None:
        msg = f"unsupported navbar item type '{item_type}'"
        raise MalformedNavItemError(field, msg)

    to = _optional_str(data.get("to"))
    href = _optional_str(data.get("href"))
    match (to, href):
        case (str(), None):
            return NavItem(NavItemKind.PAGE, label, to, position)
        case (None, str()):
            if not _is_absolute_url(href):
                msg = f"'{href}' is not a well-formed absolute URL"
                raise MalformedNavItemError(field, msg)
            return NavItem(NavItemKind.EXTERNAL, label, href, position)
        case _:
            msg = "navbar items require exactly one of 'to' or 'href'"
            raise MalformedNavItemError(field, msg)


def _nav_position(value: object, field: str) -> NavPosition:
    try:
        return NavPosition(str(value).strip().lower())
    except ValueError as exc:
        msg = f"position must be 'left' or 'right', got {value!r}"
        raise MalformedNavItemError(field, msg) from exc


def _build_footer(
    value: object, field: str, *, title: str, year: int
) -> FooterConfig:
    """Build footer groups and render the copyright line for ``year``."""
    data = _mapping(value, field, known=FOOTER_KEYS)
    style_raw = data.get("style") or FooterStyle.LIGHT.value
    try:
        style = FooterStyle(str(style_raw).strip().lower())
    except ValueError as exc:
        msg = f"footer style must be 'light' or 'dark', got {style_raw!r}"
        raise InvalidFieldError(_field(field, "style"), msg) from exc

    links_field = _field(field, "links")
    groups = tuple(
        _build_footer_group(entry, _field(links_field, index))
        for index, entry in enumerate(_sequence(data.get("links"), links_field))
    )
    copyright_text = _render_copyright(
        data.get("copyright"), _field(field, "copyright"), title=title, year=year
    )
    return FooterConfig(style=style, groups=groups, copyright_text=copyright_text)


def _build_footer_group(entry: object, field: str) -> FooterGroup:
    match entry:
        case {"title": title, **rest} if _optional_str(title):
            pass
        case _:
            msg = "footer groups require a non-empty 'title'"
            raise MalformedFooterItemError(field, msg)
    items_field = _field(field, "items")
    try:
        items_raw = _sequence(rest.get("items"), items_field)
    except InvalidFieldError as exc:
        raise MalformedFooterItemError(items_field, exc.message) from exc
    if not items_raw:
        msg = "footer groups require a non-empty 'items' list"
        raise MalformedFooterItemError(items_field, msg)
    return FooterGroup(
        title=str(title).strip(),
        items=tuple(
            _build_footer_link(item, _field(items_field, index))
            for index, item in enumerate(items_raw)
        ),
    )


def _build_footer_link(entry: object, field: str) -> FooterLink:
    """Build a footer link carrying exactly one internal or external target."""
    match entry:
        case cabc.Mapping() as data:
            pass
        case _:
            msg = "footer items must be mappings"
            raise MalformedFooterItemError(field, msg)
    label = _optional_str(data.get("label"))
    if not label:
        msg = "footer items require a non-empty 'label'"
        raise MalformedFooterItemError(field, msg)
    to = _optional_str(data.get("to"))
    href = _optional_str(data.get("href"))
    if to and href:
        msg = "footer items must set only one of 'to' or 'href'"
        raise MalformedFooterItemError(field, msg)
    if to:
        return FooterLink(label=label, target=to, external=False)
    if href:
        if not _is_absolute_url(href):
            msg = f"'{href}' is not a well-formed absolute URL"
            raise MalformedFooterItemError(field, msg)
        return FooterLink(label=label, target=href, external=True)
    msg = "footer items require one of 'to' or 'href'"
    raise MalformedFooterItemError(field, msg)


def _render_copyright(value: object, field: str, *, title: str, year: int) -> str:
    """Render the copyright template with the resolution year."""
    source = DEFAULT_COPYRIGHT if value is None else str(value)
    try:
        return _TEMPLATES.from_string(source).render(year=year, title=title).strip()
    except TemplateError as exc:
        msg = f"cannot render copyright template: {exc}"
        raise InvalidTemplateError(field, msg) from exc


__all__ = [
    "DEFAULT_COPYRIGHT",
    "_build_footer",
    "_build_footer_group",
    "_build_footer_link",
    "_build_logo",
    "_build_nav_item",
    "_build_navbar",
    "_render_copyright",
]
