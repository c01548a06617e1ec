"""Resolve a raw site configuration mapping into a :class:`SiteDescriptor`.

Resolution is a single synchronous pass. It validates every section, fills
defaults, resolves file references against the configuration's directory and
renders the copyright line for the current year. The first invalid field
aborts resolution with a :class:`SiteConfigError` subclass naming that field;
a partially resolved descriptor is never returned.

Examples
--------
>>> from pathlib import Path
>>> from docsite.config import ConfigResolver
>>> resolver = ConfigResolver(Path("site"))
>>> site = resolver.resolve({"url": "https://example.org", "base_url": "/docs/"})
>>> site.locales
('en',)
>>> site.url_for("/blog")
'/docs/blog'
"""

from __future__ import annotations

import collections.abc as cabc
import datetime as dt
import logging
import typing as typ

from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .helpers import (
    _field,
    _flag,
    _mapping,
    _optional_str,
    _origin,
    _sequence,
    _string,
)
from .models import (
    BrokenLinkPolicy,
    BrokenLinkSettings,
    DeploymentTarget,
    InvalidBasePathError,
    InvalidFieldError,
    InvalidPolicyTokenError,
    LocaleConfig,
    LocaleMismatchError,
    MalformedNavItemError,
    NavItemKind,
    PrismConfig,
    SiteDescriptor,
    TextDirection,
    UnknownHighlightThemeError,
)
from .navigation import _build_footer, _build_navbar
from .presets import _build_presets

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import NavbarConfig, Preset

logger = logging.getLogger(__name__)

Clock = typ.Callable[[], dt.datetime]

TOP_LEVEL_KEYS = (
    "title",
    "tagline",
    "favicon",
    "url",
    "base_url",
    "organization_name",
    "project_name",
    "deployment_branch",
    "on_broken_links",
    "on_broken_markdown_links",
    "ignore_broken_links",
    "i18n",
    "presets",
    "theme_config",
    "future",
)
I18N_KEYS = ("default_locale", "locales", "locale_configs")
THEME_CONFIG_KEYS = ("image", "navbar", "footer", "prism")
PRISM_KEYS = ("theme", "dark_theme")
DEFAULT_LOCALE = "en"
ROOT_FIELD = "<root>"

# "throw" is the token the upstream generator uses for failing builds.
_POLICY_ALIASES = {"throw": BrokenLinkPolicy.FAIL}


def _utc_now() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


class ConfigResolver:
    """Turn raw configuration mappings into immutable site descriptors."""

    def __init__(self, base_dir: Path, *, clock: Clock | None = None) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        base_dir : Path
            Directory that relative file references (sidebar definitions,
            stylesheets) are resolved against; normally the directory holding
            the configuration file.
        clock : callable, optional
            Returns the current datetime. Only its year is used, to render
            the copyright line. Defaults to the current UTC time.
        """
        self.base_dir = base_dir
        self.clock = clock or _utc_now

    def resolve(self, raw: typ.Mapping[str, typ.Any]) -> SiteDescriptor:
        """Validate ``raw`` and return the resolved site descriptor.

        Parameters
        ----------
        raw : Mapping[str, Any]
            The configuration as authored. Unknown keys are ignored.

        Returns
        -------
        SiteDescriptor
            Fully populated descriptor with defaults applied and all file
            references absolute.

        Raises
        ------
        SiteConfigError
            The subclass identifies the failed rule and ``field`` names the
            offending entry, for example :class:`InvalidBasePathError` for
            ``base_url``.
        """
        if not isinstance(raw, cabc.Mapping):
            msg = "the configuration must be a mapping"
            raise InvalidFieldError(ROOT_FIELD, msg)
        data = _mapping(raw, "", known=TOP_LEVEL_KEYS)
        title = _string(data.get("title"), "title")
        origin = _origin(data.get("url"), "url")
        base_path = _base_path(data.get("base_url"))
        default_locale, locales, locale_configs = _resolve_i18n(data.get("i18n"))
        broken_links = _resolve_broken_links(data)

        theme_config = _mapping(
            data.get("theme_config"), "theme_config", known=THEME_CONFIG_KEYS
        )
        # Presets resolve after the navbar so sidebar references are checked
        # against the resolved docs sections.
        navbar = _build_navbar(theme_config.get("navbar"), "theme_config.navbar")
        presets = _build_presets(data.get("presets"), "presets", self.base_dir)
        _check_sidebar_references(navbar, presets)

        year = self.clock().year
        footer = _build_footer(
            theme_config.get("footer"), "theme_config.footer", title=title, year=year
        )
        descriptor = SiteDescriptor(
            title=title,
            tagline=_string(data.get("tagline"), "tagline"),
            origin=origin,
            base_path=base_path,
            default_locale=default_locale,
            locales=locales,
            locale_configs=locale_configs,
            presets=presets,
            navbar=navbar,
            footer=footer,
            broken_links=broken_links,
            prism=_resolve_prism(theme_config.get("prism")),
            deployment=DeploymentTarget(
                organization=_optional_str(data.get("organization_name")),
                project=_optional_str(data.get("project_name")),
                branch=_optional_str(data.get("deployment_branch")),
            ),
            favicon=_optional_str(data.get("favicon")),
            image=_optional_str(theme_config.get("image")),
            future_flags=_resolve_future_flags(data.get("future")),
        )
        logger.debug(
            "Resolved site '%s' at %s%s with %d preset(s)",
            title,
            origin,
            base_path,
            len(presets),
        )
        return descriptor


def resolve_site_config(
    raw: typ.Mapping[str, typ.Any], base_dir: Path, *, clock: Clock | None = None
) -> SiteDescriptor:
    """Resolve ``raw`` with a one-off :class:`ConfigResolver`."""
    return ConfigResolver(base_dir, clock=clock).resolve(raw)


def _base_path(value: object) -> str:
    text = _string(value, "base_url", default="/")
    if not (text.startswith("/") and text.endswith("/")):
        msg = f"base path must start and end with '/', got {text!r}"
        raise InvalidBasePathError("base_url", msg)
    return text


def _resolve_i18n(
    value: object,
) -> tuple[str, tuple[str, ...], tuple[tuple[str, LocaleConfig], ...]]:
    """Return the default locale, locale list and per-locale settings."""
    data = _mapping(value, "i18n", known=I18N_KEYS)
    default_locale = _string(
        data.get("default_locale"), "i18n.default_locale", default=DEFAULT_LOCALE
    )
    if not default_locale:
        msg = "default locale must not be empty"
        raise LocaleMismatchError("i18n.default_locale", msg)

    locales: list[str] = []
    for index, entry in enumerate(_sequence(data.get("locales"), "i18n.locales")):
        locale = _string(entry, _field("i18n.locales", index))
        if not locale:
            msg = "locale identifiers must not be empty"
            raise InvalidFieldError(_field("i18n.locales", index), msg)
        if locale not in locales:
            locales.append(locale)
    if not locales:
        locales.append(default_locale)
    elif default_locale not in locales:
        msg = (
            f"default locale '{default_locale}' is not one of the configured "
            f"locales: {', '.join(locales)}"
        )
        raise LocaleMismatchError("i18n.default_locale", msg)

    configs_raw = _mapping(data.get("locale_configs"), "i18n.locale_configs")
    locale_configs = tuple(
        (
            locale,
            _build_locale_config(
                configs_raw.get(locale), _field("i18n.locale_configs", locale), locale
            ),
        )
        for locale in locales
    )
    return default_locale, tuple(locales), locale_configs


def _build_locale_config(value: object, field: str, locale: str) -> LocaleConfig:
    data = _mapping(value, field, known=("label", "direction"))
    direction_raw = data.get("direction") or TextDirection.LTR.value
    try:
        direction = TextDirection(str(direction_raw).strip().lower())
    except ValueError as exc:
        msg = f"direction must be 'ltr' or 'rtl', got {direction_raw!r}"
        raise InvalidFieldError(_field(field, "direction"), msg) from exc
    return LocaleConfig(
        label=_optional_str(data.get("label")) or locale,
        direction=direction,
    )


def _resolve_broken_links(data: typ.Mapping[str, typ.Any]) -> BrokenLinkSettings:
    """Parse both broken-link policies unless the override flag is set."""
    if _flag(data.get("ignore_broken_links"), "ignore_broken_links"):
        logger.warning(
            "Broken-link checks are disabled by 'ignore_broken_links'; "
            "dangling links will not be reported."
        )
        return BrokenLinkSettings(
            links=BrokenLinkPolicy.IGNORE,
            markdown_links=BrokenLinkPolicy.IGNORE,
            overridden=True,
        )
    base = BrokenLinkSettings()
    return BrokenLinkSettings(
        links=_policy(data.get("on_broken_links"), "on_broken_links", base.links),
        markdown_links=_policy(
            data.get("on_broken_markdown_links"),
            "on_broken_markdown_links",
            base.markdown_links,
        ),
    )


def _policy(
    value: object, field: str, default: BrokenLinkPolicy
) -> BrokenLinkPolicy:
    if value is None:
        return default
    token = str(value).strip().lower()
    if token in _POLICY_ALIASES:
        return _POLICY_ALIASES[token]
    try:
        return BrokenLinkPolicy(token)
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in BrokenLinkPolicy)
        msg = f"unknown policy {value!r}; expected one of {choices}"
        raise InvalidPolicyTokenError(field, msg) from exc


def _check_sidebar_references(
    navbar: NavbarConfig, presets: tuple[Preset, ...]
) -> None:
    """Check sidebar navbar items against the resolved docs sections."""
    docs_sections = [preset.docs for preset in presets if preset.docs is not None]
    declared = {sidebar for docs in docs_sections for sidebar in docs.sidebars}
    for index, item in enumerate(navbar.items):
        if item.kind is not NavItemKind.SIDEBAR:
            continue
        field = _field("theme_config.navbar.items", index)
        if not docs_sections:
            msg = f"sidebar '{item.target}' requires a preset with docs enabled"
            raise MalformedNavItemError(field, msg)
        if declared and item.target not in declared:
            msg = (
                f"unknown sidebar '{item.target}'; declared sidebars: "
                f"{', '.join(sorted(declared))}"
            )
            raise MalformedNavItemError(field, msg)


def _resolve_prism(value: object) -> PrismConfig:
    data = _mapping(value, "theme_config.prism", known=PRISM_KEYS)
    base = PrismConfig()
    return PrismConfig(
        theme=_highlight_style(data.get("theme"), "theme_config.prism.theme", base.theme),
        dark_theme=_highlight_style(
            data.get("dark_theme"), "theme_config.prism.dark_theme", base.dark_theme
        ),
    )


def _highlight_style(value: object, field: str, default: str) -> str:
    name = _string(value, field) or default
    try:
        get_style_by_name(name)
    except ClassNotFound as exc:
        msg = f"'{name}' is not an installed Pygments style"
        raise UnknownHighlightThemeError(field, msg) from exc
    return name


def _resolve_future_flags(value: object) -> tuple[str, ...]:
    data = _mapping(value, "future")
    return tuple(
        sorted(
            str(name)
            for name, enabled in data.items()
            if _flag(enabled, _field("future", str(name)))
        )
    )


__all__ = ["Clock", "ConfigResolver", "resolve_site_config"]
