"""Typed dataclasses describing a resolved documentation site."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete.

    Every error names the dotted path of the offending field within the raw
    configuration, for example ``theme_config.footer.links[1].items[0]``.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InvalidFieldError(SiteConfigError):
    """A section or scalar has the wrong type or an unsupported value."""


class InvalidURLError(SiteConfigError):
    """A URL field is not a well-formed absolute http(s) URL."""


class InvalidBasePathError(SiteConfigError):
    """The base path does not start and end with ``/``."""


class LocaleMismatchError(SiteConfigError):
    """The default locale is not one of the configured locales."""


class UnknownPresetKindError(SiteConfigError):
    """A preset entry names a kind no builder is registered for."""


class MissingReferencedFileError(SiteConfigError):
    """A referenced sidebar or stylesheet file does not exist."""

    def __init__(self, field: str, path: Path) -> None:
        super().__init__(field, f"referenced file '{path}' does not exist")
        self.path = path


class InvalidPolicyTokenError(SiteConfigError):
    """A broken-link policy is not one of ``fail``, ``warn`` or ``ignore``."""


class MalformedNavItemError(SiteConfigError):
    """A navbar item is missing a label, position or valid target."""


class MalformedFooterItemError(SiteConfigError):
    """A footer group or link is incomplete or ambiguous."""


class InvalidTemplateError(SiteConfigError):
    """The copyright template cannot be rendered."""


class UnknownHighlightThemeError(SiteConfigError):
    """A syntax-highlight theme is not an installed Pygments style."""


class BrokenLinkPolicy(enum.StrEnum):
    """How the renderer reacts to internal links that do not resolve."""

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"


class NavItemKind(enum.StrEnum):
    SIDEBAR = "sidebar"
    PAGE = "page"
    EXTERNAL = "external"


class NavPosition(enum.StrEnum):
    LEFT = "left"
    RIGHT = "right"


class TextDirection(enum.StrEnum):
    LTR = "ltr"
    RTL = "rtl"


class FooterStyle(enum.StrEnum):
    LIGHT = "light"
    DARK = "dark"


@dc.dataclass(frozen=True, slots=True)
class DeploymentTarget:
    """Opaque deployment metadata handed to the external deploy tool."""

    organization: str | None = None
    project: str | None = None
    branch: str | None = None


@dc.dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Presentation settings for a single locale."""

    label: str
    direction: TextDirection = TextDirection.LTR


@dc.dataclass(frozen=True, slots=True)
class BrokenLinkSettings:
    """Broken-link policies for regular and markdown links."""

    links: BrokenLinkPolicy = BrokenLinkPolicy.FAIL
    markdown_links: BrokenLinkPolicy = BrokenLinkPolicy.WARN
    overridden: bool = False


@dc.dataclass(frozen=True, slots=True)
class DocsSection:
    """Documentation plugin options of a preset."""

    path: str = "docs"
    route_base_path: str = "docs"
    sidebar_path: Path | None = None
    sidebars: tuple[str, ...] = ()
    edit_url: str | None = None


@dc.dataclass(frozen=True, slots=True)
class BlogSection:
    """Blog plugin options of a preset."""

    path: str = "blog"
    route_base_path: str = "blog"
    show_reading_time: bool = False
    edit_url: str | None = None


@dc.dataclass(frozen=True, slots=True)
class ThemeSection:
    """Theme options of a preset."""

    custom_css: tuple[Path, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ClassicPreset:
    """The ``classic`` bundle: docs, blog and theme options.

    ``docs`` or ``blog`` is ``None`` when that section was disabled with
    ``false`` in the raw configuration.
    """

    docs: DocsSection | None = DocsSection()
    blog: BlogSection | None = BlogSection()
    theme: ThemeSection = ThemeSection()
    kind: str = dc.field(default="classic", init=False)


Preset = ClassicPreset


@dc.dataclass(frozen=True, slots=True)
class NavbarLogo:
    alt: str
    src: str


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """A navbar entry tagged by the kind of target it points at."""

    kind: NavItemKind
    label: str
    target: str
    position: NavPosition


@dc.dataclass(frozen=True, slots=True)
class NavbarConfig:
    title: str | None = None
    logo: NavbarLogo | None = None
    items: tuple[NavItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class FooterLink:
    """Footer hyperlink; ``external`` is true for ``href`` targets."""

    label: str
    target: str
    external: bool


@dc.dataclass(frozen=True, slots=True)
class FooterGroup:
    title: str
    items: tuple[FooterLink, ...]


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer link groups plus the copyright line rendered at resolve time."""

    style: FooterStyle = FooterStyle.LIGHT
    groups: tuple[FooterGroup, ...] = ()
    copyright_text: str = ""


@dc.dataclass(frozen=True, slots=True)
class PrismConfig:
    """Syntax-highlight styles for light and dark colour modes."""

    theme: str = "default"
    dark_theme: str = "monokai"


@dc.dataclass(frozen=True, slots=True)
class SiteDescriptor:
    """A fully resolved site configuration ready for the renderer."""

    title: str
    tagline: str
    origin: str
    base_path: str
    default_locale: str
    locales: tuple[str, ...]
    locale_configs: tuple[tuple[str, LocaleConfig], ...]
    presets: tuple[Preset, ...]
    navbar: NavbarConfig
    footer: FooterConfig
    broken_links: BrokenLinkSettings
    prism: PrismConfig
    deployment: DeploymentTarget
    favicon: str | None = None
    image: str | None = None
    future_flags: tuple[str, ...] = ()

    @property
    def copyright_text(self) -> str:
        """Return the copyright line rendered for the resolution year."""
        return self.footer.copyright_text

    def url_for(self, target: str) -> str:
        """Return ``target`` prefixed with the site's base path.

        >>> site.url_for("/blog")  # doctest: +SKIP
        '/docs/blog'
        """
        return self.base_path + target.lstrip("/")

    def absolute_url(self, target: str) -> str:
        """Return the fully qualified URL for an internal ``target``."""
        return self.origin + self.url_for(target)

    def locale_config(self, locale: str) -> LocaleConfig:
        """Return presentation settings for ``locale``."""
        for key, config in self.locale_configs:
            if key == locale:
                return config
        msg = f"Unknown locale '{locale}'. Known locales: {', '.join(self.locales)}"
        raise KeyError(msg)


__all__ = [
    "BlogSection",
    "BrokenLinkPolicy",
    "BrokenLinkSettings",
    "ClassicPreset",
    "DeploymentTarget",
    "DocsSection",
    "FooterConfig",
    "FooterGroup",
    "FooterLink",
    "FooterStyle",
    "InvalidBasePathError",
    "InvalidFieldError",
    "InvalidPolicyTokenError",
    "InvalidTemplateError",
    "InvalidURLError",
    "LocaleConfig",
    "LocaleMismatchError",
    "MalformedFooterItemError",
    "MalformedNavItemError",
    "MissingReferencedFileError",
    "NavItem",
    "NavItemKind",
    "NavPosition",
    "NavbarConfig",
    "NavbarLogo",
    "Preset",
    "PrismConfig",
    "SiteConfigError",
    "SiteDescriptor",
    "TextDirection",
    "ThemeSection",
    "UnknownHighlightThemeError",
    "UnknownPresetKindError",
]
