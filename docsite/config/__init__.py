"""Validate and resolve documentation-site configuration.

This subpackage reads the project's ``docsite.yaml`` (or ``docsite.toml``),
applies defaults, resolves sidebar and stylesheet references relative to the
file and produces an immutable :class:`SiteDescriptor` for the site renderer.
The primary entry points are :func:`load_site_config` for files and
:class:`ConfigResolver` for in-memory mappings.

Examples
--------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> site = load_site_config(Path("website/docsite.yaml"))  # doctest: +SKIP
>>> site.absolute_url("/blog")  # doctest: +SKIP
'https://example.org/docs/blog'
"""

from .loader import load_raw_config, load_site_config
from .models import (
    BlogSection,
    BrokenLinkPolicy,
    BrokenLinkSettings,
    ClassicPreset,
    DeploymentTarget,
    DocsSection,
    FooterConfig,
    FooterGroup,
    FooterLink,
    FooterStyle,
    InvalidBasePathError,
    InvalidFieldError,
    InvalidPolicyTokenError,
    InvalidTemplateError,
    InvalidURLError,
    LocaleConfig,
    LocaleMismatchError,
    MalformedFooterItemError,
    MalformedNavItemError,
    MissingReferencedFileError,
    NavbarConfig,
    NavbarLogo,
    NavItem,
    NavItemKind,
    NavPosition,
    Preset,
    PrismConfig,
    SiteConfigError,
    SiteDescriptor,
    TextDirection,
    ThemeSection,
    UnknownHighlightThemeError,
    UnknownPresetKindError,
)
from .resolver import ConfigResolver, resolve_site_config

__all__ = [
    "BlogSection",
    "BrokenLinkPolicy",
    "BrokenLinkSettings",
    "ClassicPreset",
    "ConfigResolver",
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
    "load_raw_config",
    "load_site_config",
    "resolve_site_config",
]
