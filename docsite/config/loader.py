"""Load site configuration files and resolve them into descriptors."""

from __future__ import annotations

import logging
import typing as typ

import tomlkit
from ruamel.yaml import YAML

from .models import SiteConfigError
from .resolver import ConfigResolver

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import SiteDescriptor
    from .resolver import Clock

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
TOML_SUFFIXES = (".toml",)


def load_raw_config(path: Path) -> dict[str, typ.Any]:
    """Read a YAML or TOML configuration file into a plain mapping.

    Parameters
    ----------
    path : Path
        Filesystem path to ``docsite.yaml``, ``docsite.yml`` or
        ``docsite.toml``.

    Returns
    -------
    dict[str, Any]
        The configuration as authored, with no defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level structure is not a mapping.
    SiteConfigError
        If the file suffix names an unsupported format.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    elif suffix in TOML_SUFFIXES:
        loaded = tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()
    else:
        supported = ", ".join(YAML_SUFFIXES + TOML_SUFFIXES)
        msg = f"unsupported configuration format '{suffix}'; expected {supported}"
        raise SiteConfigError(str(path), msg)

    if not isinstance(loaded, dict):
        msg = "Top-level configuration structure must be a mapping."
        raise TypeError(msg)
    logger.debug("Loaded %d top-level key(s) from %s", len(loaded), path)
    return dict(loaded)


def load_site_config(path: Path, *, clock: Clock | None = None) -> SiteDescriptor:
    """Load ``path`` and resolve it relative to the file's own directory.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite.config import load_site_config
    >>> site = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
    >>> site.base_path  # doctest: +SKIP
    '/docs/'
    """
    raw = load_raw_config(path)
    resolver = ConfigResolver(path.resolve().parent, clock=clock)
    return resolver.resolve(raw)


__all__ = ["load_raw_config", "load_site_config"]
