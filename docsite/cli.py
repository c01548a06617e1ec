"""Cyclopts CLI entrypoint for checking and resolving site configuration.

The ``docsite`` console script validates a ``docsite.yaml`` file before a
build and can write the resolved descriptor as JSON for the site renderer.
Typical usage is ``docsite check`` in CI and ``docsite resolve --output
build/site.json`` ahead of rendering.

Examples
--------
Validate the default configuration:

>>> from docsite.cli import main
>>> main()  # doctest: +SKIP

Write the resolved descriptor to a file:

>>> from docsite.cli import app
>>> app(["resolve", "--output", "build/site.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG, ENV_PREFIX
from .config import SiteConfigError, load_site_config
from .export import descriptor_to_json, write_descriptor

if typ.TYPE_CHECKING:
    from .config import SiteDescriptor

app = App(name="docsite", config=cyclopts.config.Env(ENV_PREFIX, command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_or_exit(config: Path) -> SiteDescriptor:
    """Load ``config`` or print the problem and exit with status 1."""
    try:
        return load_site_config(config)
    except SiteConfigError as exc:
        print(f"error: {exc.field}: {exc.message}")
        raise SystemExit(1) from exc
    except (FileNotFoundError, TypeError) as exc:
        print(f"error: {_format_path(config)}: {exc}")
        raise SystemExit(1) from exc


@app.command(help="Validate a site configuration file.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="DOCSITE_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Resolve ``config`` and report the first problem found.

    Parameters
    ----------
    config : Path, optional
        Path to the ``docsite.yaml`` or ``docsite.toml`` file (overridable via
        ``DOCSITE_CONFIG``).

    Raises
    ------
    SystemExit
        With status 1 when the configuration is missing or invalid.
    """
    site = _load_or_exit(config)
    print(f"ok: {site.title or '(untitled)'} -> {site.origin}{site.base_path}")


@app.command(help="Write the resolved site descriptor as JSON.")
def resolve(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="DOCSITE_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write JSON here instead of stdout", env_var="DOCSITE_OUTPUT"),
    ] = None,
) -> None:
    """Resolve ``config`` and emit the descriptor JSON.

    Parameters
    ----------
    config : Path, optional
        Path to the site configuration file.
    output : Path or None, optional
        Destination file for the JSON document. When ``None`` (default) the
        document is written to stdout.

    Raises
    ------
    SystemExit
        With status 1 when the configuration is missing or invalid.
    """
    site = _load_or_exit(config)
    if output is None:
        sys.stdout.write(descriptor_to_json(site).decode("utf-8") + "\n")
        return
    written = write_descriptor(site, output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``docsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
