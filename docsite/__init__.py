"""Validate and resolve configuration for static documentation sites.

This package turns an authored ``docsite.yaml`` into an immutable site
descriptor consumed by the site renderer, and exposes the ``docsite`` CLI used
to check configuration in CI.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docsite import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
