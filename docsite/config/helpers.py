"""Utility helpers shared by the docsite configuration resolver."""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ
from pathlib import Path
from urllib.parse import urlsplit

from .models import (
    InvalidFieldError,
    InvalidURLError,
    MissingReferencedFileError,
)

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http", "https")


def _field(parent: str, key: str | int) -> str:
    """Join a dotted field path, rendering integers as list indexes."""
    if isinstance(key, int):
        return f"{parent}[{key}]"
    return f"{parent}.{key}" if parent else key


def _mapping(
    value: object, field: str, *, known: typ.Collection[str] = ()
) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    match value:
        case None:
            return {}
        case cabc.Mapping() as data:
            pass
        case _:
            msg = "expected a mapping"
            raise InvalidFieldError(field, msg)
    if known:
        _log_unknown_keys(data, field, known)
    return data


def _sequence(value: object, field: str) -> list[typ.Any]:
    """Return ``value`` as a list, treating ``None`` as empty."""
    match value:
        case None:
            return []
        case list() | tuple() as items:
            return list(items)
        case _:
            msg = "expected a list"
            raise InvalidFieldError(field, msg)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string(value: object, field: str, *, default: str = "") -> str:
    """Return a scalar as text, rejecting mappings and lists."""
    if value is None:
        return default
    if isinstance(value, cabc.Mapping | list | tuple):
        msg = "expected a string"
        raise InvalidFieldError(field, msg)
    return str(value).strip()


def _flag(value: object, field: str, *, default: bool = False) -> bool:
    """Return a boolean flag, rejecting anything but true/false."""
    if value is None:
        return default
    if not isinstance(value, bool):
        msg = f"expected true or false, got {value!r}"
        raise InvalidFieldError(field, msg)
    return value


def _is_absolute_url(value: str) -> bool:
    """Return True for ``http``/``https`` URLs that carry a host."""
    try:
        parsed = urlsplit(value)
        # Raises for a non-numeric or out-of-range port.
        parsed.port  # noqa: B018
    except ValueError:
        return False
    if parsed.scheme.lower() not in _URL_SCHEMES or not parsed.hostname:
        return False
    return not any(char.isspace() for char in value)


def _external_url(value: object, field: str) -> str:
    """Validate an optional-path URL such as an edit link."""
    text = _string(value, field)
    if not _is_absolute_url(text):
        msg = f"'{text}' is not a well-formed absolute URL"
        raise InvalidURLError(field, msg)
    return text


def _origin(value: object, field: str) -> str:
    """Validate the site origin and strip any trailing slash."""
    text = _string(value, field)
    if not text:
        msg = "a site URL is required"
        raise InvalidURLError(field, msg)
    if not _is_absolute_url(text):
        msg = f"'{text}' is not a well-formed absolute URL"
        raise InvalidURLError(field, msg)
    parsed = urlsplit(text)
    if parsed.path not in ("", "/") or parsed.query or parsed.fragment:
        msg = f"'{text}' must not carry a path; put it in 'base_url' instead"
        raise InvalidURLError(field, msg)
    return f"{parsed.scheme.lower()}://{parsed.netloc}"


def _resolve_reference(value: object, field: str, base_dir: Path) -> Path:
    """Resolve a file reference against ``base_dir`` and check it exists."""
    text = _string(value, field)
    if not text:
        msg = "expected a file path"
        raise InvalidFieldError(field, msg)
    candidate = Path(text).expanduser()
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    resolved = candidate.resolve()
    if not resolved.is_file():
        raise MissingReferencedFileError(field, resolved)
    return resolved


def _log_unknown_keys(
    data: typ.Mapping[str, typ.Any], field: str, known: typ.Collection[str]
) -> None:
    """Log keys that are not recognized; they are never an error."""
    for key in data:
        if key not in known:
            logger.debug("Ignoring unknown key '%s'", _field(field, str(key)))


__all__ = [
    "_external_url",
    "_field",
    "_flag",
    "_is_absolute_url",
    "_log_unknown_keys",
    "_mapping",
    "_optional_str",
    "_origin",
    "_resolve_reference",
    "_sequence",
    "_string",
]
