"""Serialize resolved site descriptors for the external renderer.

The JSON document mirrors :class:`~docsite.config.SiteDescriptor` field for
field: enums become their string values, tuples become arrays and resolved
file references become absolute path strings. Encoding is deterministic, so
two descriptors resolved within the same calendar year encode to identical
bytes.

Examples
--------
>>> from docsite.export import descriptor_to_json
>>> payload = descriptor_to_json(site)  # doctest: +SKIP
>>> payload.startswith(b"{")  # doctest: +SKIP
True
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json

if typ.TYPE_CHECKING:
    from .config import SiteDescriptor


def _encode_extra(value: object) -> object:
    """Encode values msgspec does not support natively."""
    if isinstance(value, Path):
        return str(value)
    msg = f"Cannot encode objects of type {type(value).__name__}"
    raise NotImplementedError(msg)


_ENCODER = msgspec_json.Encoder(enc_hook=_encode_extra)


def descriptor_to_json(descriptor: SiteDescriptor, *, indent: int = 2) -> bytes:
    """Return the descriptor as UTF-8 JSON, pretty-printed when ``indent`` > 0."""
    encoded = _ENCODER.encode(descriptor)
    if indent > 0:
        encoded = msgspec_json.format(encoded, indent=indent)
    return encoded


def write_descriptor(descriptor: SiteDescriptor, output: Path) -> Path:
    """Write the descriptor JSON to ``output`` and return the path."""
    output.parent.mkdir(parents=True, exist_ok=True)
    payload = descriptor_to_json(descriptor)
    if not payload.endswith(b"\n"):
        payload += b"\n"
    output.write_bytes(payload)
    return output


__all__ = ["descriptor_to_json", "write_descriptor"]
