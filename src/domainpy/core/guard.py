"""Structured-value type guard.

``guard`` answers one question: is this a non-null structured value
(mapping, sequence, or object) that owns the given keys?  It never raises
and never mutates its argument.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from typing import Any

_SCALARS = (str, bytes, bytearray, bool, numbers.Number)


def guard(value: Any, *keys: str) -> bool:
    """Return ``True`` if *value* is a structured value owning every key.

    Mappings are checked by membership, everything else by attribute
    presence.
    """
    if value is None or isinstance(value, _SCALARS):
        return False
    if isinstance(value, Mapping):
        return all(key in value for key in keys)
    return all(hasattr(value, key) for key in keys)
