"""Compact JSON rendering used in every error message.

The output mirrors a browser's structured-value stringification: compact
separators, keys in insertion order, timestamps as ISO-8601 with
millisecond precision.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any


def _iso(value: datetime) -> str:
    if value.tzinfo is None:
        return value.isoformat(timespec="milliseconds")
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _default(value: Any) -> Any:
    # Local import: domain.value imports this module.
    from domainpy.domain.value import Value

    if isinstance(value, Value):
        return {"type": value.type, "value": value.value}
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, datetime):
        return _iso(value)
    if isinstance(value, date):
        return value.isoformat()
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        return list(value)
    return str(value)


def stringify(value: Any) -> str:
    """Render *value* as compact JSON for debug output."""
    return json.dumps(
        value,
        default=_default,
        ensure_ascii=False,
        separators=(",", ":"),
    )
