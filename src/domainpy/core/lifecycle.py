"""Lifecycle handlers: per-field rules plus creation/trace/error hooks.

A lifecycle is declared once and shared by every record its factory builds.
All models are frozen, reject unknown keys, and accept plain dicts through
``model_validate`` so a handler can be written as a literal::

    define_entity({
        "properties": {
            "name": {"required": True, "validator": lambda v, e: len(v) > 2},
        },
    })

Hooks are optional.  The ``notify_*`` methods are the dispatch points the
record factories call; subclasses may override them instead of passing
callables.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

Validator = Callable[[Any, Any], Any]
UpdatedHook = Callable[[Any, Any, Any], None]
RecordHook = Callable[[Any], None]
ErrorHook = Callable[[Exception], None]


# ---------------------------------------------------------------------------
# Field descriptors
# ---------------------------------------------------------------------------

class PropertyLifecycle(BaseModel):
    """Rule for a single field: required flag plus optional validator.

    A validator returning exactly ``False`` rejects the value.  Any other
    return value passes, including falsy non-``bool`` results such as
    ``None``, ``0`` or ``numpy.False_``; wrap those in ``bool(...)``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    required: bool = False
    validator: Validator | None = None

    def rejects(self, value: Any, record: Any) -> bool:
        """True when the validator exists and returns ``False``."""
        if self.validator is None:
            return False
        return self.validator(value, record) is False


class EntityPropertyLifecycle(PropertyLifecycle):
    """Entity field rule; adds the ``updated(new, old, entity)`` hook."""

    updated: UpdatedHook | None = None


# ---------------------------------------------------------------------------
# Record lifecycles
# ---------------------------------------------------------------------------

class Lifecycle(BaseModel):
    """Hooks shared by every record variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    created: RecordHook | None = None
    trace: RecordHook | None = None
    error: ErrorHook | None = None

    def notify_created(self, record: Any) -> None:
        if self.created is not None:
            self.created(record)

    def notify_trace(self, record: Any) -> None:
        if self.trace is not None:
            self.trace(record)

    def notify_error(self, error: Exception) -> None:
        if self.error is not None:
            self.error(error)


class EntityLifecycle(Lifecycle):
    properties: dict[str, EntityPropertyLifecycle] = Field(default_factory=dict)


class EventLifecycle(Lifecycle):
    properties: dict[str, PropertyLifecycle] = Field(default_factory=dict)


class MessageLifecycle(Lifecycle):
    properties: dict[str, PropertyLifecycle] = Field(default_factory=dict)


class ValueLifecycle(Lifecycle):
    """Value lifecycle: one validator for the wrapped value."""

    validator: Validator | None = None

    def rejects(self, value: Any, vo: Any) -> bool:
        """True when the validator exists and returns exactly ``False``."""
        if self.validator is None:
            return False
        return self.validator(value, vo) is False


def coerce_lifecycle(
    handler: Lifecycle | dict[str, Any] | None,
    lifecycle_type: type[Lifecycle],
) -> Lifecycle:
    """Normalize *handler* into an instance of *lifecycle_type*.

    ``None`` yields an empty lifecycle; dicts are validated; instances of
    the right type pass through untouched so subclass overrides survive.
    """
    if handler is None:
        return lifecycle_type()
    if isinstance(handler, lifecycle_type):
        return handler
    if isinstance(handler, BaseModel):
        return lifecycle_type.model_validate(handler.model_dump(exclude_none=True))
    return lifecycle_type.model_validate(handler)
