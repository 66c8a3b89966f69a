"""Event: a guarded record that is immutable once constructed.

Construction applies the same field rules as an entity.  Afterwards every
write and delete is rejected with ``EventError``.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from domainpy.core.errors import DomainError, EventError
from domainpy.core.lifecycle import EventLifecycle, Lifecycle
from domainpy.core.record import GuardedRecord, RecordFactory, raise_error


class Event(GuardedRecord):
    """Guarded immutable record produced by ``define_event``."""

    __slots__ = ()


class ImmutablePolicy:
    """Reject every post-construction write and delete.

    Shared by events and messages; only the error kind and the noun in the
    message differ.
    """

    def __init__(
        self,
        lifecycle: Lifecycle,
        error_type: type[DomainError],
        noun: str,
    ) -> None:
        self.lifecycle = lifecycle
        self.error_type = error_type
        self.noun = noun

    def _reject(self) -> None:
        raise_error(
            self.lifecycle,
            self.error_type,
            f"cannot modify {self.noun} properties",
        )

    def set(
        self,
        record: GuardedRecord,
        target: MutableMapping[str, Any],
        key: str,
        value: Any,
    ) -> None:
        self._reject()

    def delete(
        self,
        record: GuardedRecord,
        target: MutableMapping[str, Any],
        key: str,
    ) -> None:
        self._reject()


class EventFactory(RecordFactory[Event]):
    record_type = Event
    lifecycle_type = EventLifecycle
    error_type = EventError

    def _make_policy(self) -> ImmutablePolicy:
        return ImmutablePolicy(self.lifecycle, EventError, "event")


def define_event(
    handler: EventLifecycle | dict[str, Any] | None = None,
) -> EventFactory:
    """Return a factory that builds immutable events for *handler*."""
    return EventFactory(handler)
