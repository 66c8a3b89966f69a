"""Message: the immutable twin of ``Event`` with its own error kind."""

from __future__ import annotations

from typing import Any

from domainpy.core.errors import MessageError
from domainpy.core.lifecycle import MessageLifecycle
from domainpy.core.record import GuardedRecord, RecordFactory

from .event import ImmutablePolicy


class Message(GuardedRecord):
    """Guarded immutable record produced by ``define_message``."""

    __slots__ = ()


class MessageFactory(RecordFactory[Message]):
    record_type = Message
    lifecycle_type = MessageLifecycle
    error_type = MessageError

    def _make_policy(self) -> ImmutablePolicy:
        return ImmutablePolicy(self.lifecycle, MessageError, "message")


def define_message(
    handler: MessageLifecycle | dict[str, Any] | None = None,
) -> MessageFactory:
    """Return a factory that builds immutable messages for *handler*."""
    return MessageFactory(handler)
