"""Synchronous topic observable for guarded events and messages.

Handlers are called synchronously in subscription order.  A handler that
raises is logged, counted, and reported through ``on_handler_error``; the
remaining handlers still run.

Improvements over a bare callback list:
- ``once`` subscriptions that detach after their first delivery
- Per-topic error counters
- Optional payload type check (see ``EventObservable``)
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from domainpy.domain.event import Event
from domainpy.domain.message import Message

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Mapping[str, Any])

TopicHandler = Callable[[Any], None]


class Observable(Generic[T]):
    """Topic-keyed publish/subscribe hub.

    ``T`` names the topic map (for example a ``TypedDict`` of topic name to
    payload type) and exists for static typing only.
    """

    payload_type: type | None = None

    def __init__(
        self,
        on_handler_error: Callable[[str, Exception], None] | None = None,
    ) -> None:
        # topic -> list of (handler, once)
        self._handlers: dict[str, list[tuple[TopicHandler, bool]]] = defaultdict(list)
        self._on_handler_error = on_handler_error
        self._error_counts: dict[str, int] = defaultdict(int)

    def subscribe(self, topic: str, *handlers: TopicHandler) -> None:
        for handler in handlers:
            self._handlers[topic].append((handler, False))

    def once(self, topic: str, *handlers: TopicHandler) -> None:
        """Subscribe handlers that are removed after one delivery."""
        for handler in handlers:
            self._handlers[topic].append((handler, True))

    def unsubscribe(self, topic: str, *handlers: TopicHandler) -> None:
        remaining = [
            (handler, once)
            for handler, once in self._handlers.get(topic, [])
            if handler not in handlers
        ]
        if remaining:
            self._handlers[topic] = remaining
        else:
            self._handlers.pop(topic, None)

    def publish(self, topic: str, payload: Any) -> None:
        """Deliver *payload* to every handler subscribed to *topic*."""
        if self.payload_type is not None and not isinstance(payload, self.payload_type):
            raise TypeError(
                f"{type(self).__name__} expects {self.payload_type.__name__} "
                f"payloads, got {type(payload).__name__}"
            )

        subscribers = list(self._handlers.get(topic, []))
        if any(once for _handler, once in subscribers):
            self._handlers[topic] = [entry for entry in subscribers if not entry[1]]

        for handler, _once in subscribers:
            try:
                handler(payload)
            except Exception as exc:
                self._error_counts[topic] += 1
                logger.exception("Handler error on topic=%s", topic)

                if self._on_handler_error is not None:
                    try:
                        self._on_handler_error(topic, exc)
                    except Exception:
                        logger.warning(
                            "on_handler_error callback failed",
                            exc_info=True,
                        )

    def subscriber_count(self, topic: str) -> int:
        return len(self._handlers.get(topic, []))

    def get_error_counts(self) -> dict[str, int]:
        """Return per-topic handler error counts."""
        return dict(self._error_counts)


class EventObservable(Observable[T]):
    """Observable restricted to guarded ``Event`` payloads."""

    payload_type = Event


class MessageObservable(Observable[T]):
    """Observable restricted to guarded ``Message`` payloads."""

    payload_type = Message
