"""Guarded records: construction validation and write interception.

Design invariants
-----------------
1.  A guarded record never copies its input.  The caller's mapping is the
    backing store; the wrapper only filters writes and deletes.
2.  Reads pass through unchanged, by item (``record["name"]``) or by
    attribute (``record.name``).
3.  Every write, delete, and mapping mutator (``update``, ``pop``,
    ``setdefault``, ``clear``) is routed to the record's ``MutationPolicy``.
4.  Every rejection calls the lifecycle's ``error`` hook with the error
    instance before it is raised.
5.  Construction validates the rule map in insertion order and fires
    ``created`` then ``trace`` exactly once on success.

Attribute reads do not shadow mapping methods: a field called ``items`` or
``keys`` must be read with ``record["items"]``.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, MutableMapping
from typing import Any, Generic, NoReturn, Protocol, TypeVar

from .errors import DomainError
from .guard import guard
from .lifecycle import Lifecycle, coerce_lifecycle
from .stringify import stringify

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="GuardedRecord")


def raise_error(
    lifecycle: Lifecycle,
    error_type: type[DomainError],
    message: str,
) -> NoReturn:
    """Build *error_type*, hand it to the ``error`` hook, then raise it."""
    error = error_type(message)
    logger.debug("%s rejected: %s", error_type.__name__, message)
    lifecycle.notify_error(error)
    raise error


# ---------------------------------------------------------------------------
# Mutation policy
# ---------------------------------------------------------------------------

class MutationPolicy(Protocol):
    """Decides what happens to writes and deletes after construction."""

    lifecycle: Lifecycle

    def set(
        self,
        record: GuardedRecord,
        target: MutableMapping[str, Any],
        key: str,
        value: Any,
    ) -> None: ...

    def delete(
        self,
        record: GuardedRecord,
        target: MutableMapping[str, Any],
        key: str,
    ) -> None: ...


# ---------------------------------------------------------------------------
# Guarded record
# ---------------------------------------------------------------------------

class GuardedRecord(MutableMapping[str, Any]):
    """Transparent interception layer over a caller-owned mapping."""

    __slots__ = ("_target", "_policy")

    def __init__(
        self,
        target: MutableMapping[str, Any],
        policy: MutationPolicy,
    ) -> None:
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_policy", policy)

    # -- Mapping protocol --------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self._target[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._policy.set(self, self._target, key, value)

    def __delitem__(self, key: str) -> None:
        self._policy.delete(self, self._target, key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._target)

    def __len__(self) -> int:
        return len(self._target)

    def __contains__(self, key: object) -> bool:
        return key in self._target

    # -- Attribute access --------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name in GuardedRecord.__slots__:
            raise AttributeError(name)
        try:
            return self._target[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} has no field {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        del self[name]

    def __copy__(self) -> GuardedRecord:
        # Copies get their own backing mapping but keep the policy.
        return type(self)(copy.copy(self._target), self._policy)

    def __deepcopy__(self, memo: dict[int, Any]) -> GuardedRecord:
        return type(self)(copy.deepcopy(self._target, memo), self._policy)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"

    def to_dict(self) -> dict[str, Any]:
        """Shallow, unguarded copy of the current fields."""
        return dict(self._target)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def validate_properties(
    target: MutableMapping[str, Any],
    record: GuardedRecord,
    lifecycle: Lifecycle,
    error_type: type[DomainError],
) -> None:
    """Apply the lifecycle's field rules to a freshly wrapped record.

    Required fields must be present and pass their validator.  Optional
    fields are only validated when present and not ``None``.  Fields with
    no rule are never checked.
    """
    properties = getattr(lifecycle, "properties", {})

    for key, rule in properties.items():
        if rule.required:
            if key not in target:
                raise_error(
                    lifecycle, error_type, f"{stringify(target)} {key} is required",
                )
            if rule.rejects(target[key], record):
                raise_error(
                    lifecycle, error_type, f"{stringify(target)} {key} is invalid",
                )
        elif key in target and target[key] is not None:
            if rule.rejects(target[key], record):
                raise_error(
                    lifecycle, error_type, f"{stringify(target)} {key} is invalid",
                )


class RecordFactory(Generic[R]):
    """Callable that turns plain mappings into guarded records.

    Subclasses set ``record_type``, ``lifecycle_type`` and ``error_type``
    and implement ``_make_policy``.  One policy is built per factory and
    shared by every record it produces.
    """

    record_type: type[R]
    lifecycle_type: type[Lifecycle]
    error_type: type[DomainError]

    def __init__(self, handler: Lifecycle | dict[str, Any] | None = None) -> None:
        self.lifecycle = coerce_lifecycle(handler, self.lifecycle_type)
        self.policy = self._make_policy()

    def _make_policy(self) -> MutationPolicy:
        raise NotImplementedError

    def __call__(self, target: MutableMapping[str, Any]) -> R:
        if not (guard(target) and isinstance(target, MutableMapping)):
            raise_error(
                self.lifecycle, self.error_type, f"{stringify(target)} is invalid",
            )

        record = self.record_type(target, self.policy)
        validate_properties(target, record, self.lifecycle, self.error_type)

        self.lifecycle.notify_created(record)
        self.lifecycle.notify_trace(record)
        return record

    def produced(self, record: Any) -> bool:
        """True if *record* was built by this factory."""
        return isinstance(record, self.record_type) and record._policy is self.policy
