"""Entity: a mutable, identity-bearing guarded record.

Writes to a field with a rule are validated, passed to the rule's
``updated(new, old, entity)`` hook, applied, and then traced.  Writes to
fields without a rule are applied and traced unchecked unless the factory
is strict.  Deletes are always rejected.

Example::

    make_user = define_entity({
        "properties": {
            "name": {"required": True, "validator": lambda v, e: len(v) > 2},
        },
    })
    user = make_user({"id": "123", "name": "daniel"})
    user.name = "a"          # raises EntityError, user.name == "daniel"
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from domainpy.core.config import Settings, get_settings
from domainpy.core.errors import EntityError
from domainpy.core.lifecycle import EntityLifecycle
from domainpy.core.record import GuardedRecord, RecordFactory, raise_error
from domainpy.core.stringify import stringify

logger = logging.getLogger(__name__)


class Entity(GuardedRecord):
    """Guarded mutable record produced by ``define_entity``.

    Entities compare equal by field contents and are unhashable, like any
    mutable mapping.  Key collections by the entity's ``id`` field, not by
    the record.
    """

    __slots__ = ()


class EntityPolicy:
    """Validate-then-hook-then-write policy for entity fields."""

    def __init__(self, lifecycle: EntityLifecycle, *, strict: bool = False) -> None:
        self.lifecycle = lifecycle
        self.strict = strict

    def set(
        self,
        record: GuardedRecord,
        target: MutableMapping[str, Any],
        key: str,
        value: Any,
    ) -> None:
        rule = self.lifecycle.properties.get(key)

        if rule is None:
            if self.strict:
                raise_error(
                    self.lifecycle,
                    EntityError,
                    f"{stringify(target)} {stringify(key)} is not defined",
                )
            logger.debug("Unguarded entity write key=%s", key)
        else:
            if rule.rejects(value, record):
                raise_error(
                    self.lifecycle,
                    EntityError,
                    f"{stringify(target)} {stringify(key)} is invalid",
                )
            if rule.updated is not None:
                rule.updated(value, target.get(key), record)

        target[key] = value
        self.lifecycle.notify_trace(record)

    def delete(
        self,
        record: GuardedRecord,
        target: MutableMapping[str, Any],
        key: str,
    ) -> None:
        raise_error(
            self.lifecycle,
            EntityError,
            f"{stringify(target)} {stringify(key)} cannot be deleted",
        )


class EntityFactory(RecordFactory[Entity]):
    record_type = Entity
    lifecycle_type = EntityLifecycle
    error_type = EntityError

    def __init__(
        self,
        handler: EntityLifecycle | dict[str, Any] | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self.strict = strict
        super().__init__(handler)

    def _make_policy(self) -> EntityPolicy:
        return EntityPolicy(self.lifecycle, strict=self.strict)


def define_entity(
    handler: EntityLifecycle | dict[str, Any] | None = None,
    *,
    strict: bool | None = None,
    settings: Settings | None = None,
) -> EntityFactory:
    """Return a factory that builds guarded entities for *handler*.

    *strict* rejects writes to fields without a rule.  When omitted it is
    read from ``settings.guard.strict_entity_fields`` (environment-derived
    settings if *settings* is also omitted).
    """
    if strict is None:
        strict = (settings or get_settings()).guard.strict_entity_fields
    return EntityFactory(handler, strict=strict)


def validate_entity_for(record: Any, factory: EntityFactory | None = None) -> bool:
    """True if *record* is a guarded entity, optionally from *factory*."""
    if factory is None:
        return isinstance(record, Entity)
    return factory.produced(record)
