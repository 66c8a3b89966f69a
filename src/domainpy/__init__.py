"""domainpy: runtime contracts for domain records.

Public API
----------
Factories:
    define_entity, define_event, define_message, define_value

Records:
    GuardedRecord, Entity, Event, Message, Value

Lifecycles:
    EntityLifecycle, EventLifecycle, MessageLifecycle, ValueLifecycle,
    PropertyLifecycle, EntityPropertyLifecycle

Predicates:
    guard, validate_entity_for, validate_value_for

Errors:
    DomainError, EntityError, EventError, MessageError, ValueObjectError,
    ConfigError

Observables:
    Observable, EventObservable, MessageObservable

Support:
    stringify, Settings, load_settings, get_settings,
    setup_logging, get_logger
"""

from domainpy.bus.observable import EventObservable, MessageObservable, Observable
from domainpy.core.config import Settings, get_settings, load_settings
from domainpy.core.errors import (
    ConfigError,
    DomainError,
    EntityError,
    EventError,
    MessageError,
    ValueObjectError,
)
from domainpy.core.guard import guard
from domainpy.core.lifecycle import (
    EntityLifecycle,
    EntityPropertyLifecycle,
    EventLifecycle,
    MessageLifecycle,
    PropertyLifecycle,
    ValueLifecycle,
)
from domainpy.core.record import GuardedRecord
from domainpy.core.stringify import stringify
from domainpy.domain.entity import Entity, define_entity, validate_entity_for
from domainpy.domain.event import Event, define_event
from domainpy.domain.message import Message, define_message
from domainpy.domain.value import Value, define_value, validate_value_for
from domainpy.observability.logger import get_logger, setup_logging

__all__ = [
    "ConfigError",
    "DomainError",
    "Entity",
    "EntityError",
    "EntityLifecycle",
    "EntityPropertyLifecycle",
    "Event",
    "EventError",
    "EventLifecycle",
    "EventObservable",
    "GuardedRecord",
    "Message",
    "MessageError",
    "MessageLifecycle",
    "MessageObservable",
    "Observable",
    "PropertyLifecycle",
    "Settings",
    "Value",
    "ValueLifecycle",
    "ValueObjectError",
    "define_entity",
    "define_event",
    "define_message",
    "define_value",
    "get_logger",
    "get_settings",
    "guard",
    "load_settings",
    "setup_logging",
    "stringify",
    "validate_entity_for",
    "validate_value_for",
]
