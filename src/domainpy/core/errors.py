"""Custom exception hierarchy for guarded domain records."""


class DomainError(Exception):
    """Base exception for all domain record errors."""


# --- Configuration ---
class ConfigError(DomainError):
    """Invalid or unreadable configuration."""


# --- Records ---
class EntityError(DomainError):
    """Entity construction or mutation rejected."""


class EventError(DomainError):
    """Event construction rejected or event modified after construction."""


class MessageError(DomainError):
    """Message construction rejected or message modified after construction."""


# Named so it does not shadow the builtin ``ValueError``.
class ValueObjectError(DomainError):
    """Value construction or reassignment rejected."""
