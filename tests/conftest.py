"""Shared fixtures for the domainpy test suite."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from domainpy.core.guard import guard
from domainpy.domain.entity import define_entity


# ---------------------------------------------------------------------------
# Hook recorder
# ---------------------------------------------------------------------------

class HookRecorder:
    """Collects lifecycle hook invocations in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def created(self, record):
        self.calls.append(("created", record))

    def trace(self, record):
        self.calls.append(("trace", record))

    def error(self, error):
        self.calls.append(("error", error))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def of(self, name: str) -> list[object]:
        return [arg for call, arg in self.calls if call == name]

    def hooks(self) -> dict[str, object]:
        return {"created": self.created, "trace": self.trace, "error": self.error}


@pytest.fixture
def hooks() -> HookRecorder:
    return HookRecorder()


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def user_properties() -> dict[str, dict]:
    return {
        "id": {"required": True, "validator": lambda value, _: len(value) > 2},
        "created_at": {"required": True, "validator": lambda value, _: guard(value)},
        "name": {"required": True, "validator": lambda value, _: len(value) > 2},
        "empty": {"required": False, "validator": lambda value, _: isinstance(value, str)},
    }


@pytest.fixture
def created_at() -> datetime:
    return datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_user(hooks):
    return define_entity(
        {**hooks.hooks(), "properties": user_properties()},
        strict=False,
    )
