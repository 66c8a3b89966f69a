"""Value: a single wrapped value with a ``type`` tag.

Subclass ``Value`` and override ``prepare`` to normalize raw input before
it is stored and validated::

    class Email(Value[str]):
        def prepare(self, value: str) -> str:
            return value.strip().lower()

    make_email = define_value(Email, {"validator": lambda v, vo: "@" in v})
    email = make_email("  Daniel@Example.com ")
    email.value              # "daniel@example.com"
    email.value = "nope"     # raises ValueObjectError

Instances built by ``define_value`` are bound to the factory's lifecycle:
every write to ``value`` is re-validated and traced, and every other
attribute becomes read-only.  Unbound instances behave as plain objects.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from domainpy.core.errors import ValueObjectError
from domainpy.core.guard import guard
from domainpy.core.lifecycle import ValueLifecycle, coerce_lifecycle
from domainpy.core.record import raise_error
from domainpy.core.stringify import stringify

V = TypeVar("V")
VO = TypeVar("VO", bound="Value[Any]")


class Value(Generic[V]):
    """Base class for wrapped values."""

    __slots__ = ("type", "_value", "_lifecycle")

    type: str

    def __init__(self, value: V) -> None:
        object.__setattr__(self, "type", type(self).__name__)
        object.__setattr__(self, "_lifecycle", None)
        object.__setattr__(self, "_value", self.prepare(value))

    def prepare(self, value: V) -> V:
        """Normalize raw input.  Identity by default."""
        return value

    @property
    def value(self) -> V:
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        lifecycle: ValueLifecycle | None = getattr(self, "_lifecycle", None)

        if name == "value":
            if lifecycle is not None and lifecycle.rejects(value, self):
                raise_error(
                    lifecycle,
                    ValueObjectError,
                    f"{stringify(self)} is invalid: {stringify(value)}",
                )
            object.__setattr__(self, "_value", value)
            if lifecycle is not None:
                lifecycle.notify_trace(self)
        elif lifecycle is None:
            object.__setattr__(self, name, value)
        else:
            raise_error(
                lifecycle, ValueObjectError, f"{stringify(self)} {name} is immutable",
            )

    def __delattr__(self, name: str) -> None:
        lifecycle: ValueLifecycle | None = getattr(self, "_lifecycle", None)
        if lifecycle is None:
            object.__delattr__(self, name)
            return
        raise_error(
            lifecycle, ValueObjectError, f"{stringify(self)} {name} is immutable",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.type}({self._value!r})"


class ValueFactory(Generic[VO]):
    """Callable that builds, binds and validates instances of a Value class."""

    def __init__(
        self,
        value_type: type[VO],
        handler: ValueLifecycle | dict[str, Any] | None = None,
    ) -> None:
        self.value_type = value_type
        self.lifecycle = coerce_lifecycle(handler, ValueLifecycle)

    def __call__(self, value: Any) -> VO:
        vo = self.value_type(value)

        if not guard(vo, "type", "value"):
            raise_error(self.lifecycle, ValueObjectError, f"{stringify(vo)} is invalid")

        object.__setattr__(vo, "_lifecycle", self.lifecycle)

        if self.lifecycle.rejects(vo.value, vo):
            raise_error(
                self.lifecycle,
                ValueObjectError,
                f"{stringify(vo)} is invalid: {stringify(value)}",
            )

        self.lifecycle.notify_created(vo)
        self.lifecycle.notify_trace(vo)
        return vo


def define_value(
    value_type: type[VO],
    handler: ValueLifecycle | dict[str, Any] | None = None,
) -> ValueFactory[VO]:
    """Return a factory that builds guarded instances of *value_type*."""
    return ValueFactory(value_type, handler)


def validate_value_for(
    value: Any,
    value_type: type[Value[Any]] = Value,
    type_name: str | None = None,
) -> bool:
    """True if *value* is a *value_type* whose ``type`` tag matches.

    The tag defaults to the class name, so a subclass instance does not
    pass for its base class unless *type_name* says so.
    """
    expected = type_name if type_name is not None else value_type.__name__
    return isinstance(value, value_type) and value.type == expected
