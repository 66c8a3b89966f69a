"""Tests for lifecycle handler models."""

import pydantic
import pytest

from domainpy.core.lifecycle import (
    EntityLifecycle,
    EntityPropertyLifecycle,
    EventLifecycle,
    PropertyLifecycle,
    ValueLifecycle,
    coerce_lifecycle,
)
from domainpy.domain.entity import define_entity


class TestPropertyLifecycle:
    def test_defaults(self):
        rule = PropertyLifecycle()
        assert rule.required is False
        assert rule.validator is None
        assert rule.rejects("anything", None) is False

    @pytest.mark.parametrize(
        ("result", "rejected"),
        [(False, True), (True, False), (None, False), (0, False), ("", False)],
    )
    def test_only_false_rejects(self, result, rejected):
        rule = PropertyLifecycle(validator=lambda value, record: result)
        assert rule.rejects("x", {}) is rejected

    def test_falsy_non_bool_result_passes(self):
        class Falsy:
            def __bool__(self):
                return False

        rule = PropertyLifecycle(validator=lambda value, record: Falsy())
        assert not rule.rejects("x", {})
        wrapped = PropertyLifecycle(validator=lambda value, record: bool(Falsy()))
        assert wrapped.rejects("x", {})

    def test_non_callable_validator_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PropertyLifecycle(validator="not callable")

    def test_unknown_key_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PropertyLifecycle(updated=lambda *a: None)

    def test_frozen(self):
        rule = EntityPropertyLifecycle(required=True)
        with pytest.raises(pydantic.ValidationError):
            rule.required = False


class TestCoerceLifecycle:
    def test_none_gives_empty_lifecycle(self):
        lifecycle = coerce_lifecycle(None, EntityLifecycle)
        assert isinstance(lifecycle, EntityLifecycle)
        assert lifecycle.properties == {}

    def test_dict_validated_in_order(self):
        lifecycle = coerce_lifecycle(
            {"properties": {"b": {"required": True}, "a": {}}}, EntityLifecycle,
        )
        assert list(lifecycle.properties) == ["b", "a"]
        assert isinstance(lifecycle.properties["b"], EntityPropertyLifecycle)

    def test_instance_passes_through(self):
        lifecycle = EventLifecycle()
        assert coerce_lifecycle(lifecycle, EventLifecycle) is lifecycle

    def test_converts_between_lifecycle_kinds(self):
        entity = EntityLifecycle(properties={"name": {"required": True}})
        event = coerce_lifecycle(entity, EventLifecycle)
        assert isinstance(event, EventLifecycle)
        assert event.properties["name"].required is True

    def test_value_lifecycle_has_single_validator(self):
        lifecycle = ValueLifecycle(validator=lambda value, vo: value > 0)
        assert lifecycle.rejects(-1, None) is True
        assert lifecycle.rejects(1, None) is False


class TestLifecycleSubclass:
    def test_notify_overrides_are_used(self):
        events = []

        class AuditedLifecycle(EntityLifecycle):
            def notify_created(self, record):
                events.append(("created", dict(record)))

            def notify_trace(self, record):
                events.append(("trace", dict(record)))

        make = define_entity(AuditedLifecycle(), strict=False)
        make({"id": "1"})

        assert events == [("created", {"id": "1"}), ("trace", {"id": "1"})]
