"""Tests for the debug string embedded in error messages."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from pydantic import BaseModel

from domainpy.core.stringify import stringify
from domainpy.domain.entity import define_entity
from domainpy.domain.value import Value


class Tag(Value[str]):
    pass


class Point(BaseModel):
    x: int
    y: int


@dataclass
class Pair:
    left: str
    right: str


class TestStringify:
    def test_compact_object_in_key_order(self):
        assert (
            stringify({"id": "123", "n": 1, "ok": True, "none": None})
            == '{"id":"123","n":1,"ok":true,"none":null}'
        )

    def test_scalars(self):
        assert stringify("abc") == '"abc"'
        assert stringify(None) == "null"
        assert stringify(42) == "42"

    def test_non_ascii_kept(self):
        assert stringify({"name": "José"}) == '{"name":"José"}'

    def test_utc_datetime_uses_z_and_milliseconds(self):
        value = datetime(2023, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
        assert stringify(value) == '"2023-01-02T03:04:05.678Z"'

    def test_offset_datetime_converted_to_utc(self):
        value = datetime(2023, 1, 2, 5, 0, tzinfo=timezone(timedelta(hours=2)))
        assert stringify(value) == '"2023-01-02T03:00:00.000Z"'

    def test_naive_datetime_and_date(self):
        assert stringify(datetime(2023, 1, 2, 3, 4, 5)) == '"2023-01-02T03:04:05.000"'
        assert stringify(date(2023, 1, 2)) == '"2023-01-02"'

    def test_collections(self):
        assert stringify((1, 2)) == "[1,2]"
        assert stringify({3}) == "[3]"
        assert stringify(frozenset()) == "[]"

    def test_unknown_objects_fall_back_to_str(self):
        assert stringify(Decimal("1.50")) == '"1.50"'

    def test_models_and_dataclasses(self):
        assert stringify(Point(x=1, y=2)) == '{"x":1,"y":2}'
        assert stringify(Pair("a", "b")) == '{"left":"a","right":"b"}'

    def test_guarded_record_renders_like_its_mapping(self):
        record = define_entity(strict=False)({"id": "1", "tags": ["a"]})
        assert stringify(record) == '{"id":"1","tags":["a"]}'

    def test_value_renders_type_and_value(self):
        assert stringify(Tag("x")) == '{"type":"Tag","value":"x"}'
        assert stringify({"tag": Tag("x")}) == '{"tag":{"type":"Tag","value":"x"}}'
