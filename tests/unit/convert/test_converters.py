"""Type tag resolution and soft conversion tests."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

import pytest

from commons.convert import (
    TypeCode,
    list_to_array,
    to_boolean,
    to_boolean_with_default,
    to_double,
    to_integer,
    to_long_with_default,
    to_nullable_array,
    to_nullable_boolean,
    to_nullable_datetime,
    to_nullable_double,
    to_nullable_long,
    to_nullable_map,
    to_nullable_string,
    to_nullable_type,
    to_string,
    to_type,
    to_type_code,
    to_type_with_default,
)


class Color(Enum):
    RED = "red"


class Thing:
    def __init__(self):
        self.a = 1
        self._b = 2


class TestTypeCode:
    @pytest.mark.parametrize("value, code", [
        (None, TypeCode.UNKNOWN),
        ("s", TypeCode.STRING),
        (True, TypeCode.BOOLEAN),
        (1, TypeCode.LONG),
        (1.5, TypeCode.DOUBLE),
        (Decimal("1.5"), TypeCode.DOUBLE),
        (datetime.now(), TypeCode.DATETIME),
        (date.today(), TypeCode.DATETIME),
        (timedelta(seconds=1), TypeCode.DURATION),
        (Color.RED, TypeCode.ENUM),
        ([1], TypeCode.ARRAY),
        ((1,), TypeCode.ARRAY),
        ({1}, TypeCode.ARRAY),
        ({"a": 1}, TypeCode.MAP),
        (Thing(), TypeCode.OBJECT),
    ])
    def test_to_type_code(self, value, code) -> None:
        assert to_type_code(value) == code

    def test_str_and_numeric(self) -> None:
        assert str(TypeCode.DATETIME) == "datetime"
        assert TypeCode.FLOAT.is_numeric
        assert not TypeCode.STRING.is_numeric


class TestStrings:
    def test_to_string(self) -> None:
        assert to_nullable_string(None) is None
        assert to_string(None) == ""
        assert to_string(True) == "true"
        assert to_string([1, "a"]) == "1,a"
        assert to_string(Color.RED) == "red"
        assert to_string(datetime(2020, 1, 2, 3, 4, 5)) == "2020-01-02T03:04:05"


class TestBooleans:
    @pytest.mark.parametrize("value, expected", [
        ("yes", True), ("TRUE", True), ("1", True), (1, True),
        ("no", False), ("off", False), (0, False),
        ("maybe", None), (None, None),
    ])
    def test_to_nullable_boolean(self, value, expected) -> None:
        assert to_nullable_boolean(value) is expected

    def test_defaults(self) -> None:
        assert to_boolean("maybe") is False
        assert to_boolean_with_default("maybe", True) is True


class TestNumbers:
    def test_to_nullable_long(self) -> None:
        assert to_nullable_long("12") == 12
        assert to_nullable_long("12.7") == 12
        assert to_nullable_long(True) == 1
        assert to_nullable_long("abc") is None
        assert to_nullable_long(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)) == 1000

    def test_defaults(self) -> None:
        assert to_integer("abc") == 0
        assert to_long_with_default("abc", -1) == -1
        assert to_double("2.5") == 2.5
        assert to_nullable_double(" 3 ") == 3.0
        assert to_nullable_double("x") is None


class TestDateTimes:
    def test_iso_string(self) -> None:
        value = to_nullable_datetime("2020-01-02T03:04:05Z")
        assert value == datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_epoch_millis(self) -> None:
        assert to_nullable_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_numeric_string_is_epoch_millis(self) -> None:
        assert to_nullable_datetime("1700000000") == to_nullable_datetime(1700000000)
        assert to_nullable_datetime(" 1500 ") == datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)
        assert to_nullable_datetime("nan") is None

    def test_invalid(self) -> None:
        assert to_nullable_datetime("not a date") is None
        assert to_nullable_datetime(True) is None


class TestContainers:
    def test_arrays(self) -> None:
        assert to_nullable_array(None) is None
        assert to_nullable_array(5) == [5]
        assert to_nullable_array((1, 2)) == [1, 2]
        assert list_to_array("a,b") == ["a", "b"]
        assert list_to_array("a;b", ";") == ["a", "b"]
        assert list_to_array("") == []

    def test_maps(self) -> None:
        assert to_nullable_map([1, 2]) == {"0": 1, "1": 2}
        assert to_nullable_map(Thing()) == {"a": 1}
        assert to_nullable_map(5) is None


class TestTypeConverter:
    def test_to_nullable_type(self) -> None:
        assert to_nullable_type(TypeCode.LONG, "5") == 5
        assert to_nullable_type(TypeCode.STRING, 5) == "5"
        assert to_nullable_type(TypeCode.LONG, "x") is None
        assert to_nullable_type(TypeCode.OBJECT, {"a": 1}) == {"a": 1}

    def test_to_type_defaults(self) -> None:
        assert to_type(TypeCode.LONG, "x") == 0
        assert to_type(TypeCode.STRING, None) == ""
        assert isinstance(to_type(TypeCode.DATETIME, "x"), datetime)
        assert to_type_with_default(TypeCode.BOOLEAN, "x", True) is True
