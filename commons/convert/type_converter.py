"""Type-tag resolution and conversion by type tag."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, date, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from . import primitives
from .type_code import TypeCode


def to_type_code(value: Any) -> TypeCode:
    """Resolve a dynamic value to its coarse type tag.

    Integers resolve to ``LONG`` and reals to ``DOUBLE``: Python numbers
    carry no narrower width.
    """
    if value is None:
        return TypeCode.UNKNOWN
    if isinstance(value, (list, tuple, set, frozenset)):
        return TypeCode.ARRAY
    if isinstance(value, bool):
        return TypeCode.BOOLEAN
    if isinstance(value, (datetime, date)):
        return TypeCode.DATETIME
    if isinstance(value, timedelta):
        return TypeCode.DURATION
    if isinstance(value, Enum):
        return TypeCode.ENUM
    if isinstance(value, int):
        return TypeCode.LONG
    if isinstance(value, (float, Decimal)):
        return TypeCode.DOUBLE
    if isinstance(value, str):
        return TypeCode.STRING
    if isinstance(value, Mapping):
        return TypeCode.MAP
    return TypeCode.OBJECT


_CONVERTERS = {
    TypeCode.STRING: primitives.to_nullable_string,
    TypeCode.BOOLEAN: primitives.to_nullable_boolean,
    TypeCode.INTEGER: primitives.to_nullable_integer,
    TypeCode.LONG: primitives.to_nullable_long,
    TypeCode.FLOAT: primitives.to_nullable_float,
    TypeCode.DOUBLE: primitives.to_nullable_double,
    TypeCode.DATETIME: primitives.to_nullable_datetime,
    TypeCode.ARRAY: primitives.to_nullable_array,
    TypeCode.MAP: primitives.to_nullable_map,
}


def to_nullable_type(type_code: TypeCode, value: Any) -> Any:
    """Convert value to the given type, or None when it cannot be converted.

    Tags without a converter (OBJECT, ENUM, DURATION, UNKNOWN) pass the value through.
    """
    if value is None:
        return None
    if (converter := _CONVERTERS.get(type_code)) is None:
        return value
    return converter(value)


def _default_for(type_code: TypeCode) -> Any:
    defaults = {
        TypeCode.STRING: "",
        TypeCode.BOOLEAN: False,
        TypeCode.INTEGER: 0,
        TypeCode.LONG: 0,
        TypeCode.FLOAT: 0.0,
        TypeCode.DOUBLE: 0.0,
        TypeCode.ARRAY: [],
        TypeCode.MAP: {},
    }
    if type_code == TypeCode.DATETIME:
        return datetime.now(timezone.utc)
    return defaults.get(type_code)


def to_type(type_code: TypeCode, value: Any) -> Any:
    """Convert value to the given type, falling back to the type's default."""
    result = to_nullable_type(type_code, value)
    return result if result is not None else _default_for(type_code)


def to_type_with_default(type_code: TypeCode, value: Any, default: Any) -> Any:
    result = to_nullable_type(type_code, value)
    return result if result is not None else default
