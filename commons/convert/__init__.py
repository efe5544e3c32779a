"""Soft Type Conversion

Coarse type tags for dynamic values and best-effort conversions between
them. Conversions return None or a default instead of raising.

Usage:
    from commons.convert import TypeCode, to_type_code, to_nullable_double

    to_type_code([1, 2])          # TypeCode.ARRAY
    to_nullable_double("12.5")    # 12.5
    to_nullable_double("abc")     # None
"""
from .type_code import TypeCode

from .type_converter import (
    to_type_code,
    to_nullable_type,
    to_type,
    to_type_with_default,
)

from .primitives import (
    to_nullable_string,
    to_string,
    to_string_with_default,
    to_nullable_boolean,
    to_boolean,
    to_boolean_with_default,
    to_nullable_integer,
    to_integer,
    to_integer_with_default,
    to_nullable_long,
    to_long,
    to_long_with_default,
    to_nullable_float,
    to_float,
    to_float_with_default,
    to_nullable_double,
    to_double,
    to_double_with_default,
    to_nullable_datetime,
    to_datetime,
    to_datetime_with_default,
    to_nullable_array,
    to_array,
    to_array_with_default,
    list_to_array,
    to_nullable_map,
    to_map,
    to_map_with_default,
)

__all__ = [
    "TypeCode",
    "to_type_code",
    "to_nullable_type",
    "to_type",
    "to_type_with_default",
    "to_nullable_string",
    "to_string",
    "to_string_with_default",
    "to_nullable_boolean",
    "to_boolean",
    "to_boolean_with_default",
    "to_nullable_integer",
    "to_integer",
    "to_integer_with_default",
    "to_nullable_long",
    "to_long",
    "to_long_with_default",
    "to_nullable_float",
    "to_float",
    "to_float_with_default",
    "to_nullable_double",
    "to_double",
    "to_double_with_default",
    "to_nullable_datetime",
    "to_datetime",
    "to_datetime_with_default",
    "to_nullable_array",
    "to_array",
    "to_array_with_default",
    "list_to_array",
    "to_nullable_map",
    "to_map",
    "to_map_with_default",
]
