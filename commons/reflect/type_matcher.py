"""Matching of resolved type tags against expected types.

An expected type is ``None`` (anything goes), a ``TypeCode`` or a
case-insensitive type name such as ``"int"``, ``"dict"`` or ``"string[]"``.
Numeric tags widen into each other in every direction.
"""
from __future__ import annotations

from typing import Any

from commons.convert import TypeCode, to_type_code

_INTEGERS = frozenset({TypeCode.INTEGER, TypeCode.LONG})
_REALS = frozenset({TypeCode.FLOAT, TypeCode.DOUBLE})
_NUMBERS = _INTEGERS | _REALS

# Type name -> tags it accepts. "object" and "T[]" are handled separately.
_NAMED_TYPES: dict[str, frozenset[TypeCode]] = {
    "int": _INTEGERS,
    "integer": _INTEGERS,
    "long": frozenset({TypeCode.LONG}),
    "float": _REALS,
    "double": frozenset({TypeCode.DOUBLE}),
    "string": frozenset({TypeCode.STRING}),
    "bool": frozenset({TypeCode.BOOLEAN}),
    "boolean": frozenset({TypeCode.BOOLEAN}),
    "date": frozenset({TypeCode.DATETIME}),
    "datetime": frozenset({TypeCode.DATETIME}),
    "timespan": _NUMBERS | {TypeCode.DURATION},
    "duration": _NUMBERS | {TypeCode.DURATION},
    "enum": frozenset({TypeCode.INTEGER, TypeCode.STRING}),
    "map": frozenset({TypeCode.MAP}),
    "dict": frozenset({TypeCode.MAP}),
    "dictionary": frozenset({TypeCode.MAP}),
    "array": frozenset({TypeCode.ARRAY}),
    "list": frozenset({TypeCode.ARRAY}),
}


class TypeMatcher:

    @staticmethod
    def match_value_type(expected_type: Any, actual_value: Any) -> bool:
        if expected_type is None:
            return True
        if actual_value is None:
            raise ValueError("Actual value cannot be None")
        return TypeMatcher.match_type(expected_type, to_type_code(actual_value))

    @staticmethod
    def match_type(expected_type: Any, actual_type: TypeCode | None) -> bool:
        if expected_type is None:
            return True
        if actual_type is None:
            raise ValueError("Actual type cannot be None")

        if isinstance(expected_type, TypeCode):
            if expected_type in _NUMBERS and actual_type in _NUMBERS:
                return True
            return expected_type == actual_type
        if isinstance(expected_type, str):
            return TypeMatcher.match_type_by_name(expected_type, actual_type)
        return False

    @staticmethod
    def match_value_type_by_name(expected_type: str | None, actual_value: Any) -> bool:
        if expected_type is None:
            return True
        if actual_value is None:
            raise ValueError("Actual value cannot be None")
        return TypeMatcher.match_type_by_name(expected_type, to_type_code(actual_value))

    @staticmethod
    def match_type_by_name(expected_type: str | None, actual_type: TypeCode | None) -> bool:
        if expected_type is None:
            return True
        if actual_type is None:
            raise ValueError("Actual type cannot be None")

        expected_type = expected_type.lower()
        if expected_type == "object":
            return True
        if expected_type in _NAMED_TYPES:
            return actual_type in _NAMED_TYPES[expected_type]
        if expected_type.endswith("[]"):
            # TODO: match the element type named before "[]" against each element
            return actual_type == TypeCode.ARRAY
        return False
