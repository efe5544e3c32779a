"""Single-level property access over objects, mappings and lists.

Lists and tuples expose their elements as properties named by index
("0", "1", ...). Primitives, strings, dates and None have no properties.
"""
from __future__ import annotations

from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import RootModel

from commons.convert import to_nullable_integer

from .property_reflector import PropertyReflector

_SCALARS = (str, bytes, bytearray, bool, int, float, complex, Decimal, date, time, timedelta, Enum,
            set, frozenset)


def is_array_like(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def is_object_like(obj: Any) -> bool:
    return obj is not None and not is_array_like(obj) and not isinstance(obj, _SCALARS)


def _index_of(obj: list | tuple, name: str) -> int | None:
    index = to_nullable_integer(name)
    return index if index is not None and 0 <= index < len(obj) else None


class ObjectReader:
    """Reads properties of any value without caring about its concrete type."""

    @staticmethod
    def get_value(obj: Any) -> Any:
        """Unwrap boxed values (pydantic ``RootModel``) to the value they hold."""
        while isinstance(obj, RootModel):
            obj = obj.root
        return obj

    @staticmethod
    def has_property(obj: Any, name: str) -> bool:
        if obj is None or name is None:
            return False
        if is_array_like(obj):
            return _index_of(obj, name) is not None
        if is_object_like(obj):
            return PropertyReflector.has_property(obj, name)
        return False

    @staticmethod
    def get_property(obj: Any, name: str) -> Any:
        if obj is None or name is None:
            return None
        if is_array_like(obj):
            index = _index_of(obj, name)
            return obj[index] if index is not None else None
        if is_object_like(obj):
            return PropertyReflector.get_property(obj, name)
        return None

    @staticmethod
    def get_property_names(obj: Any) -> list[str]:
        if is_array_like(obj):
            return [str(index) for index in range(len(obj))]
        if is_object_like(obj):
            return PropertyReflector.get_property_names(obj)
        return []

    @staticmethod
    def get_properties(obj: Any) -> dict[str, Any]:
        if is_array_like(obj):
            return {str(index): item for index, item in enumerate(obj)}
        if is_object_like(obj):
            return PropertyReflector.get_properties(obj)
        return {}
