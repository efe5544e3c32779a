"""Single-level property writes over objects, mappings and lists."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from commons.convert import to_nullable_integer

from .object_reader import is_object_like
from .property_reflector import PropertyReflector


class ObjectWriter:

    @staticmethod
    def set_property(obj: Any, name: str, value: Any) -> None:
        """Set a property by name. List indices past the end grow the list with None."""
        if obj is None:
            raise ValueError("Object cannot be None")
        if name is None:
            raise ValueError("Property name cannot be None")

        if isinstance(obj, list):
            index = to_nullable_integer(name)
            if index is not None and index >= 0:
                if index >= len(obj):
                    obj.extend([None] * (index - len(obj) + 1))
                obj[index] = value
        elif is_object_like(obj):
            PropertyReflector.set_property(obj, name, value)

    @staticmethod
    def set_properties(obj: Any, values: Mapping[str, Any] | None) -> None:
        if values is None:
            return
        for name, value in values.items():
            ObjectWriter.set_property(obj, name, value)
