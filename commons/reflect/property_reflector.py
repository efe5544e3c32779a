"""Duck-typed access to the public properties of an object.

A property is any non-callable member whose name does not start with an
underscore: mapping items (non-string keys exposed as ``str(key)``),
pydantic model fields (extras included), instance attributes from
``vars()`` and ``__slots__`` members.
Names match case-insensitively.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from pydantic import BaseModel


def _slot_names(obj: Any) -> Iterator[str]:
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        yield from ((slots,) if isinstance(slots, str) else slots)


def _members(obj: Any) -> Iterator[tuple[str, Any]]:
    """Yield (name, value) for every member, public or not."""
    if isinstance(obj, Mapping):
        yield from ((key if isinstance(key, str) else str(key), value) for key, value in obj.items())
        return
    if isinstance(obj, BaseModel):
        yield from obj
        return

    seen: set[str] = set()
    if hasattr(obj, "__dict__"):
        for name, value in vars(obj).items():
            seen.add(name)
            yield name, value
    for name in _slot_names(obj):
        if name in seen or name in ("__dict__", "__weakref__"):
            continue
        seen.add(name)
        try:
            yield name, getattr(obj, name)
        except AttributeError:
            continue  # unassigned slot


def _match_field(field_name: str, field_value: Any, expected_name: str | None) -> bool:
    if callable(field_value):
        return False
    if field_name.startswith("_"):
        return False
    if expected_name is None:
        return True
    return field_name.lower() == expected_name


class PropertyReflector:
    """Reads and writes properties of mappings and plain objects by name."""

    @staticmethod
    def has_property(obj: Any, name: str) -> bool:
        if obj is None:
            raise ValueError("Object cannot be None")
        if name is None:
            raise ValueError("Property name cannot be None")

        name = name.lower()
        return any(_match_field(field, value, name) for field, value in _members(obj))

    @staticmethod
    def get_property(obj: Any, name: str) -> Any:
        if obj is None:
            raise ValueError("Object cannot be None")
        if name is None:
            raise ValueError("Property name cannot be None")

        name = name.lower()
        for field, value in _members(obj):
            if _match_field(field, value, name):
                return value
        return None

    @staticmethod
    def get_property_names(obj: Any) -> list[str]:
        return [field for field, value in _members(obj) if _match_field(field, value, None)]

    @staticmethod
    def get_properties(obj: Any) -> dict[str, Any]:
        return {field: value for field, value in _members(obj) if _match_field(field, value, None)}

    @staticmethod
    def set_property(obj: Any, name: str, value: Any) -> None:
        """Overwrite the matching property, or create it under ``name`` when none matches."""
        if obj is None:
            raise ValueError("Object cannot be None")
        if name is None:
            raise ValueError("Property name cannot be None")

        expected_name = name.lower()
        if isinstance(obj, MutableMapping):
            # Keep the original key, which may not be a string
            target = next(
                (key for key, current in obj.items() if _match_field(str(key), current, expected_name)),
                name,
            )
            obj[target] = value
            return

        target = next(
            (field for field, current in _members(obj) if _match_field(field, current, expected_name)),
            name,
        )
        setattr(obj, target, value)

    @staticmethod
    def set_properties(obj: Any, values: Mapping[str, Any] | None) -> None:
        if values is None:
            return
        for name, value in values.items():
            PropertyReflector.set_property(obj, name, value)
