"""Dotted-path property writes that create missing intermediate containers."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from commons.convert import to_nullable_integer

from .object_reader import ObjectReader
from .object_writer import ObjectWriter
from .recursive_object_reader import RecursiveObjectReader


def _create_container(next_segment: str) -> list | dict:
    # An integer segment addresses a list element
    return [] if to_nullable_integer(next_segment) is not None else {}


def _set(obj: Any, names: list[str], index: int, value: Any) -> None:
    if index == len(names) - 1:
        ObjectWriter.set_property(obj, names[index], value)
        return

    child = ObjectReader.get_property(obj, names[index])
    if child is not None:
        _set(child, names, index + 1, value)
        return

    child = _create_container(names[index + 1])
    _set(child, names, index + 1, value)
    ObjectWriter.set_property(obj, names[index], child)


class RecursiveObjectWriter:

    @staticmethod
    def set_property(obj: Any, name: str, value: Any) -> None:
        if obj is None or not name:
            return
        _set(obj, name.split("."), 0, value)

    @staticmethod
    def set_properties(obj: Any, values: Mapping[str, Any] | None) -> None:
        if values is None:
            return
        for name, value in values.items():
            RecursiveObjectWriter.set_property(obj, name, value)

    @staticmethod
    def copy_properties(dest: Any, src: Any) -> None:
        """Copy every leaf of ``src`` into ``dest`` at the same dotted path."""
        if dest is None or src is None:
            return
        RecursiveObjectWriter.set_properties(dest, RecursiveObjectReader.get_properties(src))
