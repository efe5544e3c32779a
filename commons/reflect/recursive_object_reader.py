"""Dotted-path property access and cycle-safe flattening of value graphs.

Paths like ``"a.b.2.c"`` resolve one segment at a time through
``ObjectReader``. Flattening walks every container it finds, keeps the
containers currently being expanded on a stack and skips any value that is
already on it, so self-referencing graphs terminate. The number of
containers open at once is capped (``Settings.REFLECT_MAX_DEPTH``); a
container reached beyond the cap is reported as a leaf.
"""
from __future__ import annotations

from typing import Any, Callable

from commons.config import get_settings
from commons.convert import TypeCode, to_type_code
from commons.logging import reflect_logger

from .object_reader import ObjectReader

log = reflect_logger()

_CONTAINER_CODES = frozenset({TypeCode.ARRAY, TypeCode.MAP, TypeCode.OBJECT})


def _is_simple_value(value: Any) -> bool:
    return to_type_code(value) not in _CONTAINER_CODES


def _on_stack(value: Any, stack: list[Any]) -> bool:
    return any(value is item for item in stack)


def _flatten(obj: Any, path: str | None, emit: Callable[[str, Any], None],
             stack: list[Any], max_depth: int) -> None:
    properties = ObjectReader.get_properties(obj)

    if not properties or len(stack) >= max_depth:
        if properties:
            log.debug("flatten_depth_capped", path=path, max_depth=max_depth)
        if path is not None:
            emit(path, obj)
        return

    stack.append(obj)
    try:
        for key, value in properties.items():
            if _on_stack(value, stack):
                continue

            new_path = f"{path}.{key}" if path is not None else key
            if _is_simple_value(value):
                emit(new_path, value)
            else:
                _flatten(value, new_path, emit, stack, max_depth)
    finally:
        stack.pop()


class RecursiveObjectReader:
    """Reads nested properties by dotted path and flattens whole graphs."""

    @staticmethod
    def has_property(obj: Any, name: str) -> bool:
        if obj is None or not name:
            return False

        *parents, last = name.split(".")
        for segment in parents:
            obj = ObjectReader.get_property(obj, segment)
            if obj is None:
                return False
        return ObjectReader.has_property(obj, last)

    @staticmethod
    def get_property(obj: Any, name: str) -> Any:
        if obj is None or not name:
            return None

        *parents, last = name.split(".")
        for segment in parents:
            obj = ObjectReader.get_property(obj, segment)
            if obj is None:
                return None
        return ObjectReader.get_property(obj, last)

    @staticmethod
    def get_property_names(obj: Any) -> list[str]:
        """Dotted paths of every leaf reachable from ``obj``."""
        names: list[str] = []
        if obj is not None:
            _flatten(obj, None, lambda path, _: names.append(path), [], get_settings().REFLECT_MAX_DEPTH)
        return names

    @staticmethod
    def get_properties(obj: Any) -> dict[str, Any]:
        """Dotted path to value for every leaf reachable from ``obj``."""
        properties: dict[str, Any] = {}
        if obj is not None:
            _flatten(obj, None, properties.__setitem__, [], get_settings().REFLECT_MAX_DEPTH)
        return properties
