"""Reflection over Plain Values

Duck-typed property access for mappings, lists, dataclasses, pydantic
models and plain objects, at one level or along dotted paths, plus
type-tag matching.

Usage:
    from commons.reflect import RecursiveObjectReader, TypeMatcher

    RecursiveObjectReader.get_property({"a": {"b": [1, 2]}}, "a.b.1")   # 2
    TypeMatcher.match_value_type_by_name("int", 123)                    # True
"""
from .property_reflector import PropertyReflector
from .object_reader import ObjectReader
from .object_writer import ObjectWriter
from .recursive_object_reader import RecursiveObjectReader
from .recursive_object_writer import RecursiveObjectWriter
from .type_matcher import TypeMatcher

__all__ = [
    "PropertyReflector",
    "ObjectReader",
    "ObjectWriter",
    "RecursiveObjectReader",
    "RecursiveObjectWriter",
    "TypeMatcher",
]
