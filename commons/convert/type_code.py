"""Coarse runtime type classification used by conversion and validation."""
from enum import Enum


class TypeCode(Enum):
    """Type tags a dynamic value resolves to.

    ``str()`` renders the lowercase name used in diagnostic messages.
    """
    UNKNOWN = 0
    STRING = 1
    BOOLEAN = 2
    INTEGER = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    DATETIME = 7
    DURATION = 8
    OBJECT = 9
    ENUM = 10
    ARRAY = 11
    MAP = 12

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC

    def __str__(self) -> str:
        return self.name.lower()


_NUMERIC = frozenset({TypeCode.INTEGER, TypeCode.LONG, TypeCode.FLOAT, TypeCode.DOUBLE})
