"""Comparison of dynamic values by operator name."""
from __future__ import annotations

import re
from typing import Any

from commons.convert import to_nullable_double, to_string

EQUAL_OPERATIONS = frozenset({"=", "==", "EQ"})
NOT_EQUAL_OPERATIONS = frozenset({"!=", "<>", "NE"})
LESS_OPERATIONS = frozenset({"<", "LT"})
LESS_EQUAL_OPERATIONS = frozenset({"<=", "LE"})
GREATER_OPERATIONS = frozenset({">", "GT"})
GREATER_EQUAL_OPERATIONS = frozenset({">=", "GE"})


class ObjectComparator:
    """Compares values with =, !=, <, <=, >, >= and LIKE (or EQ, NE, LT, LE, GT, GE).

    Ordering comparisons convert both sides to numbers and fail when either
    side is not numeric. Unknown operators compare as true.
    """

    @staticmethod
    def compare(value1: Any, operation: str, value2: Any) -> bool:
        operation = operation.upper()

        if operation in EQUAL_OPERATIONS:
            return ObjectComparator.are_equal(value1, value2)
        if operation in NOT_EQUAL_OPERATIONS:
            return ObjectComparator.are_not_equal(value1, value2)
        if operation in LESS_OPERATIONS:
            return ObjectComparator.is_less(value1, value2)
        if operation in LESS_EQUAL_OPERATIONS:
            return ObjectComparator.are_equal(value1, value2) or ObjectComparator.is_less(value1, value2)
        if operation in GREATER_OPERATIONS:
            return ObjectComparator.is_greater(value1, value2)
        if operation in GREATER_EQUAL_OPERATIONS:
            return ObjectComparator.are_equal(value1, value2) or ObjectComparator.is_greater(value1, value2)
        if operation == "LIKE":
            return ObjectComparator.match(value1, value2)

        return True

    @staticmethod
    def are_equal(value1: Any, value2: Any) -> bool:
        if value1 is None and value2 is None:
            return True
        if value1 is None or value2 is None:
            return False
        # True == 1 in Python; booleans only equal booleans
        if isinstance(value1, bool) != isinstance(value2, bool):
            return False
        return value1 == value2

    @staticmethod
    def are_not_equal(value1: Any, value2: Any) -> bool:
        return not ObjectComparator.are_equal(value1, value2)

    @staticmethod
    def is_less(value1: Any, value2: Any) -> bool:
        number1, number2 = to_nullable_double(value1), to_nullable_double(value2)
        if number1 is None or number2 is None:
            return False
        return number1 < number2

    @staticmethod
    def is_greater(value1: Any, value2: Any) -> bool:
        number1, number2 = to_nullable_double(value1), to_nullable_double(value2)
        if number1 is None or number2 is None:
            return False
        return number1 > number2

    @staticmethod
    def match(value1: Any, value2: Any) -> bool:
        """True when the string form of ``value2`` (a regex) is found in ``value1``."""
        if value1 is None and value2 is None:
            return True
        if value1 is None or value2 is None:
            return False
        try:
            return re.search(to_string(value2), to_string(value1)) is not None
        except re.error:
            return False
