"""Soft Primitive Conversion

Best-effort conversions between dynamic values and primitives. Conversions
never raise on bad input: the ``to_nullable_*`` forms return ``None``,
the ``to_*`` forms fall back to a type default, and the
``to_*_with_default`` forms fall back to the caller's default.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, date, time, timedelta, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError

_DATETIME_ADAPTER = TypeAdapter(datetime)

TRUE_VALUES = frozenset({"true", "1", "yes", "y", "t", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "n", "f", "off"})


def _epoch_millis(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp() * 1000


# ============================================================================
# Strings
# ============================================================================

def to_nullable_string(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Enum):
        return to_nullable_string(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_string(item) for item in value)
    return str(value)


def to_string(value: Any) -> str:
    return to_string_with_default(value, "")


def to_string_with_default(value: Any, default: str) -> str:
    return result if (result := to_nullable_string(value)) is not None else default


# ============================================================================
# Booleans
# ============================================================================

def to_nullable_boolean(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    if isinstance(value, timedelta):
        return value.total_seconds() > 0
    text = to_string(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    return None


def to_boolean(value: Any) -> bool:
    return to_boolean_with_default(value, False)


def to_boolean_with_default(value: Any, default: bool) -> bool:
    return result if (result := to_nullable_boolean(value)) is not None else default


# ============================================================================
# Integers (Python ints are unbounded; integer and long share one path)
# ============================================================================

def to_nullable_long(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        try:
            return int(value)
        except (ValueError, OverflowError, InvalidOperation):
            return None
    if isinstance(value, datetime):
        return int(_epoch_millis(value))
    if isinstance(value, timedelta):
        return int(value.total_seconds() * 1000)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return int(float(text))
        except (ValueError, OverflowError):
            return None
    return None


def to_long(value: Any) -> int:
    return to_long_with_default(value, 0)


def to_long_with_default(value: Any, default: int) -> int:
    return result if (result := to_nullable_long(value)) is not None else default


to_nullable_integer = to_nullable_long
to_integer = to_long
to_integer_with_default = to_long_with_default


# ============================================================================
# Floating point (Python floats are doubles; float and double share one path)
# ============================================================================

def to_nullable_double(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, datetime):
        return _epoch_millis(value)
    if isinstance(value, timedelta):
        return value.total_seconds() * 1000
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def to_double(value: Any) -> float:
    return to_double_with_default(value, 0.0)


def to_double_with_default(value: Any, default: float) -> float:
    return result if (result := to_nullable_double(value)) is not None else default


to_nullable_float = to_nullable_double
to_float = to_double
to_float_with_default = to_double_with_default


# ============================================================================
# Date and time
# ============================================================================

def to_nullable_datetime(value: Any) -> datetime | None:
    """Convert to datetime. Numbers and numeric strings are milliseconds since the Unix epoch (UTC)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        try:
            return datetime.fromtimestamp(float(value) / 1000, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None
    if isinstance(value, str):
        if (millis := to_nullable_double(value)) is not None:
            return to_nullable_datetime(millis)
        try:
            return _DATETIME_ADAPTER.validate_python(value.strip())
        except ValidationError:
            return None
    return None


def to_datetime(value: Any) -> datetime | None:
    return to_nullable_datetime(value)


def to_datetime_with_default(value: Any, default: datetime) -> datetime:
    return result if (result := to_nullable_datetime(value)) is not None else default


# ============================================================================
# Containers
# ============================================================================

def to_nullable_array(value: Any) -> list | None:
    """Convert to list. Scalars are wrapped into a single-element list."""
    if value is None:
        return None
    if isinstance(value, list):
        return value
    if isinstance(value, (tuple, set, frozenset)):
        return list(value)
    return [value]


def to_array(value: Any) -> list:
    return to_array_with_default(value, [])


def to_array_with_default(value: Any, default: list) -> list:
    return result if (result := to_nullable_array(value)) is not None else default


def list_to_array(value: Any, delimiter: str = ",") -> list:
    """Convert to list, splitting delimited strings into their parts."""
    if value is None:
        return []
    if isinstance(value, str):
        return value.split(delimiter) if value else []
    return to_array(value)


def to_nullable_map(value: Any) -> dict | None:
    """Convert to dict. Lists map string indices to items; objects map public attributes."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)):
        return {str(index): item for index, item in enumerate(value)}
    if isinstance(value, (str, bytes, bool, int, float, Decimal, datetime, date, time, timedelta, Enum)):
        return None
    if hasattr(value, "__dict__"):
        return {
            key: item for key, item in vars(value).items()
            if not key.startswith("_") and not callable(item)
        }
    return None


def to_map(value: Any) -> dict:
    return to_map_with_default(value, {})


def to_map_with_default(value: Any, default: dict) -> dict:
    return result if (result := to_nullable_map(value)) is not None else default
