"""Validation results: the diagnostics a schema walk produces."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValidationResultType(str, Enum):
    """Severity of a validation result.

    Errors always fail validation, warnings only in strict mode and
    information never does.
    """
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """A single finding at a dotted path ("" is the validated value itself).

    - code: machine-readable reason (e.g. "VALUE_IS_NULL", "TYPE_MISMATCH")
    - message: human-readable description
    - expected / actual: what the check wanted and what it found
    """
    path: str | None
    type: ValidationResultType
    code: str
    message: str
    expected: Any = None
    actual: Any = None

    @property
    def is_error(self) -> bool: return self.type == ValidationResultType.ERROR

    @property
    def is_warning(self) -> bool: return self.type == ValidationResultType.WARNING

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured error reports."""
        return {"path": self.path, "type": self.type.value, "code": self.code, "message": self.message,
            "expected": _plain(self.expected), "actual": _plain(self.actual)}


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
