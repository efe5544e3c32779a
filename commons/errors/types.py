"""Error Records and Results

The error code taxonomy, immutable error records and the two-variant
Result returned by ``CommandSet.execute_result``. Callers branch on
``is_ok()`` or pattern-match ``Ok(value)`` / ``Err(error)``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Numbered error codes.

    E2xxx: caller supplied bad data or asked for something that does not exist
    E9xxx: internal and handler failures
    """
    E2000_VALIDATION_GENERIC = 2000
    E2030_INVALID_DATA = 2030
    E2031_UNKNOWN_COMMAND = 2031

    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001
    E9004_INVOCATION_FAILED = 9004

    @property
    def http_status(self) -> int:
        return 400 if 2000 <= self.value < 3000 else 500

    @property
    def category(self) -> str:
        return "validation" if 2000 <= self.value < 3000 else "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error happened, and which call it belongs to."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""

    def with_origin(self, origin: str) -> ErrorContext:
        return ErrorContext(self.correlation_id, self.timestamp, origin)


@dataclass(frozen=True, slots=True)
class AppError:
    """Immutable error record: code, message, tracing context, metadata and cause."""
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: BaseException | None = None

    def with_context(self, correlation_id: str | None = None, origin: str | None = None) -> AppError:
        context = ErrorContext(
            correlation_id or self.context.correlation_id,
            self.context.timestamp,
            self.context.origin if origin is None else origin,
        )
        return AppError(self.code, self.message, context, self.metadata, self.cause)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured reports."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


# ============================================================================
# Result
# ============================================================================

@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool: return True

    def is_err(self) -> bool: return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool: return False

    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: BaseException,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Convert an exception to Err.

    Library exceptions carry their own code and correlation id and are
    converted through ``to_app_error``.
    """
    if callable(to_app_error := getattr(exc, "to_app_error", None)):
        app_error = to_app_error()
        return Err(app_error.with_context(origin=origin) if origin else app_error)
    return Err(AppError(code, str(exc), ErrorContext(origin=origin), metadata, exc))
