"""Application Exceptions

Exception side of the error system. Used at boundaries that signal failure
by raising (schema ``validate_and_throw_exception``, command execution)
rather than by returning a Result. Every exception converts losslessly to
an ``AppError`` for the Result-based code paths.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Self

from .types import AppError, ErrorCode, ErrorContext


class ErrorCategory(str, Enum):
    """Broad classification shared by all application exceptions."""
    UNKNOWN = "Unknown"
    BAD_REQUEST = "BadRequest"
    FAILED_INVOCATION = "FailedInvocation"


class ApplicationException(Exception):
    """Base exception carrying a correlation id, a machine code and details.

    Subclasses fix ``category`` and the ``ErrorCode`` used when converting
    to an ``AppError``.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN
    error_code: ErrorCode = ErrorCode.E9000_INTERNAL_GENERIC

    def __init__(
        self,
        correlation_id: str | None = None,
        code: str = "UNKNOWN",
        message: str = "Unknown error",
        *,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.correlation_id = correlation_id
        self.code = code
        self.message = message
        self.details: dict[str, Any] = dict(details or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def with_details(self, key: str, value: Any) -> Self:
        self.details[key] = value
        return self

    def wrap(self, cause: BaseException) -> Self:
        """Chain an underlying error as the cause of this one."""
        self.__cause__ = cause
        return self

    def to_app_error(self) -> AppError:
        """Convert to AppError for the Result-based error system."""
        context = ErrorContext(correlation_id=self.correlation_id) if self.correlation_id else ErrorContext()
        return AppError(
            code=self.error_code,
            message=self.message,
            context=context.with_origin(self.category.value),
            metadata={"code": self.code, **self.details},
            cause=self,
        )

    def __str__(self) -> str:
        return self.message


class BadRequestException(ApplicationException):
    """Raised when the caller supplied data that cannot be processed."""

    category = ErrorCategory.BAD_REQUEST
    error_code = ErrorCode.E2000_VALIDATION_GENERIC

    def __init__(self, correlation_id: str | None = None, code: str = "BAD_REQUEST",
                 message: str = "Bad request", **kwargs):
        super().__init__(correlation_id, code, message, **kwargs)


class InvocationException(ApplicationException):
    """Raised when a handler fails while executing a call."""

    category = ErrorCategory.FAILED_INVOCATION
    error_code = ErrorCode.E9004_INVOCATION_FAILED

    def __init__(self, correlation_id: str | None = None, code: str = "INVOCATION_FAILED",
                 message: str = "Invocation failed", **kwargs):
        super().__init__(correlation_id, code, message, **kwargs)
