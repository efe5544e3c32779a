"""Validation Exception

Aggregates the results of one validation into a single raisable error.
The result list stays the source of truth; the exception is a convenience
for callers that fail by raising.

Error Format (to_app_error().to_dict()):
{
    "error": {
        "code": "E2030_INVALID_DATA",
        "message": "Validation failed: name must not be null",
        "category": "validation",
        "correlation_id": "123",
        "metadata": {
            "code": "INVALID_DATA",
            "results": [
                {"path": "name", "type": "error", "code": "VALUE_IS_NULL", ...}
            ]
        }
    }
}
"""
from __future__ import annotations

from typing import Sequence

from commons.errors import BadRequestException, ErrorCode
from commons.logging import validate_logger

from .result import ValidationResult, ValidationResultType

log = validate_logger()


class ValidationException(BadRequestException):
    """Raised (or returned) when validation produced failing results."""

    error_code = ErrorCode.E2030_INVALID_DATA

    def __init__(self, correlation_id: str | None = None, message: str | None = None,
                 results: Sequence[ValidationResult] | None = None):
        super().__init__(correlation_id, "INVALID_DATA", message or self.compose_message(results))
        self.results: list[ValidationResult] = list(results or [])
        if self.results:
            self.with_details("results", [result.to_dict() for result in self.results])

    @property
    def field_errors(self) -> dict[str, list[ValidationResult]]:
        """Group results by path."""
        grouped: dict[str, list[ValidationResult]] = {}
        for result in self.results: grouped.setdefault(result.path or "", []).append(result)
        return grouped

    @staticmethod
    def compose_message(results: Sequence[ValidationResult] | None) -> str:
        """Join the messages of all non-information results after "Validation failed"."""
        messages = [result.message for result in results or [] if result.type != ValidationResultType.INFORMATION]
        return f"Validation failed: {', '.join(messages)}" if messages else "Validation failed"

    @classmethod
    def from_results(cls, correlation_id: str | None, results: Sequence[ValidationResult],
                     strict: bool = False) -> ValidationException | None:
        """Build an exception when results contain errors (or warnings in strict mode)."""
        failed = any(
            result.type == ValidationResultType.ERROR
            or (strict and result.type == ValidationResultType.WARNING)
            for result in results
        )
        return cls(correlation_id, None, results) if failed else None

    @classmethod
    def throw_exception_if_needed(cls, correlation_id: str | None, results: Sequence[ValidationResult],
                                  strict: bool = False) -> None:
        if (exc := cls.from_results(correlation_id, results, strict)) is not None:
            log.warning("validation_failed", correlation_id=correlation_id, strict=strict,
                error_count=len(exc.results), message=exc.message)
            raise exc
