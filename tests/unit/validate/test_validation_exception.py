"""ValidationResult and ValidationException tests."""

import pytest
from structlog.testing import capture_logs

from commons.convert import TypeCode
from commons.errors import BadRequestException, ErrorCode
from commons.validate import ValidationException, ValidationResult, ValidationResultType

ERROR = ValidationResult("name", ValidationResultType.ERROR, "VALUE_IS_NULL", "name must not be null", "NOT NULL", None)
WARNING = ValidationResult("extra", ValidationResultType.WARNING, "UNEXPECTED_PROPERTY",
    "value contains unexpected property extra", None, "extra")
INFO = ValidationResult("", ValidationResultType.INFORMATION, "NOTE", "just saying")


class TestValidationResult:
    def test_to_dict(self) -> None:
        result = ValidationResult("age", ValidationResultType.ERROR, "TYPE_MISMATCH", "bad", TypeCode.LONG, TypeCode.STRING)
        assert result.to_dict() == {
            "path": "age",
            "type": "error",
            "code": "TYPE_MISMATCH",
            "message": "bad",
            "expected": "long",
            "actual": "string",
        }

    def test_severity_flags(self) -> None:
        assert ERROR.is_error and not ERROR.is_warning
        assert WARNING.is_warning and not WARNING.is_error


class TestComposeMessage:
    def test_joins_errors_and_warnings(self) -> None:
        assert ValidationException.compose_message([ERROR, WARNING]) == (
            "Validation failed: name must not be null, value contains unexpected property extra"
        )

    def test_skips_information(self) -> None:
        assert ValidationException.compose_message([INFO, ERROR]) == "Validation failed: name must not be null"

    def test_empty(self) -> None:
        assert ValidationException.compose_message([]) == "Validation failed"


class TestFromResults:
    def test_errors_always_fail(self) -> None:
        exc = ValidationException.from_results("c-1", [ERROR], strict=False)
        assert exc is not None
        assert exc.results == [ERROR]
        assert exc.correlation_id == "c-1"

    def test_warnings_fail_only_in_strict_mode(self) -> None:
        assert ValidationException.from_results(None, [WARNING], strict=False) is None
        assert ValidationException.from_results(None, [WARNING], strict=True) is not None

    def test_information_never_fails(self) -> None:
        assert ValidationException.from_results(None, [INFO], strict=True) is None

    def test_throw_if_needed_logs_and_raises(self) -> None:
        with capture_logs() as logs, pytest.raises(ValidationException):
            ValidationException.throw_exception_if_needed("c-2", [ERROR, WARNING])

        assert logs[0]["event"] == "validation_failed"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["error_count"] == 2

    def test_throw_if_needed_passes_clean_results(self) -> None:
        ValidationException.throw_exception_if_needed("c-3", [INFO])


class TestExceptionShape:
    def test_is_bad_request(self) -> None:
        exc = ValidationException("c-1", None, [ERROR])
        assert isinstance(exc, BadRequestException)
        assert exc.code == "INVALID_DATA"
        assert str(exc) == "Validation failed: name must not be null"

    def test_field_errors_grouped_by_path(self) -> None:
        exc = ValidationException(None, None, [ERROR, WARNING, ERROR])
        assert set(exc.field_errors) == {"name", "extra"}
        assert len(exc.field_errors["name"]) == 2

    def test_converts_to_app_error(self) -> None:
        error = ValidationException("c-9", None, [ERROR]).to_app_error()

        assert error.code == ErrorCode.E2030_INVALID_DATA
        assert error.code.http_status == 400
        assert error.context.correlation_id == "c-9"
        assert error.metadata["code"] == "INVALID_DATA"
        assert error.metadata["results"][0]["code"] == "VALUE_IS_NULL"
