"""Error Handling System

Two complementary views of the same failures:
- Result[T, E]: Ok(value) or Err(AppError), for callers that branch instead of catching
- ApplicationException: raised at boundaries that fail by throwing

Usage:
    from commons.errors import Ok, Err

    match commands.execute_result(correlation_id, "get_user", args):
        case Ok(user):
            return user
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
)

from .builders import (
    unknown_command,
    invocation_failed,
)

from .exceptions import (
    ErrorCategory,
    ApplicationException,
    BadRequestException,
    InvocationException,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    # Builders
    "unknown_command",
    "invocation_failed",
    # Exceptions
    "ErrorCategory",
    "ApplicationException",
    "BadRequestException",
    "InvocationException",
]
