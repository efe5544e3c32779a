"""Error Builders

Err constructors for the failures ``CommandSet.execute_result`` reports
without an exception to convert.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


def _context(correlation_id: str | None, origin: str) -> ErrorContext:
    return ErrorContext(correlation_id=correlation_id, origin=origin) if correlation_id else ErrorContext(origin=origin)


def unknown_command(name: str, correlation_id: str | None = None, origin: str = "") -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E2031_UNKNOWN_COMMAND,
        message=f"Requested command does not exist: {name}",
        context=_context(correlation_id, origin),
        metadata={"command": name},
    ))


def invocation_failed(
    name: str,
    cause: BaseException,
    *,
    correlation_id: str | None = None,
    origin: str = "",
) -> Err[AppError]:
    """A handler raised something that is not an ApplicationException."""
    return Err(AppError(
        code=ErrorCode.E9004_INVOCATION_FAILED,
        message=f"Execution {name} failed: {cause}",
        context=_context(correlation_id, origin),
        metadata={"command": name},
        cause=cause,
    ))
