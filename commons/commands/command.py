"""Commands

A command pairs a name, an optional argument schema and a handler. Arguments
are validated before the handler runs; handler failures surface as
InvocationException chained to the original error.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Protocol

from commons.errors import InvocationException
from commons.logging import command_logger
from commons.validate import Schema, ValidationResult

log = command_logger()

Handler = Callable[[str | None, Mapping[str, Any]], Any]


class Executable(Protocol):
    """Object form of a command handler."""
    def execute(self, correlation_id: str | None, args: Mapping[str, Any]) -> Any: ...


class CommandBase(ABC):
    """Anything a CommandSet can register, chain and execute."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def execute(self, correlation_id: str | None, args: Mapping[str, Any]) -> Any:
        """Run the command and return its result."""
        ...

    @abstractmethod
    def validate(self, args: Mapping[str, Any]) -> list[ValidationResult]:
        """Check arguments without running the command."""
        ...


class Command(CommandBase):
    """Named handler guarded by an argument schema.

    Example:
        command = Command("get_user", ObjectSchema().with_required_property("id", TypeCode.STRING),
                          lambda correlation_id, args: users[args["id"]])
        command.execute("req-1", {"id": "42"})
    """

    def __init__(self, name: str, schema: Schema | None, function: Handler | Executable):
        if not name:
            raise ValueError("Name cannot be empty")
        if function is None:
            raise ValueError("Function cannot be None")

        handler = function if callable(function) else getattr(function, "execute", None)
        if not callable(handler):
            raise ValueError("Function must be callable or have an execute method")

        self._name = name
        self._schema = schema
        self._function: Handler = handler

    @property
    def name(self) -> str:
        return self._name

    @property
    def schema(self) -> Schema | None:
        return self._schema

    def execute(self, correlation_id: str | None, args: Mapping[str, Any]) -> Any:
        """Validate ``args`` (raising ValidationException) and invoke the handler."""
        if self._schema is not None:
            self._schema.validate_and_throw_exception(correlation_id, args)

        log.debug("command_executing", command=self._name, correlation_id=correlation_id)
        try:
            return self._function(correlation_id, args)
        except Exception as e:
            log.error("command_failed", command=self._name, correlation_id=correlation_id,
                error=str(e), error_type=type(e).__name__)
            raise InvocationException(
                correlation_id, "EXEC_FAILED", f"Execution {self._name} failed: {e}",
            ).with_details("command", self._name).wrap(e) from e

    def validate(self, args: Mapping[str, Any]) -> list[ValidationResult]:
        if self._schema is None:
            return []
        return self._schema.validate(args)
