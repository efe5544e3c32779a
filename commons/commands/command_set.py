"""Command Registry

Groups commands and events by name, threads every command through the registered
interceptors and dispatches calls by name.

Features:
- Interceptor chains rebuilt whenever an interceptor is added
- Validation before execution, reported as ValidationException
- Correlation ids generated for anonymous calls and bound to log events
- Result-returning variant for callers that avoid exceptions
- Events raised by name; listeners can be attached to every event at once
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from commons.errors import (
    AppError, ApplicationException, BadRequestException, Ok, Result,
    from_exception, invocation_failed, unknown_command,
)
from commons.logging import call_context, command_logger, generate_correlation_id
from commons.validate import ValidationException, ValidationResult, ValidationResultType

from .command import CommandBase
from .event import Event, EventListener
from .interceptor import CommandInterceptor, InterceptedCommand

log = command_logger()


class CommandSet:
    """Named commands and events plus the interceptors wrapped around each command.

    ``id_generator`` produces correlation ids for calls made without one.
    """

    def __init__(self, id_generator: Callable[[], str] = generate_correlation_id):
        self._id_generator = id_generator
        self._commands: list[CommandBase] = []
        self._interceptors: list[CommandInterceptor] = []
        self._commands_by_name: dict[str, CommandBase] = {}
        self._events: list[Event] = []
        self._events_by_name: dict[str, Event] = {}

    @property
    def commands(self) -> list[CommandBase]:
        return list(self._commands)

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    def find_command(self, name: str) -> CommandBase | None:
        return self._commands_by_name.get(name)

    def find_event(self, name: str) -> Event | None:
        return self._events_by_name.get(name)

    # ========================================================================
    # Registration
    # ========================================================================

    def _build_command_chain(self, command: CommandBase) -> None:
        chained = command
        for interceptor in reversed(self._interceptors):
            chained = InterceptedCommand(interceptor, chained)
        self._commands_by_name[chained.name] = chained

    def _rebuild_all_command_chains(self) -> None:
        self._commands_by_name = {}
        for command in self._commands:
            self._build_command_chain(command)

    def add_command(self, command: CommandBase) -> None:
        self._commands.append(command)
        self._build_command_chain(command)

    def add_commands(self, commands: Iterable[CommandBase]) -> None:
        for command in commands:
            self.add_command(command)

    def add_event(self, event: Event) -> None:
        self._events.append(event)
        self._events_by_name[event.name] = event

    def add_events(self, events: Iterable[Event]) -> None:
        for event in events:
            self.add_event(event)

    def add_command_set(self, command_set: CommandSet) -> None:
        """Add every command and event of ``command_set``."""
        self.add_commands(command_set.commands)
        self.add_events(command_set.events)

    def add_listener(self, listener: EventListener) -> None:
        """Attach ``listener`` to every event registered so far."""
        for event in self._events:
            event.add_listener(listener)

    def remove_listener(self, listener: EventListener) -> None:
        for event in self._events:
            event.remove_listener(listener)

    def add_interceptor(self, interceptor: CommandInterceptor) -> None:
        """Add an interceptor. The first interceptor added is the outermost."""
        self._interceptors.append(interceptor)
        self._rebuild_all_command_chains()

    # ========================================================================
    # Dispatch
    # ========================================================================

    def execute(self, correlation_id: str | None, name: str, args: Mapping[str, Any]) -> Any:
        """Validate and run a command by name.

        Raises:
            BadRequestException: ``CMD_NOT_FOUND`` when no command has this name
            ValidationException: arguments failed validation
            InvocationException: the handler failed
        """
        command = self.find_command(name)
        if command is None:
            log.warning("command_not_found", command=name, correlation_id=correlation_id)
            raise BadRequestException(
                correlation_id, "CMD_NOT_FOUND", "Requested command does not exist",
            ).with_details("command", name)

        correlation_id = correlation_id or self._id_generator()

        token = call_context.set({"correlation_id": correlation_id, "command": name})
        try:
            ValidationException.throw_exception_if_needed(correlation_id, command.validate(args), False)
            return command.execute(correlation_id, args)
        finally:
            call_context.reset(token)

    def execute_result(self, correlation_id: str | None, name: str,
                       args: Mapping[str, Any]) -> Result[Any, AppError]:
        """Like ``execute`` but returns Ok(result) or Err(AppError) instead of raising."""
        if self.find_command(name) is None:
            return unknown_command(name, correlation_id, origin="commands")
        try:
            return Ok(self.execute(correlation_id, name, args))
        except ApplicationException as e:
            return from_exception(e, origin="commands")
        except Exception as e:
            return invocation_failed(name, e, correlation_id=correlation_id, origin="commands")

    def validate(self, name: str, args: Mapping[str, Any]) -> list[ValidationResult]:
        command = self.find_command(name)
        if command is None:
            return [ValidationResult("", ValidationResultType.ERROR, "CMD_NOT_FOUND",
                "Requested command does not exist", None, None)]
        return command.validate(args)

    def notify(self, correlation_id: str | None, name: str, args: Mapping[str, Any]) -> None:
        """Raise the event called ``name``. Unknown events are ignored."""
        event = self.find_event(name)
        if event is None:
            log.debug("event_not_found", event=name, correlation_id=correlation_id)
            return
        event.notify(correlation_id, args)
