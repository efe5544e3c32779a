"""Command interception: wrap a command with cross-cutting behaviour."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from commons.validate import ValidationResult

from .command import CommandBase


class CommandInterceptor(ABC):
    """Hook placed in front of a command. Each hook decides whether and how to call ``command``.

    Override only what you need; the defaults pass straight through.
    """

    def get_name(self, command: CommandBase) -> str:
        return command.name

    @abstractmethod
    def execute(self, correlation_id: str | None, command: CommandBase, args: Mapping[str, Any]) -> Any:
        ...

    def validate(self, command: CommandBase, args: Mapping[str, Any]) -> list[ValidationResult]:
        return command.validate(args)


class InterceptedCommand(CommandBase):
    """A command seen through an interceptor."""

    def __init__(self, interceptor: CommandInterceptor, next_command: CommandBase):
        self._interceptor = interceptor
        self._next = next_command

    @property
    def name(self) -> str:
        return self._interceptor.get_name(self._next)

    def execute(self, correlation_id: str | None, args: Mapping[str, Any]) -> Any:
        return self._interceptor.execute(correlation_id, self._next, args)

    def validate(self, args: Mapping[str, Any]) -> list[ValidationResult]:
        return self._interceptor.validate(self._next, args)
