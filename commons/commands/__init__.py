"""Command Dispatch

Named, schema-guarded handlers with interceptor chains, and named events
with listeners. Arguments are plain mappings; execution is synchronous.

Usage:
    from commons.commands import Command, CommandSet
    from commons.validate import ObjectSchema
    from commons.convert import TypeCode

    commands = CommandSet()
    commands.add_command(Command(
        "greet",
        ObjectSchema().with_required_property("name", TypeCode.STRING),
        lambda correlation_id, args: f"Hello, {args['name']}",
    ))
    commands.execute(None, "greet", {"name": "Ada"})   # "Hello, Ada"
"""
from .command import CommandBase, Command, Executable, Handler
from .event import Event, EventListener
from .interceptor import CommandInterceptor, InterceptedCommand
from .command_set import CommandSet

__all__ = [
    "CommandBase",
    "Command",
    "Executable",
    "Handler",
    "Event",
    "EventListener",
    "CommandInterceptor",
    "InterceptedCommand",
    "CommandSet",
]
