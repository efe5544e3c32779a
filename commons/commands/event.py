"""Events

A named event fans out notifications to its listeners in registration
order. A listener failure stops the fan-out and surfaces as
InvocationException chained to the original error.

Usage:
    class AuditTrail:
        def on_event(self, correlation_id, event, args):
            entries.append((event.name, dict(args)))

    saved = Event("user_saved")
    saved.add_listener(AuditTrail())
    saved.notify("req-1", {"id": "42"})
"""
from __future__ import annotations

from typing import Any, Mapping, Protocol

from commons.errors import InvocationException
from commons.logging import command_logger

log = command_logger()


class EventListener(Protocol):
    """Receives notifications from the events it is registered with."""
    def on_event(self, correlation_id: str | None, event: Event, args: Mapping[str, Any]) -> None: ...


class Event:
    def __init__(self, name: str):
        if not name:
            raise ValueError("Name cannot be empty")
        self._name = name
        self._listeners: list[EventListener] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def listeners(self) -> list[EventListener]:
        return list(self._listeners)

    def add_listener(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: EventListener) -> None:
        """Remove the first registration of ``listener``; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, correlation_id: str | None, args: Mapping[str, Any]) -> None:
        """Call ``on_event`` on every listener.

        Raises:
            InvocationException: ``EXEC_FAILED`` when a listener raises
        """
        log.debug("event_raised", event=self._name, listeners=len(self._listeners),
            correlation_id=correlation_id)
        for listener in list(self._listeners):
            try:
                listener.on_event(correlation_id, self, args)
            except Exception as e:
                log.error("event_failed", event=self._name, correlation_id=correlation_id,
                    error=str(e), error_type=type(e).__name__)
                raise InvocationException(
                    correlation_id, "EXEC_FAILED", f"Raising event {self._name} failed: {e}",
                ).with_details("event", self._name).wrap(e) from e
