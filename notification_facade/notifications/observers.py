"""Listeners receiving notifications from the subscription registry."""

from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console

from .channels.base import format_notification, write


class Listener(Protocol):
    def receive(self, subject: str, message: str) -> None:  # pragma: no cover (interface)
        ...


class User:
    """Named listener printing what it receives."""

    def __init__(self, name: str, console: Optional[Console] = None):
        self.name = name
        self._console = console or Console()

    def __repr__(self) -> str:
        return f"User({self.name!r})"

    def receive(self, subject: str, message: str) -> None:
        header = f"{self.name} received a notification:"
        write(self._console, format_notification(header, subject, message))


__all__ = ["Listener", "User"]
