"""Notification channels (interface + shared rendering)."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console


class NotificationChannel(Protocol):
    name: str

    def format(self, subject: str, message: str) -> str:  # pragma: no cover (interface)
        ...

    def render(self, subject: str, message: str) -> None:  # pragma: no cover (interface)
        ...


def format_notification(header: str, subject: str, message: str) -> str:
    """Build the block printed for a notification, blank line included."""
    return f"{header}\nSubject: {subject}\nMessage: {message}\n"


def write(console: Console, text: str) -> None:
    # Written raw: console.print would expand tabs and drop control codes
    console.file.write(text + "\n")


__all__ = ["NotificationChannel", "format_notification", "write"]
