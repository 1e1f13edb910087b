"""SMS notification channel."""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from .base import format_notification, write


class SMSChannel:
    """Channel printing notifications as a text message would be sent."""

    name = "sms"
    header = "Sending SMS notification:"

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def format(self, subject: str, message: str) -> str:
        return format_notification(self.header, subject, message)

    def render(self, subject: str, message: str) -> None:
        write(self._console, self.format(subject, message))


__all__ = ["SMSChannel"]
