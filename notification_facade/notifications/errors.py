"""Exceptions raised by the notification package."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for notification errors."""


class InvalidArgument(NotificationError, ValueError):
    """Raised when a caller supplies an unusable argument."""


class InvalidChannelError(InvalidArgument):
    """Raised when a channel label is neither Email nor SMS."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Invalid channel type: {label!r}")


__all__ = ["NotificationError", "InvalidArgument", "InvalidChannelError"]
