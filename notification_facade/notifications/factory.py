"""Factories turning a channel label into a channel instance."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Protocol

from rich.console import Console

from .channels.base import NotificationChannel
from .channels.email import EmailChannel
from .channels.sms import SMSChannel
from .errors import InvalidChannelError

logger = logging.getLogger(__name__)


class ChannelType(Enum):
    """Supported channel kinds."""

    EMAIL = "email"
    SMS = "sms"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "ChannelType":
        """Match ``label`` case-insensitively against the known channels."""
        normalized = label.lower() if isinstance(label, str) else None
        for member in cls:
            if member.value == normalized:
                return member
        logger.warning("Unknown channel label %r", label)
        raise InvalidChannelError(label)


class ChannelFactory(Protocol):
    def create_channel(
        self, console: Optional[Console] = None
    ) -> NotificationChannel:  # pragma: no cover (interface)
        ...


class EmailChannelFactory:
    def create_channel(self, console: Optional[Console] = None) -> NotificationChannel:
        return EmailChannel(console)


class SMSChannelFactory:
    def create_channel(self, console: Optional[Console] = None) -> NotificationChannel:
        return SMSChannel(console)


CHANNEL_FACTORIES: Dict[ChannelType, ChannelFactory] = {
    ChannelType.EMAIL: EmailChannelFactory(),
    ChannelType.SMS: SMSChannelFactory(),
}


def resolve_channel(
    label: str, console: Optional[Console] = None
) -> NotificationChannel:
    """Return a fresh channel for ``label``.

    Raises:
        InvalidChannelError: if ``label`` is not Email or SMS (any case).
    """
    channel_type = ChannelType.from_label(label)
    return CHANNEL_FACTORIES[channel_type].create_channel(console)


__all__ = [
    "ChannelType",
    "ChannelFactory",
    "EmailChannelFactory",
    "SMSChannelFactory",
    "CHANNEL_FACTORIES",
    "resolve_channel",
]
