"""Façade publique pour l'envoi de notifications et les abonnements.

L'envoi et les abonnements sont deux flux indépendants : ``send_notification``
affiche le message via le canal résolu et ne déclenche jamais les abonnés.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

from notification_facade.notifications.factory import resolve_channel
from notification_facade.notifications.observers import Listener, User
from notification_facade.notifications.registry import SubscriptionRegistry
from notification_facade.services.config_schema import NotificationConfig

logger = logging.getLogger(__name__)


class NotificationFacade:
    """Point d'entrée unique : sélection du canal et registre d'abonnés."""

    def __init__(
        self,
        registry: Optional[SubscriptionRegistry] = None,
        console: Optional[Console] = None,
    ):
        self._registry = registry if registry is not None else SubscriptionRegistry()
        self.console = console or Console()

    @property
    def registry(self) -> SubscriptionRegistry:
        return self._registry

    def subscribe(self, channel_label: str, listener: Listener) -> None:
        # Clé brute, pas de normalisation de casse à ce niveau
        self._registry.subscribe(channel_label, listener)

    def send_notification(self, channel_label: str, subject: str, message: str) -> None:
        """Render ``subject``/``message`` on the channel named ``channel_label``.

        Raises:
            InvalidChannelError: before any output, if the label is unknown.
        """
        channel = resolve_channel(channel_label, self.console)
        logger.debug("Sending notification via %s", channel.name)
        channel.render(subject, message)


def build_facade(
    config: NotificationConfig, console: Optional[Console] = None
) -> NotificationFacade:
    """Compose a facade with one ``User`` per configured subscriber."""
    facade = NotificationFacade(SubscriptionRegistry(), console)
    for subscriber in config.subscribers:
        facade.subscribe(subscriber.channel, User(subscriber.name, facade.console))
    return facade


__all__ = ["NotificationFacade", "build_facade"]
