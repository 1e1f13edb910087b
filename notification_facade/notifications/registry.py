"""Subscription registry routing notifications to listeners by channel."""

from __future__ import annotations

import logging
import threading
from typing import Dict, List

from .observers import Listener

logger = logging.getLogger(__name__)


class SubscriptionRegistry:
    """Ordered listener lists keyed by the raw channel label.

    One instance is created by whoever composes the facade and passed
    around explicitly.
    """

    def __init__(self):
        self._subscribers: Dict[str, List[Listener]] = {}
        self._lock = threading.Lock()

    def subscribe(self, channel: str, listener: Listener) -> None:
        """Append ``listener`` to ``channel``. Duplicates are kept."""
        with self._lock:
            self._subscribers.setdefault(channel, []).append(listener)
        logger.debug("Subscribed %r to channel %r", listener, channel)

    def notify(self, channel: str, subject: str, message: str) -> None:
        """Call ``receive`` on every listener of ``channel``, in order."""
        listeners = self.subscribers(channel)
        logger.debug("Notifying %d listener(s) on channel %r", len(listeners), channel)
        for listener in listeners:
            listener.receive(subject, message)

    def subscribers(self, channel: str) -> List[Listener]:
        with self._lock:
            return list(self._subscribers.get(channel, []))

    def channels(self) -> List[str]:
        with self._lock:
            return [name for name, listeners in self._subscribers.items() if listeners]


__all__ = ["SubscriptionRegistry"]
