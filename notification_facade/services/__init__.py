"""Entrypoint for services package."""

from notification_facade.services.config_service import ConfigService
from notification_facade.services.notification_service import (
    NotificationFacade,
    build_facade,
)

__all__ = ["ConfigService", "NotificationFacade", "build_facade"]
