"""Configuration service for the demo subscribers."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from .config_schema import NotificationConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "notifications_config.yaml"
CONFIG_PATH_ENV = "NOTIFICATION_CONFIG"


class ConfigService:
    """Load the notification configuration from an optional YAML file."""

    def __init__(self, path: Optional[str] = None):
        self._path = Path(path or os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)

    def load_config(self) -> NotificationConfig:
        """
        Load and validate configuration, falling back to the defaults when
        the file does not exist.
        """
        path = self._path.absolute()
        if not path.exists():
            logger.debug("No configuration at %s, using defaults", path)
            return NotificationConfig()
        logger.debug("Loading configuration from %s", path)
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        return NotificationConfig.model_validate(raw)
