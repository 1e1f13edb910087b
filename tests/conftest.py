"""Global fixtures and pytest configuration.

- Provides a rich Console writing to an in-memory buffer
- Provides recording listeners for registry tests
- Exposes a shared CliRunner for CLI tests
"""

import io

import pytest
import yaml
from rich.console import Console
from typer.testing import CliRunner

from notification_facade.notifications.registry import SubscriptionRegistry
from notification_facade.services.config_schema import NotificationConfig


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Ignore any NOTIFICATION_CONFIG set in the developer environment."""
    monkeypatch.delenv("NOTIFICATION_CONFIG", raising=False)


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    """Console capturing output verbatim in ``buffer``."""
    return Console(file=buffer, width=80, color_system=None)


@pytest.fixture
def registry():
    return SubscriptionRegistry()


class RecordingListener:
    """Listener appending ``(name, subject, message)`` to a shared log."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def receive(self, subject, message):
        self.log.append((self.name, subject, message))


@pytest.fixture
def make_listener():
    log = []

    def factory(name):
        return RecordingListener(name, log)

    factory.log = log
    return factory


@pytest.fixture
def default_config():
    return NotificationConfig()


@pytest.fixture
def config_file(tmp_path):
    """YAML configuration file with two custom subscribers."""
    path = tmp_path / "notifications_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "subscribers": [
                    {"name": "Alice", "channel": "email"},
                    {"name": "Bob", "channel": "SMS"},
                ]
            },
            f,
        )
    return str(path)


@pytest.fixture
def cli_runner():
    return CliRunner()
