"""CLI command for the notification facade."""

from __future__ import annotations

import typer
from rich.console import Console

from notification_facade.notifications.errors import InvalidChannelError
from notification_facade.services import ConfigService, build_facade

config_service = ConfigService()
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="notification-facade",
    help="Send a notification over the Email or SMS channel",
    add_completion=False,
    pretty_exceptions_enable=False,
)


# Subjects and messages may start with "-"
@app.command(context_settings={"ignore_unknown_options": True})
def send(
    channel: str = typer.Argument(..., help="Channel type: Email or SMS"),
    subject: str = typer.Argument(..., help="Notification subject"),
    message: str = typer.Argument(..., help="Notification message"),
) -> None:
    """Subscribe the configured users, then send SUBJECT/MESSAGE on CHANNEL."""
    facade = build_facade(config_service.load_config(), console)
    try:
        facade.send_notification(channel, subject, message)
    except InvalidChannelError as e:
        err_console.print(f"[ERROR] {e}", style="bold red", markup=False)
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
