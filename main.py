#!/usr/bin/env python3
"""Notification Facade CLI - Main entry point."""

import logging
import os
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

load_dotenv()
console = Console(stderr=True)


def setup_logging() -> None:
    """Send log records to stderr so stdout only carries notifications."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main():
    """Main entry point for the CLI application."""
    try:
        setup_logging()
        from notification_facade.presentation.cli.commands import app

        app()
    except KeyboardInterrupt:
        console.print("\nGoodbye!", style="yellow")
        sys.exit(0)
    except Exception as e:
        console.print(f"An error occurred: {e}", style="bold red", markup=False)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
