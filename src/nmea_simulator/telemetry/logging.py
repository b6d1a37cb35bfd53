"""Logging setup for the command-line entrypoint."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO", console: Console | None = None) -> None:
    """Route ``nmea_simulator`` loggers to a rich handler on stderr."""
    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("nmea_simulator")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
