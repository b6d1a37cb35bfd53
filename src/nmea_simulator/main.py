"""CLI startup entrypoint for the NMEA simulator."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from nmea_simulator.adapters import (
    Device,
    DeviceName,
    EchoDevice,
    SerialResponseReader,
    TransportError,
    UnsupportedBaudRateError,
    open_device,
    validate_baud_rate,
)
from nmea_simulator.config import settings
from nmea_simulator.errors import ConfigLoadError
from nmea_simulator.loader import load
from nmea_simulator.models import ResolvedConfig
from nmea_simulator.registry import MESSAGE_REGISTRY
from nmea_simulator.sender import send_rounds
from nmea_simulator.telemetry import configure_logging

app = typer.Typer(help="NMEA Simulator: send NMEA 2000 messages described by a TOML test config")


def _build_device(interface: str) -> Device:
    if settings.transport_backend.lower() == "echo":
        return EchoDevice()
    return open_device(
        interface,
        name=DeviceName(unique_number=settings.unique_number),
        module_name=settings.transport_module,
    )


def _load_or_exit(config_file: Path) -> ResolvedConfig:
    try:
        return load(config_file)
    except ConfigLoadError as exc:
        print({"error": f"Error reading config file: {exc}"})
        raise typer.Exit(code=1)


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, help="Logging level")) -> None:
    configure_logging(log_level)


@app.command()
def run(
    config_file: Path = typer.Option(..., "--config", "-C", help="Path to test config file"),
    can_interface: str = typer.Option(
        settings.can_interface, "--can", "-c", help="CAN interface to connect to NMEA2000 network"
    ),
    serial_port: str = typer.Option(None, "--serial", "-s", help="Serial port to read responses from"),
    baud: int = typer.Option(settings.serial_baud, "--baud", "-b", help="Baud rate for serial port"),
) -> None:
    """Send every configured message, one round per message index."""
    try:
        validate_baud_rate(baud)
    except UnsupportedBaudRateError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    config = _load_or_exit(config_file)

    with ExitStack() as stack:
        try:
            device = _build_device(can_interface)
            responses = None
            if serial_port:
                responses = stack.enter_context(SerialResponseReader(port=serial_port, baud=baud))
            send_rounds(device, config, responses=responses, console=Console())
        except (TransportError, OSError) as exc:
            print({"error": str(exc)})
            raise typer.Exit(code=1)


@app.command()
def check(config_file: Path = typer.Option(..., "--config", "-C", help="Path to test config file")) -> None:
    """Validate a config file and summarize the messages it produces."""
    config = _load_or_exit(config_file)

    table = Table(title=str(config_file))
    table.add_column("PGN", justify="right")
    table.add_column("Message")
    table.add_column("Count", justify="right")
    for pgn, messages in config.messages.items():
        table.add_row(str(pgn), type(messages[0]).__name__, str(len(messages)))
    Console().print(table)
    print({"pgns": len(config.messages), "messages": config.message_count, "rounds": config.round_count})


@app.command()
def pgns() -> None:
    """List the PGNs that can be configured and their fields."""
    for pgn, descriptor in sorted(MESSAGE_REGISTRY.items()):
        print({"pgn": int(pgn), "message": descriptor.factory.__name__, "fields": list(descriptor.fields)})


if __name__ == "__main__":
    app()
