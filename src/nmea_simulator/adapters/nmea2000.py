"""NMEA 2000 transport boundary.

Connecting to the CAN bus, the address-claim handshake and wire encoding are
provided by an external transport module resolved at runtime. That module
must expose ``connect(interface)`` returning a :class:`Device`.
"""

from __future__ import annotations

import asyncio
import importlib
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Protocol

from nmea_simulator.messages import NmeaMessage, format_message

ACTISENSE_MANUFACTURER_CODE = 273
ATMOSPHERIC_DEVICE_FUNCTION = 130
MARINE_INDUSTRY_GROUP = 4

logger = logging.getLogger("nmea_simulator.adapters.nmea2000")


class TransportError(RuntimeError):
    """Base class for NMEA 2000 transport failures."""


class TransportUnavailableError(TransportError):
    """Raised when the transport module cannot be imported or has no ``connect``."""


class ConnectError(TransportError):
    """Raised when the CAN interface cannot be opened."""


class ClaimError(TransportError):
    """Raised when the address claim handshake fails."""


class SendError(TransportError):
    """Raised by a device when a message cannot be transmitted."""


@dataclass(slots=True)
class DeviceName:
    """ISO 11783 NAME announced during address claim."""

    unique_number: int = 120
    manufacturer_code: int = ACTISENSE_MANUFACTURER_CODE
    device_instance_lower: int = 0
    device_instance_upper: int = 0
    device_function: int = ATMOSPHERIC_DEVICE_FUNCTION
    system_instance: int = 0
    industry_group: int = MARINE_INDUSTRY_GROUP
    arbitrary_address_capable: bool = True


class Device(Protocol):
    """A claimed (or claimable) node on the NMEA 2000 network."""

    def claim(self, name: DeviceName) -> Awaitable[None] | None:
        """Start the address claim; may return an awaitable that completes it."""

    def send(self, message: NmeaMessage) -> None:
        """Encode and transmit one message, raising :class:`SendError` on failure."""


def _resolve_connect(module_name: str) -> Callable[[str], Device]:
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise TransportUnavailableError(
            f"Unable to import NMEA 2000 transport module '{module_name}'."
        ) from exc

    connect = getattr(module, "connect", None)
    if not callable(connect):
        raise TransportUnavailableError(f"Transport module '{module_name}' has no connect(interface) function.")
    return connect


async def _await(pending: Awaitable[Any]) -> Any:
    return await pending


def open_device(interface: str, *, name: DeviceName | None = None, module_name: str = "nmea2000") -> Device:
    """Connect to ``interface`` and claim an address before returning the device."""
    connect = _resolve_connect(module_name)
    try:
        device = connect(interface)
    except Exception as exc:  # noqa: BLE001 - transport modules raise their own error types.
        raise ConnectError(f"Error on connection: {exc}") from exc

    claim_name = name or DeviceName()
    try:
        pending = device.claim(claim_name)
        if inspect.isawaitable(pending):
            asyncio.run(_await(pending))
    except Exception as exc:  # noqa: BLE001
        raise ClaimError(f"Failed to claim address: {exc}") from exc

    logger.info(
        "device_claimed",
        extra={"interface": interface, "transport_module": module_name, "unique_number": claim_name.unique_number},
    )
    return device


@dataclass(slots=True)
class EchoDevice:
    """Device that only records and logs what it would transmit."""

    sent: list[NmeaMessage] = field(default_factory=list)
    name: DeviceName | None = None

    def claim(self, name: DeviceName) -> None:
        self.name = name

    def send(self, message: NmeaMessage) -> None:
        self.sent.append(message)
        logger.debug("echo_send", extra={"nmea_message": format_message(message)})
