"""Transport adapters (NMEA 2000 network, NMEA 0183 serial responses)."""

from .nmea2000 import (
    ClaimError,
    ConnectError,
    Device,
    DeviceName,
    EchoDevice,
    SendError,
    TransportError,
    TransportUnavailableError,
    open_device,
)
from .serial_port import (
    ResponseSource,
    SerialPortError,
    SerialResponseReader,
    UnsupportedBaudRateError,
    validate_baud_rate,
)

__all__ = [
    "ClaimError",
    "ConnectError",
    "Device",
    "DeviceName",
    "EchoDevice",
    "ResponseSource",
    "SendError",
    "SerialPortError",
    "SerialResponseReader",
    "TransportError",
    "TransportUnavailableError",
    "UnsupportedBaudRateError",
    "open_device",
    "validate_baud_rate",
]
