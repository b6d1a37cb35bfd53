"""Read-only serial port used to capture NMEA 0183 output from the device under test."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import serial

SUPPORTED_BAUD_RATES = (4800, 9600, 19200, 38400, 57600, 115200)
_READ_CHUNK = 256
_READ_TIMEOUT_SECONDS = 0.5

logger = logging.getLogger("nmea_simulator.adapters.serial_port")


class UnsupportedBaudRateError(ValueError):
    """Raised for baud rates the serial reader does not configure."""


class SerialPortError(OSError):
    """Raised when the serial port cannot be opened or read."""


class ResponseSource(Protocol):
    """Anything that can return the text received since the last call."""

    def read_available(self) -> str:
        """Drain and return pending text without blocking indefinitely."""


def validate_baud_rate(baud: int) -> int:
    if baud not in SUPPORTED_BAUD_RATES:
        raise UnsupportedBaudRateError(f"Unsupported baud rate: {baud}")
    return baud


@dataclass(slots=True)
class SerialResponseReader:
    """Read-only serial reader with a short per-read timeout."""

    port: str
    baud: int = 4800
    _serial: Any = field(default=None, init=False, repr=False)

    def open(self) -> SerialResponseReader:
        validate_baud_rate(self.baud)
        try:
            self._serial = serial.Serial(self.port, baudrate=self.baud, timeout=_READ_TIMEOUT_SECONDS)
        except serial.SerialException as exc:
            raise SerialPortError(f"Failed to open '{self.port}': {exc}") from exc

        logger.info("serial_opened", extra={"port": self.port, "baud": self.baud})
        return self

    def read_available(self) -> str:
        if self._serial is None:
            raise SerialPortError(f"Serial port '{self.port}' is not open")

        chunks: list[bytes] = []
        try:
            while chunk := self._serial.read(_READ_CHUNK):
                chunks.append(chunk)
        except serial.SerialException as exc:
            raise SerialPortError(f"Failed to read '{self.port}': {exc}") from exc
        return b"".join(chunks).decode("ascii", errors="replace")

    def close(self) -> None:
        if self._serial is not None:
            self._serial.close()
            self._serial = None

    def __enter__(self) -> SerialResponseReader:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()
