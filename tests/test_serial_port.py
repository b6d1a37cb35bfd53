from __future__ import annotations

import logging

import pytest
import serial

from nmea_simulator.adapters import serial_port
from nmea_simulator.adapters.serial_port import (
    SerialPortError,
    SerialResponseReader,
    UnsupportedBaudRateError,
    validate_baud_rate,
)


class _FakeSerial:
    instances: list[_FakeSerial] = []

    def __init__(self, port: str, baudrate: int, timeout: float) -> None:
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout
        self.pending = [b"$GPVTG,1.0,T", b"*00\r\n"]
        self.closed = False
        _FakeSerial.instances.append(self)

    def read(self, size: int) -> bytes:
        return self.pending.pop(0) if self.pending else b""

    def close(self) -> None:
        self.closed = True


class _BrokenSerial:
    def __init__(self, port: str, **kwargs) -> None:
        raise serial.SerialException(f"could not open port {port}")


@pytest.fixture()
def fake_serial(monkeypatch):
    _FakeSerial.instances = []
    monkeypatch.setattr(serial_port.serial, "Serial", _FakeSerial)
    return _FakeSerial


@pytest.mark.parametrize("baud", [4800, 9600, 19200, 38400, 57600, 115200])
def test_supported_baud_rates(baud: int) -> None:
    assert validate_baud_rate(baud) == baud


def test_unsupported_baud_rate() -> None:
    with pytest.raises(UnsupportedBaudRateError, match="Unsupported baud rate: 1200"):
        validate_baud_rate(1200)


def test_reader_drains_pending_text(fake_serial, caplog) -> None:
    caplog.set_level(logging.INFO, logger="nmea_simulator")

    with SerialResponseReader(port="/dev/ttyUSB0", baud=9600) as reader:
        assert reader.read_available() == "$GPVTG,1.0,T*00\r\n"
        assert reader.read_available() == ""

    port = fake_serial.instances[0]
    assert (port.port, port.baudrate, port.timeout) == ("/dev/ttyUSB0", 9600, 0.5)
    assert port.closed is True
    assert "serial_opened" in caplog.messages


def test_read_before_open_fails() -> None:
    reader = SerialResponseReader(port="/dev/ttyUSB0")

    with pytest.raises(SerialPortError):
        reader.read_available()


def test_open_failure_is_wrapped(monkeypatch) -> None:
    monkeypatch.setattr(serial_port.serial, "Serial", _BrokenSerial)
    reader = SerialResponseReader(port="/dev/ttyMissing")

    with pytest.raises(SerialPortError, match="Failed to open '/dev/ttyMissing'"):
        reader.open()
