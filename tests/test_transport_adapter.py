from __future__ import annotations

import logging
import sys
import types

import pytest

from nmea_simulator.adapters.nmea2000 import (
    ClaimError,
    ConnectError,
    DeviceName,
    TransportUnavailableError,
    open_device,
)


class _FakeDevice:
    def __init__(self, interface: str, claim_result=None) -> None:
        self.interface = interface
        self.claimed: list[DeviceName] = []
        self._claim_result = claim_result

    def claim(self, name: DeviceName):
        self.claimed.append(name)
        return self._claim_result

    def send(self, message) -> None:
        return None


@pytest.fixture(autouse=True)
def _info_logging(caplog):
    caplog.set_level(logging.INFO, logger="nmea_simulator")
    return caplog


def _install_module(monkeypatch, connect) -> None:
    module = types.SimpleNamespace(connect=connect)
    monkeypatch.setitem(sys.modules, "fake_nmea2000", module)


def test_open_device_connects_and_claims(monkeypatch) -> None:
    _install_module(monkeypatch, lambda interface: _FakeDevice(interface))

    device = open_device("vcan0", module_name="fake_nmea2000")

    assert device.interface == "vcan0"
    assert device.claimed == [DeviceName()]
    assert device.claimed[0].unique_number == 120


def test_open_device_awaits_async_claim(monkeypatch) -> None:
    finished: list[bool] = []

    async def _claim() -> None:
        finished.append(True)

    _install_module(monkeypatch, lambda interface: _FakeDevice(interface, claim_result=_claim()))

    open_device("vcan0", module_name="fake_nmea2000")

    assert finished == [True]


def test_open_device_wraps_connect_failure(monkeypatch) -> None:
    def _connect(interface: str):
        raise OSError("no such device")

    _install_module(monkeypatch, _connect)

    with pytest.raises(ConnectError, match="Error on connection: no such device"):
        open_device("can9", module_name="fake_nmea2000")


def test_open_device_wraps_claim_failure(monkeypatch) -> None:
    async def _claim() -> None:
        raise RuntimeError("address lost")

    _install_module(monkeypatch, lambda interface: _FakeDevice(interface, claim_result=_claim()))

    with pytest.raises(ClaimError, match="Failed to claim address: address lost"):
        open_device("vcan0", module_name="fake_nmea2000")


def test_missing_transport_module(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "fake_nmea2000", None)

    with pytest.raises(TransportUnavailableError):
        open_device("vcan0", module_name="fake_nmea2000")


def test_transport_module_without_connect(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "fake_nmea2000", types.SimpleNamespace())

    with pytest.raises(TransportUnavailableError):
        open_device("vcan0", module_name="fake_nmea2000")


def test_open_device_logs_claim(monkeypatch, caplog) -> None:
    _install_module(monkeypatch, lambda interface: _FakeDevice(interface))

    open_device("vcan0", module_name="fake_nmea2000")

    record = next(r for r in caplog.records if r.getMessage() == "device_claimed")
    assert record.interface == "vcan0"
    assert record.transport_module == "fake_nmea2000"
    assert record.unique_number == 120
