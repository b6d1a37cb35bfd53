from __future__ import annotations

import io

import pytest
from rich.console import Console

from nmea_simulator.adapters import EchoDevice, SendError
from nmea_simulator.loader import compile_document
from nmea_simulator.messages import CogSog, Temperature
from nmea_simulator.sender import MessageSendError, send_rounds


class StubResponses:
    def __init__(self, chunks: list[str]) -> None:
        self.chunks = chunks

    def read_available(self) -> str:
        return self.chunks.pop(0) if self.chunks else ""


class FailingDevice:
    def claim(self, name) -> None:
        return None

    def send(self, message) -> None:
        raise SendError("bus off")


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=100, color_system=None), buffer


def _config():
    return compile_document(
        {
            "127250": {"cog": [1.0, 2.0, 3.0]},
            "130312": {"instance": [5]},
        }
    )


def test_rounds_interleave_pgns_and_skip_exhausted_sequences() -> None:
    device = EchoDevice()
    console, _ = _console()

    sent = send_rounds(device, _config(), console=console)

    assert sent == 4
    assert device.sent == [
        CogSog(cog=1.0),
        Temperature(instance=5),
        CogSog(cog=2.0),
        CogSog(cog=3.0),
    ]


def test_rounds_print_banners_messages_and_responses() -> None:
    console, buffer = _console()
    responses = StubResponses(["$GPVTG,1.0,T*00\r\n", ""])

    send_rounds(EchoDevice(), compile_document({"127250": {"cog": [1.0, 2.0]}}), responses=responses, console=console)

    output = buffer.getvalue()
    assert "001" in output and "002" in output
    assert "NMEA2000" in output
    assert "NMEA0183" in output
    assert "$GPVTG,1.0,T*00" in output
    assert "[127250] CogSog" in output


def test_send_failure_names_pgn() -> None:
    console, _ = _console()

    with pytest.raises(MessageSendError) as excinfo:
        send_rounds(FailingDevice(), _config(), console=console)

    assert excinfo.value.pgn == 127250
    assert str(excinfo.value) == "[127250] send error: bus off"


def test_empty_config_sends_nothing() -> None:
    console, buffer = _console()

    assert send_rounds(EchoDevice(), compile_document({}), console=console) == 0
    assert buffer.getvalue() == ""
