"""Round-robin transmission of a resolved config."""

from __future__ import annotations

import logging

from rich.console import Console

from nmea_simulator.adapters.nmea2000 import Device, SendError
from nmea_simulator.adapters.serial_port import ResponseSource
from nmea_simulator.messages import format_message
from nmea_simulator.models import ResolvedConfig

logger = logging.getLogger("nmea_simulator.sender")


class MessageSendError(SendError):
    """A device send failure tagged with the PGN that was being sent."""

    def __init__(self, pgn: int, cause: Exception) -> None:
        self.pgn = pgn
        super().__init__(f"[{pgn}] send error: {cause}")


def send_rounds(
    device: Device,
    config: ResolvedConfig,
    *,
    responses: ResponseSource | None = None,
    console: Console | None = None,
) -> int:
    """Send message ``i`` of every PGN in round ``i`` and return how many were sent.

    PGNs with fewer messages than the longest sequence are skipped in the
    later rounds. When ``responses`` is given, the serial output received
    after each round is printed below the sent messages.
    """
    out = console or Console()
    sent = 0

    for index in range(config.round_count):
        out.rule(f"{index + 1:03}")
        out.rule("NMEA2000", characters="=")
        for pgn, message in config.round(index):
            try:
                device.send(message)
            except SendError as exc:
                logger.error("message_send_failed", extra={"pgn": pgn, "round": index + 1})
                raise MessageSendError(pgn, exc) from exc
            sent += 1
            logger.debug("message_sent", extra={"pgn": pgn, "round": index + 1})
            out.print(format_message(message), markup=False, highlight=False)

        if responses is not None:
            out.rule("NMEA0183", characters="=")
            text = responses.read_available()
            if text:
                out.print(text, end="", markup=False, highlight=False)
        out.rule(characters="=")
        out.print()

    logger.info("rounds_completed", extra={"rounds": config.round_count, "sent": sent})
    return sent
