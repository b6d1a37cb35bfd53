"""Resolved, immutable result of compiling a message config."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

from nmea_simulator.messages import NmeaMessage


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Validated messages to transmit, grouped by PGN in config order."""

    messages: Mapping[int, tuple[NmeaMessage, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_sections(cls, sections: Mapping[int, list[NmeaMessage]]) -> ResolvedConfig:
        return cls(messages=MappingProxyType({pgn: tuple(items) for pgn, items in sections.items()}))

    @property
    def round_count(self) -> int:
        """Length of the longest per-PGN sequence."""
        return max((len(items) for items in self.messages.values()), default=0)

    @property
    def message_count(self) -> int:
        return sum(len(items) for items in self.messages.values())

    def round(self, index: int) -> Iterator[tuple[int, NmeaMessage]]:
        """Yield ``(pgn, message)`` for every PGN that has an entry at ``index``."""
        for pgn, items in self.messages.items():
            if index < len(items):
                yield pgn, items[index]
