"""NMEA 2000 message variants that can be driven from a test config."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import ClassVar


class Pgn(IntEnum):
    """Parameter group numbers of the messages this simulator can build."""

    COG_SOG = 127250
    TEMPERATURE = 130312


class CogReference(IntEnum):
    TRUE = 0
    MAGNETIC = 1
    ERROR = 2
    NULL = 3


class TemperatureSource(IntEnum):
    SEA = 0
    OUTSIDE = 1
    INSIDE = 2
    ENGINE_ROOM = 3
    MAIN_CABIN = 4
    LIVE_WELL = 5
    BAIT_WELL = 6
    REFRIGERATION = 7
    HEATING_SYSTEM = 8
    DEW_POINT = 9
    APPARENT_WIND_CHILL = 10
    THEORETICAL_WIND_CHILL = 11
    HEAT_INDEX = 12
    FREEZER = 13
    EXHAUST_GAS = 14


@dataclass(slots=True)
class CogSog:
    """Course and speed over ground."""

    pgn: ClassVar[int] = Pgn.COG_SOG

    sid: int = 0
    cog_reference: CogReference = CogReference.TRUE
    cog: float = 0.0
    sog: float = 0.0


@dataclass(slots=True)
class Temperature:
    """Measured and set temperature for one sensor instance."""

    pgn: ClassVar[int] = Pgn.TEMPERATURE

    sid: int = 0
    instance: int = 0
    source: TemperatureSource = TemperatureSource.SEA
    actual_temperature: float = 0.0
    set_temperature: float = 0.0


NmeaMessage = CogSog | Temperature


def format_message(message: NmeaMessage) -> str:
    """Render a message as a single human-readable line."""
    parts = []
    for item in fields(message):
        value = getattr(message, item.name)
        if isinstance(value, IntEnum):
            value = value.name
        parts.append(f"{item.name}={value}")
    return f"[{message.pgn}] {type(message).__name__} " + " ".join(parts)
