"""Per-PGN message descriptors and the typed field setters behind them.

Each registered PGN maps to a :class:`MessageDescriptor` that knows how to
build a blank message and which named fields a config section may fill in.
The registry is intentionally partial: PGNs without a descriptor are simply
not simulated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Callable, Mapping

from nmea_simulator.errors import FieldTypeMismatch
from nmea_simulator.messages import CogReference, CogSog, NmeaMessage, Temperature, TemperatureSource

Converter = Callable[[Any], Any]


def _describe(raw: Any) -> str:
    return f"{type(raw).__name__} {raw!r}"


def _to_float(raw: Any) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise FieldTypeMismatch("float", _describe(raw))
    return float(raw)


def _unsigned(bits: int) -> Converter:
    limit = (1 << bits) - 1
    expected = f"uint{bits}"

    def convert(raw: Any) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw <= limit:
            raise FieldTypeMismatch(expected, _describe(raw))
        return raw

    return convert


def _enumerant(enum_type: type[IntEnum]) -> Converter:
    def convert(raw: Any) -> IntEnum:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise FieldTypeMismatch(enum_type.__name__, _describe(raw))
        try:
            return enum_type(raw)
        except ValueError:
            raise FieldTypeMismatch(enum_type.__name__, _describe(raw)) from None

    return convert


@dataclass(frozen=True, slots=True)
class FieldSetter:
    """Writes one named attribute of a message after converting the raw value."""

    attribute: str
    convert: Converter

    def apply(self, message: NmeaMessage, raw: Any) -> None:
        """Store ``raw`` on ``message``; the message is untouched on failure."""
        value = self.convert(raw)
        setattr(message, self.attribute, value)


def float_field(attribute: str) -> FieldSetter:
    return FieldSetter(attribute, _to_float)


def uint_field(attribute: str, bits: int = 8) -> FieldSetter:
    return FieldSetter(attribute, _unsigned(bits))


def enum_field(attribute: str, enum_type: type[IntEnum]) -> FieldSetter:
    return FieldSetter(attribute, _enumerant(enum_type))


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """Factory for one message variant plus the fields a config may set."""

    factory: Callable[[], NmeaMessage]
    fields: Mapping[str, FieldSetter]

    @classmethod
    def of(cls, message_type: Callable[[], NmeaMessage], *setters: FieldSetter) -> MessageDescriptor:
        return cls(
            factory=message_type,
            fields=MappingProxyType({setter.attribute: setter for setter in setters}),
        )

    def setter(self, field_name: str) -> FieldSetter | None:
        return self.fields.get(field_name)


MESSAGE_REGISTRY: Mapping[int, MessageDescriptor] = MappingProxyType(
    {
        CogSog.pgn: MessageDescriptor.of(
            CogSog,
            uint_field("sid"),
            enum_field("cog_reference", CogReference),
            float_field("cog"),
            float_field("sog"),
        ),
        Temperature.pgn: MessageDescriptor.of(
            Temperature,
            uint_field("sid"),
            uint_field("instance"),
            enum_field("source", TemperatureSource),
            float_field("actual_temperature"),
            float_field("set_temperature"),
        ),
    }
)


def lookup(pgn: int, registry: Mapping[int, MessageDescriptor] = MESSAGE_REGISTRY) -> MessageDescriptor | None:
    """Return the descriptor registered for ``pgn``, or ``None`` when unknown."""
    return registry.get(pgn)
