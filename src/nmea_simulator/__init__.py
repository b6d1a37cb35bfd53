"""Send NMEA 2000 messages described by a TOML test config."""

from nmea_simulator.errors import (
    ArrayLengthMismatchError,
    ConfigFileError,
    ConfigLoadError,
    ConfigSyntaxError,
    FieldTypeError,
    FieldTypeMismatch,
    UnknownFieldError,
)
from nmea_simulator.loader import compile_document, load, loads
from nmea_simulator.messages import CogReference, CogSog, NmeaMessage, Pgn, Temperature, TemperatureSource
from nmea_simulator.models import ResolvedConfig
from nmea_simulator.registry import MESSAGE_REGISTRY, MessageDescriptor, lookup

__version__ = "0.1.0"

__all__ = [
    "ArrayLengthMismatchError",
    "CogReference",
    "CogSog",
    "ConfigFileError",
    "ConfigLoadError",
    "ConfigSyntaxError",
    "FieldTypeError",
    "FieldTypeMismatch",
    "MESSAGE_REGISTRY",
    "MessageDescriptor",
    "NmeaMessage",
    "Pgn",
    "ResolvedConfig",
    "Temperature",
    "TemperatureSource",
    "UnknownFieldError",
    "compile_document",
    "load",
    "loads",
    "lookup",
]
