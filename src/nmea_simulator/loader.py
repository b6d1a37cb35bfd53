"""Compile a TOML test config into per-PGN message sequences.

The document uses a column-array layout: each top-level key is a decimal PGN
and each array under it holds one field's value for every message to send.
Index ``i`` across all arrays of a section forms message ``i``::

    [127250]
    cog = [1.2, 3.4]
    sog = [5.6, 7.8]
    cog_reference = [0, 0]

Keys that are not PGNs, PGNs without a registered descriptor, non-table
values and sections without arrays are skipped. Any other problem aborts the
whole load.
"""

from __future__ import annotations

import logging
import re
import tomllib
from pathlib import Path
from typing import Any, Mapping

from nmea_simulator.errors import (
    ArrayLengthMismatchError,
    ConfigFileError,
    ConfigSyntaxError,
    FieldTypeError,
    FieldTypeMismatch,
    UnknownFieldError,
)
from nmea_simulator.messages import NmeaMessage
from nmea_simulator.models import ResolvedConfig
from nmea_simulator.registry import MESSAGE_REGISTRY, MessageDescriptor, lookup

_PGN_RE = re.compile(r"[0-9]+")
_POSITION_RE = re.compile(r"^(?P<description>.*?)\s*\(at line (?P<line>\d+), column (?P<column>\d+)\)$", re.DOTALL)
_MAX_PGN = 0xFFFFFFFF

logger = logging.getLogger("nmea_simulator.loader")

ColumnArrays = list[tuple[str, list[Any]]]


def parse_pgn(key: str) -> int | None:
    """Return ``key`` as an unsigned 32-bit PGN, or ``None`` if it is not one."""
    if not _PGN_RE.fullmatch(key):
        return None
    value = int(key)
    if value > _MAX_PGN:
        return None
    return value


def collect_arrays(section: Mapping[str, Any]) -> ColumnArrays:
    """Return the array-valued children of a section in document order."""
    return [(name, value) for name, value in section.items() if isinstance(value, list)]


def compile_table(descriptor: MessageDescriptor, arrays: ColumnArrays, pgn: int) -> list[NmeaMessage]:
    """Transpose the column arrays of one section into row messages."""
    count = len(arrays[0][1])
    if any(len(column) != count for _, column in arrays):
        raise ArrayLengthMismatchError(pgn)

    messages: list[NmeaMessage] = []
    for index in range(count):
        message = descriptor.factory()
        for field_name, column in arrays:
            setter = descriptor.setter(field_name)
            if setter is None:
                raise UnknownFieldError(pgn, field_name)
            try:
                setter.apply(message, column[index])
            except FieldTypeMismatch as exc:
                raise FieldTypeError(pgn, field_name, exc) from exc
        messages.append(message)
    return messages


def compile_document(
    document: Mapping[str, Any],
    registry: Mapping[int, MessageDescriptor] = MESSAGE_REGISTRY,
) -> ResolvedConfig:
    """Compile every message section of a parsed document."""
    sections: dict[int, list[NmeaMessage]] = {}

    for key, node in document.items():
        pgn = parse_pgn(key)
        if pgn is None:
            continue

        descriptor = lookup(pgn, registry)
        if descriptor is None:
            logger.debug("section_skipped", extra={"key": key, "reason": "unregistered_pgn"})
            continue

        if not isinstance(node, dict):
            logger.debug("section_skipped", extra={"key": key, "reason": "not_a_table"})
            continue

        arrays = collect_arrays(node)
        if not arrays:
            logger.debug("section_skipped", extra={"key": key, "reason": "no_arrays"})
            continue

        messages = compile_table(descriptor, arrays, pgn)
        if messages:
            sections.setdefault(pgn, []).extend(messages)

    config = ResolvedConfig.from_sections(sections)
    logger.info(
        "config_compiled",
        extra={"pgns": sorted(config.messages), "message_count": config.message_count},
    )
    return config


def _syntax_error(exc: tomllib.TOMLDecodeError, text: str) -> ConfigSyntaxError:
    line = getattr(exc, "lineno", None)
    column = getattr(exc, "colno", None)
    if line is not None and column is not None:
        return ConfigSyntaxError(line, column, getattr(exc, "msg", str(exc)))

    message = str(exc)
    match = _POSITION_RE.match(message)
    if match:
        return ConfigSyntaxError(int(match.group("line")), int(match.group("column")), match.group("description"))

    # tomllib reports "(at end of document)" without a position.
    description = message.replace("(at end of document)", "").strip()
    line = text.count("\n") + 1
    column = len(text) - text.rfind("\n")
    return ConfigSyntaxError(line, column, description)


def loads(text: str, registry: Mapping[int, MessageDescriptor] = MESSAGE_REGISTRY) -> ResolvedConfig:
    """Parse and compile a config document held in memory."""
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise _syntax_error(exc, text) from exc
    return compile_document(document, registry)


def load(path: str | Path, registry: Mapping[int, MessageDescriptor] = MESSAGE_REGISTRY) -> ResolvedConfig:
    """Read, parse and compile the config file at ``path``."""
    target = Path(path).expanduser()
    try:
        text = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileError(f"File could not be opened for reading: {target} ({exc})") from exc

    logger.info("config_loading", extra={"path": str(target)})
    return loads(text, registry)
