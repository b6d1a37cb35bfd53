"""Errors raised while loading a message config document."""

from __future__ import annotations


class ConfigLoadError(Exception):
    """Base class for every failure that aborts a config load."""


class ConfigFileError(ConfigLoadError):
    """Raised when the config file cannot be opened or decoded."""


class ConfigSyntaxError(ConfigLoadError):
    """Raised when the document is not valid TOML."""

    def __init__(self, line: int, column: int, description: str) -> None:
        self.line = line
        self.column = column
        self.description = description
        super().__init__(f"at ({line}:{column}) {description}")


class ArrayLengthMismatchError(ConfigLoadError):
    """Raised when the column arrays of one section differ in length."""

    def __init__(self, pgn: int) -> None:
        self.pgn = pgn
        super().__init__(f"[{pgn}] all fields must have the same length")


class UnknownFieldError(ConfigLoadError):
    """Raised when a section names a field its message type does not have."""

    def __init__(self, pgn: int, field_name: str) -> None:
        self.pgn = pgn
        self.field_name = field_name
        super().__init__(f"[{pgn}] unknown field '{field_name}'")


class FieldTypeMismatch(ValueError):
    """Raised by a field setter when a raw value cannot be stored in its field."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"type mismatch: expected {expected}, got {actual}")


class FieldTypeError(ConfigLoadError):
    """A :class:`FieldTypeMismatch` located at one field of one section."""

    def __init__(self, pgn: int, field_name: str, cause: FieldTypeMismatch) -> None:
        self.pgn = pgn
        self.field_name = field_name
        self.cause = cause
        super().__init__(f"[{pgn}]['{field_name}'] {cause}")
