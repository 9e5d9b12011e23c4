"""Error types raised by the field-selection core.

Each fatal condition has its own class so the CLI (and tests) can tell them apart.
"""

from __future__ import annotations


class NcutError(Exception):
    """Base class for every fatal ncut error."""


class SelectionError(NcutError, ValueError):
    """No selection mode, or more than one, was requested."""


class ConfigError(NcutError, ValueError):
    """The configuration file could not be read or has unexpected content."""


class InvalidFieldSpec(NcutError, ValueError):
    def __init__(self, token: str, reason: str | None = None) -> None:
        self.token = token
        self.reason = reason or "invalid field list"
        super().__init__(f"{self.reason}: '{token}'")


class FileOpenError(NcutError):
    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause.strerror or cause}")


class LineReadError(NcutError):
    def __init__(self, line_number: int, cause: Exception) -> None:
        self.line_number = line_number
        self.cause = cause
        super().__init__(f"read failed at line {line_number}: {cause}")


class FieldCountMismatch(NcutError):
    def __init__(self, line_number: int | None, expected: int, actual: int) -> None:
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"{where} has {actual} fields, expected at least {expected}")
