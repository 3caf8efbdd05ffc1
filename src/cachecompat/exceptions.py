"""Exceptions raised while loading a cache-compatibility test input.

All loader errors are fatal to the current test run. Malformed input is a
configuration defect, so none of these are retried.

Hierarchy:
    TestInputError (ValueError)
    ├── MalformedInputError   - text is not valid JSON
    ├── MissingFieldError     - required field absent or empty
    └── TypeMismatchError     - field has the wrong type or shape
    InputFileError (OSError)  - input file could not be read
"""

from __future__ import annotations

__all__ = [
    "InputFileError",
    "MalformedInputError",
    "MissingFieldError",
    "TestInputError",
    "TypeMismatchError",
]


class TestInputError(ValueError):
    """Base class for test input errors."""

    __test__ = False


class MalformedInputError(TestInputError):
    """Raised when the input text is not syntactically valid JSON.

    Attributes:
        line: 1-based line of the parse failure.
        column: 1-based column of the parse failure.
        position: 0-based character offset of the parse failure.
    """

    def __init__(self, message: str, line: int, column: int, position: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column
        self.position = position


class _FieldError(TestInputError):
    """Error tied to one field of the input, identified by its wire path."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(_FieldError):
    """Raised when a required field is absent or empty."""


class TypeMismatchError(_FieldError):
    """Raised when a field's value does not match its expected type."""


class InputFileError(OSError):
    """Raised when the input file cannot be read."""
