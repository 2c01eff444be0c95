# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argkit.

Configuration problems are reported while a `ParserConfig` is being built, parse
problems while a token list is being consumed. Every parse error carries an
`ErrorKind` tag so callers can branch on the failure without string matching.

All exceptions inherit from `ArgkitError`, the base exception for the package.

Exception Hierarchy:
- ArgkitError
    ├── ParserConfigError
    └── ArgumentParseError
        ├── UnknownArgumentError
        │   └── UnexpectedPositionalError
        ├── DuplicateKeyError
        ├── MissingRequiredArgumentsError
        ├── MissingValueError
        ├── InvalidValueError
        └── InvalidChoiceError
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Sequence


class ErrorKind(Enum):
    """Tags for the closed set of parse failures."""

    UNKNOWN_ARGUMENT = "unknown_argument"
    DUPLICATE_KEY = "duplicate_key"
    MISSING_REQUIRED = "missing_required"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"
    INVALID_CHOICE = "invalid_choice"

    def __str__(self) -> str:
        return self.value


class ArgkitError(Exception):
    """Base exception for argkit."""


class ParserConfigError(ArgkitError):
    """Exception raised when an argument or parser definition is invalid."""


class ArgumentParseError(ArgkitError):
    """Exception raised when a token list does not satisfy the parser config."""

    kind: ErrorKind


class UnknownArgumentError(ArgumentParseError):
    """Exception raised when a flag matches no known argument in strict mode."""

    kind = ErrorKind.UNKNOWN_ARGUMENT

    def __init__(
        self, token: str, suggestions: Sequence[str] = (), message: str | None = None
    ) -> None:
        super().__init__(message or f"invalid argument: {token}")
        self.token = token
        self.suggestions = list(suggestions)


class UnexpectedPositionalError(UnknownArgumentError):
    """Exception raised when a positional token is left over."""

    def __init__(self, token: str) -> None:
        super().__init__(token, message=f"unexpected positional argument: {token}")


class DuplicateKeyError(ArgumentParseError):
    """Exception raised when a non-accumulating argument is given twice."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: str) -> None:
        super().__init__(f"duplicate key {key}")
        self.key = key


class MissingRequiredArgumentsError(ArgumentParseError):
    """Exception raised when required arguments were never supplied."""

    kind = ErrorKind.MISSING_REQUIRED

    def __init__(self, keys: Sequence[str]) -> None:
        super().__init__(f"Missing required args: [{', '.join(keys)}]")
        self.keys = list(keys)


class MissingValueError(ArgumentParseError):
    """Exception raised when an argument cannot find the values it needs."""

    kind = ErrorKind.MISSING_VALUE

    def __init__(self, key: str, message: str = "Missing value") -> None:
        super().__init__(message)
        self.key = key


class InvalidValueError(ArgumentParseError):
    """Exception raised when a converter rejects a value."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, key: str, error: Exception) -> None:
        super().__init__(f"invalid value for '{key}': {error}")
        self.key = key


class InvalidChoiceError(ArgumentParseError):
    """Exception raised when a value is not one of the allowed choices."""

    kind = ErrorKind.INVALID_CHOICE

    def __init__(self, key: str, value: Any, choices: Sequence[Any]) -> None:
        allowed = ", ".join(str(choice) for choice in choices)
        super().__init__(
            f"invalid choice for '{key}': {value!r} (choose from {{{allowed}}})"
        )
        self.key = key
        self.value = value
        self.choices = list(choices)
