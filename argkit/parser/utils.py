# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Ready-made converters for the `convert` option of an argument.

A converter receives the consumed value: a single token for plain `store`/`append`
and `nargs='?'`, or the whole list of tokens for list quantifiers. Use
`convert_each` to apply a per-token converter to a list.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- enum_converter: Build a converter bound to one Enum type.
- coerce_datetime: Parse a date/time string with dateutil.
- convert_each: Lift a converter to work on every element of a list.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum, EnumMeta
from typing import Any, Callable

from dateutil import parser as date_parser


def coerce_bool(value: str | bool) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true', 'yes', '1', 'on' and 'false', 'no', '0', 'off' in any case.

    Raises:
        ValueError: For any other string.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "y", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, then by value coerced to the members' value type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def enum_converter(enum_type: type[Enum]) -> Callable[[Any], Any]:
    """Return a converter that resolves tokens to members of `enum_type`."""

    def _convert(value: Any) -> Any:
        return coerce_enum(value, enum_type)

    _convert.__name__ = enum_type.__name__
    return _convert


def coerce_datetime(value: str) -> datetime:
    """Parse a date/time string in any format dateutil understands."""
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error


def convert_each(converter: Callable[[Any], Any]) -> Callable[[list[Any]], list[Any]]:
    """Return a converter applying `converter` to every element of a list."""

    def _convert(values: list[Any]) -> list[Any]:
        return [converter(value) for value in values]

    _convert.__name__ = f"each_{getattr(converter, '__name__', 'value')}"
    return _convert
