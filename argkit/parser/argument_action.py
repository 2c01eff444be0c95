# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentAction`, the enum naming what happens when an argument matches.

Each member maps to one branch of the action executor. Aliases make config-friendly
spellings resolve to the canonical member.

Example:
    ArgumentAction("store_true") → ArgumentAction.STORE_TRUE
    ArgumentAction("true")       → ArgumentAction.STORE_TRUE (via alias)
    ArgumentAction("const")      → ArgumentAction.STORE_CONST
"""
from __future__ import annotations

from enum import Enum


class ArgumentAction(Enum):
    """
    Defines the action to be taken when the argument is encountered.

    Members:
        STORE: Store the consumed value (default).
        STORE_CONST: Store the configured constant.
        STORE_TRUE: Store `True` if the flag is present.
        STORE_FALSE: Store `False` if the flag is present.
        APPEND: Append the consumed value to a list.
        APPEND_CONST: Append the configured constant to a list under its own key.
        COUNT: Count the number of occurrences.
        HELP: Request help output.
        VERSION: Request the configured version string.

    Aliases:
        - "true" → "store_true"
        - "false" → "store_false"
        - "const" → "store_const"
    """

    STORE = "store"
    STORE_CONST = "store_const"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"
    APPEND = "append"
    APPEND_CONST = "append_const"
    COUNT = "count"
    HELP = "help"
    VERSION = "version"

    @classmethod
    def choices(cls) -> list[ArgumentAction]:
        """Return a list of all argument actions."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "true": "store_true",
            "false": "store_false",
            "const": "store_const",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def accumulates(self) -> bool:
        """Whether repeated matches add to the previous value instead of failing."""
        return self in (
            ArgumentAction.APPEND,
            ArgumentAction.APPEND_CONST,
            ArgumentAction.COUNT,
        )

    @property
    def consumes_values(self) -> bool:
        """Whether the action reads values from the token stream."""
        return self in (ArgumentAction.STORE, ArgumentAction.APPEND)

    @property
    def exits(self) -> bool:
        return self in (ArgumentAction.HELP, ArgumentAction.VERSION)

    def __str__(self) -> str:
        """Return the string representation of the argument action."""
        return self.value
