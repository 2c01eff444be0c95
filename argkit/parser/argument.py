# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentSpec` dataclass, the declarative description of one argument.

A spec is either a positional (a single symbolic name) or a flag (one or more
aliases such as `-v` and `--verbose`). Whether a spec is positional is decided by
the list it is placed in on the `ParserConfig`.

Key Attributes:
- `flags`: The positional name, or the flag aliases.
- `action`: `ArgumentAction` describing what a match does.
- `nargs`: Quantifier (`int`, `'?'`, `'*'`, `'+'`, `'...'`).
- `convert`: Callable applied to the consumed value (a list for list quantifiers).
- `const`: Constant for `store_const`/`append_const` and empty `'?'` matches.
- `choices`: Allowed values, if restricted.
- `required`: Explicit required marker; `None` lets the config decide.
- `key`: Explicit result key; derived from the flags when omitted.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from argkit.exceptions import ParserConfigError
from argkit.parser.argument_action import ArgumentAction
from argkit.parser.nargs import Nargs, normalize_nargs


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Represents one declared argument.

    Attributes:
        flags (tuple[str, ...]): Positional name or flag aliases.
        action (ArgumentAction): What to do when the argument matches.
        nargs (int | str | None): How many tokens one occurrence consumes.
        convert (Callable | None): Converter for the consumed value.
        const (Any): Constant used by const actions and empty '?' matches.
        choices (tuple | None): Allowed values.
        required (bool | None): Whether the argument must be supplied.
        default (Any): Value used when the argument never matched.
        help (str): Help text.
        metavar (str | None): Display name in help output.
        key (str | None): Result key, derived from the flags when omitted.
        version (str | None): Version string for the `version` action.
    """

    flags: tuple[str, ...]
    action: ArgumentAction = ArgumentAction.STORE
    nargs: Nargs = None
    convert: Callable[[Any], Any] | None = None
    const: Any = None
    choices: tuple[Any, ...] | None = None
    required: bool | None = None
    default: Any = None
    help: str = ""
    metavar: str | None = None
    key: str | None = None
    version: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", self._normalize_flags(self.flags))
        object.__setattr__(self, "action", self._normalize_action(self.action))
        nargs = normalize_nargs(self.nargs)
        if nargs is not None and not self.action.consumes_values:
            raise ParserConfigError(
                f"nargs cannot be specified for {self.action} actions"
            )
        object.__setattr__(self, "nargs", nargs)
        object.__setattr__(self, "choices", self._normalize_choices(self.choices))

        if self.convert is not None and not callable(self.convert):
            raise ParserConfigError(f"convert must be callable, got {self.convert!r}")
        if self.required and self.action in (
            ArgumentAction.STORE_TRUE,
            ArgumentAction.STORE_FALSE,
            ArgumentAction.HELP,
            ArgumentAction.VERSION,
        ):
            raise ParserConfigError(
                f"Argument with action {self.action} cannot be required"
            )
        if self.default is not None and self.action in (
            ArgumentAction.STORE_TRUE,
            ArgumentAction.STORE_FALSE,
        ):
            raise ParserConfigError(
                f"Default value cannot be set for action {self.action}. "
                "It is a boolean flag."
            )
        if self.key is not None and (not isinstance(self.key, str) or not self.key):
            raise ParserConfigError("key must be a non-empty string")
        if self.action == ArgumentAction.APPEND_CONST and self.key is None:
            raise ParserConfigError(
                f"append_const argument {self.flags[0]!r} needs an explicit key"
            )
        if self.action == ArgumentAction.VERSION and not self.version:
            raise ParserConfigError(
                f"version argument {self.flags[0]!r} needs a version string"
            )

    @staticmethod
    def _normalize_flags(flags: str | Iterable[str]) -> tuple[str, ...]:
        if isinstance(flags, str):
            flags = (flags,)
        flags = tuple(flags)
        if not flags:
            raise ParserConfigError("No flags provided")
        for flag in flags:
            if not isinstance(flag, str) or not flag:
                raise ParserConfigError(f"Flag {flag!r} must be a non-empty string")
        return flags

    @staticmethod
    def _normalize_action(action: ArgumentAction | str) -> ArgumentAction:
        if isinstance(action, ArgumentAction):
            return action
        try:
            return ArgumentAction(action)
        except ValueError as error:
            raise ParserConfigError(str(error)) from error

    def _normalize_choices(
        self, choices: Iterable[Any] | None
    ) -> tuple[Any, ...] | None:
        if choices is None:
            return None
        if not self.action.consumes_values:
            raise ParserConfigError(f"choices cannot be specified for {self.action} actions")
        if isinstance(choices, (dict, str)):
            raise ParserConfigError("choices must be a list, tuple or set of values")
        try:
            return tuple(choices)
        except TypeError as error:
            raise ParserConfigError(
                "choices must be iterable (like list, tuple, or set)"
            ) from error


def derive_key(spec: ArgumentSpec, prefix_char: str = "-") -> str:
    """
    Return the result key of a spec.

    An explicit `key` wins. Otherwise the longest name is used with its leading
    prefix characters stripped, so `("-v", "--verbose")` maps to `verbose` and a
    positional `files` maps to `files`.
    """
    if spec.key:
        return spec.key
    longest = max(spec.flags, key=len)
    key = longest.lstrip(prefix_char)
    if not key:
        raise ParserConfigError(f"Cannot derive a key from {spec.flags!r}")
    return key
