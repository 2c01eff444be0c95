# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Applies one matched argument to the token stream and the result mapping.

`apply_action` never mutates its inputs: it returns the shortened token stream and
a new result mapping. Non-accumulating actions refuse to write a key that is
already present, which is how repeated `store` flags are rejected.
"""
from __future__ import annotations

from typing import Any, Sequence

from argkit.exceptions import (
    DuplicateKeyError,
    InvalidChoiceError,
    InvalidValueError,
    MissingValueError,
)
from argkit.parser.argument import ArgumentSpec
from argkit.parser.argument_action import ArgumentAction
from argkit.parser.nargs import resolve_nargs
from argkit.parser.parser_config import ParserConfig
from argkit.signals import HelpSignal, VersionSignal

Values = dict[str, Any]
Tokens = tuple[str, ...]


def _assoc(values: Values, key: str, value: Any) -> Values:
    return {**values, key: value}


def _convert(spec: ArgumentSpec, key: str, value: Any) -> Any:
    if spec.convert is None:
        return value
    try:
        return spec.convert(value)
    except (ValueError, TypeError) as error:
        raise InvalidValueError(key, error) from error


def _check_choices(spec: ArgumentSpec, key: str, value: Any) -> None:
    if spec.choices is None:
        return
    candidates = value if isinstance(value, (list, tuple)) else [value]
    for candidate in candidates:
        if candidate not in spec.choices:
            raise InvalidChoiceError(key, candidate, spec.choices)


def consume_value(
    spec: ArgumentSpec, tokens: Sequence[str], config: ParserConfig
) -> tuple[Any, Tokens]:
    """
    Read the value of a `store`/`append` argument from the front of the stream.

    Without a quantifier exactly one token is taken verbatim, even when it looks
    like a flag, so `--offset -5` stores `"-5"`.
    """
    key = spec.key or ""
    if spec.nargs is None:
        if not tokens:
            raise MissingValueError(key)
        value = _convert(spec, key, tokens[0])
        rest = tuple(tokens[1:])
    else:
        raw, rest = resolve_nargs(spec.nargs, tokens, config.prefix_char, key)
        if raw is None:
            return spec.const, rest
        value = _convert(spec, key, raw)
    _check_choices(spec, key, value)
    return value, rest


def apply_action(
    spec: ArgumentSpec,
    tokens: Sequence[str],
    values: Values,
    config: ParserConfig,
) -> tuple[Tokens, Values]:
    """
    Apply `spec` to the stream that follows its flag (or starts at its positional).

    Args:
        spec: The resolved argument spec.
        tokens: Remaining tokens after the flag itself.
        values: Result mapping built so far.
        config: The active parser config.

    Returns:
        The remaining tokens and the updated result mapping.

    Raises:
        DuplicateKeyError: A non-accumulating action targets a key already set.
        MissingValueError: Not enough tokens for the action.
        InvalidValueError: The converter rejected the value.
        InvalidChoiceError: The value is not one of the allowed choices.
        HelpSignal: For `help` actions.
        VersionSignal: For `version` actions.
    """
    action = spec.action
    key = spec.key
    assert key is not None, "specs must be resolved by ParserConfig"
    tokens = tuple(tokens)

    if action == ArgumentAction.HELP:
        raise HelpSignal(config)
    if action == ArgumentAction.VERSION:
        assert spec.version is not None, "version actions carry a version string"
        raise VersionSignal(spec.version)
    if not action.accumulates and key in values:
        raise DuplicateKeyError(key)

    if action == ArgumentAction.STORE:
        value, tokens = consume_value(spec, tokens, config)
        return tokens, _assoc(values, key, value)
    elif action == ArgumentAction.STORE_TRUE:
        return tokens, _assoc(values, key, True)
    elif action == ArgumentAction.STORE_FALSE:
        return tokens, _assoc(values, key, False)
    elif action == ArgumentAction.STORE_CONST:
        return tokens, _assoc(values, key, spec.const)
    elif action == ArgumentAction.APPEND:
        value, tokens = consume_value(spec, tokens, config)
        return tokens, _assoc(values, key, [*values.get(key, []), value])
    elif action == ArgumentAction.APPEND_CONST:
        return tokens, _assoc(values, key, [*values.get(key, []), spec.const])
    elif action == ArgumentAction.COUNT:
        return tokens, _assoc(values, key, values.get(key, 0) + 1)
    raise AssertionError(f"Unhandled action: {action}")
