# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The parse loop and the final required-argument check.

`parse` reads the token stream left to right. Each head token is routed to:
- help, when automatic help is on and the token is `-h` or `--help`
  (a bundle containing `h`, such as `-vh`, also requests help),
- a long flag (`--name`), resolved through `match_flag`,
- a short flag or bundle (`-v`, `-abc`), expanded through `expand_aliases`,
- otherwise the next positional spec, in declaration order.

Every step returns a new `(tokens, values)` pair; nothing is mutated in place, so
the same config and tokens always produce the same result.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Sequence

from argkit.exceptions import MissingRequiredArgumentsError, UnexpectedPositionalError
from argkit.logger import logger
from argkit.parser.actions import Values, apply_action
from argkit.parser.argument import ArgumentSpec
from argkit.parser.argument_action import ArgumentAction
from argkit.parser.matcher import expand_aliases, match_flag
from argkit.parser.nargs import is_list_valued
from argkit.parser.parser_config import ParserConfig
from argkit.signals import HelpSignal


def resolve_default(spec: ArgumentSpec) -> Any:
    """Get the value used for an argument that never matched."""
    if spec.default is not None:
        return deepcopy(spec.default)
    if spec.action == ArgumentAction.STORE_TRUE:
        return False
    elif spec.action == ArgumentAction.STORE_FALSE:
        return True
    elif spec.action == ArgumentAction.COUNT:
        return 0
    elif spec.action in (ArgumentAction.APPEND, ArgumentAction.APPEND_CONST):
        return []
    elif is_list_valued(spec.nargs) and spec.convert is None:
        return []
    return None


def validate(values: Values, config: ParserConfig) -> Values:
    """
    Check required arguments and fill in defaults for the rest.

    Raises:
        MissingRequiredArgumentsError: Naming every required key that is absent.
    """
    specs = [spec for spec in config.arguments if not spec.action.exits]
    missing: list[str] = []
    for spec in specs:
        assert spec.key is not None
        if spec.required and spec.key not in values and spec.key not in missing:
            missing.append(spec.key)
    if missing:
        raise MissingRequiredArgumentsError(missing)

    result = dict(values)
    for spec in specs:
        assert spec.key is not None
        if spec.key not in result:
            result[spec.key] = resolve_default(spec)
    return result


def parse(tokens: Sequence[str], config: ParserConfig) -> dict[str, Any]:
    """
    Parse a token list into a mapping of key to value.

    Args:
        tokens: Raw tokens, usually `sys.argv[1:]`.
        config: The parser configuration.

    Returns:
        dict[str, Any]: One entry per declared key (absent optional arguments hold
        their defaults), plus any flags accepted in non-strict mode.

    Raises:
        ArgumentParseError: A subclass describing the first problem found.
        HelpSignal: Help was requested.
        VersionSignal: A version action matched.
    """
    remaining: tuple[str, ...] = tuple(tokens)
    values: Values = {}
    position = 0
    prefix = config.prefix_char

    while remaining:
        token, rest = remaining[0], remaining[1:]
        if config.is_help_token(token):
            logger.debug("Help requested by '%s'", token)
            raise HelpSignal(config)
        if token.startswith(prefix * 2):
            spec = match_flag(token, config)
            logger.debug("Long flag '%s' -> '%s'", token, spec.key)
            remaining, values = apply_action(spec, rest, values, config)
        elif len(token) > 1 and token.startswith(prefix):
            logger.debug("Short flag bundle '%s'", token)
            remaining, values = expand_aliases(token[1:], rest, values, config)
        else:
            if position >= len(config.positionals):
                raise UnexpectedPositionalError(token)
            spec = config.positionals[position]
            logger.debug("Positional '%s' -> '%s'", token, spec.key)
            remaining, values = apply_action(spec, remaining, values, config)
            position += 1

    return validate(values, config)
