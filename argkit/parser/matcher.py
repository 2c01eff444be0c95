# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flag resolution and POSIX-style bundling of single-character flags.

`match_flag` turns a flag token into its `ArgumentSpec`. In non-strict mode an
unknown flag becomes an ad hoc `store` spec keyed by the flag text, unless that
key belongs to a declared argument.

`expand_aliases` applies a bundle such as `-abc` one character at a time against
the shared token stream, so `-ab VALUE` behaves like `-a -b VALUE`.
"""
from __future__ import annotations

from typing import Sequence

from argkit.exceptions import UnknownArgumentError
from argkit.logger import logger
from argkit.parser.actions import Tokens, Values, apply_action
from argkit.parser.argument import ArgumentSpec
from argkit.parser.parser_config import ParserConfig
from argkit.signals import HelpSignal


def suggest_flags(token: str, config: ParserConfig) -> list[str]:
    """Return the known flags that start with `token`."""
    return sorted(flag for flag in config.flag_map if flag.startswith(token))


def match_flag(token: str, config: ParserConfig) -> ArgumentSpec:
    """
    Resolve a flag token to its spec.

    Raises:
        UnknownArgumentError: The flag is unknown and the config is strict, or the
            flag is nothing but prefix characters, or in non-strict mode the flag
            would reuse the key of a declared argument.
    """
    spec = config.flag_map.get(token)
    if spec is not None:
        return spec
    key = token.lstrip(config.prefix_char)
    if config.strict or not key:
        raise UnknownArgumentError(token, suggest_flags(token, config))
    if any(declared.key == key for declared in config.arguments):
        raise UnknownArgumentError(
            token,
            suggest_flags(token, config),
            message=f"invalid argument: {token} (key '{key}' is already declared)",
        )
    logger.debug("Accepting unknown flag '%s' as '%s'", token, key)
    return ArgumentSpec((token,), key=key, required=False)


def expand_aliases(
    bundle: str,
    tokens: Sequence[str],
    values: Values,
    config: ParserConfig,
) -> tuple[Tokens, Values]:
    """
    Apply every single-character flag in `bundle`, left to right.

    Args:
        bundle: The characters after the prefix, e.g. `"abc"` for `-abc`.
        tokens: Tokens following the bundle token.
        values: Result mapping built so far.
        config: The active parser config.

    Raises:
        HelpSignal: The bundle contains the help character, as in `-vh`.
    """
    remaining = tuple(tokens)
    for char in bundle:
        flag = f"{config.prefix_char}{char}"
        if config.is_help_token(flag):
            raise HelpSignal(config)
        spec = match_flag(flag, config)
        remaining, values = apply_action(spec, remaining, values, config)
    return remaining, values
