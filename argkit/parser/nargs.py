# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Quantifier handling: how many tokens one occurrence of an argument consumes.

Quantifiers:
- `n` (positive int): exactly `n` tokens.
- `OPTIONAL` ("?"): one token unless the stream is empty or the next token is a flag.
- `ZERO_OR_MORE` ("*"): every token up to the next flag.
- `ONE_OR_MORE` ("+"): like "*" but at least one token.
- `REMAINDER` ("..."): everything that is left, flags included.
"""
from __future__ import annotations

from typing import Sequence

from argkit.exceptions import MissingValueError, ParserConfigError

OPTIONAL = "?"
ZERO_OR_MORE = "*"
ONE_OR_MORE = "+"
REMAINDER = "..."

NARGS_SYMBOLS = (OPTIONAL, ZERO_OR_MORE, ONE_OR_MORE, REMAINDER)

Nargs = int | str | None


def normalize_nargs(nargs: Nargs) -> Nargs:
    """Validate a quantifier and return its canonical form."""
    if nargs is None:
        return None
    if isinstance(nargs, bool):
        raise ParserConfigError(f"nargs must be an int or one of {NARGS_SYMBOLS}")
    if isinstance(nargs, int):
        if nargs <= 0:
            raise ParserConfigError("nargs must be a positive integer")
        return nargs
    if isinstance(nargs, str):
        if nargs.strip().lower() == "remainder":
            return REMAINDER
        if nargs not in NARGS_SYMBOLS:
            raise ParserConfigError(f"Invalid nargs value: {nargs}")
        return nargs
    raise ParserConfigError(f"nargs must be an int or one of {NARGS_SYMBOLS}")


def is_list_valued(nargs: Nargs) -> bool:
    """Whether the quantifier always produces a list of tokens."""
    return isinstance(nargs, int) or nargs in (ZERO_OR_MORE, ONE_OR_MORE, REMAINDER)


def looks_like_flag(token: str, prefix_char: str) -> bool:
    """A token looks like a flag if it is the prefix plus at least one character."""
    return len(token) > 1 and token.startswith(prefix_char)


def _split_before_flag(
    tokens: Sequence[str], prefix_char: str
) -> tuple[list[str], tuple[str, ...]]:
    index = 0
    while index < len(tokens) and not looks_like_flag(tokens[index], prefix_char):
        index += 1
    return list(tokens[:index]), tuple(tokens[index:])


def resolve_nargs(
    nargs: Nargs,
    tokens: Sequence[str],
    prefix_char: str = "-",
    key: str = "",
) -> tuple[list[str] | str | None, tuple[str, ...]]:
    """
    Split the tokens belonging to one argument off the front of the stream.

    Args:
        nargs: The argument's quantifier (must not be None).
        tokens: The remaining token stream.
        prefix_char: Character that introduces flags.
        key: Key of the argument being filled, used in error reports.

    Returns:
        The consumed value and the remaining stream. `OPTIONAL` yields a single
        token or `None` when nothing was consumed; every other quantifier yields
        a list.

    Raises:
        MissingValueError: If fewer than `n` tokens remain for an exact count or
            no token is available for `ONE_OR_MORE`.
    """
    if isinstance(nargs, int):
        if len(tokens) < nargs:
            raise MissingValueError(
                key, f"Expected {nargs} values for '{key}', got {len(tokens)}"
            )
        return list(tokens[:nargs]), tuple(tokens[nargs:])
    if nargs == REMAINDER:
        return list(tokens), ()
    if nargs == ZERO_OR_MORE:
        return _split_before_flag(tokens, prefix_char)
    if nargs == ONE_OR_MORE:
        values, rest = _split_before_flag(tokens, prefix_char)
        if not values:
            raise MissingValueError(key)
        return values, rest
    if nargs == OPTIONAL:
        if not tokens or looks_like_flag(tokens[0], prefix_char):
            return None, tuple(tokens)
        return tokens[0], tuple(tokens[1:])
    raise ValueError(f"Invalid nargs value: {nargs!r}")
