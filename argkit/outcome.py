# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tagged parse outcomes for callers that prefer values over exceptions.

`try_parse` never raises for bad input or for help/version requests:

    match try_parse(tokens, config):
        case Ok(values):
            run(values)
        case Err(kind, message):
            report(kind, message)
        case Exit(message):
            print(message)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from argkit.exceptions import ArgumentParseError, ErrorKind
from argkit.parser.dispatcher import parse
from argkit.parser.help import format_help
from argkit.parser.parser_config import ParserConfig
from argkit.signals import HelpSignal, VersionSignal


@dataclass(frozen=True)
class Ok:
    """The token list parsed cleanly."""

    values: dict[str, Any]


@dataclass(frozen=True)
class Err:
    """The token list was rejected."""

    kind: ErrorKind
    message: str
    error: ArgumentParseError


@dataclass(frozen=True)
class Exit:
    """Help or version output was requested instead of a parse."""

    message: str


ParseOutcome = Ok | Err | Exit


def try_parse(tokens: Sequence[str], config: ParserConfig) -> ParseOutcome:
    """Parse `tokens` and wrap the result, the failure or the exit request."""
    try:
        return Ok(parse(tokens, config))
    except ArgumentParseError as error:
        return Err(error.kind, str(error), error)
    except HelpSignal as signal:
        return Exit(format_help(signal.config))
    except VersionSignal as signal:
        return Exit(signal.version)
