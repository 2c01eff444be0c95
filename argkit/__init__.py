"""
Argkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .definitions import load_definitions
from .exceptions import (
    ArgkitError,
    ArgumentParseError,
    DuplicateKeyError,
    ErrorKind,
    InvalidChoiceError,
    InvalidValueError,
    MissingRequiredArgumentsError,
    MissingValueError,
    ParserConfigError,
    UnexpectedPositionalError,
    UnknownArgumentError,
)
from .outcome import Err, Exit, Ok, ParseOutcome, try_parse
from .parser import ArgumentAction, ArgumentParser, ArgumentSpec, ParserConfig, parse
from .signals import FlowSignal, HelpSignal, VersionSignal
from .utils import setup_logging
from .version import __version__

logger = logging.getLogger("argkit")


__all__ = [
    "ArgumentAction",
    "ArgumentParser",
    "ArgumentSpec",
    "ParserConfig",
    "parse",
    "try_parse",
    "load_definitions",
    "setup_logging",
    "Ok",
    "Err",
    "Exit",
    "ParseOutcome",
    "ErrorKind",
    "ArgkitError",
    "ArgumentParseError",
    "ParserConfigError",
    "UnknownArgumentError",
    "UnexpectedPositionalError",
    "DuplicateKeyError",
    "MissingRequiredArgumentsError",
    "MissingValueError",
    "InvalidValueError",
    "InvalidChoiceError",
    "FlowSignal",
    "HelpSignal",
    "VersionSignal",
    "__version__",
]
