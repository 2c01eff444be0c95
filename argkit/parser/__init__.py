"""
Argkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentSpec, derive_key
from .argument_action import ArgumentAction
from .argument_parser import ArgumentParser
from .dispatcher import parse, validate
from .nargs import ONE_OR_MORE, OPTIONAL, REMAINDER, ZERO_OR_MORE
from .parser_config import ParserConfig

__all__ = [
    "ArgumentAction",
    "ArgumentParser",
    "ArgumentSpec",
    "ParserConfig",
    "derive_key",
    "parse",
    "validate",
    "OPTIONAL",
    "ZERO_OR_MORE",
    "ONE_OR_MORE",
    "REMAINDER",
]
