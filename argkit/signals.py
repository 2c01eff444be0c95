# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the parsing engine.

Help and version requests stop a parse without being failures. They are raised as
signals so the caller decides whether to print and exit, and so the engine itself
never terminates the process.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Help was requested (`-h`, `--help` or a `help` action).
- VersionSignal: A `version` action was triggered.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argkit.parser.parser_config import ParserConfig


class FlowSignal(BaseException):
    """Base class for all flow control signals in argkit.

    These are not errors. They end a parse early on behalf of the user.
    """


class HelpSignal(FlowSignal):
    """Raised when help output was requested."""

    def __init__(
        self, config: ParserConfig, message: str = "Help signal received."
    ) -> None:
        super().__init__(message)
        self.config = config


class VersionSignal(FlowSignal):
    """Raised when a version action was triggered."""

    def __init__(self, version: str) -> None:
        super().__init__(version)
        self.version = version
