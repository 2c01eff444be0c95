# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, an `argparse`-style builder around the
argkit parsing engine.

Arguments are registered one at a time with `add_argument()`. Every registration
rebuilds the immutable `ParserConfig`, so definition errors surface at the call
that introduced them rather than at parse time.

Public Interface:
- `add_argument(...)`: Register a positional or flag argument.
- `parse_args(...)`: Parse into a `dict[str, Any]`, raising on failure.
- `try_parse(...)`: Parse into an `Ok | Err | Exit` outcome.
- `parse_or_exit(...)`: Parse, or print a diagnostic and exit the process.
- `render_help()` / `format_help()`: Help listing, styled or plain.

Example Usage:
    parser = ArgumentParser(prog="deploy", description="Ship a build.")
    parser.add_argument("-v", "--verbose", action="count")
    parser.add_argument("--env", choices=["prod", "dev"], required=True)
    parser.add_argument("targets", nargs="+")

    args = parser.parse_args(["-vv", "--env", "prod", "web", "db"])

    # args == {'verbose': 2, 'env': 'prod', 'targets': ['web', 'db']}
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from argkit.console import console as default_console
from argkit.exceptions import ArgumentParseError, ParserConfigError, UnknownArgumentError
from argkit.logger import logger
from argkit.outcome import ParseOutcome, try_parse
from argkit.parser.argument import ArgumentSpec
from argkit.parser.argument_action import ArgumentAction
from argkit.parser.dispatcher import parse
from argkit.parser.help import format_help, get_usage, render_help
from argkit.parser.nargs import Nargs
from argkit.parser.parser_config import ParserConfig
from argkit.signals import HelpSignal, VersionSignal


class ArgumentParser:
    """
    Declarative argument parser.

    Features:
    - Positional and flag arguments, matched by declaration order and by alias.
    - store, store_const, store_true/false, append, append_const, count, help and
      version actions.
    - Quantifiers: exact counts, '?', '*', '+' and remainder.
    - POSIX-style bundling for single-character flags (`-abc`).
    - Strict or permissive handling of unknown flags.
    - Help rendering using the Rich library.
    """

    def __init__(
        self,
        description: str = "",
        epilog: str = "",
        prog: str | None = None,
        prefix_char: str = "-",
        add_help: bool = True,
        strict: bool = True,
        console: Console | None = None,
    ) -> None:
        """Initialize the ArgumentParser."""
        self.console: Console = console or default_console
        self._config: ParserConfig = ParserConfig(
            positionals=(),
            description=description,
            epilog=epilog,
            prefix_char=prefix_char,
            add_help=add_help,
            strict=strict,
            prog=prog,
        )

    @property
    def config(self) -> ParserConfig:
        """The immutable configuration built from the registered arguments."""
        return self._config

    def _is_positional(self, flags: tuple[str, ...]) -> bool:
        """Check if the flags are positional."""
        prefix = self._config.prefix_char
        positional = any(not flag.startswith(prefix) for flag in flags)
        if positional and len(flags) > 1:
            raise ParserConfigError("Positional arguments cannot have multiple flags")
        return positional

    def add_argument(
        self,
        *flags: str,
        action: str | ArgumentAction = "store",
        nargs: Nargs = None,
        convert: Callable[[Any], Any] | None = None,
        const: Any = None,
        choices: Iterable[Any] | None = None,
        required: bool | None = None,
        default: Any = None,
        help: str = "",
        metavar: str | None = None,
        key: str | None = None,
        version: str | None = None,
    ) -> ArgumentSpec:
        """
        Define a new argument for the parser.

        Args:
            *flags (str): The positional name, or the flag aliases (e.g. "-v", "--verbose").
            action (str | ArgumentAction): The argument action (default: "store").
            nargs (int | str | None): How many tokens one occurrence consumes.
            convert (Callable | None): Converter for the consumed value.
            const (Any): Constant for const actions and empty '?' matches.
            choices (Iterable | None): Optional set of allowed values.
            required (bool | None): Whether this argument is mandatory.
            default (Any): Value used when the argument is not provided.
            help (str): Help text for rendering in help output.
            metavar (str | None): Display name for the value in help output.
            key (str | None): Custom key in the result dict.
            version (str | None): Version string for the `version` action.

        Returns:
            ArgumentSpec: The registered spec, with its key and required marker resolved.
        """
        spec = ArgumentSpec(
            flags,
            action=action,
            nargs=nargs,
            convert=convert,
            const=const,
            choices=choices,
            required=required,
            default=default,
            help=help,
            metavar=metavar,
            key=key,
            version=version,
        )
        if self._is_positional(spec.flags):
            self._config = self._config.with_arguments(positionals=[spec])
            return self._config.positionals[-1]
        self._config = self._config.with_arguments(flags=[spec])
        return self._config.flags[-1]

    def get_argument(self, key: str) -> ArgumentSpec | None:
        """Return the spec registered under `key`, if any."""
        return next((spec for spec in self._config.arguments if spec.key == key), None)

    def parse_args(self, args: Sequence[str] | None = None) -> dict[str, Any]:
        """
        Parse arguments into a dictionary of values.

        Args:
            args (Sequence[str] | None): Tokens to parse; defaults to `sys.argv[1:]`.

        Raises:
            ArgumentParseError: On invalid input.
            HelpSignal / VersionSignal: When help or version output was requested.
        """
        if args is None:
            args = sys.argv[1:]
        return parse(args, self._config)

    def try_parse(self, args: Sequence[str] | None = None) -> ParseOutcome:
        """Parse arguments into an `Ok`, `Err` or `Exit` outcome."""
        if args is None:
            args = sys.argv[1:]
        return try_parse(args, self._config)

    def parse_or_exit(self, args: Sequence[str] | None = None) -> dict[str, Any]:
        """
        Parse arguments, or report the problem and exit.

        Help and version requests exit with status 0, invalid input with status 2.
        """
        try:
            return self.parse_args(args)
        except HelpSignal:
            self.render_help()
            sys.exit(0)
        except VersionSignal as signal:
            self.console.print(f"[version]{escape(signal.version)}[/version]")
            sys.exit(0)
        except ArgumentParseError as error:
            logger.debug("Argument parsing failed (%s): %s", error.kind, error)
            self.console.print(f"[usage]usage:[/usage] {escape(self.get_usage())}")
            self.console.print(f"[error]{escape(str(error))}[/error]")
            if isinstance(error, UnknownArgumentError) and error.suggestions:
                self.console.print(
                    f"[hint]Did you mean one of: {escape(', '.join(error.suggestions))}?[/hint]"
                )
            sys.exit(2)

    def get_usage(self) -> str:
        """Render the usage string for this parser."""
        return get_usage(self._config)

    def render_help(self) -> None:
        """Print formatted help text for this parser using Rich output."""
        render_help(self._config, self.console)

    def format_help(self) -> str:
        """Return the help text as a plain string."""
        return format_help(self._config)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        config = self._config
        required = sum(bool(spec.required) for spec in config.arguments)
        return (
            f"ArgumentParser(args={len(config.arguments)}, "
            f"flags={len(config.flag_map)}, positional={len(config.positionals)}, "
            f"required={required}, strict={config.strict})"
        )

    def __repr__(self) -> str:
        return str(self)
