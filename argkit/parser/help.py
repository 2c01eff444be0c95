# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage line and help listing for a `ParserConfig`, printed through Rich.

The listing is deliberately plain: description, usage, positionals, options and
epilog. `format_help` renders the same output without styling for callers that
want a string.
"""
from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.markup import escape

from argkit.console import console as default_console
from argkit.parser.argument import ArgumentSpec
from argkit.parser.nargs import ONE_OR_MORE, OPTIONAL, REMAINDER, ZERO_OR_MORE
from argkit.parser.parser_config import ParserConfig
from argkit.themes import get_theme
from argkit.utils import get_program_invocation


def get_metavar(spec: ArgumentSpec, positional: bool = False) -> str:
    """Name shown for the value(s) of an argument."""
    if spec.metavar:
        return spec.metavar
    if spec.choices:
        return f"{{{','.join(str(choice) for choice in spec.choices)}}}"
    key = spec.key or spec.flags[0]
    return key if positional else key.upper()


def get_choice_text(spec: ArgumentSpec, positional: bool = False) -> str:
    """Value placeholder for an argument, shaped by its quantifier."""
    if not spec.action.consumes_values:
        return ""
    metavar = get_metavar(spec, positional)
    if spec.nargs == OPTIONAL:
        return f"[{metavar}]"
    elif spec.nargs == ZERO_OR_MORE:
        return f"[{metavar} ...]"
    elif spec.nargs == ONE_OR_MORE:
        return f"{metavar} [{metavar} ...]"
    elif spec.nargs == REMAINDER:
        return "..."
    elif isinstance(spec.nargs, int):
        return " ".join([metavar] * spec.nargs)
    return metavar


def get_usage(config: ParserConfig) -> str:
    """Render the one-line usage string for a config."""
    program = config.prog or get_program_invocation()
    parts = [program]
    if config.add_help:
        parts.append(f"[{config.help_flags[0]}]")
    for spec in config.flags:
        choice_text = get_choice_text(spec)
        flag = spec.flags[0]
        text = f"{flag} {choice_text}" if choice_text else flag
        parts.append(text if spec.required else f"[{text}]")
    for spec in config.positionals:
        parts.append(get_choice_text(spec, positional=True))
    return " ".join(part for part in parts if part)


def _print_row(console: Console, label: str, help_text: str) -> None:
    arg_line = f"  {label:<30} "
    if help_text and len(label) > 30:
        help_text = f"\n{'':<33}{help_text}"
    console.print(f"{escape(arg_line)}{escape(help_text)}".rstrip())


def render_help(config: ParserConfig, console: Console | None = None) -> None:
    """
    Print formatted help text for a config using Rich output.

    Includes description, usage, positional and option listings, and the epilog.
    """
    console = console or default_console
    if config.description:
        console.print(escape(config.description) + "\n")
    console.print(f"[usage]usage: {escape(get_usage(config))}[/usage]\n")

    if config.positionals:
        console.print("[heading]positional:[/heading]")
        for spec in config.positionals:
            _print_row(console, get_metavar(spec, positional=True), spec.help)

    options: list[tuple[str, str]] = []
    if config.add_help:
        options.append((", ".join(config.help_flags), "Show this help message."))
    for spec in config.flags:
        flags = ", ".join(spec.flags)
        choice_text = get_choice_text(spec)
        options.append((f"{flags} {choice_text}".strip(), spec.help))
    if options:
        console.print("[heading]options:[/heading]")
        for label, help_text in options:
            _print_row(console, label, help_text)

    if config.epilog:
        console.print("\n" + escape(config.epilog), style="hint")


def format_help(config: ParserConfig, width: int = 100) -> str:
    """Return the help listing as plain text."""
    buffer = StringIO()
    plain = Console(
        file=buffer,
        width=width,
        color_system=None,
        highlight=False,
        theme=get_theme(),
    )
    render_help(config, plain)
    return buffer.getvalue()
