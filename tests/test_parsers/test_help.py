from io import StringIO

from rich.console import Console

from argkit.parser import ArgumentSpec, ParserConfig
from argkit.parser.help import (
    format_help,
    get_choice_text,
    get_metavar,
    get_usage,
    render_help,
)
from argkit.themes import get_theme


def build_config(**kwargs):
    return ParserConfig(
        flags=[
            ArgumentSpec(("-v", "--verbose"), action="count", help="More output."),
            ArgumentSpec(("--mode",), choices=["fast", "slow"], help="Run mode."),
            ArgumentSpec(("--out",), metavar="FILE", required=True),
            ArgumentSpec(("--point",), nargs=2),
        ],
        positionals=[
            ArgumentSpec("source", help="Where to read from."),
            ArgumentSpec("rest", nargs="*"),
        ],
        prog="tool",
        **kwargs,
    )


def test_get_metavar():
    config = build_config()
    verbose, mode, out, point = config.flags
    assert get_metavar(point) == "POINT"
    assert get_metavar(mode) == "{fast,slow}"
    assert get_metavar(out) == "FILE"
    assert get_metavar(config.positionals[0], positional=True) == "source"


def test_get_choice_text_by_quantifier():
    assert get_choice_text(ArgumentSpec(("--x",), key="x")) == "X"
    assert get_choice_text(ArgumentSpec(("--x",), key="x", nargs="?")) == "[X]"
    assert get_choice_text(ArgumentSpec(("--x",), key="x", nargs="*")) == "[X ...]"
    assert get_choice_text(ArgumentSpec(("--x",), key="x", nargs="+")) == "X [X ...]"
    assert get_choice_text(ArgumentSpec(("--x",), key="x", nargs="...")) == "..."
    assert get_choice_text(ArgumentSpec(("--x",), key="x", nargs=3)) == "X X X"
    assert get_choice_text(ArgumentSpec(("--x",), action="store_true")) == ""


def test_get_usage():
    assert get_usage(build_config()) == (
        "tool [-h] [-v] [--mode {fast,slow}] --out FILE [--point POINT POINT] "
        "source [rest ...]"
    )


def test_get_usage_without_help():
    config = ParserConfig(add_help=False, prog="tool", positionals=())
    assert get_usage(config) == "tool"


def test_format_help():
    text = format_help(build_config(description="Copy things.", epilog="See docs."))
    assert text.startswith("Copy things.\n")
    assert "usage: tool [-h]" in text
    assert "positional:" in text
    assert "Where to read from." in text
    assert "options:" in text
    assert "-h, --help" in text
    assert "-v, --verbose" in text
    assert "More output." in text
    assert "--mode {fast,slow}" in text
    assert text.rstrip().endswith("See docs.")
    assert "\x1b[" not in text


def test_format_help_custom_prefix():
    config = ParserConfig(prefix_char="+", prog="tool", positionals=())
    text = format_help(config)
    assert "usage: tool [+h]" in text
    assert "+h, ++help" in text


def test_render_help_to_console():
    buffer = StringIO()
    console = Console(file=buffer, width=100, color_system=None, theme=get_theme())
    render_help(build_config(), console)
    assert "usage: tool" in buffer.getvalue()


def test_long_labels_wrap_help_text():
    config = ParserConfig(
        flags=[
            ArgumentSpec(
                ("--an-extremely-long-flag-name",), help="Described below."
            )
        ],
        positionals=(),
    )
    lines = format_help(config).splitlines()
    options_index = next(
        index for index, line in enumerate(lines) if line.strip() == "options:"
    )
    label_index = next(
        index
        for index, line in enumerate(lines)
        if index > options_index and "--an-extremely-long" in line
    )
    assert lines[label_index + 1].strip() == "Described below."
