import pytest

from argkit.exceptions import (
    DuplicateKeyError,
    MissingRequiredArgumentsError,
    MissingValueError,
    UnexpectedPositionalError,
    UnknownArgumentError,
)
from argkit.parser import ArgumentSpec, ParserConfig, parse
from argkit.signals import HelpSignal, VersionSignal


def test_empty_tokens_default_config():
    assert parse([], ParserConfig()) == {"args": []}


def test_zero_or_more_positional_without_flags():
    assert parse(["a", "b", "c"], ParserConfig()) == {"args": ["a", "b", "c"]}


@pytest.mark.parametrize("value", ["x", "hello world", "", "-5", "--not-a-flag"])
def test_store_returns_token_verbatim(value):
    config = ParserConfig(flags=[ArgumentSpec(("--name",))])
    assert parse(["--name", value], config)["name"] == value


@pytest.mark.parametrize("times", [1, 2, 5])
def test_count_repetitions(times):
    config = ParserConfig(flags=[ArgumentSpec(("-v", "--verbose"), action="count")])
    assert parse(["--verbose"] * times, config)["verbose"] == times
    assert parse(["-" + "v" * times], config)["verbose"] == times


def test_count_defaults_to_zero():
    config = ParserConfig(flags=[ArgumentSpec(("-v",), action="count")])
    assert parse([], config)["v"] == 0


@pytest.mark.parametrize("tokens", [["--files"], ["--files", "--other"]])
def test_one_or_more_missing_value(tokens):
    config = ParserConfig(
        flags=[
            ArgumentSpec(("--files",), nargs="+"),
            ArgumentSpec(("--other",), action="store_true"),
        ]
    )
    with pytest.raises(MissingValueError):
        parse(tokens, config)


def test_parse_is_repeatable():
    config = ParserConfig(
        flags=[
            ArgumentSpec(("-t", "--tag"), action="append"),
            ArgumentSpec(("-v",), action="count"),
        ],
        positionals=[ArgumentSpec("target")],
    )
    tokens = ["-v", "--tag", "a", "build", "-t", "b", "-vv"]
    first = parse(tokens, config)
    second = parse(tokens, config)
    assert first == second == {"tag": ["a", "b"], "v": 3, "target": "build"}
    assert tokens == ["-v", "--tag", "a", "build", "-t", "b", "-vv"]


def test_bundle_equals_separate_flags():
    config = ParserConfig(
        flags=[
            ArgumentSpec(("-a",), action="store_true"),
            ArgumentSpec(("-b",), nargs=1),
        ]
    )
    assert parse(["-ab", "X"], config) == parse(["-a", "-b", "X"], config)
    assert parse(["-ab", "X"], config) == {"a": True, "b": ["X"], "args": []}


def test_store_twice_is_duplicate():
    config = ParserConfig(flags=[ArgumentSpec(("--name",))])
    with pytest.raises(DuplicateKeyError) as excinfo:
        parse(["--name", "x", "--name", "y"], config)
    assert excinfo.value.key == "name"


def test_append_twice_keeps_encounter_order():
    config = ParserConfig(flags=[ArgumentSpec(("--name",), action="append")])
    assert parse(["--name", "x", "--name", "y"], config)["name"] == ["x", "y"]


def test_required_flag_missing_named_exactly():
    config = ParserConfig(
        flags=[
            ArgumentSpec(("--token",), required=True),
            ArgumentSpec(("--user",)),
            ArgumentSpec(("-q",), action="store_true"),
        ],
        positionals=[ArgumentSpec("path")],
    )
    with pytest.raises(MissingRequiredArgumentsError) as excinfo:
        parse(["--user", "me", "-q", "here"], config)
    assert excinfo.value.keys == ["token"]
    assert str(excinfo.value) == "Missing required args: [token]"


def test_missing_required_lists_positionals_first():
    config = ParserConfig(
        flags=[ArgumentSpec(("--token",), required=True)],
        positionals=[ArgumentSpec("source"), ArgumentSpec("dest")],
    )
    with pytest.raises(MissingRequiredArgumentsError) as excinfo:
        parse([], config)
    assert excinfo.value.keys == ["source", "dest", "token"]


def test_defaults_fill_absent_keys():
    config = ParserConfig(
        flags=[
            ArgumentSpec(("--yes",), action="store_true"),
            ArgumentSpec(("--no",), action="store_false"),
            ArgumentSpec(("--tag",), action="append"),
            ArgumentSpec(("--level",), action="store_const", const=2),
            ArgumentSpec(("--jobs",), convert=int, default=4),
            ArgumentSpec(("--items",), nargs="*"),
            ArgumentSpec(("--name",)),
        ],
        positionals=(),
    )
    assert parse([], config) == {
        "yes": False,
        "no": True,
        "tag": [],
        "level": None,
        "jobs": 4,
        "items": [],
        "name": None,
    }


def test_mutable_defaults_are_copied():
    default: list[str] = ["seed"]
    config = ParserConfig(
        flags=[ArgumentSpec(("--tag",), action="append", default=default)],
        positionals=(),
    )
    result = parse([], config)
    result["tag"].append("changed")
    assert parse([], config)["tag"] == ["seed"]
    assert default == ["seed"]


def test_positionals_matched_in_declaration_order():
    config = ParserConfig(
        flags=[ArgumentSpec(("-v",), action="store_true")],
        positionals=[ArgumentSpec("source"), ArgumentSpec("dest")],
    )
    assert parse(["a", "-v", "b"], config) == {"source": "a", "dest": "b", "v": True}
    assert parse(["-v", "a", "b"], config) == {"source": "a", "dest": "b", "v": True}


def test_positional_zero_or_more_stops_at_flag():
    config = ParserConfig(
        flags=[ArgumentSpec(("-v",), action="store_true")],
        positionals=[ArgumentSpec("files", nargs="*"), ArgumentSpec("last", nargs="?")],
    )
    assert parse(["a", "b", "-v", "c"], config) == {
        "files": ["a", "b"],
        "last": "c",
        "v": True,
    }


def test_positional_remainder():
    config = ParserConfig(
        flags=[ArgumentSpec(("--dry-run",), action="store_true")],
        positionals=[ArgumentSpec("command"), ArgumentSpec("argv", nargs="...")],
    )
    result = parse(["--dry-run", "git", "commit", "-m", "--amend"], config)
    assert result == {"dry-run": True, "command": "git", "argv": ["commit", "-m", "--amend"]}


def test_positional_append_uses_one_slot():
    config = ParserConfig(positionals=[ArgumentSpec("item", action="append")])
    assert parse(["a"], config) == {"item": ["a"]}
    with pytest.raises(UnexpectedPositionalError):
        parse(["a", "b"], config)


def test_positional_with_converter():
    config = ParserConfig(positionals=[ArgumentSpec("port", convert=int)])
    assert parse(["8080"], config) == {"port": 8080}


def test_extra_positional_rejected():
    config = ParserConfig(positionals=[ArgumentSpec("only")])
    with pytest.raises(UnexpectedPositionalError) as excinfo:
        parse(["a", "b"], config)
    assert excinfo.value.token == "b"
    assert isinstance(excinfo.value, UnknownArgumentError)


def test_bare_prefix_is_positional():
    config = ParserConfig(positionals=[ArgumentSpec("input")])
    assert parse(["-"], config) == {"input": "-"}


def test_unknown_long_flag_strict():
    with pytest.raises(UnknownArgumentError) as excinfo:
        parse(["--nope"], ParserConfig())
    assert str(excinfo.value) == "invalid argument: --nope"


def test_unknown_short_flag_strict():
    with pytest.raises(UnknownArgumentError) as excinfo:
        parse(["-x"], ParserConfig())
    assert excinfo.value.token == "-x"


def test_double_prefix_alone_is_unknown():
    with pytest.raises(UnknownArgumentError):
        parse(["--"], ParserConfig(strict=False))


def test_permissive_mode_accepts_unknown_flags():
    config = ParserConfig(strict=False)
    assert parse(["--color", "red", "-xy", "1", "2", "rest"], config) == {
        "color": "red",
        "x": "1",
        "y": "2",
        "args": ["rest"],
    }


def test_permissive_unknown_flags_are_still_unique():
    with pytest.raises(DuplicateKeyError):
        parse(["--color", "red", "--color", "blue"], ParserConfig(strict=False))


@pytest.mark.parametrize("token", ["-h", "--help"])
def test_automatic_help(token):
    config = ParserConfig(flags=[ArgumentSpec(("--name",))])
    with pytest.raises(HelpSignal) as excinfo:
        parse(["--name", "x", token, "--bogus"], config)
    assert excinfo.value.config is config


def test_help_disabled_treats_flag_as_unknown():
    with pytest.raises(UnknownArgumentError):
        parse(["--help"], ParserConfig(add_help=False))


def test_help_token_as_value_is_not_help():
    config = ParserConfig(flags=[ArgumentSpec(("--name",))])
    assert parse(["--name", "--help"], config)["name"] == "--help"


def test_version_action():
    config = ParserConfig(
        flags=[ArgumentSpec(("-V", "--version"), action="version", version="2.0")]
    )
    with pytest.raises(VersionSignal) as excinfo:
        parse(["-V"], config)
    assert excinfo.value.version == "2.0"


def test_version_and_help_keys_not_in_result():
    config = ParserConfig(
        flags=[
            ArgumentSpec(("--version",), action="version", version="2.0"),
            ArgumentSpec(("--usage",), action="help"),
        ],
        positionals=(),
    )
    assert parse([], config) == {}


def test_append_const_shared_key():
    config = ParserConfig(
        flags=[
            ArgumentSpec(("--str",), action="append_const", const="str", key="types"),
            ArgumentSpec(("--int",), action="append_const", const="int", key="types"),
        ],
        positionals=(),
    )
    assert parse(["--int", "--str", "--int"], config) == {"types": ["int", "str", "int"]}
    assert parse([], config) == {"types": []}


def test_custom_prefix_char():
    config = ParserConfig(
        flags=[
            ArgumentSpec(("+v", "++verbose"), action="count"),
            ArgumentSpec(("+o",)),
        ],
        prefix_char="+",
    )
    assert parse(["+vvo", "out", "-x", "++verbose"], config) == {
        "verbose": 3,
        "o": "out",
        "args": ["-x"],
    }
    with pytest.raises(HelpSignal):
        parse(["++help"], config)


def test_exact_nargs_insufficient_tokens():
    config = ParserConfig(flags=[ArgumentSpec(("--point",), nargs=2)])
    with pytest.raises(MissingValueError):
        parse(["--point", "1"], config)


def test_permissive_flag_cannot_shadow_count():
    config = ParserConfig(flags=[ArgumentSpec(("-v",), action="count")], strict=False)
    with pytest.raises(UnknownArgumentError):
        parse(["--v", "x", "-v"], config)
    assert parse(["-vv", "--x", "1"], config) == {"v": 2, "x": "1", "args": []}


def test_permissive_flag_cannot_shadow_append():
    config = ParserConfig(flags=[ArgumentSpec(("-t",), action="append")], strict=False)
    with pytest.raises(UnknownArgumentError):
        parse(["--t", "xyz", "-t", "y"], config)


def test_help_char_inside_bundle():
    config = ParserConfig(flags=[ArgumentSpec(("-v",), action="count")])
    with pytest.raises(HelpSignal):
        parse(["-vh"], config)


def test_count_starts_from_zero_when_matched():
    config = ParserConfig(
        flags=[ArgumentSpec(("-v",), action="count", default=5)], positionals=()
    )
    assert parse([], config) == {"v": 5}
    assert parse(["-vv"], config) == {"v": 2}
