import pytest

from argkit.exceptions import ParserConfigError
from argkit.parser import ArgumentAction, ArgumentSpec, derive_key


def test_flags_and_action_are_normalized():
    spec = ArgumentSpec(["-v", "--verbose"], action="count")
    assert spec.flags == ("-v", "--verbose")
    assert spec.action is ArgumentAction.COUNT


def test_single_name_becomes_tuple():
    spec = ArgumentSpec("files", nargs="remainder")
    assert spec.flags == ("files",)
    assert spec.nargs == "..."


def test_choices_become_tuple():
    spec = ArgumentSpec(("--mode",), choices=["dev", "prod"])
    assert spec.choices == ("dev", "prod")


@pytest.mark.parametrize(
    "flags,expected",
    [
        (("-v", "--verbose"), "verbose"),
        (("--verbose", "-v"), "verbose"),
        (("-n",), "n"),
        (("files",), "files"),
        (("--dry-run",), "dry-run"),
    ],
)
def test_derive_key(flags, expected):
    assert derive_key(ArgumentSpec(flags)) == expected


def test_derive_key_first_longest_alias_wins():
    assert derive_key(ArgumentSpec(("--abc", "--xyz"))) == "abc"


def test_derive_key_custom_prefix():
    assert derive_key(ArgumentSpec(("+v", "++verbose")), "+") == "verbose"


def test_explicit_key_wins():
    assert derive_key(ArgumentSpec(("-v", "--verbose"), key="loud")) == "loud"


def test_specs_are_frozen():
    spec = ArgumentSpec(("--name",))
    with pytest.raises(AttributeError):
        spec.key = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"flags": ()},
        {"flags": ("",)},
        {"flags": ("--x",), "action": "explode"},
        {"flags": ("--x",), "action": "store_true", "nargs": 2},
        {"flags": ("--x",), "action": "count", "nargs": "*"},
        {"flags": ("--x",), "action": "store_true", "required": True},
        {"flags": ("--x",), "action": "store_false", "default": False},
        {"flags": ("--x",), "action": "store_true", "choices": [1, 2]},
        {"flags": ("--x",), "choices": {"a": 1}},
        {"flags": ("--x",), "choices": "abc"},
        {"flags": ("--x",), "convert": "int"},
        {"flags": ("--x",), "action": "append_const", "const": 1},
        {"flags": ("--x",), "action": "version"},
        {"flags": ("--x",), "key": ""},
        {"flags": ("--x",), "nargs": 0},
    ],
)
def test_invalid_specs(kwargs):
    with pytest.raises(ParserConfigError):
        ArgumentSpec(**kwargs)
