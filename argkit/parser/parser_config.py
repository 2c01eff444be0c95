# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParserConfig`, the immutable description of everything a parse needs.

Building a config validates every `ArgumentSpec` against the prefix character,
derives each result key once, resolves the required markers, and indexes the
flag aliases. A config is never mutated afterwards, so one instance can be shared
by any number of parses.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping

from argkit.exceptions import ParserConfigError
from argkit.parser.argument import ArgumentSpec, derive_key
from argkit.parser.argument_action import ArgumentAction
from argkit.parser.nargs import OPTIONAL, REMAINDER, ZERO_OR_MORE

DEFAULT_POSITIONALS: tuple[ArgumentSpec, ...] = (
    ArgumentSpec(("args",), nargs=ZERO_OR_MORE),
)

_SHAREABLE = (ArgumentAction.APPEND, ArgumentAction.APPEND_CONST)


def resolve_required(spec: ArgumentSpec, positional: bool) -> bool:
    """Positionals are required unless they can be empty; flags are optional."""
    if spec.required is not None:
        return spec.required
    if positional:
        return (
            spec.nargs not in (OPTIONAL, ZERO_OR_MORE, REMAINDER)
            and spec.default is None
        )
    return False


@dataclass(frozen=True)
class ParserConfig:
    """
    Immutable parser configuration.

    Attributes:
        flags (tuple[ArgumentSpec, ...]): Flag specs, in declaration order.
        positionals (tuple[ArgumentSpec, ...]): Positional specs, matched in order.
            Defaults to a single catch-all `args` with nargs '*'.
        description (str): Text shown above the argument listing in help.
        epilog (str): Text shown below the argument listing in help.
        prefix_char (str): Single character that introduces flags.
        add_help (bool): Whether `-h`/`--help` request help automatically.
        strict (bool): Whether unknown flags are rejected or accepted as `store`.
        prog (str | None): Program name for the usage line.
    """

    flags: tuple[ArgumentSpec, ...] = ()
    positionals: tuple[ArgumentSpec, ...] = DEFAULT_POSITIONALS
    description: str = ""
    epilog: str = ""
    prefix_char: str = "-"
    add_help: bool = True
    strict: bool = True
    prog: str | None = None
    _flag_map: Mapping[str, ArgumentSpec] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.prefix_char, str) or len(self.prefix_char) != 1:
            raise ParserConfigError(
                f"prefix_char must be a single character, got {self.prefix_char!r}"
            )
        if self.prefix_char.isalnum() or self.prefix_char.isspace():
            raise ParserConfigError(
                f"prefix_char must be punctuation, got {self.prefix_char!r}"
            )
        flags = tuple(self._resolve_flag(spec) for spec in self.flags)
        positionals = tuple(self._resolve_positional(spec) for spec in self.positionals)
        object.__setattr__(self, "flags", flags)
        object.__setattr__(self, "positionals", positionals)
        object.__setattr__(self, "_flag_map", MappingProxyType(self._index_flags()))
        self._check_unique_keys()

    def _resolve_flag(self, spec: ArgumentSpec) -> ArgumentSpec:
        prefix = self.prefix_char
        for flag in spec.flags:
            if flag.startswith(prefix * 2):
                if len(flag) < 3:
                    raise ParserConfigError(
                        f"Flag '{flag}' must be at least 3 characters long"
                    )
            elif flag.startswith(prefix):
                if len(flag) != 2:
                    raise ParserConfigError(
                        f"Flag '{flag}' must be a single character or start with "
                        f"'{prefix * 2}'"
                    )
            else:
                raise ParserConfigError(
                    f"Flag '{flag}' must start with the prefix character '{prefix}'"
                )
            if self.add_help and flag in self.help_flags:
                raise ParserConfigError(
                    f"Flag '{flag}' is reserved for help; pass add_help=False to use it"
                )
        return replace(
            spec,
            key=derive_key(spec, prefix),
            required=resolve_required(spec, positional=False),
        )

    def _resolve_positional(self, spec: ArgumentSpec) -> ArgumentSpec:
        if len(spec.flags) != 1:
            raise ParserConfigError("Positional arguments cannot have multiple names")
        name = spec.flags[0]
        if name.startswith(self.prefix_char):
            raise ParserConfigError(
                f"Positional argument '{name}' cannot start with '{self.prefix_char}'"
            )
        if not spec.action.consumes_values:
            raise ParserConfigError(
                f"Action '{spec.action}' cannot be used with positional arguments"
            )
        return replace(
            spec,
            key=derive_key(spec, self.prefix_char),
            required=resolve_required(spec, positional=True),
        )

    def _index_flags(self) -> dict[str, ArgumentSpec]:
        flag_map: dict[str, ArgumentSpec] = {}
        for spec in self.flags:
            for flag in spec.flags:
                if flag in flag_map:
                    raise ParserConfigError(
                        f"Flag '{flag}' is already used by argument "
                        f"'{flag_map[flag].key}'"
                    )
                flag_map[flag] = spec
        return flag_map

    def _check_unique_keys(self) -> None:
        owners: dict[str, ArgumentSpec] = {}
        for spec in self.arguments:
            assert spec.key is not None, "key is derived during validation"
            existing = owners.get(spec.key)
            if existing is None:
                owners[spec.key] = spec
            elif existing.action not in _SHAREABLE or spec.action not in _SHAREABLE:
                raise ParserConfigError(
                    f"Key '{spec.key}' is already defined by {existing.flags[0]!r}. "
                    "Only append and append_const arguments may share a key."
                )

    @property
    def arguments(self) -> tuple[ArgumentSpec, ...]:
        """All specs, positionals first."""
        return self.positionals + self.flags

    @property
    def flag_map(self) -> Mapping[str, ArgumentSpec]:
        """Read-only mapping of every flag alias to its spec."""
        return self._flag_map

    @property
    def help_flags(self) -> tuple[str, str]:
        return f"{self.prefix_char}h", f"{self.prefix_char * 2}help"

    def is_help_token(self, token: str) -> bool:
        return self.add_help and token in self.help_flags

    def with_arguments(
        self,
        flags: Iterable[ArgumentSpec] | None = None,
        positionals: Iterable[ArgumentSpec] | None = None,
    ) -> ParserConfig:
        """Return a copy of this config with more specs appended."""
        return replace(
            self,
            flags=self.flags + tuple(flags or ()),
            positionals=self.positionals + tuple(positionals or ()),
        )
