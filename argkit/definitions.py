# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""definitions.py
Build a `ParserConfig` from plain data such as an already-decoded JSON document.

Example:
    config = load_definitions(
        {
            "description": "Copy files",
            "flags": [
                {"flags": ["-v", "--verbose"], "action": "count"},
                {"flags": ["--jobs"], "convert": "int", "default": 1},
            ],
            "positionals": [{"flags": "sources", "nargs": "+"}, {"flags": "dest"}],
        }
    )
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from argkit.exceptions import ParserConfigError
from argkit.logger import logger
from argkit.parser.argument import ArgumentSpec
from argkit.parser.argument_action import ArgumentAction
from argkit.parser.parser_config import ParserConfig
from argkit.parser.utils import coerce_bool, coerce_datetime, convert_each

BUILTIN_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": coerce_bool,
    "path": Path,
    "datetime": coerce_datetime,
}


def import_converter(dotted_path: str) -> Callable[[Any], Any]:
    """Resolve a builtin converter name or a dotted path like 'my.module.func'."""
    if dotted_path in BUILTIN_CONVERTERS:
        return BUILTIN_CONVERTERS[dotted_path]
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ParserConfigError(f"Invalid converter path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ParserConfigError(f"Could not import '{dotted_path}': {error}") from error
    try:
        converter = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ParserConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(converter):
        raise ParserConfigError(f"Converter '{dotted_path}' is not callable")
    return converter


class RawArgument(BaseModel):
    """Raw argument model, one entry of `flags` or `positionals`."""

    flags: list[str]
    action: ArgumentAction = ArgumentAction.STORE
    nargs: int | str | None = None
    convert: str | None = None
    each: bool = False
    const: Any = None
    choices: list[Any] | None = None
    required: bool | None = None
    default: Any = None
    help: str = ""
    metavar: str | None = None
    key: str | None = None
    version: str | None = None

    @field_validator("flags", mode="before")
    @classmethod
    def validate_flags(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, value: Any) -> ArgumentAction:
        if isinstance(value, ArgumentAction):
            return value
        return ArgumentAction(value)

    def to_spec(self) -> ArgumentSpec:
        converter = import_converter(self.convert) if self.convert else None
        if converter is not None and self.each:
            converter = convert_each(converter)
        return ArgumentSpec(
            tuple(self.flags),
            action=self.action,
            nargs=self.nargs,
            convert=converter,
            const=self.const,
            choices=self.choices,
            required=self.required,
            default=self.default,
            help=self.help,
            metavar=self.metavar,
            key=self.key,
            version=self.version,
        )


class RawParser(BaseModel):
    """Raw parser model: the top level of a definitions mapping."""

    description: str = ""
    epilog: str = ""
    prog: str | None = None
    prefix_char: str = "-"
    add_help: bool = True
    strict: bool = True
    flags: list[RawArgument] = Field(default_factory=list)
    positionals: list[RawArgument] | None = None

    @field_validator("prefix_char")
    @classmethod
    def validate_prefix_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("prefix_char must be a single character")
        return value

    def to_config(self) -> ParserConfig:
        options: dict[str, Any] = {}
        if self.positionals is not None:
            options["positionals"] = tuple(arg.to_spec() for arg in self.positionals)
        return ParserConfig(
            flags=tuple(arg.to_spec() for arg in self.flags),
            description=self.description,
            epilog=self.epilog,
            prefix_char=self.prefix_char,
            add_help=self.add_help,
            strict=self.strict,
            prog=self.prog,
            **options,
        )


def load_definitions(definitions: Mapping[str, Any]) -> ParserConfig:
    """
    Validate a definitions mapping and build the `ParserConfig` it describes.

    Omitting `positionals` keeps the default catch-all `args` positional; an empty
    list declares none.

    Raises:
        ParserConfigError: If the mapping or any argument in it is invalid.
    """
    if not isinstance(definitions, Mapping):
        raise ParserConfigError(
            f"Definitions must be a mapping, got {type(definitions).__name__}"
        )
    try:
        raw_parser = RawParser.model_validate(dict(definitions))
    except ValidationError as error:
        raise ParserConfigError(f"Invalid parser definitions:\n{error}") from error
    return raw_parser.to_config()
