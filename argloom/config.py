# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argloom argument definitions.

Builds an `ArgumentParser` from a YAML or TOML file:

    program: greet
    description: Greets people
    arguments:
      - label: name
        description: Who to greet
      - label: count
        names: ["-c", "--count"]
        nargs: 1
      - label: tags
        names: ["--tag"]
        nargs: "*"
        max: 4
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from argloom.exceptions import ConfigError
from argloom.logger import logger
from argloom.parser.argument_parser import ArgumentParser
from argloom.parser.arity import (
    MAX_VALUE_COUNT,
    Arity,
    Fixed,
    OneOrMore,
    VariableUpTo,
)

NARGS_SYMBOLS = ("?", "*", "+")


class RawArgument(BaseModel):
    """Raw argument model for Argloom configuration."""

    label: str = ""
    description: str = ""
    names: list[str] = Field(default_factory=list)
    metalabel: str = ""
    nargs: int | str = 1
    max: int | None = None
    min: int | None = None
    optional: bool | None = None

    @field_validator("nargs")
    @classmethod
    def validate_nargs(cls, value: int | str) -> int | str:
        if isinstance(value, str):
            if value not in NARGS_SYMBOLS:
                raise ValueError(f"nargs must be an integer or one of {NARGS_SYMBOLS}")
            return value
        if value < 0 or value > MAX_VALUE_COUNT:
            raise ValueError(f"nargs must be between 0 and {MAX_VALUE_COUNT}")
        return value

    @model_validator(mode="after")
    def validate_bounds(self) -> RawArgument:
        if self.max is not None and self.nargs != "*":
            raise ValueError("max is only valid with nargs '*'")
        if self.min is not None and self.nargs != "+":
            raise ValueError("min is only valid with nargs '+'")
        if self.max is not None and not 0 <= self.max <= MAX_VALUE_COUNT:
            raise ValueError(f"max must be between 0 and {MAX_VALUE_COUNT}")
        if self.min is not None and not 1 <= self.min <= MAX_VALUE_COUNT:
            raise ValueError(f"min must be between 1 and {MAX_VALUE_COUNT}")
        return self

    def to_arity(self) -> Arity:
        if isinstance(self.nargs, int):
            return Fixed(self.nargs)
        if self.nargs == "?":
            return VariableUpTo(1)
        if self.nargs == "*":
            return VariableUpTo(MAX_VALUE_COUNT if self.max is None else self.max)
        return OneOrMore(1 if self.min is None else self.min)


class ParserConfig(BaseModel):
    """Argloom parser configuration model."""

    program: str | None = None
    description: str = ""
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_parser(self) -> ArgumentParser:
        parser = ArgumentParser(program=self.program, description=self.description)
        for raw_argument in self.arguments:
            handle = parser.add_argument(raw_argument.label, raw_argument.description)
            for name in raw_argument.names:
                handle.add_name(name)
            handle.set_arity(raw_argument.to_arity())
            if raw_argument.metalabel:
                handle.set_metalabel(raw_argument.metalabel)
            if raw_argument.optional is not None:
                handle.set_optional(raw_argument.optional)
        return parser


def load_raw_config(path: Path) -> dict[str, Any]:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with a list of arguments.\n"
            "Example:\n"
            "program: 'greet'\n"
            "arguments:\n"
            "  - label: 'name'\n"
            "    description: 'Who to greet'"
        )
    return raw_config


def loader(file_path: Path | str) -> ArgumentParser:
    """
    Load argument definitions from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        ArgumentParser: A parser with every configured argument defined.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
        ArgumentDefinitionError: If a configured argument breaks the definition rules.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = load_raw_config(path)
    try:
        config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        logger.error("Invalid argument config '%s': %s", path, error)
        raise ConfigError(f"Invalid argument config {path}:\n{error}") from error

    logger.debug("Loaded %d argument(s) from %s", len(config.arguments), path)
    return config.to_parser()
