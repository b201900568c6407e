# Optionsparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option schemas for `OptionsParser` from YAML or TOML files."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import tomli
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from optionsparser.exceptions import OptionDefinitionError, SchemaLoadError
from optionsparser.logger import logger
from optionsparser.option_type import OptionType
from optionsparser.options_parser import OptionsParser


class RawOption(BaseModel):
    """One option entry of a schema file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    option_id: str = Field(alias="id")
    arg: str = ""
    long_arg: str = ""
    type: OptionType = OptionType.STRING
    required: bool = False
    must_exist: bool = False
    default: Any = None
    help_text: str = Field(default="", alias="help")

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> OptionType:
        if isinstance(value, OptionType):
            return value
        return OptionType(value)

    @field_validator("arg", "long_arg")
    @classmethod
    def strip_dashes(cls, value: str) -> str:
        return value.lstrip("-")


class OptionsSchema(BaseModel):
    """Schema model for an `OptionsParser`."""

    model_config = ConfigDict(extra="forbid")

    header: str = ""
    footer: str = ""
    options: list[RawOption] = Field(default_factory=list)

    def to_parser(self) -> OptionsParser:
        parser = OptionsParser(header=self.header, footer=self.footer)
        for raw_option in self.options:
            parser.add_option(
                raw_option.option_id,
                raw_option.arg,
                raw_option.type,
                raw_option.required,
                long_arg=raw_option.long_arg,
                help_text=raw_option.help_text,
                default=raw_option.default,
                must_exist=raw_option.must_exist,
            )
        return parser


def build_parser(raw_config: dict[str, Any]) -> OptionsParser:
    """
    Build an `OptionsParser` from an already loaded schema mapping.

    Raises:
        OptionDefinitionError: If the mapping does not describe valid options.
    """
    try:
        schema = OptionsSchema.model_validate(raw_config)
    except ValidationError as error:
        raise OptionDefinitionError(f"Invalid option schema:\n{error}") from error
    return schema.to_parser()


def load_parser(file_path: Path | str) -> OptionsParser:
    """
    Load an option schema from a YAML or TOML file.

    The file should contain a mapping with an `options` list. Each option
    needs at least an `id`; `arg`, `long_arg`, `type`, `required`,
    `must_exist`, `default` and `help` are optional. `header` and `footer`
    may be given at the top level.

    Args:
        file_path (Path | str): Path to the schema file.

    Returns:
        OptionsParser: A parser with the schema's options registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or is not a mapping.
        SchemaLoadError: If the file cannot be parsed as YAML or TOML.
        OptionDefinitionError: If the options do not validate.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such schema file: {file_path}")

    suffix = path.suffix
    if suffix not in (".yaml", ".yml", ".toml"):
        raise ValueError(f"Unsupported schema format: {suffix}")

    try:
        if suffix == ".toml":
            with path.open("rb") as schema_file:
                raw_config = tomli.load(schema_file)
        else:
            with path.open("r", encoding="UTF-8") as schema_file:
                raw_config = yaml.safe_load(schema_file)
    except (yaml.YAMLError, tomli.TOMLDecodeError, UnicodeDecodeError) as error:
        raise SchemaLoadError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Schema file must contain a mapping with a list of options.\n"
            "Example:\n"
            "header: 'My tool'\n"
            "options:\n"
            "  - id: 'help'\n"
            "    arg: 'h'\n"
            "    long_arg: 'help'\n"
            "    type: 'boolean'"
        )

    parser = build_parser(raw_config)
    logger.debug("Loaded %d options from %s.", len(parser.options), path)
    return parser
