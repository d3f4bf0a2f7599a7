# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Optline option declarations.

Options can be declared in a YAML or TOML file instead of code:

    prog: report
    usage: "%prog [options] FILE..."
    version: "%prog 1.0"
    options:
      - flags: ["-f", "--file"]
        dest: filename
        metavar: FILE
        help: write report to FILE
      - flags: ["-q", "--quiet"]
        action: store_false
        dest: verbose
        default: "1"
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from optline.logger import logger
from optline.option_parser import OptionParser
from optline.parser.option_action import OptionAction, OptionType


class RawOption(BaseModel):
    """Raw option model for Optline configuration."""

    flags: list[str]
    action: OptionAction = OptionAction.STORE
    type: OptionType = OptionType.STRING
    dest: str | None = None
    default: Any = None
    nargs: int | None = None
    const: Any = None
    choices: list[Any] | None = None
    help: str = ""
    metavar: str = ""

    @field_validator("flags", mode="before")
    @classmethod
    def validate_flags(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("flags")
    @classmethod
    def validate_flags_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("An option needs at least one flag.")
        return value

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, value: str | OptionAction) -> OptionAction:
        return OptionAction(value)

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: str | OptionType) -> OptionType:
        return OptionType(value)


class ParserConfig(BaseModel):
    """Optline parser configuration model."""

    prog: str | None = None
    usage: str = "%prog [options]"
    version: str = ""
    description: str = ""
    epilog: str = ""
    add_help_option: bool = True
    add_version_option: bool = True
    strict_types: bool = False
    defaults: dict[str, Any] = Field(default_factory=dict)
    options: list[RawOption] = Field(default_factory=list)

    def to_parser(self) -> OptionParser:
        parser = OptionParser(
            usage=self.usage,
            version=self.version,
            description=self.description,
            prog=self.prog,
            epilog=self.epilog,
            add_help_option=self.add_help_option,
            add_version_option=self.add_version_option,
            strict_types=self.strict_types,
        )
        for raw_option in self.options:
            parser.add_option(
                *raw_option.flags,
                **raw_option.model_dump(exclude={"flags"}),
            )
        if self.defaults:
            parser.set_defaults(**self.defaults)
        return parser


def loader(file_path: Path | str) -> OptionParser:
    """
    Load an `OptionParser` from a YAML or TOML file.

    The file should contain a dictionary with an `options` list. Each option
    needs at least `flags`; every other key of `OptionParser.add_option` is
    accepted.

    Args:
        file_path (str | Path): Path to the config file (YAML or TOML).

    Returns:
        OptionParser: A parser with the declared options.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its content is invalid.
        OptionDeclarationError: If an option declaration is rejected by the parser.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            try:
                raw_config = yaml.safe_load(config_file)
            except yaml.YAMLError as error:
                raise ValueError(f"Invalid YAML in {path}: {error}") from error
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "prog: 'report'\n"
            "options:\n"
            "  - flags: ['-f', '--file']\n"
            "    dest: 'filename'"
        )

    config = ParserConfig(**raw_config)
    logger.debug("Loaded %d option(s) from %s", len(config.options), path)
    return config.to_parser()
