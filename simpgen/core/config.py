"""Configuration loading and validation."""

import argparse
import json
from enum import Enum

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from simpgen.utils.constants import Constants


class ChainMode(Enum):
    """How far explicit mappings are chained through resolved analogies."""

    SINGLE = "single"
    FIXPOINT = "fixpoint"


class Config(BaseModel):
    """Configuration for a derivation run."""

    workbook: str = Constants.DEFAULT_WORKBOOK
    output: str = Constants.DEFAULT_OUTPUT
    rime: bool = False
    reports: str | None = None
    verbose: bool = False
    debug: bool = False
    debug_chars: list[str] = Field(default_factory=list)
    chain_mode: ChainMode = ChainMode.SINGLE

    standalone_sheets: list[str] = Field(
        default_factory=lambda: list(Constants.STANDALONE_SHEETS)
    )
    inferrable_sheet: str = Constants.INFERRABLE_SHEET
    rule_sheet: str = Constants.RULE_SHEET
    undecided_marker: str = Constants.UNDECIDED_MARKER

    @field_validator("debug_chars", mode="before")
    @classmethod
    def parse_char_list(cls, value):
        """Accept a string of characters or a list of strings; keep each character once."""
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        chars: list[str] = []
        for item in value:
            for char in item:
                if not char.isspace() and char != "," and char not in chars:
                    chars.append(char)
        return chars

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Validate options that depend on each other."""
        if self.debug_chars and not self.debug:
            raise ValueError("debug_chars requires debug to be enabled")
        if not self.standalone_sheets:
            raise ValueError("standalone_sheets must name at least one sheet")
        return self


def load_config(
    json_path: str | None, cli_args: argparse.Namespace, parser: argparse.ArgumentParser
) -> Config:
    """Load configuration from a JSON file, with CLI arguments taking precedence.

    Args:
        json_path: Optional path to a JSON configuration file
        cli_args: Parsed command-line arguments
        parser: Parser used to report usage errors

    Returns:
        Validated Config
    """
    values: dict = {}
    if json_path:
        try:
            with open(json_path, encoding="utf-8") as f:
                values.update(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            parser.error(f"Cannot read config file {json_path}: {e}")

    for key, value in vars(cli_args).items():
        if key == "config" or value is None:
            continue
        # store_true flags only override JSON when set
        if value is False and key in values:
            continue
        values[key] = value

    try:
        config = Config(**values)
    except ValidationError as e:
        parser.error(f"Invalid configuration: {e}")
    return config
