"""Core domain types and parsing for SimpGen."""

from .config import ChainMode, Config, load_config
from .errors import (
    ChainCycleError,
    MissingCellError,
    SimpGenError,
    UnpairedCharacterError,
    WorkbookError,
)
from .radicals import RADICALS, is_radical
from .reviews import derive, derive_all, interpret, parse_review
from .rules import parse_rule, parse_rule_output
from .types import Mapping, Review, Rule

__all__ = [
    "ChainMode",
    "Config",
    "load_config",
    "ChainCycleError",
    "MissingCellError",
    "SimpGenError",
    "UnpairedCharacterError",
    "WorkbookError",
    "RADICALS",
    "is_radical",
    "derive",
    "derive_all",
    "interpret",
    "parse_review",
    "parse_rule",
    "parse_rule_output",
    "Mapping",
    "Review",
    "Rule",
]
