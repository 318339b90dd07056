"""Utility functions for SimpGen."""

from simpgen.utils.constants import Constants
from simpgen.utils.debug import (
    debug_chars_of,
    is_debug_mapping,
    log_debug_char,
    log_if_debug_mapping,
)
from simpgen.utils.helpers import expand_file_path
from simpgen.utils.logging import setup_logger

__all__ = [
    "Constants",
    "debug_chars_of",
    "is_debug_mapping",
    "log_debug_char",
    "log_if_debug_mapping",
    "expand_file_path",
    "setup_logger",
]
