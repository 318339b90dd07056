"""Debug tracing for selected characters."""

from collections.abc import Collection
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from simpgen.core.types import Mapping


def debug_chars_of(mapping: "Mapping", debug_chars: Collection[str]) -> list[str]:
    """Return the debug characters a mapping touches, in trad/simp order."""
    found = []
    for char in (mapping.trad, mapping.simp):
        if char in debug_chars and char not in found:
            found.append(char)
    return found


def is_debug_mapping(mapping: "Mapping", debug_chars: Collection[str]) -> bool:
    """Check if a mapping involves any debug character."""
    return bool(debug_chars) and (mapping.trad in debug_chars or mapping.simp in debug_chars)


def log_debug_char(char: str, message: str, stage: str = "") -> None:
    """Log a debug message for a character."""
    stage_marker = f"[{stage}] " if stage else ""
    logger.debug(f"[DEBUG CHAR: '{char}'] {stage_marker}{message}")


def log_if_debug_mapping(
    mapping: "Mapping",
    message: str,
    debug_chars: Collection[str],
    stage: str = "",
) -> None:
    """Log a message about a mapping once per debug character it involves."""
    if not is_debug_mapping(mapping, debug_chars):
        return
    for char in debug_chars_of(mapping, debug_chars):
        log_debug_char(char, f"{mapping}: {message}", stage)
