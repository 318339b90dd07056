"""OpenCC table output."""

import os
import sys
from collections.abc import Mapping as EnvMapping

from loguru import logger

from simpgen.core import Mapping
from simpgen.resolution import format_table
from simpgen.utils.constants import Constants
from simpgen.utils.helpers import expand_file_path


def rime_output_path(environ: EnvMapping[str, str]) -> str | None:
    """Return the RIME OpenCC table path under %APPDATA%, or None if it is unset."""
    base = environ.get(Constants.RIME_BASE_ENV)
    if not base:
        return None
    return os.path.join(base, *Constants.RIME_OUTPUT_SUBPATH)


def write_table(mappings: list[Mapping], output_path: str | None, verbose: bool = False) -> None:
    """Write the table as trad<TAB>simp lines.

    Format:
    門	门
    問	问

    Args:
        mappings: Final deduplicated mappings
        output_path: Destination file ('-' or None = stdout)
        verbose: Whether to log where the table went
    """
    text = format_table(mappings)

    if not output_path or output_path == "-":
        sys.stdout.write(text)
        return

    output_file = expand_file_path(output_path)
    os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)

    with open(output_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)

    if verbose:
        logger.info(f"Wrote {len(mappings)} mappings to {output_file}")
