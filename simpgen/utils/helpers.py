"""Shared utility functions for the table generator."""

import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand ``~`` in a workbook, output or reports path. Empty paths give None."""
    if not filepath:
        return None
    return os.path.expanduser(filepath)
