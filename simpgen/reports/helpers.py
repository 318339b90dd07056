"""Helper functions for report generation."""

from datetime import datetime
from typing import TextIO

REPORT_WIDTH = 80


def format_time(seconds: float) -> str:
    """Format a stage duration as ms, seconds, or minutes and seconds."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes)}m {secs:.1f}s"


def write_report_header(f: TextIO, title: str) -> None:
    """Open a report file with its title and generation time."""
    f.write("=" * REPORT_WIDTH + "\n")
    f.write(f"{title}\n")
    f.write("=" * REPORT_WIDTH + "\n")
    f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")


def write_section_header(f: TextIO, title: str) -> None:
    """Start a titled section inside a report."""
    f.write(f"{title}\n")
    f.write("-" * REPORT_WIDTH + "\n")
