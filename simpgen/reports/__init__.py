"""Report generation for SimpGen."""

from .core import create_report_directory, generate_reports
from .data import ReportData
from .helpers import format_time, write_report_header

__all__ = [
    "ReportData",
    "generate_reports",
    "create_report_directory",
    "write_report_header",
    "format_time",
]
