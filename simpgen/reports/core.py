"""Report directory creation and generation."""

from datetime import datetime
from pathlib import Path

from loguru import logger

from simpgen.core import Config
from simpgen.processing.stages.data_models import DerivationResult, ReviewTables
from simpgen.reports.data import ReportData
from simpgen.reports.writers import (
    write_chains,
    write_conflicts,
    write_rejected_rules,
    write_shadowed,
    write_summary,
)
from simpgen.utils.helpers import expand_file_path


def create_report_directory(reports_dir: str) -> Path:
    """Create a timestamped subdirectory for this run's reports."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    report_dir = Path(expand_file_path(reports_dir)) / timestamp
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def generate_reports(
    tables: ReviewTables, derivation: DerivationResult, config: Config
) -> Path:
    """Write all reports for a derivation run.

    Args:
        tables: Reviews and rules from the loading stage
        derivation: Result of the derivation stage
        config: Configuration object (config.reports must be set)

    Returns:
        Directory the reports were written to
    """
    report_dir = create_report_directory(config.reports)
    data = ReportData.from_run(
        tables, derivation, config.workbook, config.output, config.chain_mode.value
    )

    write_summary(report_dir, data)
    write_conflicts(report_dir, derivation)
    write_chains(report_dir, derivation)
    write_shadowed(report_dir, derivation)
    write_rejected_rules(report_dir, tables.rules, derivation)

    if config.verbose:
        logger.info(f"Reports written to {report_dir}")
    return report_dir
