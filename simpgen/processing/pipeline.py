"""Main processing pipeline orchestration."""

import time

from loguru import logger

from simpgen.core import Config
from simpgen.output import write_table
from simpgen.processing.stages import DerivationResult, derive_table, load_review_tables
from simpgen.reports import format_time, generate_reports


def run_pipeline(config: Config) -> DerivationResult:
    """Load the workbook, derive the table and write it.

    The table is written only after derivation has fully succeeded.

    Args:
        config: Configuration object

    Returns:
        DerivationResult of the run
    """
    start_time = time.time()
    verbose = config.verbose

    if verbose:
        logger.info("Stage 1: Loading review workbook...")
    tables = load_review_tables(config, verbose)

    if verbose:
        logger.info(f"  Completed in {format_time(tables.elapsed_time)}")
        logger.info("Stages 2-6: Deriving simplification table...")
    derivation = derive_table(tables, config, verbose)

    if verbose:
        logger.info(f"  Completed in {format_time(derivation.elapsed_time)}")
        logger.info("Stage 7: Writing output...")
    write_table(derivation.table, config.output, verbose)

    if config.reports:
        generate_reports(tables, derivation, config)

    if verbose:
        logger.info(f"Total time: {format_time(time.time() - start_time)}")

    return derivation
