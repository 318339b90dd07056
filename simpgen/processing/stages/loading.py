"""Stage 1: Loading reviews and rules from the review workbook."""

import time

import pandas as pd
from loguru import logger

from simpgen.core import Config, WorkbookError, parse_review, parse_rule
from simpgen.core.types import Review, Rule
from simpgen.processing.stages.data_models import ReviewTables
from simpgen.resolution import split_radical_reviews
from simpgen.utils.constants import Constants
from simpgen.utils.debug import log_if_debug_mapping
from simpgen.utils.helpers import expand_file_path

# Header occupies the first spreadsheet row, data starts on row 2
_FIRST_DATA_ROW = 2


def _cell_to_text(value) -> str:
    """Stringify a cell, mapping empty cells to ''."""
    if value is None or pd.isna(value):
        return ""
    return str(value)


def read_workbook(path: str) -> dict[str, pd.DataFrame]:
    """Read every sheet of the workbook with all cells as text.

    Raises:
        WorkbookError: If the workbook cannot be opened
    """
    try:
        return pd.read_excel(
            path,
            sheet_name=None,
            header=0,
            dtype=str,
            keep_default_na=False,
            engine="openpyxl",
        )
    except (OSError, ValueError) as e:
        raise WorkbookError(f"Cannot read workbook {path}: {e}") from e


def iter_sheet_rows(sheets: dict[str, pd.DataFrame], sheet: str):
    """Yield (row_number, cells) for each non-blank data row of a sheet.

    Rows are padded to at least the four review columns.

    Raises:
        WorkbookError: If the sheet does not exist
    """
    if sheet not in sheets:
        raise WorkbookError(f"Workbook has no sheet named '{sheet}'")

    frame = sheets[sheet]
    for offset, values in enumerate(frame.itertuples(index=False, name=None)):
        cells = [_cell_to_text(value) for value in values]
        if not any(cell.strip() for cell in cells):
            continue
        cells.extend([""] * (Constants.REVIEW_COLUMNS - len(cells)))
        yield offset + _FIRST_DATA_ROW, cells


def load_reviews(
    sheets: dict[str, pd.DataFrame], sheet: str, config: Config
) -> list[Review]:
    """Parse every review row of a sheet."""
    reviews = []
    for row_number, cells in iter_sheet_rows(sheets, sheet):
        review = parse_review(cells, sheet, row_number, config.undecided_marker)
        reviews.append(review)
        if config.debug_chars:
            fix = f"fixed to '{review.fix}'" if review.fix else "no fix"
            log_if_debug_mapping(
                review.mapping,
                f"reviewed in '{sheet}' row {row_number} ({fix})",
                config.debug_chars,
                "Stage 1",
            )
    return reviews


def load_rules(sheets: dict[str, pd.DataFrame], sheet: str, config: Config) -> list[Rule]:
    """Parse every rule row of a sheet, skipping rules without outputs."""
    rules = []
    for row_number, cells in iter_sheet_rows(sheets, sheet):
        rule = parse_rule(cells, sheet, row_number)
        if rule is None:
            continue
        rules.append(rule)
        if config.debug_chars:
            for mapping in rule.output:
                log_if_debug_mapping(
                    mapping,
                    f"rule output of premise {rule.premise} in '{sheet}' row {row_number}",
                    config.debug_chars,
                    "Stage 1",
                )
    return rules


def load_review_tables(config: Config, verbose: bool = False) -> ReviewTables:
    """Load all reviews and rules from the workbook.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        ReviewTables with standalone, inferrable and radical reviews plus rules
    """
    start_time = time.time()
    workbook_path = expand_file_path(config.workbook)

    if verbose:
        logger.info(f"  Reading {workbook_path}...")
    sheets = read_workbook(workbook_path)

    standalone_reviews = []
    for sheet in config.standalone_sheets:
        standalone_reviews.extend(load_reviews(sheets, sheet, config))

    inferrable_reviews, radical_reviews = split_radical_reviews(
        load_reviews(sheets, config.inferrable_sheet, config)
    )
    rules = load_rules(sheets, config.rule_sheet, config)

    if verbose:
        logger.info(f"  Loaded {len(standalone_reviews)} standalone reviews")
        logger.info(
            f"  Loaded {len(inferrable_reviews)} inferrable reviews "
            f"and {len(radical_reviews)} radical reviews"
        )
        logger.info(f"  Loaded {len(rules)} analogy rules")

    return ReviewTables(
        standalone_reviews=standalone_reviews,
        inferrable_reviews=inferrable_reviews,
        radical_reviews=radical_reviews,
        rules=rules,
        elapsed_time=time.time() - start_time,
    )
