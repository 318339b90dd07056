"""Review interpretation: turning reviewed rows into effective mappings."""

from simpgen.core.errors import MissingCellError
from simpgen.core.types import Mapping, Review
from simpgen.utils.constants import Constants


def first_char(cell: str) -> str | None:
    """Return the first non-whitespace character of a cell, or None if it is blank."""
    cell = cell.strip()
    return cell[0] if cell else None


def require_char(row: list[str], column: int, sheet: str, row_number: int) -> str:
    """Return the first character of a required cell.

    Raises:
        MissingCellError: If the cell is missing or empty
    """
    cell = row[column] if column < len(row) else ""
    char = first_char(cell)
    if char is None:
        raise MissingCellError(sheet, row_number, column)
    return char


def interpret(
    mapping: Mapping,
    precision_note: str,
    compatible_char: str | None,
    undecided_marker: str = Constants.UNDECIDED_MARKER,
) -> Review:
    """Interpret a reviewer's precision note for a proposed mapping.

    An empty note, or one ending with the undecided marker, means the reviewer
    made no confident fix. Otherwise the fix is the compatible variant when one
    is given, else the first character of the note.
    """
    if not precision_note or precision_note.endswith(undecided_marker):
        return Review(mapping=mapping)
    return Review(mapping=mapping, fix=compatible_char or first_char(precision_note))


def parse_review(
    row: list[str],
    sheet: str,
    row_number: int,
    undecided_marker: str = Constants.UNDECIDED_MARKER,
) -> Review:
    """Parse one review row: trad, simp, precision note, compatible variant."""
    mapping = Mapping(
        trad=require_char(row, 0, sheet, row_number),
        simp=require_char(row, 1, sheet, row_number),
    )
    precision_note = row[2] if len(row) > 2 else ""
    compatible_char = first_char(row[3]) if len(row) > 3 else None
    return interpret(mapping, precision_note, compatible_char, undecided_marker)


def derive(review: Review) -> Mapping:
    """Return the effective mapping of a review."""
    if review.fix:
        return Mapping(trad=review.mapping.trad, simp=review.fix)
    return review.mapping


def derive_all(reviews: list[Review]) -> list[Mapping]:
    """Derive mappings for a batch of reviews, dropping X -> X mappings."""
    mappings = []
    for review in reviews:
        mapping = derive(review)
        if mapping.is_identity():
            continue
        mappings.append(mapping)
    return mappings
