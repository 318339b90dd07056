"""Parsing of analogy rule rows."""

from simpgen.core.errors import UnpairedCharacterError
from simpgen.core.reviews import require_char
from simpgen.core.types import Mapping, Rule


def parse_rule_output(premise: Mapping, *texts: str) -> tuple[Mapping, ...]:
    """Pair characters from the concatenated output columns.

    The texts are scanned as one character stream with whitespace skipped; each
    character is paired with the next non-whitespace character as its
    simplification.

    e.g., '問问 悶闷' -> (問→问, 悶→闷)

    Raises:
        UnpairedCharacterError: If the stream ends on an unpaired character
    """
    chars = [ch for ch in "".join(texts) if not ch.isspace()]
    if len(chars) % 2:
        raise UnpairedCharacterError(premise.trad, premise.simp, chars[-1])
    return tuple(Mapping(trad=chars[i], simp=chars[i + 1]) for i in range(0, len(chars), 2))


def parse_rule(row: list[str], sheet: str, row_number: int) -> Rule | None:
    """Parse one rule row, returning None when it proposes no outputs."""
    premise = Mapping(
        trad=require_char(row, 0, sheet, row_number),
        simp=require_char(row, 1, sheet, row_number),
    )
    output = parse_rule_output(premise, *row[2:4])
    if not output:
        return None
    return Rule(premise=premise, output=output)
