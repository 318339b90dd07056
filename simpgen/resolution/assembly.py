"""Selection of winning rule outputs and final table assembly."""

from collections.abc import Collection
from dataclasses import dataclass, field

from simpgen.core import Mapping, Rule
from simpgen.resolution.resolution_logging import (
    log_dropped_identity,
    log_kept_mapping,
    log_shadowed_winner,
)
from simpgen.utils.constants import Constants


@dataclass
class AssemblyResult:
    """Final table plus the analogy winners it had to leave out."""

    table: list[Mapping] = field(default_factory=list)
    shadowed: list[Mapping] = field(default_factory=list)
    dropped_identities: list[Mapping] = field(default_factory=list)


def select_rule_outputs(
    rules: list[Rule], accepted: list[bool], resolution: dict[str, str]
) -> list[Mapping]:
    """Collect winning outputs of accepted rules, in rule order."""
    winners = []
    for rule, is_accepted in zip(rules, accepted):
        if not is_accepted:
            continue
        for mapping in rule.output:
            if mapping.simp == resolution[mapping.trad]:
                winners.append(mapping)
    return winners


def assemble(
    explicit_pool: list[Mapping],
    winners: list[Mapping],
    debug_chars: Collection[str] = (),
) -> AssemblyResult:
    """Merge explicit mappings and analogy winners, one mapping per trad.

    The first mapping seen for a trad claims it. Explicit mappings come first, so
    analogy can never replace an explicit decision. A claimed trad whose mapping
    turned into X -> X is left out of the table entirely.
    """
    result = AssemblyResult()
    claimed: dict[str, Mapping] = {}

    for mapping in explicit_pool:
        if mapping.trad not in claimed:
            claimed[mapping.trad] = mapping

    for mapping in winners:
        if mapping.trad not in claimed:
            claimed[mapping.trad] = mapping
        elif claimed[mapping.trad] != mapping and mapping not in result.shadowed:
            result.shadowed.append(mapping)
            log_shadowed_winner(mapping, claimed[mapping.trad], debug_chars)

    for mapping in claimed.values():
        if mapping.is_identity():
            result.dropped_identities.append(mapping)
            log_dropped_identity(mapping, debug_chars)
            continue
        result.table.append(mapping)
        log_kept_mapping(mapping, debug_chars)

    return result


def format_table(mappings: list[Mapping]) -> str:
    """Serialize mappings as newline-terminated trad<TAB>simp records."""
    return "".join(
        f"{m.trad}{Constants.OUTPUT_SEPARATOR}{m.simp}\n" for m in mappings
    )
