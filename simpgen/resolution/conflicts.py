"""Conflict resolution between competing analogy candidates."""

from collections.abc import Collection

from simpgen.core import Mapping
from simpgen.resolution.resolution_logging import log_conflict_resolved
from simpgen.resolution.state_types import Conflict


def choose_best_candidate(candidates: list[Mapping], scores: dict[Mapping, int]) -> Mapping:
    """Choose the candidate with the highest score.

    Ties go to the candidate proposed first in rule order; candidates must be
    listed in first-proposal order.
    """
    best = candidates[0]
    for candidate in candidates[1:]:
        if scores[candidate] > scores[best]:
            best = candidate
    return best


def resolve_conflicts(
    candidates: dict[str, list[Mapping]],
    scores: dict[Mapping, int],
    debug_chars: Collection[str] = (),
) -> tuple[dict[str, str], list[Conflict]]:
    """Pick one simplification for every trad with analogy candidates.

    Args:
        candidates: Accepted candidates per trad, in first-proposal order
        scores: Net score per mapping
        debug_chars: Characters to trace

    Returns:
        Tuple of (resolution trad -> simp, conflicts that needed a choice)
    """
    resolution: dict[str, str] = {}
    conflicts: list[Conflict] = []

    for trad, trad_candidates in candidates.items():
        if not trad_candidates:
            continue
        winner = choose_best_candidate(trad_candidates, scores)
        resolution[trad] = winner.simp

        if len(trad_candidates) > 1:
            conflict = Conflict(
                trad=trad,
                candidates=tuple((m, scores[m]) for m in trad_candidates),
                winner=winner,
            )
            conflicts.append(conflict)
            log_conflict_resolved(conflict, debug_chars)

    return resolution, conflicts
