"""Debug logging functions for analogy resolution."""

from collections.abc import Collection
from typing import TYPE_CHECKING

from simpgen.utils.debug import log_debug_char, log_if_debug_mapping

if TYPE_CHECKING:
    from simpgen.core import Mapping
    from simpgen.resolution.state_types import ChainRewrite, Conflict


def log_conflict_resolved(conflict: "Conflict", debug_chars: Collection[str]) -> None:
    """Log how competing candidates for one trad were ranked.

    Args:
        conflict: The resolved conflict
        debug_chars: Characters to trace
    """
    if not debug_chars:
        return
    involved = {conflict.trad} | {m.simp for m, _ in conflict.candidates}
    ranking = ", ".join(f"{m} ({score:+d})" for m, score in conflict.candidates)
    for char in debug_chars:
        if char in involved:
            log_debug_char(
                char,
                f"Conflict on '{conflict.trad}' resolved to {conflict.winner} among {ranking}",
                "Stage 4",
            )


def log_chain_rewrite(rewrite: "ChainRewrite", debug_chars: Collection[str]) -> None:
    """Log that an explicit mapping was chained through a resolved analogy.

    Args:
        rewrite: The rewrite that was applied
        debug_chars: Characters to trace
    """
    log_if_debug_mapping(
        rewrite.original,
        f"chained to {rewrite.rewritten} ({rewrite.hops} hop{'s' if rewrite.hops != 1 else ''})",
        debug_chars,
        "Stage 5",
    )


def log_shadowed_winner(
    winner: "Mapping", explicit: "Mapping", debug_chars: Collection[str]
) -> None:
    """Log that an analogy winner lost to an explicit mapping for the same trad."""
    log_if_debug_mapping(
        winner,
        f"REMOVED - '{winner.trad}' is pinned by explicit mapping {explicit}",
        debug_chars,
        "Stage 6",
    )


def log_dropped_identity(mapping: "Mapping", debug_chars: Collection[str]) -> None:
    """Log that a mapping collapsed to X -> X and was left out."""
    log_if_debug_mapping(mapping, "REMOVED - maps a character to itself", debug_chars, "Stage 6")


def log_kept_mapping(mapping: "Mapping", debug_chars: Collection[str]) -> None:
    """Log that a mapping made it into the final table."""
    log_if_debug_mapping(mapping, "Kept in final table", debug_chars, "Stage 6")
