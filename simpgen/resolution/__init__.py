"""Analogy scoring, conflict resolution and table assembly for SimpGen."""

from .assembly import AssemblyResult, assemble, format_table, select_rule_outputs
from .chaining import apply_chaining, follow_chain
from .conflicts import choose_best_candidate, resolve_conflicts
from .premises import build_explicit_pool, build_premise_set, split_radical_reviews
from .scoring import score_rules
from .state_types import ChainRewrite, Conflict, ScoringResult

__all__ = [
    "AssemblyResult",
    "assemble",
    "format_table",
    "select_rule_outputs",
    "apply_chaining",
    "follow_chain",
    "choose_best_candidate",
    "resolve_conflicts",
    "build_explicit_pool",
    "build_premise_set",
    "split_radical_reviews",
    "score_rules",
    "ChainRewrite",
    "Conflict",
    "ScoringResult",
]
