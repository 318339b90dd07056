"""Scoring of analogy rules against the premise set."""

from collections.abc import Collection

from loguru import logger
from tqdm import tqdm

from simpgen.core import Mapping, Rule
from simpgen.resolution.state_types import ScoringResult
from simpgen.utils.debug import log_if_debug_mapping


def score_rules(
    rules: list[Rule],
    premises: Collection[Mapping],
    debug_chars: Collection[str] = (),
    verbose: bool = False,
) -> ScoringResult:
    """Score every rule output and collect candidates from accepted rules.

    A rule is accepted when its premise is in the premise set. Accepted rules add
    +1 to each output mapping and register it as a candidate for its trad.
    Rejected rules subtract 1 from the same mappings without registering them,
    so they only weigh in on ties between rival accepted rules.

    Args:
        rules: Analogy rules in input order
        premises: Accepted premise mappings
        debug_chars: Characters to trace
        verbose: Whether to show a progress bar

    Returns:
        ScoringResult with scores, candidates and per-rule acceptance
    """
    result = ScoringResult()

    rules_iter = rules
    if verbose:
        rules_iter = tqdm(rules, desc="Scoring rules", unit="rule")

    for rule in rules_iter:
        accepted = rule.premise in premises
        result.accepted.append(accepted)
        delta = 1 if accepted else -1

        for mapping in rule.output:
            result.scores[mapping] = result.scores.get(mapping, 0) + delta
            if accepted:
                candidates = result.candidates.setdefault(mapping.trad, [])
                if mapping not in candidates:
                    candidates.append(mapping)

            if debug_chars:
                verdict = "accepted" if accepted else "rejected"
                log_if_debug_mapping(
                    mapping,
                    f"proposed by {verdict} premise {rule.premise} "
                    f"(score now {result.scores[mapping]:+d})",
                    debug_chars,
                    "Stage 3",
                )

    if verbose:
        accepted_count = sum(result.accepted)
        logger.info(
            f"  {accepted_count} of {len(rules)} rules accepted, "
            f"{len(result.candidates)} characters have analogy candidates"
        )

    return result
