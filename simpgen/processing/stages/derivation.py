"""Stages 2-6: Deriving the simplification table from reviews and rules."""

import time

from loguru import logger

from simpgen.core import Config, derive_all
from simpgen.processing.stages.data_models import DerivationResult, ReviewTables
from simpgen.resolution import (
    apply_chaining,
    assemble,
    build_explicit_pool,
    build_premise_set,
    resolve_conflicts,
    score_rules,
    select_rule_outputs,
)
from simpgen.utils.debug import log_if_debug_mapping


def derive_table(tables: ReviewTables, config: Config, verbose: bool = False) -> DerivationResult:
    """Resolve reviews and analogy rules into one mapping per traditional character.

    Args:
        tables: Reviews and rules from the loading stage
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        DerivationResult with the final table and every intermediate result
    """
    start_time = time.time()
    debug_chars = config.debug_chars

    # Stage 2: explicit decisions and premises
    standalone_mappings = derive_all(tables.standalone_reviews)
    inferrable_mappings = derive_all(tables.inferrable_reviews)
    radical_mappings = derive_all(tables.radical_reviews)

    explicit_pool = build_explicit_pool(standalone_mappings, inferrable_mappings)
    premises = build_premise_set(radical_mappings, inferrable_mappings)

    if debug_chars:
        for mapping in explicit_pool:
            log_if_debug_mapping(mapping, "explicit decision", debug_chars, "Stage 2")
        for mapping in premises:
            log_if_debug_mapping(mapping, "accepted premise", debug_chars, "Stage 2")
    if verbose:
        logger.info(f"  {len(explicit_pool)} explicit mappings, {len(premises)} premises")

    # Stage 3: scoring
    scoring = score_rules(tables.rules, premises, debug_chars, verbose)

    # Stage 4: conflict resolution
    resolution, conflicts = resolve_conflicts(scoring.candidates, scoring.scores, debug_chars)
    if verbose:
        logger.info(
            f"  Resolved {len(resolution)} analogy targets ({len(conflicts)} with conflicts)"
        )

    # Stage 5: chaining
    chained_pool, rewrites = apply_chaining(
        explicit_pool, resolution, config.chain_mode, debug_chars
    )
    if verbose:
        logger.info(f"  Chained {len(rewrites)} explicit mappings ({config.chain_mode.value})")

    # Stage 6: selection and assembly
    winners = select_rule_outputs(tables.rules, scoring.accepted, resolution)
    assembly = assemble(chained_pool, winners, debug_chars)
    if verbose:
        logger.info(
            f"  Final table: {len(assembly.table)} mappings "
            f"({len(assembly.shadowed)} analogy results pinned by explicit decisions)"
        )

    return DerivationResult(
        explicit_pool=explicit_pool,
        premises=premises,
        scoring=scoring,
        resolution=resolution,
        conflicts=conflicts,
        rewrites=rewrites,
        winners=winners,
        assembly=assembly,
        elapsed_time=time.time() - start_time,
    )
