"""Chaining of explicit mappings through resolved analogies.

If A -> B is an explicit decision and analogy resolves B -> C, the explicit
mapping becomes A -> C. The trad side of an explicit mapping is never changed,
which is what pins reviewed characters against analogy.
"""

from collections.abc import Collection

from simpgen.core import ChainCycleError, ChainMode, Mapping
from simpgen.resolution.resolution_logging import log_chain_rewrite
from simpgen.resolution.state_types import ChainRewrite


def follow_chain(simp: str, resolution: dict[str, str], mode: ChainMode) -> tuple[str, int]:
    """Follow resolved analogies starting from simp.

    Args:
        simp: Simplified character of an explicit mapping
        resolution: Resolved analogies, trad -> simp
        mode: SINGLE for one hop, FIXPOINT to follow until nothing changes

    Returns:
        Tuple of (final simplified character, number of hops taken)

    Raises:
        ChainCycleError: In FIXPOINT mode, if the chain loops back on itself
    """
    if mode is ChainMode.SINGLE:
        target = resolution.get(simp, simp)
        return target, int(target != simp)

    path = [simp]
    current = simp
    while current in resolution:
        following = resolution[current]
        if following == current:
            break
        if following in path:
            raise ChainCycleError([*path, following])
        path.append(following)
        current = following
    return current, len(path) - 1


def apply_chaining(
    pool: list[Mapping],
    resolution: dict[str, str],
    mode: ChainMode = ChainMode.SINGLE,
    debug_chars: Collection[str] = (),
) -> tuple[list[Mapping], list[ChainRewrite]]:
    """Redirect explicit mappings whose target is itself resolved by analogy.

    Args:
        pool: Explicit output pool (no analogy winners yet)
        resolution: Resolved analogies, trad -> simp
        mode: Chaining depth
        debug_chars: Characters to trace

    Returns:
        Tuple of (rewritten pool in the same order, rewrites performed)
    """
    rewritten_pool = []
    rewrites = []

    for mapping in pool:
        target, hops = follow_chain(mapping.simp, resolution, mode)
        if target == mapping.simp:
            rewritten_pool.append(mapping)
            continue

        chained = Mapping(trad=mapping.trad, simp=target)
        rewrite = ChainRewrite(original=mapping, rewritten=chained, hops=hops)
        rewritten_pool.append(chained)
        rewrites.append(rewrite)
        log_chain_rewrite(rewrite, debug_chars)

    return rewritten_pool, rewrites
