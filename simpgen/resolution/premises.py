"""Premise set and explicit output pool construction."""

from simpgen.core import Mapping, Review, is_radical


def split_radical_reviews(reviews: list[Review]) -> tuple[list[Review], list[Review]]:
    """Split inferrable-sheet reviews into (inferrable character reviews, radical reviews)."""
    inferrable_reviews = []
    radical_reviews = []
    for review in reviews:
        if is_radical(review.mapping.trad):
            radical_reviews.append(review)
        else:
            inferrable_reviews.append(review)
    return inferrable_reviews, radical_reviews


def build_premise_set(
    radical_mappings: list[Mapping], inferrable_mappings: list[Mapping]
) -> dict[Mapping, None]:
    """Build the set of mappings that may license analogy rules.

    Returned as an insertion-ordered dict so iteration never depends on hashing.
    """
    premises: dict[Mapping, None] = {}
    for mapping in radical_mappings:
        premises[mapping] = None
    for mapping in inferrable_mappings:
        premises[mapping] = None
    return premises


def build_explicit_pool(
    standalone_mappings: list[Mapping], inferrable_mappings: list[Mapping]
) -> list[Mapping]:
    """Build the explicit output pool: standalone decisions, then inferrable ones.

    Radical mappings are premises only and never enter the pool.
    """
    return [*standalone_mappings, *inferrable_mappings]
