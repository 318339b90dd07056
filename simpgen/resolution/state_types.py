"""Intermediate state produced by the resolution passes."""

from dataclasses import dataclass, field

from simpgen.core import Mapping


@dataclass
class ScoringResult:
    """Evidence gathered by walking all analogy rules once.

    Attributes:
        scores: Net evidence per proposed mapping (+1 accepted, -1 rejected)
        candidates: Mappings proposed by accepted rules, per trad, in first-proposal order
        accepted: Acceptance flag for each rule, parallel to the rule list
    """

    scores: dict[Mapping, int] = field(default_factory=dict)
    candidates: dict[str, list[Mapping]] = field(default_factory=dict)
    accepted: list[bool] = field(default_factory=list)


@dataclass(frozen=True)
class Conflict:
    """A trad with more than one accepted analogy candidate."""

    trad: str
    candidates: tuple[tuple[Mapping, int], ...]
    winner: Mapping


@dataclass(frozen=True)
class ChainRewrite:
    """An explicit mapping redirected through a resolved analogy."""

    original: Mapping
    rewritten: Mapping
    hops: int
