"""Data models passed between pipeline stages."""

from dataclasses import dataclass, field

from simpgen.core import Mapping, Review, Rule
from simpgen.resolution import AssemblyResult, ChainRewrite, Conflict, ScoringResult


@dataclass
class ReviewTables:
    """Reviews and rules loaded from the workbook (Stage 1)."""

    standalone_reviews: list[Review] = field(default_factory=list)
    inferrable_reviews: list[Review] = field(default_factory=list)
    radical_reviews: list[Review] = field(default_factory=list)
    rules: list[Rule] = field(default_factory=list)
    elapsed_time: float = 0.0


@dataclass
class DerivationResult:
    """Everything produced while deriving the table (Stages 2-6)."""

    explicit_pool: list[Mapping]
    premises: dict[Mapping, None]
    scoring: ScoringResult
    resolution: dict[str, str]
    conflicts: list[Conflict]
    rewrites: list[ChainRewrite]
    winners: list[Mapping]
    assembly: AssemblyResult
    elapsed_time: float = 0.0

    @property
    def table(self) -> list[Mapping]:
        """Final deduplicated table."""
        return self.assembly.table
