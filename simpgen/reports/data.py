"""Report summary data model."""

from pydantic import BaseModel

from simpgen.processing.stages.data_models import DerivationResult, ReviewTables


class ReportData(BaseModel):
    """Counts and timings summarizing one derivation run."""

    workbook: str
    output: str
    chain_mode: str
    standalone_reviews: int
    inferrable_reviews: int
    radical_reviews: int
    rules: int
    accepted_rules: int
    explicit_mappings: int
    premises: int
    analogy_targets: int
    conflicts: int
    chained: int
    shadowed: int
    dropped_identities: int
    final_mappings: int
    loading_time: float
    derivation_time: float

    @classmethod
    def from_run(
        cls, tables: ReviewTables, derivation: DerivationResult, workbook: str, output: str,
        chain_mode: str,
    ) -> "ReportData":
        """Summarize the results of the loading and derivation stages."""
        return cls(
            workbook=workbook,
            output=output,
            chain_mode=chain_mode,
            standalone_reviews=len(tables.standalone_reviews),
            inferrable_reviews=len(tables.inferrable_reviews),
            radical_reviews=len(tables.radical_reviews),
            rules=len(tables.rules),
            accepted_rules=sum(derivation.scoring.accepted),
            explicit_mappings=len(derivation.explicit_pool),
            premises=len(derivation.premises),
            analogy_targets=len(derivation.resolution),
            conflicts=len(derivation.conflicts),
            chained=len(derivation.rewrites),
            shadowed=len(derivation.assembly.shadowed),
            dropped_identities=len(derivation.assembly.dropped_identities),
            final_mappings=len(derivation.table),
            loading_time=tables.elapsed_time,
            derivation_time=derivation.elapsed_time,
        )
