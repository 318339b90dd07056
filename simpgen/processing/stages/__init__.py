"""Pipeline stages for SimpGen."""

from .data_models import DerivationResult, ReviewTables
from .derivation import derive_table
from .loading import load_review_tables

__all__ = [
    "DerivationResult",
    "ReviewTables",
    "derive_table",
    "load_review_tables",
]
