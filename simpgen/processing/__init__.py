"""Processing pipeline for SimpGen."""

from .pipeline import run_pipeline

__all__ = ["run_pipeline"]
