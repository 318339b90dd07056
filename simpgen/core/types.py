"""Type definitions for SimpGen."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Mapping:
    """A single simplification: traditional character -> simplified character."""

    trad: str
    simp: str

    def is_identity(self) -> bool:
        """Return True for X -> X mappings, which never reach the output."""
        return self.trad == self.simp

    def __str__(self) -> str:
        return f"{self.trad}→{self.simp}"


@dataclass(frozen=True)
class Review:
    """A reviewed mapping plus the reviewer's optional corrected simplification."""

    mapping: Mapping
    fix: str | None = None


@dataclass(frozen=True)
class Rule:
    """Analogy rule: if the premise mapping is accepted, the outputs are plausible."""

    premise: Mapping
    output: tuple[Mapping, ...]
