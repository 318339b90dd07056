"""Exceptions raised while loading and deriving the simplification table."""


class SimpGenError(Exception):
    """Base class for all fatal SimpGen errors."""


class WorkbookError(SimpGenError):
    """The review workbook or one of its sheets cannot be read."""


class MissingCellError(SimpGenError):
    """A required character cell is empty."""

    def __init__(self, sheet: str, row: int, column: int) -> None:
        self.sheet = sheet
        self.row = row
        self.column = column
        super().__init__(f"Sheet '{sheet}', row {row}: column {column + 1} has no character")


class UnpairedCharacterError(SimpGenError):
    """A rule's output text ends with a traditional character lacking its simplification."""

    def __init__(self, premise_trad: str, premise_simp: str, char: str) -> None:
        self.premise_trad = premise_trad
        self.premise_simp = premise_simp
        self.char = char
        super().__init__(
            f"Rule '{premise_trad}{premise_simp}': '{char}' has no paired simplified character"
        )


class ChainCycleError(SimpGenError):
    """Chaining through resolved analogies never settles."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__(f"Chaining cycle in resolved analogies: {' → '.join(cycle)}")
