"""Constants used throughout the SimpGen codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Default locations
    DEFAULT_WORKBOOK = "./简化字批评.xlsx"
    """Review workbook read when no path is given."""

    DEFAULT_OUTPUT = "./TSCharacters.txt"
    """OpenCC table written when no output is given."""

    RIME_OUTPUT_SUBPATH = ("rime", "opencc", "TPCharacters.txt")
    """Path of the RIME OpenCC table, relative to %APPDATA%."""

    RIME_BASE_ENV = "APPDATA"
    """Environment variable holding the RIME user data parent directory."""

    # Workbook layout
    STANDALONE_SHEETS = ("表一", "其他", "增补")
    """Sheets of standalone (non-analogy) character reviews, read in this order."""

    INFERRABLE_SHEET = "表二"
    """Sheet of inferrable characters and radicals."""

    RULE_SHEET = "表三"
    """Sheet of analogy rules."""

    REVIEW_COLUMNS = 4
    """Columns in a review row: trad, simp, precision note, compatible variant."""

    # Review notes
    UNDECIDED_MARKER = "？"
    """Trailing marker on a precision note meaning the reviewer has not decided."""

    # Output format
    OUTPUT_SEPARATOR = "\t"
    """Separator between traditional and simplified character in the table."""
