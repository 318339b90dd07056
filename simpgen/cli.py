"""Command-line interface."""

import argparse

from simpgen.core import ChainMode


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="simpgen",
        description="Generate an OpenCC traditional-to-simplified character table "
        "from a review workbook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default workbook and output (./简化字批评.xlsx -> ./TSCharacters.txt)
  %(prog)s

  # Explicit workbook and output
  %(prog)s reviews.xlsx -o opencc/TSCharacters.txt -v

  # Install straight into RIME (%%APPDATA%%/rime/opencc/TPCharacters.txt)
  %(prog)s reviews.xlsx --rime

  # Trace what happens to particular characters
  %(prog)s reviews.xlsx --debug --debug-chars 門問

Example config.json:
{
  "workbook": "./简化字批评.xlsx",
  "output": "./TSCharacters.txt",
  "chain_mode": "single",
  "reports": "./reports",
  "verbose": true
}
        """,
    )

    # Input
    parser.add_argument(
        "workbook",
        nargs="?",
        default=None,
        help="Review workbook (.xlsx), default ./简化字批评.xlsx",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Output
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output table path ('-' for stdout), default ./TSCharacters.txt",
    )
    parser.add_argument(
        "-r",
        "--rime",
        action="store_true",
        help="Write the table to %%APPDATA%%/rime/opencc for RIME",
    )
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to generate resolution reports (creates timestamped subdirectories)",
    )

    # Resolution
    parser.add_argument(
        "--chain-mode",
        dest="chain_mode",
        choices=[mode.value for mode in ChainMode],
        help="Chain explicit mappings through one resolved analogy (single, default) "
        "or until nothing changes (fixpoint)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (use with --debug-chars to trace characters)",
    )
    parser.add_argument(
        "--debug-chars",
        dest="debug_chars",
        type=str,
        help="Characters to trace through every stage (requires --debug)",
    )

    return parser
