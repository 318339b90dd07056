"""Main entry point for simpgen package."""

import os
import sys

from loguru import logger

from simpgen.cli import create_parser
from simpgen.core import SimpGenError, load_config
from simpgen.output import rime_output_path
from simpgen.processing import run_pipeline
from simpgen.utils.constants import Constants
from simpgen.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("SimpGen - Simplification Table Generator")
        logger.info("=" * 60)
        logger.info("")


def _resolve_rime_output(config, parser) -> None:
    """Point the output at the RIME OpenCC directory when --rime is given."""
    if not config.rime:
        return
    if config.output != Constants.DEFAULT_OUTPUT:
        parser.error("--rime and --output cannot be combined")
    output = rime_output_path(os.environ)
    if output is None:
        parser.error("--rime requires the APPDATA environment variable")
    config.output = output


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Workbook: {config.workbook}")
        logger.info(f"  Output: {config.output}")
        logger.info(f"  Chaining: {config.chain_mode.value}")
        if config.reports:
            logger.info(f"  Reports: {config.reports}")
        if config.debug_chars:
            logger.info(f"  Debug characters: {''.join(config.debug_chars)}")
        logger.info("")


def _run_pipeline_with_error_handling(config) -> None:
    """Run pipeline with proper error handling."""
    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except SimpGenError as e:
        logger.error(f"✗ {e}")
        sys.exit(1)
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Print startup banner
    _print_startup_banner(config.verbose)

    # Fix the output destination once
    _resolve_rime_output(config, parser)

    # Print configuration summary
    _print_config_summary(config)

    # Run pipeline
    _run_pipeline_with_error_handling(config)


if __name__ == "__main__":
    main()
