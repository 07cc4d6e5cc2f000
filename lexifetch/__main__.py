"""Main entry point for the lexifetch package."""

import sys

from loguru import logger

from lexifetch.cli import create_parser
from lexifetch.core import Config, SetupError, load_config
from lexifetch.processing import run_pipeline
from lexifetch.reports import RunReport
from lexifetch.utils.constants import Constants
from lexifetch.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("lexifetch - Dictionary definitions for word lists")
        logger.info("=" * 60)
        logger.info("")


def _print_config_summary(config: Config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Input: {config.input}")
        logger.info(f"  Output: {config.output}")
        logger.info(f"  Dictionary: {config.base_url}")
        logger.info(f"  Max in flight: {config.jobs}")
        logger.info(f"  Timeout: {config.timeout}s, retries: {config.retries}")
        if config.reports:
            logger.info(f"  Reports: {config.reports}")
        logger.info("")


def exit_status(report: RunReport) -> int:
    """Map a finished run to the process exit status."""
    summary = report.summary
    if not summary.complete:
        return Constants.INTERRUPTED_EXIT_CODE
    if summary.total > 0 and summary.resolved == 0:
        return 1
    return 0


def _run_pipeline_with_error_handling(config: Config) -> int:
    """Run pipeline with proper error handling."""
    try:
        report = run_pipeline(config)
    except SetupError as e:
        logger.error(f"✗ {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise

    if config.verbose and report.summary.complete:
        logger.info("")
        logger.info("=" * 60)
        logger.info("✓ Processing completed")
        logger.info("=" * 60)
    return exit_status(report)


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Print startup banner
    _print_startup_banner(config.verbose)

    # Print configuration summary
    _print_config_summary(config)

    # Run pipeline
    return _run_pipeline_with_error_handling(config)


if __name__ == "__main__":
    sys.exit(main())
