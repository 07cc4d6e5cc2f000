"""Command-line interface."""

import argparse

from lexifetch.utils.constants import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="lexifetch",
        description=(
            "Fetches the definition(s) of each word in a list from websters1913.com "
            "and outputs them in Markdown format"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write vocab.md next to the notes in ~/vault/
  %(prog)s vocab.txt ~/vault/

  # Explicit output file, fewer concurrent lookups, progress bar
  %(prog)s vocab.txt ~/vault/Words.md -j 4 -v

  # Using JSON config (CLI overrides JSON)
  %(prog)s vocab.txt out/ --config config.json

  # Trace how particular words are resolved
  %(prog)s vocab.txt out/ --debug --debug-words "running,geese"

The input is a .txt file with one word per line. Words are trimmed and
lower-cased, blank lines and lines starting with # are skipped, and repeated
words are looked up once. Words without an entry are retried with their
lemmas (e.g. running -> run).

Example config.json:
{
  "jobs": 10,
  "timeout": 10.0,
  "retries": 2,
  "reports": "./reports",
  "verbose": true
}
        """,
    )

    parser.add_argument("input", type=str, help="Input file path (.txt, one word per line)")
    parser.add_argument(
        "output", type=str, help="Output location (directory or .md file)"
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Lookup
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Maximum words resolved concurrently (default: {Constants.DEFAULT_MAX_IN_FLIGHT})",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help=f"Dictionary site root (default: {Constants.DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help=f"Per-request timeout in seconds (default: {Constants.DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--retries",
        type=int,
        help=f"Retries for throttled or failed requests (default: {Constants.DEFAULT_RETRIES})",
    )

    # Reports
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to write a run report (creates timestamped subdirectories)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Log every lookup attempt")
    parser.add_argument(
        "--debug-words",
        type=str,
        help="Comma-separated words to trace through resolution (requires --debug)",
    )

    return parser
