"""Helper functions for report generation."""

from datetime import datetime
from typing import TextIO


def write_report_header(f: TextIO, title: str) -> None:
    """Write a standard report header with title and timestamp.

    Args:
        f: File object to write to
        title: Title of the report
    """
    f.write("=" * 80 + "\n")
    f.write(f"{title}\n")
    f.write("=" * 80 + "\n")
    f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")


def write_section_header(f: TextIO, title: str) -> None:
    """Write a section header with separator line.

    Args:
        f: File object to write to
        title: Title of the section (empty string to write only separator)
    """
    if title:
        f.write(f"{title}\n")
    f.write("-" * 80 + "\n")


def format_failure(word: str, reason: str) -> str:
    return f"{word}: {reason}"
