"""Report generation for lexifetch."""

from .helpers import format_failure, write_report_header, write_section_header
from .run_report import (
    RunReport,
    create_report_directory,
    log_run_report,
    summary_lines,
    write_run_report,
)

__all__ = [
    "RunReport",
    "create_report_directory",
    "format_failure",
    "log_run_report",
    "summary_lines",
    "write_report_header",
    "write_run_report",
    "write_section_header",
]
