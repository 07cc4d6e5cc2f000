"""Run summary reporting to the console and to report files."""

from datetime import datetime
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from lexifetch.core.types import RunSummary
from lexifetch.reports.helpers import format_failure, write_report_header, write_section_header
from lexifetch.utils.constants import Constants
from lexifetch.utils.helpers import expand_file_path, format_time


class RunReport(BaseModel):
    """What happened in one run of the pipeline."""

    summary: RunSummary
    failures: list[tuple[str, str]]
    output_path: str
    written: bool
    elapsed_time: float


def summary_lines(summary: RunSummary) -> list[str]:
    """The two-line run summary shown to the operator."""
    lines = [
        f"{summary.failed} error(s) encountered out of {summary.total} words.",
        f"{summary.success_percent}% of words found.",
    ]
    if not summary.complete:
        lines.append(f"Run interrupted: {summary.unattempted} word(s) were not attempted.")
    return lines


def log_run_report(report: RunReport) -> None:
    """Log the failure list and summary. Always called, whether or not output was written."""
    if report.failures:
        logger.error("")
        logger.error("Errors:")
        for word, reason in report.failures:
            logger.error(f"  {format_failure(word, reason)}")
        logger.error("")

    for line in summary_lines(report.summary):
        if report.summary.complete:
            logger.info(line)
        else:
            logger.warning(line)


def create_report_directory(reports_dir: str) -> Path:
    """Create a timestamped sub-directory for this run's reports."""
    base = Path(expand_file_path(reports_dir) or reports_dir)
    report_dir = base / datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def write_run_report(report: RunReport, report_dir: Path) -> Path:
    """Write the run report file and return its path."""
    path = report_dir / Constants.RUN_REPORT_FILENAME
    summary = report.summary

    with open(path, "w", encoding="utf-8") as f:
        write_report_header(f, "LEXIFETCH RUN REPORT")

        write_section_header(f, "Summary")
        f.write(f"Total words:      {summary.total}\n")
        f.write(f"Resolved:         {summary.resolved}\n")
        f.write(f"Failed:           {summary.failed}\n")
        f.write(f"Success:          {summary.success_percent}%\n")
        if not summary.complete:
            f.write(f"Not attempted:    {summary.unattempted} (run interrupted)\n")
        f.write(f"Elapsed:          {format_time(report.elapsed_time)}\n")
        if report.written:
            f.write(f"Output:           {report.output_path}\n")
        else:
            f.write("Output:           not written (no definitions resolved)\n")
        f.write("\n")

        write_section_header(f, f"Failures ({len(report.failures)})")
        for word, reason in report.failures:
            f.write(f"  {format_failure(word, reason)}\n")

    return path
