"""Partitioning of outcomes into rendered documents, failures and a summary."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from lexifetch.core.protocols import Renderer
from lexifetch.core.types import Failed, Outcome, Resolved, RunSummary
from lexifetch.utils.helpers import percent_of


class AggregateResult(BaseModel):
    """Everything the driver needs to write output and report on a run."""

    model_config = ConfigDict(frozen=True)

    documents: list[str]
    failures: list[tuple[str, str]]  # (word, reason)
    summary: RunSummary


def summarize(
    resolved: int,
    failed: int,
    total: int | None = None,
    complete: bool = True,
) -> RunSummary:
    """Build a RunSummary; ``total`` defaults to the number of outcomes."""
    if total is None:
        total = resolved + failed
    return RunSummary(
        total=total,
        resolved=resolved,
        failed=failed,
        success_percent=percent_of(resolved, total),
        complete=complete,
        unattempted=max(0, total - resolved - failed),
    )


def aggregate(
    outcomes: Iterable[Outcome],
    render: Renderer,
    total: int | None = None,
    complete: bool = True,
) -> AggregateResult:
    """Render resolved outcomes and collect failures, keeping outcome order.

    Args:
        outcomes: One outcome per resolved-or-failed word
        render: Turns (matched term, content blocks) into document text
        total: Number of input words, when some were never attempted
        complete: False if the run was interrupted before every word finished

    Returns:
        AggregateResult with documents, failures and summary
    """
    documents: list[str] = []
    failures: list[tuple[str, str]] = []

    for outcome in outcomes:
        if isinstance(outcome, Resolved):
            documents.append(render(outcome.matched_term, outcome.definition.blocks))
        elif isinstance(outcome, Failed):
            failures.append((outcome.word, outcome.reason))

    return AggregateResult(
        documents=documents,
        failures=failures,
        summary=summarize(len(documents), len(failures), total, complete),
    )
