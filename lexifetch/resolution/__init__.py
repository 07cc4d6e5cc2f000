"""Resolution core: fallback chain, bounded scheduling and aggregation."""

from lexifetch.resolution.aggregation import AggregateResult, aggregate, summarize
from lexifetch.resolution.resolver import TermResolver
from lexifetch.resolution.scheduler import ConcurrencyScheduler

__all__ = [
    "AggregateResult",
    "ConcurrencyScheduler",
    "TermResolver",
    "aggregate",
    "summarize",
]
