"""End-to-end run: load words, resolve them, write the document, report."""

import asyncio
import contextlib
import time

from loguru import logger

from lexifetch.core.config import Config
from lexifetch.core.protocols import DefinitionSource, LemmaSource, Renderer
from lexifetch.core.types import Outcome
from lexifetch.data import derive_output_path, load_words, write_output
from lexifetch.lookup import WebstersClient
from lexifetch.morphology import WordNetLemmas
from lexifetch.rendering import render_markdown
from lexifetch.reports import RunReport, create_report_directory, log_run_report, write_run_report
from lexifetch.resolution import ConcurrencyScheduler, TermResolver, aggregate


def _resolve_words(
    words: list[str],
    config: Config,
    source: DefinitionSource | None,
    lemmas: LemmaSource,
) -> tuple[list[Outcome], bool]:
    """Run the scheduler in a fresh event loop.

    Returns:
        Tuple of (outcomes, complete). On KeyboardInterrupt the outcomes that
        had already finished are returned with complete=False.
    """
    holder: dict[str, ConcurrencyScheduler] = {}

    async def _run() -> list[Outcome]:
        async with contextlib.AsyncExitStack() as stack:
            lookup = source
            if lookup is None:
                lookup = await stack.enter_async_context(
                    WebstersClient(
                        base_url=config.base_url,
                        timeout=config.timeout,
                        retries=config.retries,
                    )
                )
            resolver = TermResolver(lookup, lemmas, frozenset(config.debug_words))
            scheduler = ConcurrencyScheduler(resolver, config.jobs, show_progress=config.verbose)
            holder["scheduler"] = scheduler
            return await scheduler.run_all(words)

    try:
        return asyncio.run(_run()), True
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Interrupted, keeping definitions resolved so far")
        scheduler = holder.get("scheduler")
        return (list(scheduler.completed) if scheduler else []), False


def run_pipeline(
    config: Config,
    source: DefinitionSource | None = None,
    lemmas: LemmaSource | None = None,
    render: Renderer = render_markdown,
) -> RunReport:
    """Resolve the configured word list and write the resolved definitions.

    Args:
        config: Configuration object
        source: Definition lookup; a WebstersClient is created when omitted
        lemmas: Lemma candidates; WordNet when omitted
        render: Renderer for resolved definitions

    Returns:
        RunReport describing the run

    Raises:
        SetupError: If the input cannot be loaded, the output path derived or
            the WordNet corpus loaded; nothing has been looked up or written
            in that case
    """
    start_time = time.time()

    # Setup: anything failing here aborts before any lookup
    words = load_words(config.input, verbose=config.verbose)
    output_path = derive_output_path(config.input, config.output)
    if lemmas is None:
        lemmas = WordNetLemmas()
        lemmas.ensure_corpus()

    if config.verbose:
        logger.info(f"  Resolving {len(words)} words with up to {config.jobs} in flight")

    outcomes, complete = _resolve_words(words, config, source, lemmas)

    result = aggregate(outcomes, render, total=len(words), complete=complete)

    written = False
    if result.documents:
        logger.info(f"\nWriting results to {output_path}")
        write_output(output_path, result.documents)
        written = True
        logger.info("Done!")

    report = RunReport(
        summary=result.summary,
        failures=result.failures,
        output_path=str(output_path),
        written=written,
        elapsed_time=time.time() - start_time,
    )

    log_run_report(report)

    if config.reports:
        report_path = write_run_report(report, create_report_directory(config.reports))
        if config.verbose:
            logger.info(f"  Report written to {report_path}")

    return report
