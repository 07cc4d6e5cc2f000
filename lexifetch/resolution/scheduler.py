"""Bounded-concurrency scheduling of word resolutions."""

import asyncio

from loguru import logger
from tqdm import tqdm

from lexifetch.core.types import Failed, FailureKind, Outcome
from lexifetch.resolution.resolver import TermResolver
from lexifetch.utils.constants import Constants


class ConcurrencyScheduler:
    """Runs a TermResolver over many words, at most ``max_in_flight`` at a time.

    A permit covers a word's whole fallback chain, not a single lookup. Each
    word's outcome is recorded only once its resolution has finished, in
    completion order, so ``completed`` stays consistent if the run is
    interrupted part-way.
    """

    def __init__(
        self,
        resolver: TermResolver,
        max_in_flight: int = Constants.DEFAULT_MAX_IN_FLIGHT,
        show_progress: bool = False,
    ):
        if max_in_flight < 1:
            raise ValueError(f"max_in_flight must be at least 1, got {max_in_flight}")
        self.resolver = resolver
        self.max_in_flight = max_in_flight
        self.show_progress = show_progress
        self.completed: list[Outcome] = []

    async def _resolve_isolated(self, word: str) -> Outcome:
        """Resolve one word; an unexpected error becomes that word's failure."""
        try:
            return await self.resolver.resolve(word)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning(f"Unexpected error while resolving '{word}': {e!r}")
            return Failed(
                word=word,
                kind=FailureKind.UNEXPECTED,
                reason=f"unexpected error: {type(e).__name__}: {e}",
            )

    async def run_all(self, words: list[str]) -> list[Outcome]:
        """Resolve every word and return one outcome per distinct word.

        Args:
            words: Words to resolve; repeats are resolved once

        Returns:
            Outcomes in the order the resolutions completed
        """
        unique_words = list(dict.fromkeys(words))
        self.completed = []

        permits = asyncio.Semaphore(self.max_in_flight)
        progress = tqdm(
            total=len(unique_words),
            desc="Resolving words",
            unit="word",
            disable=not self.show_progress,
        )

        async def _run_one(word: str) -> None:
            async with permits:
                outcome = await self._resolve_isolated(word)
            self.completed.append(outcome)
            progress.update(1)

        tasks = [asyncio.create_task(_run_one(word)) for word in unique_words]
        try:
            await asyncio.gather(*tasks)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            progress.close()

        return list(self.completed)
