"""Per-word resolution through the fallback chain."""

from collections.abc import Iterator

from loguru import logger

from lexifetch.core.errors import DefinitionLookupError
from lexifetch.core.protocols import DefinitionSource, LemmaSource
from lexifetch.core.types import Failed, FailureKind, Outcome, Resolved
from lexifetch.utils.constants import Constants
from lexifetch.utils.debug import log_if_debug_word


class TermResolver:
    """Resolves one word: the word itself first, then its lemmas in order.

    Lookups within one word are strictly sequential, and the chain is
    consumed lazily, so nothing after the first hit is ever requested.
    """

    def __init__(
        self,
        source: DefinitionSource,
        lemmas: LemmaSource,
        debug_words: frozenset[str] = frozenset(),
    ):
        self.source = source
        self.lemmas = lemmas
        self.debug_words = debug_words

    def candidate_chain(self, word: str) -> Iterator[str]:
        """Yield ``word``, then each distinct lemma that differs from it.

        Lemmas are only computed if the caller asks for a second candidate.
        """
        yield word
        seen = {word}
        for lemma in self.lemmas.lemmas_of(word):
            if lemma in seen:
                continue
            seen.add(lemma)
            yield lemma

    async def resolve(self, word: str) -> Outcome:
        """Resolve ``word`` to a definition, or explain why it could not be.

        A lookup error ends the chain: it is reported as such, not as a
        missing definition, and is not retried here.
        """
        for position, candidate in enumerate(self.candidate_chain(word)):
            if position == 0:
                logger.debug(f"Fetching definition for {candidate}")
            else:
                logger.debug(f"Fetching definition for lemma: {candidate} (of {word})")

            try:
                definition = await self.source.lookup(candidate)
            except DefinitionLookupError as e:
                log_if_debug_word(
                    word, f"lookup of '{candidate}' failed: {e.detail}", self.debug_words, "resolve"
                )
                return Failed(
                    word=word, kind=FailureKind.LOOKUP_ERROR, reason=f"lookup error: {e.detail}"
                )

            if definition is not None:
                log_if_debug_word(word, f"resolved via '{candidate}'", self.debug_words, "resolve")
                return Resolved(word=word, definition=definition)

            log_if_debug_word(word, f"no entry for '{candidate}'", self.debug_words, "resolve")

        return Failed(
            word=word, kind=FailureKind.NO_DEFINITION, reason=Constants.NO_DEFINITION_REASON
        )
