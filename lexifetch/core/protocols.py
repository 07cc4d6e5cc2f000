"""Contracts for the collaborators the resolution core depends on."""

from collections.abc import Callable, Sequence
from typing import Protocol

from lexifetch.core.types import Definition


class DefinitionSource(Protocol):
    """Looks up a single term in a dictionary."""

    async def lookup(self, term: str) -> Definition | None:
        """Return the definition for ``term``, or None if the term is absent.

        Raises:
            DefinitionLookupError: On transport or parsing failures
        """


class LemmaSource(Protocol):
    """Produces root-form candidates for a word."""

    def lemmas_of(self, word: str) -> list[str]:
        """Return lemma candidates for ``word`` in lookup order."""


# render(term, blocks) -> formatted document text
Renderer = Callable[[str, Sequence[str]], str]
