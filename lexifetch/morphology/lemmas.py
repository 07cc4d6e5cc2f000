"""Lemma candidates from WordNet."""

from typing import Protocol

from loguru import logger

from lexifetch.core.errors import SetupError

# WordNet parts of speech in the order their base forms are tried.
# 'v' first so inflected verbs ("running") fall back to the verb ("run").
WORDNET_POS_ORDER = ("v", "n", "a", "r")


class Lemmatizer(Protocol):
    def lemmatize(self, word: str, pos: str = "n") -> str: ...


def _ensure_wordnet_corpus() -> bool:
    """Download the WordNet corpus; True if it is now available."""
    import nltk

    try:
        nltk.download("wordnet", quiet=True, raise_on_error=True)
        nltk.download("omw-1.4", quiet=True, raise_on_error=True)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not download WordNet corpus: {e}")
        return False
    return True


class WordNetLemmas:
    """Produces lemma candidates for a word using nltk's WordNet lemmatizer.

    Candidates are deterministic for a given word and never include the word
    itself. Call ``ensure_corpus`` before sharing an instance between
    concurrent resolutions so a missing corpus is fetched up front.
    """

    def __init__(self, lemmatizer: Lemmatizer | None = None):
        if lemmatizer is None:
            from nltk.stem import WordNetLemmatizer

            lemmatizer = WordNetLemmatizer()
        self._lemmatizer = lemmatizer
        self._corpus_checked = False

    def _lemmatize(self, word: str, pos: str) -> str:
        try:
            return self._lemmatizer.lemmatize(word, pos)
        except LookupError:
            # nltk raises LookupError when the corpus has not been downloaded
            if self._corpus_checked:
                raise
            self._corpus_checked = True
            if not _ensure_wordnet_corpus():
                raise
            return self._lemmatizer.lemmatize(word, pos)

    def ensure_corpus(self) -> None:
        """Load the WordNet corpus, downloading it once if it is missing.

        Raises:
            SetupError: If the corpus is still unavailable
        """
        try:
            self._lemmatize("test", "n")
        except LookupError as e:
            # nltk pads its message with banner lines of asterisks
            lines = [line.strip() for line in str(e).splitlines()]
            detail = next((line for line in lines if line.strip("*")), "not found")
            raise SetupError(f"WordNet corpus unavailable: {detail}") from e

    def lemmas_of(self, word: str) -> list[str]:
        """Return base forms of ``word`` for each part of speech, without repeats."""
        candidates: list[str] = []
        for pos in WORDNET_POS_ORDER:
            lemma = self._lemmatize(word, pos).lower()
            if lemma and lemma != word and lemma not in candidates:
                candidates.append(lemma)
        return candidates
