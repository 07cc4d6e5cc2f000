"""Unit tests for WordNet lemma candidates, with a stub lemmatizer."""

import pytest

from lexifetch.core import SetupError
from lexifetch.morphology import WORDNET_POS_ORDER, WordNetLemmas


class StubLemmatizer:
    """Mimics nltk's WordNetLemmatizer.lemmatize(word, pos)."""

    def __init__(self, table):
        self.table = table
        self.calls = []

    def lemmatize(self, word, pos="n"):
        self.calls.append((word, pos))
        return self.table.get((word, pos), word)


class MissingCorpusLemmatizer:
    def lemmatize(self, word, pos="n"):
        raise LookupError("Resource wordnet not found.")


class TestWordNetLemmas:
    """Candidate ordering and filtering."""

    def test_verb_lemma_first(self):
        stub = StubLemmatizer({("running", "v"): "run", ("running", "n"): "running"})

        assert WordNetLemmas(stub).lemmas_of("running") == ["run"]

    def test_tries_every_part_of_speech_in_order(self):
        stub = StubLemmatizer({})

        WordNetLemmas(stub).lemmas_of("word")

        assert [pos for _, pos in stub.calls] == list(WORDNET_POS_ORDER)

    def test_distinct_candidates_in_pos_order(self):
        stub = StubLemmatizer(
            {
                ("saw", "v"): "see",
                ("saw", "n"): "saw",
                ("better", "a"): "good",
            }
        )
        lemmas = WordNetLemmas(stub)

        assert lemmas.lemmas_of("saw") == ["see"]
        assert lemmas.lemmas_of("better") == ["good"]

    def test_keeps_different_lemmas_per_pos(self):
        stub = StubLemmatizer({("leaves", "v"): "leave", ("leaves", "n"): "leaf"})

        assert WordNetLemmas(stub).lemmas_of("leaves") == ["leave", "leaf"]

    def test_excludes_the_word_itself(self):
        stub = StubLemmatizer({})

        assert WordNetLemmas(stub).lemmas_of("run") == []

    def test_missing_corpus_is_downloaded_once(self, monkeypatch):
        """A missing corpus triggers one download attempt; failure is raised."""
        attempts = []
        monkeypatch.setattr(
            "lexifetch.morphology.lemmas._ensure_wordnet_corpus",
            lambda: attempts.append(1) or False,
        )
        lemmas = WordNetLemmas(MissingCorpusLemmatizer())

        with pytest.raises(LookupError):
            lemmas.lemmas_of("running")

        assert attempts == [1]


class FlakyCorpusLemmatizer:
    """Raises LookupError until the corpus has been 'downloaded'."""

    def __init__(self):
        self.available = False

    def lemmatize(self, word, pos="n"):
        if not self.available:
            raise LookupError("\n**********\n  Resource wordnet not found.\n**********\n")
        return word


class TestEnsureCorpus:
    """Loading the corpus before any lemmas are requested."""

    def test_unavailable_corpus_is_a_setup_error(self, monkeypatch):
        monkeypatch.setattr("lexifetch.morphology.lemmas._ensure_wordnet_corpus", lambda: False)
        lemmas = WordNetLemmas(FlakyCorpusLemmatizer())

        with pytest.raises(SetupError, match="WordNet corpus unavailable: Resource wordnet not found."):
            lemmas.ensure_corpus()

    def test_downloads_missing_corpus_once(self, monkeypatch):
        stub = FlakyCorpusLemmatizer()
        attempts = []

        def download():
            attempts.append(1)
            stub.available = True
            return True

        monkeypatch.setattr("lexifetch.morphology.lemmas._ensure_wordnet_corpus", download)
        lemmas = WordNetLemmas(stub)

        lemmas.ensure_corpus()

        assert attempts == [1]
        assert lemmas.lemmas_of("run") == []
        assert attempts == [1]
