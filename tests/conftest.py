"""Shared fakes for the lookup and lemma collaborators."""

import asyncio

import pytest

from lexifetch.core import Definition, DefinitionLookupError


class FakeDictionary:
    """In-memory DefinitionSource that records calls and concurrency."""

    def __init__(self, entries=(), errors=(), delay=0.0, interrupt_on=()):
        self.entries = {term: Definition(term=term, blocks=(f"<p>{term} sense</p>",)) for term in entries}
        self.errors = set(errors)
        self.interrupt_on = set(interrupt_on)
        self.delay = delay
        self.calls: list[str] = []
        self.active = 0
        self.peak = 0

    async def lookup(self, term):
        self.calls.append(term)
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            await asyncio.sleep(self.delay)
            if term in self.interrupt_on:
                raise KeyboardInterrupt
            if term in self.errors:
                raise DefinitionLookupError(term, "connection reset")
            return self.entries.get(term)
        finally:
            self.active -= 1


class FakeLemmas:
    """LemmaSource backed by a dict; records which words were asked about."""

    def __init__(self, mapping=None, fail_for=()):
        self.mapping = mapping or {}
        self.fail_for = set(fail_for)
        self.calls: list[str] = []

    def lemmas_of(self, word):
        self.calls.append(word)
        if word in self.fail_for:
            raise RuntimeError(f"analyzer crashed on {word}")
        return list(self.mapping.get(word, []))


@pytest.fixture
def make_dictionary():
    return FakeDictionary


@pytest.fixture
def make_lemmas():
    return FakeLemmas
