"""Morphological analysis: lemma candidates for fallback lookups."""

from lexifetch.morphology.lemmas import WORDNET_POS_ORDER, WordNetLemmas

__all__ = ["WORDNET_POS_ORDER", "WordNetLemmas"]
