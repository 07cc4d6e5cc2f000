"""Input loading and output writing."""

from lexifetch.data.output import derive_output_path, write_output
from lexifetch.data.words import load_words, normalize_words

__all__ = ["derive_output_path", "load_words", "normalize_words", "write_output"]
