"""Utility functions for lexifetch."""

from lexifetch.utils.constants import Constants
from lexifetch.utils.debug import is_debug_word, log_debug_word, log_if_debug_word
from lexifetch.utils.helpers import expand_file_path, format_time, percent_of
from lexifetch.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "format_time",
    "is_debug_word",
    "log_debug_word",
    "log_if_debug_word",
    "percent_of",
    "setup_logger",
]
