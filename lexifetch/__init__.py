"""lexifetch - Dictionary definitions for word lists.

Look up every word of a list on Webster's 1913 dictionary, falling back to
the word's lemmas, and collect the definitions as Obsidian Markdown callouts.
"""

from .core import Config, Definition, Failed, Resolved, load_config
from .processing import run_pipeline

__version__ = "0.3.0"
__all__ = ["Config", "Definition", "Failed", "Resolved", "load_config", "run_pipeline"]
