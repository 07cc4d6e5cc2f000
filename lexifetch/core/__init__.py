"""Core domain types, errors and configuration for lexifetch."""

from .config import Config, load_config
from .errors import DefinitionLookupError, LexifetchError, SetupError
from .protocols import DefinitionSource, LemmaSource, Renderer
from .types import Definition, Failed, FailureKind, Outcome, Resolved, RunSummary

__all__ = [
    "Config",
    "Definition",
    "DefinitionLookupError",
    "DefinitionSource",
    "Failed",
    "FailureKind",
    "LemmaSource",
    "LexifetchError",
    "Outcome",
    "Renderer",
    "Resolved",
    "RunSummary",
    "SetupError",
    "load_config",
]
