"""Type definitions for lexifetch."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Definition(BaseModel):
    """A dictionary entry: the term that matched plus one HTML block per sense."""

    model_config = ConfigDict(frozen=True)

    term: str
    blocks: tuple[str, ...] = Field(default_factory=tuple)
    headword: str | None = None  # As printed by the source, e.g. "Run"


class FailureKind(Enum):
    """Why a word could not be resolved."""

    NO_DEFINITION = "no_definition"
    LOOKUP_ERROR = "lookup_error"
    UNEXPECTED = "unexpected"


class Resolved(BaseModel):
    """Outcome for a word whose candidate chain produced a definition."""

    model_config = ConfigDict(frozen=True)

    word: str
    definition: Definition

    @property
    def matched_term(self) -> str:
        return self.definition.term


class Failed(BaseModel):
    """Outcome for a word that could not be resolved."""

    model_config = ConfigDict(frozen=True)

    word: str
    kind: FailureKind
    reason: str


# One outcome per distinct input word
Outcome = Resolved | Failed


class RunSummary(BaseModel):
    """Counts for a finished (or interrupted) run."""

    model_config = ConfigDict(frozen=True)

    total: int
    resolved: int
    failed: int
    success_percent: int
    complete: bool = True
    unattempted: int = 0
