"""Scoring result models.

A result is built once by the result assembler and never modified. It keeps
no reference to the question bank or the submission it came from, and its
score and label mappings are read-only views.
"""

from typing import Optional, Tuple

from pydantic import Field

from psychometrics.models.base import (
    EngineModel,
    ReadOnlyLabels,
    ReadOnlyMetadata,
    ReadOnlyScores,
)
from psychometrics.utils.constants import InstrumentCode


class Interpretation(EngineModel):
    """Qualitative reading of the scores."""

    overall_score: Optional[float] = None
    level: Optional[str] = None
    categories: ReadOnlyLabels = Field(default_factory=dict)
    descriptions: ReadOnlyLabels = Field(default_factory=dict)
    recommendations: Tuple[str, ...] = Field(default_factory=tuple)
    metadata: ReadOnlyMetadata = Field(default_factory=dict)


class ScoringResult(EngineModel):
    """Complete output of scoring one submission."""

    instrument: InstrumentCode
    test_id: str
    worker_id: str
    worker_process_id: str
    raw_scores: ReadOnlyScores = Field(default_factory=dict)
    scaled_scores: ReadOnlyScores = Field(default_factory=dict)
    interpretation: Interpretation = Field(default_factory=Interpretation)
    completion_time: int = Field(..., ge=0, description="Milliseconds between start and completion")
    scoring_version: str
    is_complete: bool = True
    answered_count: int = Field(default=0, ge=0)
    expected_count: int = Field(default=0, ge=0)
    malformed_answers: Tuple[str, ...] = Field(default_factory=tuple)

    @property
    def level(self) -> Optional[str]:
        """Headline band of the interpretation."""
        return self.interpretation.level
