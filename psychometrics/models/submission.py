"""Submission model for the scoring engine."""

from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pydantic import AliasChoices, Field, field_validator

from psychometrics.models.answer import Answer
from psychometrics.models.base import EngineModel
from psychometrics.utils.datetime_utils import calculate_duration_ms, normalize_datetime_to_utc


class Submission(EngineModel):
    """A worker's completed answer sheet for one test."""

    test_id: str = Field(..., validation_alias=AliasChoices("test_id", "testId"))
    worker_id: str = Field(..., validation_alias=AliasChoices("worker_id", "workerId"))
    worker_process_id: str = Field(
        ..., validation_alias=AliasChoices("worker_process_id", "workerProcessId")
    )
    answers: Tuple[Answer, ...] = Field(default_factory=tuple)
    started_at: datetime = Field(..., validation_alias=AliasChoices("started_at", "startedAt"))
    completed_at: datetime = Field(..., validation_alias=AliasChoices("completed_at", "completedAt"))
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("started_at", "completed_at")
    @classmethod
    def validate_timestamps(cls, value: datetime) -> datetime:
        """Store timestamps in UTC; naive values are taken as UTC."""
        return normalize_datetime_to_utc(value)

    @field_validator("test_id", "worker_id", "worker_process_id", mode="before")
    @classmethod
    def validate_identifiers(cls, value: Any) -> Any:
        """Accept numeric identifiers."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def completion_time_ms(self) -> int:
        """Signed time between start and completion in milliseconds."""
        return calculate_duration_ms(self.started_at, self.completed_at)

    def duplicate_question_ids(self) -> List[str]:
        """Question ids answered more than once, in first-seen order."""
        counts = Counter(answer.question_id for answer in self.answers)
        return [question_id for question_id, count in counts.items() if count > 1]

    def answer_for(self, question_id: str) -> Optional[Answer]:
        """Get the answer given to a question, or None."""
        for answer in self.answers:
            if answer.question_id == question_id:
                return answer
        return None
