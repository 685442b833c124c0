"""Answer models for the scoring engine.

This module defines the raw answer a worker submits and the normalized
answer shapes the scoring strategies consume, one per question type.
"""

from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import AliasChoices, Field, field_validator

from psychometrics.models.base import EngineModel


class Answer(EngineModel):
    """A raw answer as captured by the test runner.

    ``value`` keeps whatever shape the runner stored: a letter, a number, a
    numeric string, a ``{"value": ...}`` wrapper, a ``{"most", "least"}``
    pair, a column to rows mapping or a list for multi-select items.
    """

    question_id: str = Field(..., validation_alias=AliasChoices("question_id", "questionId"))
    value: Any = Field(default=None, validation_alias=AliasChoices("value", "answer"))
    question_number: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("question_number", "questionNumber")
    )
    time_taken: Optional[float] = Field(
        default=None, ge=0, validation_alias=AliasChoices("time_taken", "timeTaken")
    )

    @field_validator("question_id", mode="before")
    @classmethod
    def validate_question_id(cls, value: Any) -> Any:
        """Accept numeric identifiers."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value


# ============================================================================
# NORMALIZED ANSWERS
# ============================================================================

class TernaryChoiceValue(EngineModel):
    """One of the letters A, B or C."""

    kind: Literal["ternary_choice"] = "ternary_choice"
    letter: Literal["A", "B", "C"]


class LikertValue(EngineModel):
    """An integer on the Likert scale."""

    kind: Literal["likert"] = "likert"
    value: int


class MostLeastValue(EngineModel):
    """Dimension codes picked as most and least like the worker."""

    kind: Literal["most_least"] = "most_least"
    most: str
    least: str


class ChoiceValue(EngineModel):
    """Selected option keys, upper-cased; one entry for single select."""

    kind: Literal["choice"] = "choice"
    choices: Tuple[str, ...]


class TableSelectionValue(EngineModel):
    """Row indices marked per table column."""

    kind: Literal["table_selection"] = "table_selection"
    columns: Dict[str, Tuple[int, ...]]


NormalizedAnswer = Annotated[
    Union[TernaryChoiceValue, LikertValue, MostLeastValue, ChoiceValue, TableSelectionValue],
    Field(discriminator="kind"),
]
