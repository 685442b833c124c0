"""Domain models of the scoring engine."""

from psychometrics.models.answer import (
    Answer,
    ChoiceValue,
    LikertValue,
    MostLeastValue,
    NormalizedAnswer,
    TableSelectionValue,
    TernaryChoiceValue,
)
from psychometrics.models.question import NormativeEntry, NormativeTable, Question, QuestionBank
from psychometrics.models.result import Interpretation, ScoringResult
from psychometrics.models.submission import Submission

__all__ = [
    "Answer",
    "ChoiceValue",
    "Interpretation",
    "LikertValue",
    "MostLeastValue",
    "NormalizedAnswer",
    "NormativeEntry",
    "NormativeTable",
    "Question",
    "QuestionBank",
    "ScoringResult",
    "Submission",
    "TableSelectionValue",
    "TernaryChoiceValue",
]
