"""Scoring strategy for the IL (Wonderlic style) aptitude test."""

from typing import Dict, FrozenSet, List, Optional, Tuple

from psychometrics.catalogs import wonderlic as catalog
from psychometrics.catalogs.base import select_band
from psychometrics.models.question import NormativeTable, Question, QuestionBank
from psychometrics.models.result import Interpretation
from psychometrics.services.answer_normalizer import parse_choices
from psychometrics.services.scoring.base import ScoredItem, ScoringStrategy
from psychometrics.utils.constants import ErrorCodes, InstrumentCode, ScoringConstants
from psychometrics.utils.exceptions import ConfigurationError
from psychometrics.utils.helpers import calculate_percentage


def answer_key(question: Question) -> FrozenSet[str]:
    """Get the set of option keys that answer a question correctly.

    Raises:
        ConfigurationError: If the question has no readable answer key
    """
    choices = parse_choices(question.correct_answer)
    if choices is None:
        raise ConfigurationError(
            f"Question {question.id} has no correct answer",
            config_key="correct_answer",
            config_value=question.correct_answer,
            question_id=question.id,
            error_code=ErrorCodes.MISSING_CORRECT_ANSWER,
        )
    return frozenset(choices)


class WonderlicScoringStrategy(ScoringStrategy):
    """Correct-answer count of the aptitude test."""

    instrument = InstrumentCode.TEST_IL
    catalog_version = catalog.CATALOG_VERSION

    def validate_configuration(
        self,
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> None:
        """Check that every question carries an answer key."""
        for question in bank.questions:
            answer_key(question)

    def calculate(
        self,
        items: List[ScoredItem],
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> Tuple[Dict[str, float], Dict[str, float]]:
        correct = sum(
            1 for question, value in items if frozenset(value.choices) == answer_key(question)
        )
        incorrect = len(items) - correct
        total = len(bank)

        raw_scores = {
            "correct": float(correct),
            "incorrect": float(incorrect),
            "unanswered": float(total - correct - incorrect),
            "total": float(total),
        }
        scaled_scores = {
            "score": float(correct),
            "percentage": calculate_percentage(
                correct, total, ScoringConstants.PERCENTAGE_DECIMALS
            ),
        }
        return raw_scores, scaled_scores

    def interpret(
        self,
        raw_scores: Dict[str, float],
        scaled_scores: Dict[str, float]
    ) -> Interpretation:
        # Banded on the unrounded percentage
        percentage = calculate_percentage(raw_scores["correct"], raw_scores["total"], None)
        band = select_band(percentage, catalog.BANDS)

        return Interpretation(
            overall_score=scaled_scores["percentage"],
            level=band.code,
            categories={"level": band.code},
            descriptions={
                "level": band.description,
                "summary": band.summary,
            },
            recommendations=band.recommendations,
            metadata={
                "catalog_version": self.catalog_version,
                "characteristics": list(band.characteristics),
                "capabilities": list(band.capabilities),
                "correct": int(raw_scores["correct"]),
                "total": int(raw_scores["total"]),
            },
        )
