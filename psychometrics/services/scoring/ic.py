"""Scoring strategy for the IC complex-instructions table test.

The worker marks the table rows that meet the criteria of each column. Each
mark that is also in the answer key earns a point; extra and missing marks
are reported but never subtract.
"""

from typing import Dict, List, Optional, Tuple

from psychometrics.catalogs import ic as catalog
from psychometrics.catalogs.base import select_band
from psychometrics.models.question import NormativeTable, Question, QuestionBank
from psychometrics.models.result import Interpretation
from psychometrics.services.answer_normalizer import parse_table_selection
from psychometrics.services.scoring.base import ScoredItem, ScoringStrategy
from psychometrics.utils.constants import ErrorCodes, InstrumentCode, ScoringConstants
from psychometrics.utils.exceptions import ConfigurationError
from psychometrics.utils.helpers import calculate_percentage


def expected_marks(question: Question) -> Dict[str, Tuple[int, ...]]:
    """Get the rows each column of a question should have marked.

    Raises:
        ConfigurationError: If the answer key is missing or not a column mapping
    """
    columns = parse_table_selection(question.correct_answer)
    if columns is None:
        raise ConfigurationError(
            f"Question {question.id} has no column answer key",
            config_key="correct_answer",
            config_value=question.correct_answer,
            question_id=question.id,
            error_code=ErrorCodes.MISSING_CORRECT_ANSWER,
        )
    return columns


def count_matches(
    marked: Dict[str, Tuple[int, ...]],
    expected: Dict[str, Tuple[int, ...]]
) -> Dict[str, int]:
    """Count the marks that are in the answer key, per column.

    Args:
        marked: Rows the worker marked per column
        expected: Rows of the answer key per column

    Returns:
        Dict[str, int]: Matching marks per answer-key column
    """
    return {
        column: len(set(marked.get(column, ())) & set(rows))
        for column, rows in expected.items()
    }


class ICScoringStrategy(ScoringStrategy):
    """Matched-mark scoring of the criteria table."""

    instrument = InstrumentCode.TEST_IC
    catalog_version = catalog.CATALOG_VERSION

    def validate_configuration(
        self,
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> None:
        """Check that every question carries a column answer key."""
        for question in bank.questions:
            expected_marks(question)

    def calculate(
        self,
        items: List[ScoredItem],
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> Tuple[Dict[str, float], Dict[str, float]]:
        expected_total = sum(
            len(rows) for question in bank.questions for rows in expected_marks(question).values()
        )

        column_scores: Dict[str, int] = {
            column: 0 for question in bank.questions for column in expected_marks(question)
        }
        score = 0
        extra = 0
        for question, value in items:
            expected = expected_marks(question)
            matches = count_matches(value.columns, expected)
            for column, matched in matches.items():
                column_scores[column] = column_scores.get(column, 0) + matched
            score += sum(matches.values())
            extra += sum(len(rows) for rows in value.columns.values()) - sum(matches.values())

        missing = expected_total - score

        raw_scores: Dict[str, float] = {
            "total": float(score),
            "expected": float(expected_total),
            "incorrect": float(extra + missing),
            "extra": float(extra),
            "missing": float(missing),
        }
        for column, matched in column_scores.items():
            raw_scores[f"{catalog.COLUMN_SCORE_PREFIX}{column}"] = float(matched)

        scaled_scores = {
            "score": float(score),
            "percentage": calculate_percentage(
                score, expected_total, ScoringConstants.PERCENTAGE_DECIMALS
            ),
        }
        return raw_scores, scaled_scores

    def interpret(
        self,
        raw_scores: Dict[str, float],
        scaled_scores: Dict[str, float]
    ) -> Interpretation:
        # Banded on the unrounded percentage
        percentage = calculate_percentage(raw_scores["total"], raw_scores["expected"], None)
        band = select_band(percentage, catalog.BANDS)

        columns = {
            key[len(catalog.COLUMN_SCORE_PREFIX):]: int(value)
            for key, value in raw_scores.items()
            if key.startswith(catalog.COLUMN_SCORE_PREFIX)
        }

        return Interpretation(
            overall_score=scaled_scores["percentage"],
            level=band.code,
            categories={"level": band.code},
            descriptions={"level": band.description},
            recommendations=band.recommendations,
            metadata={
                "catalog_version": self.catalog_version,
                "capabilities": list(band.capabilities),
                "score": int(raw_scores["total"]),
                "expected_marks": int(raw_scores["expected"]),
                "column_scores": columns,
            },
        )
