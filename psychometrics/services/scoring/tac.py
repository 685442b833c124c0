"""Scoring strategy for the TAC customer-service competency test.

Likert items grouped in up to seven dimensions. Each dimension is read by
its mean; the global score is the mean of every valid answer, so larger
dimensions weigh more.
"""

from typing import Dict, List, Optional, Tuple

from psychometrics.catalogs import tac as catalog
from psychometrics.catalogs.base import select_band
from psychometrics.models.question import NormativeTable, QuestionBank
from psychometrics.models.result import Interpretation
from psychometrics.services.scoring.base import ScoredItem, ScoringStrategy
from psychometrics.utils.constants import (
    TAC_DIMENSIONS,
    ErrorCodes,
    InstrumentCode,
    ScoringConstants,
)
from psychometrics.utils.exceptions import ConfigurationError
from psychometrics.utils.helpers import calculate_mean

GLOBAL_SCORE_KEY = "global"


class TACScoringStrategy(ScoringStrategy):
    """Dimension and global means of the competency test."""

    instrument = InstrumentCode.TEST_TAC
    catalog_version = catalog.CATALOG_VERSION

    def validate_configuration(
        self,
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> None:
        """Check that every question belongs to a known dimension."""
        for question in bank.questions:
            if question.factor not in TAC_DIMENSIONS:
                raise ConfigurationError(
                    f"Question {question.id} has unknown dimension {question.factor}",
                    config_key="factor",
                    config_value=question.factor,
                    question_id=question.id,
                    error_code=ErrorCodes.UNKNOWN_DIMENSION,
                )

    def calculate(
        self,
        items: List[ScoredItem],
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> Tuple[Dict[str, float], Dict[str, float]]:
        present = bank.by_factor()
        values: Dict[str, List[int]] = {
            dimension: [] for dimension in TAC_DIMENSIONS if dimension in present
        }

        for question, value in items:
            values[question.factor].append(value.value)

        raw_scores = {dimension: float(sum(answers)) for dimension, answers in values.items()}
        scaled_scores = {
            dimension: calculate_mean(answers, ScoringConstants.MEAN_DECIMALS)
            for dimension, answers in values.items()
        }
        scaled_scores[GLOBAL_SCORE_KEY] = calculate_mean(
            [answer for answers in values.values() for answer in answers],
            ScoringConstants.MEAN_DECIMALS,
        )
        return raw_scores, scaled_scores

    def interpret(
        self,
        raw_scores: Dict[str, float],
        scaled_scores: Dict[str, float]
    ) -> Interpretation:
        global_score = scaled_scores[GLOBAL_SCORE_KEY]
        band = select_band(global_score, catalog.GLOBAL_BANDS)

        categories: Dict[str, str] = {"level": band.code}
        descriptions: Dict[str, str] = {"level": band.description}
        strengths: List[str] = []
        growth_areas: List[str] = []

        for dimension in raw_scores:
            mean = scaled_scores[dimension]
            tier = catalog.get_dimension_tier(mean)
            name = catalog.DIMENSION_NAMES[dimension]

            categories[dimension] = tier.label
            descriptions[dimension] = catalog.TIER_DESCRIPTIONS.get(dimension, {}).get(
                tier.label, catalog.NO_DESCRIPTION
            )

            if mean >= ScoringConstants.TAC_STRENGTH_THRESHOLD:
                strengths.append(name)
            elif mean < ScoringConstants.TAC_GROWTH_THRESHOLD:
                growth_areas.append(name)

        recommendations = list(band.recommendations)
        growth_line = catalog.GROWTH_AREA_LINES.get(band.code)
        if growth_line and growth_areas:
            recommendations.append(growth_line.format(areas=", ".join(growth_areas)))

        return Interpretation(
            overall_score=global_score,
            level=band.code,
            categories=categories,
            descriptions=descriptions,
            recommendations=tuple(recommendations),
            metadata={
                "catalog_version": self.catalog_version,
                "strengths": strengths or [catalog.NO_STRENGTHS_TEXT],
                "growth_areas": growth_areas or [catalog.NO_GROWTH_AREAS_TEXT],
                "dimension_names": {
                    dimension: catalog.DIMENSION_NAMES[dimension] for dimension in raw_scores
                },
            },
        )
