"""Scoring strategy for the DISC forced-choice behavioural profile.

Every block offers four words, one per dimension. The word picked as most
like the worker adds a point to its dimension; the one picked as least like
them takes a point away.
"""

from typing import Dict, List, Optional, Tuple

from psychometrics.catalogs import disc as catalog
from psychometrics.models.question import NormativeTable, QuestionBank
from psychometrics.models.result import Interpretation
from psychometrics.services.scoring.base import ScoredItem, ScoringStrategy
from psychometrics.utils.constants import (
    DISC_DIMENSIONS,
    ErrorCodes,
    InstrumentCode,
    ScoringConstants,
)
from psychometrics.utils.exceptions import ConfigurationError
from psychometrics.utils.helpers import rank_dimensions, round_half_up


def determine_profile_label(raw_scores: Dict[str, float]) -> str:
    """Label the profile from the two highest raw scores.

    When the top two dimensions are close the profile is read as a pair;
    pairs with no label of their own read as balanced.

    Args:
        raw_scores: Raw score per dimension

    Returns:
        str: Profile label
    """
    ranked = rank_dimensions(raw_scores, DISC_DIMENSIONS)
    (first, first_score), (second, second_score) = ranked[0], ranked[1]

    if first_score - second_score <= ScoringConstants.DISC_PAIRED_PROFILE_GAP:
        return catalog.PAIRED_PROFILE_LABELS.get(
            frozenset((first, second)), catalog.BALANCED_PROFILE_LABEL
        )
    return catalog.DIMENSIONS[first].profile_label


def _to_percentages(shifted: Dict[str, float], total: float) -> Dict[str, int]:
    """Round each dimension's share of the total, half up.

    When every share ends in .5 half-up rounding overshoots 100 by two; the
    share rounded up the most (first in D I S C order on ties) gives one back.
    """
    exact = {dimension: value / total * 100 for dimension, value in shifted.items()}
    rounded = {dimension: round_half_up(share) for dimension, share in exact.items()}

    excess = sum(rounded.values()) - 100
    if excess > 1:
        overshoot = sorted(
            DISC_DIMENSIONS, key=lambda d: rounded[d] - exact[d], reverse=True
        )
        for dimension in overshoot[:excess - 1]:
            rounded[dimension] -= 1

    return rounded


def get_natural_style(dimension: str, scaled_score: float) -> str:
    """Get the natural style text of a dimension at a percentage."""
    definition = catalog.DIMENSIONS[dimension]
    if scaled_score < ScoringConstants.DISC_STYLE_LOW:
        return definition.style_low
    if scaled_score > ScoringConstants.DISC_STYLE_HIGH:
        return definition.style_high
    return definition.style_medium


class DISCScoringStrategy(ScoringStrategy):
    """Most/least scoring of the four DISC dimensions."""

    instrument = InstrumentCode.TEST_DISC
    catalog_version = catalog.CATALOG_VERSION

    def validate_configuration(
        self,
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> None:
        """Check that every block's words belong to the four dimensions."""
        for question in bank.questions:
            words = question.options.get("words") or {}
            unknown = [code for code in words if str(code).upper() not in DISC_DIMENSIONS]
            if unknown:
                raise ConfigurationError(
                    f"Question {question.id} maps words to unknown dimensions",
                    config_key="options.words",
                    config_value=unknown,
                    question_id=question.id,
                    error_code=ErrorCodes.UNKNOWN_DIMENSION,
                )

    def calculate(
        self,
        items: List[ScoredItem],
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> Tuple[Dict[str, float], Dict[str, float]]:
        raw_scores: Dict[str, float] = {dimension: 0.0 for dimension in DISC_DIMENSIONS}

        for _, value in items:
            raw_scores[value.most] += 1
            raw_scores[value.least] -= 1

        # Shift by the block count so every dimension is non-negative
        blocks = len(items)
        shifted = {dimension: raw + blocks for dimension, raw in raw_scores.items()}
        total = sum(shifted.values())

        if total == 0:
            scaled_scores = {
                dimension: float(ScoringConstants.DISC_EVEN_SPLIT) for dimension in DISC_DIMENSIONS
            }
        else:
            scaled_scores = {
                dimension: float(percentage)
                for dimension, percentage in _to_percentages(shifted, total).items()
            }

        return raw_scores, scaled_scores

    def interpret(
        self,
        raw_scores: Dict[str, float],
        scaled_scores: Dict[str, float]
    ) -> Interpretation:
        ranked = rank_dimensions(scaled_scores, DISC_DIMENSIONS)
        primary = ranked[0][0]
        combined = ranked[0][0] + ranked[1][0]
        dominant = rank_dimensions(raw_scores, DISC_DIMENSIONS)[0][0]
        profile_label = determine_profile_label(raw_scores)
        primary_definition = catalog.DIMENSIONS[primary]

        descriptions: Dict[str, str] = {
            "profile": " ".join((
                primary_definition.profile_description,
                catalog.COMBINED_DESCRIPTIONS.get(combined, catalog.GENERIC_COMBINED_DESCRIPTION),
            )),
        }
        for dimension in DISC_DIMENSIONS:
            definition = catalog.DIMENSIONS[dimension]
            traits = definition.high_traits if raw_scores[dimension] > 0 else definition.low_traits
            descriptions[dimension] = (
                f"{definition.name}: {', '.join(traits[:catalog.TRAITS_PER_DESCRIPTION])}"
            )

        strengths: List[str] = []
        for dimension in DISC_DIMENSIONS:
            if scaled_scores[dimension] > ScoringConstants.DISC_STRENGTH_THRESHOLD:
                strengths.extend(
                    catalog.DIMENSIONS[dimension].strengths[:catalog.STRENGTHS_PER_DIMENSION]
                )
        if not strengths:
            strengths = list(catalog.BALANCED_STRENGTHS)

        work_recommendations = catalog.WORK_RECOMMENDATIONS.get(
            combined, catalog.GENERIC_WORK_RECOMMENDATIONS
        )

        return Interpretation(
            categories={
                "profile": profile_label,
                "primary": primary,
                "combined": combined,
                "dominant_dimension": dominant,
            },
            descriptions=descriptions,
            recommendations=tuple(work_recommendations),
            metadata={
                "catalog_version": self.catalog_version,
                "strengths": strengths,
                "growth_areas": list(primary_definition.growth_areas),
                "natural_style": {
                    dimension: get_natural_style(dimension, scaled_scores[dimension])
                    for dimension in DISC_DIMENSIONS
                },
                "profile_advice": list(
                    catalog.PROFILE_ADVICE.get(profile_label, catalog.GENERIC_PROFILE_ADVICE)
                ),
                "dimension_names": {
                    dimension: catalog.DIMENSIONS[dimension].name for dimension in DISC_DIMENSIONS
                },
            },
        )
