"""Scoring strategy for the 16PF ternary-choice personality inventory.

Each answer letter is mapped through the question's scoring table and
weighted by its polarity. Factor sums are standardized against the
normative table and converted to decatipos (1-10).
"""

from typing import Any, Dict, List, Optional, Tuple

from psychometrics.catalogs import sixteen_pf as catalog
from psychometrics.models.question import NormativeTable, Question, QuestionBank
from psychometrics.models.result import Interpretation
from psychometrics.services.scoring.base import ScoredItem, ScoringStrategy
from psychometrics.utils.constants import (
    SIXTEEN_PF_FACTORS,
    TERNARY_OPTIONS,
    ErrorCodes,
    InstrumentCode,
    ScoringConstants,
)
from psychometrics.utils.exceptions import ConfigurationError
from psychometrics.utils.helpers import clamp, coerce_number, round_half_up


def calculate_decatipo(raw_score: float, mean: float, std_dev: float) -> int:
    """Convert a raw factor score to a decatipo.

    Args:
        raw_score: Raw factor score
        mean: Normative mean of the factor
        std_dev: Normative standard deviation of the factor

    Returns:
        int: Decatipo between 1 and 10
    """
    z_score = (raw_score - mean) / std_dev
    decatipo = round_half_up(
        z_score * ScoringConstants.DECATIPO_SLOPE + ScoringConstants.DECATIPO_OFFSET
    )
    return clamp(decatipo, ScoringConstants.DECATIPO_MIN, ScoringConstants.DECATIPO_MAX)


def get_factor_interpretation(factor: str, decatipo: int) -> Dict[str, Any]:
    """Describe one factor at a decatipo.

    Args:
        factor: Factor code
        decatipo: Decatipo between 1 and 10

    Returns:
        Dict[str, Any]: Factor name, five-level and three-level readings,
        band description and pole description
    """
    definition = catalog.FACTORS.get(factor.upper())
    level = catalog.get_decatipo_level(decatipo)
    band = catalog.get_factor_band(decatipo)

    if definition is None:
        return {
            "factor": factor,
            "name": catalog.UNKNOWN_FACTOR_TEXT,
            "decatipo": decatipo,
            "level": level.value,
            "level_label": level.label,
            "band": band.value,
            "description": catalog.UNKNOWN_FACTOR_TEXT,
            "pole": catalog.UNKNOWN_FACTOR_TEXT,
        }

    return {
        "factor": definition.code,
        "name": definition.name,
        "decatipo": decatipo,
        "level": level.value,
        "level_label": level.label,
        "band": band.value,
        "description": catalog.get_band_description(definition, band),
        "pole": catalog.get_pole_description(definition, decatipo),
    }


def _scoring_table(question: Question) -> Dict[str, float]:
    """Read the letter to points table of a question.

    Raises:
        ConfigurationError: If the table is missing, incomplete or not numeric
    """
    scoring = question.options.get("scoring")
    if not isinstance(scoring, dict):
        raise ConfigurationError(
            f"Question {question.id} has no scoring table",
            config_key="options.scoring",
            question_id=question.id,
            error_code=ErrorCodes.MISSING_SCORING_MAP,
        )

    table: Dict[str, float] = {}
    for letter in TERNARY_OPTIONS:
        points = coerce_number(scoring.get(letter))
        if points is None:
            raise ConfigurationError(
                f"Scoring table of question {question.id} lacks a numeric value for {letter}",
                config_key=f"options.scoring.{letter}",
                config_value=scoring.get(letter),
                question_id=question.id,
                error_code=ErrorCodes.MISSING_SCORING_MAP,
            )
        table[letter] = points
    return table


class SixteenPFScoringStrategy(ScoringStrategy):
    """Decatipo scoring of the 16 personality factors."""

    instrument = InstrumentCode.TEST_16PF
    catalog_version = catalog.CATALOG_VERSION

    def validate_configuration(
        self,
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> None:
        """Check factors, scoring tables, polarities and normative entries."""
        for question in bank.questions:
            if question.factor not in SIXTEEN_PF_FACTORS:
                raise ConfigurationError(
                    f"Question {question.id} has unknown factor {question.factor}",
                    config_key="factor",
                    config_value=question.factor,
                    question_id=question.id,
                    error_code=ErrorCodes.UNKNOWN_DIMENSION,
                )
            _scoring_table(question)
            question.polarity  # raises on a polarity other than +1 or -1

        if normative_table is None:
            raise ConfigurationError(
                "16PF scoring requires a normative table",
                config_key="normative_table",
                error_code=ErrorCodes.MISSING_NORMATIVE_ENTRY,
            )

        for factor in self._scored_factors(bank):
            if normative_table.get(factor) is None:
                raise ConfigurationError(
                    f"Normative table has no entry for factor {factor}",
                    config_key=factor,
                    error_code=ErrorCodes.MISSING_NORMATIVE_ENTRY,
                )

    def calculate(
        self,
        items: List[ScoredItem],
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> Tuple[Dict[str, float], Dict[str, float]]:
        raw_scores: Dict[str, float] = {factor: 0.0 for factor in self._scored_factors(bank)}

        for question, value in items:
            points = _scoring_table(question)[value.letter] * question.polarity
            raw_scores[question.factor] += points

        scaled_scores: Dict[str, float] = {}
        for factor, raw_score in raw_scores.items():
            entry = normative_table.get(factor)
            scaled_scores[factor] = calculate_decatipo(raw_score, entry.mean, entry.std_dev)

        return raw_scores, scaled_scores

    def interpret(
        self,
        raw_scores: Dict[str, float],
        scaled_scores: Dict[str, float]
    ) -> Interpretation:
        categories: Dict[str, str] = {}
        descriptions: Dict[str, str] = {}
        factor_levels: Dict[str, str] = {}
        poles: Dict[str, str] = {}
        factor_names: Dict[str, str] = {}
        highlights: List[str] = []

        for factor, score in scaled_scores.items():
            decatipo = int(score)
            reading = get_factor_interpretation(factor, decatipo)

            categories[factor] = reading["level"]
            descriptions[factor] = reading["description"]
            factor_levels[factor] = reading["band"]
            poles[factor] = reading["pole"]
            factor_names[factor] = reading["name"]

            if decatipo <= ScoringConstants.DECATIPO_HIGHLIGHT_LOW:
                highlights.append(catalog.HIGHLIGHT_LOW.format(factor=factor))
            elif decatipo >= ScoringConstants.DECATIPO_HIGHLIGHT_HIGH:
                highlights.append(catalog.HIGHLIGHT_HIGH.format(factor=factor))

        if highlights:
            summary = catalog.SUMMARY_WITH_HIGHLIGHTS.format(highlights=", ".join(highlights))
        else:
            summary = catalog.SUMMARY_BALANCED

        recommendations = [
            rule.text
            for rule in catalog.RECOMMENDATION_RULES
            if rule.factor in scaled_scores and rule.applies(int(scaled_scores[rule.factor]))
        ]
        if not recommendations:
            recommendations.append(catalog.DEFAULT_RECOMMENDATION)

        return Interpretation(
            categories=categories,
            descriptions=descriptions,
            recommendations=tuple(recommendations),
            metadata={
                "catalog_version": self.catalog_version,
                "summary": summary,
                "highlights": highlights,
                "factor_levels": factor_levels,
                "poles": poles,
                "factor_names": factor_names,
                "factor_count": len(scaled_scores),
            },
        )

    @staticmethod
    def _scored_factors(bank: QuestionBank) -> List[str]:
        """Factors with at least one question in the bank, in canonical order."""
        present = {question.factor for question in bank.questions}
        return [factor for factor in SIXTEEN_PF_FACTORS if factor in present]
