"""Scoring strategy for the CFR risk behaviour inventory.

Sixty Likert items summed into a single total; reversed items contribute
their mirror value on the configured Likert scale. Higher totals mean more
impulsive behaviour in front of risk.
"""

from typing import Dict, List, Optional, Tuple

from psychometrics.catalogs import cfr as catalog
from psychometrics.catalogs.base import select_band
from psychometrics.models.question import NormativeTable, QuestionBank
from psychometrics.models.result import Interpretation
from psychometrics.services.scoring.base import ScoredItem, ScoringStrategy
from psychometrics.utils.constants import InstrumentCode, ScoringConstants
from psychometrics.utils.helpers import calculate_mean, calculate_percentage


class CFRScoringStrategy(ScoringStrategy):
    """Total-score scoring of the risk behaviour inventory."""

    instrument = InstrumentCode.TEST_CFR
    catalog_version = catalog.CATALOG_VERSION

    def calculate(
        self,
        items: List[ScoredItem],
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> Tuple[Dict[str, float], Dict[str, float]]:
        # Reversed items mirror across the scale: min + max - value
        mirror = self.normalizer.likert_min + self.normalizer.likert_max
        points = [
            mirror - value.value if question.is_reversed else value.value
            for question, value in items
        ]
        total = float(sum(points))

        # Theoretical range of the valid answers: count*min .. count*max
        count = len(points)
        lowest = count * self.normalizer.likert_min
        span = count * (self.normalizer.likert_max - self.normalizer.likert_min)

        raw_scores = {"total": total}
        scaled_scores = {
            "total": total,
            "percentage": calculate_percentage(
                total - lowest, span, ScoringConstants.PERCENTAGE_DECIMALS
            ),
            "average": calculate_mean(points, ScoringConstants.MEAN_DECIMALS),
        }
        return raw_scores, scaled_scores

    def interpret(
        self,
        raw_scores: Dict[str, float],
        scaled_scores: Dict[str, float]
    ) -> Interpretation:
        total = raw_scores["total"]
        band = select_band(total, catalog.BANDS)

        return Interpretation(
            overall_score=total,
            level=band.code,
            categories={
                "level": band.code,
                "risk": band.risk_label,
                "alert_level": band.alert_level.value,
            },
            descriptions={
                "level": band.description,
                "profile": band.profile,
                "placement": band.placement,
            },
            recommendations=(band.placement,) + band.recommendations,
            metadata={
                "catalog_version": self.catalog_version,
                "risk_label": band.risk_label,
                "characteristics": list(band.characteristics),
                "fit_for_safety_roles": band.fit_for_safety_roles,
                "fit_for_critical_operations": band.fit_for_critical_operations,
                "training_required": band.training_required,
                "alert_level": band.alert_level.value,
            },
        )
