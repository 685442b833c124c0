"""Unit tests for the TAC competency scoring strategy."""

import pytest

from psychometrics.catalogs import tac as catalog
from psychometrics.services.scoring.tac import GLOBAL_SCORE_KEY, TACScoringStrategy
from psychometrics.utils.constants import ErrorCodes
from psychometrics.utils.exceptions import ConfigurationError


@pytest.fixture
def bank(make_likert_bank):
    """Four questions on D1 and six on D2."""
    return make_likert_bank({"D1": 4, "D2": 6}, test_id="TEST_TAC")


@pytest.fixture
def strategy():
    """TAC strategy."""
    return TACScoringStrategy()


def answers_for(values_by_dimension, counts):
    """Give every question of a dimension the same answer."""
    return {
        f"{dimension}-{index}": values_by_dimension[dimension]
        for dimension, count in counts.items()
        for index in range(1, count + 1)
    }


class TestTACScoring:
    """Test dimension and global means."""

    def test_global_is_mean_of_all_answers(self, strategy, bank, make_submission):
        """Test unequal dimension sizes: 32 / 10, not the mean of means."""
        submission = make_submission(answers_for({"D1": 5, "D2": 2}, {"D1": 4, "D2": 6}))

        outcome = strategy.score(submission, bank)

        assert outcome.raw_scores == {"D1": 20.0, "D2": 12.0}
        assert outcome.scaled_scores["D1"] == 5.0
        assert outcome.scaled_scores["D2"] == 2.0
        assert outcome.scaled_scores[GLOBAL_SCORE_KEY] == 3.2
        assert outcome.scaled_scores[GLOBAL_SCORE_KEY] != 3.5

    def test_interpretation(self, strategy, bank, make_submission):
        """Test band, tiers, strengths and growth areas."""
        submission = make_submission(answers_for({"D1": 5, "D2": 2}, {"D1": 4, "D2": 6}))

        interpretation = strategy.score(submission, bank).interpretation
        band = next(b for b in catalog.GLOBAL_BANDS if b.code == "ADECUADO")

        assert interpretation.level == "ADECUADO"
        assert interpretation.overall_score == 3.2
        assert interpretation.categories == {
            "level": "ADECUADO", "D1": "Excelente", "D2": "Requiere Atención",
        }
        assert interpretation.descriptions["D1"] == catalog.TIER_DESCRIPTIONS["D1"]["Excelente"]
        assert interpretation.metadata["strengths"] == ["Orientación al Cliente"]
        assert interpretation.metadata["growth_areas"] == ["Comunicación Efectiva"]
        assert interpretation.recommendations == band.recommendations + (
            "Reforzar: Comunicación Efectiva",
        )

    def test_uniform_fours_is_excelente(self, strategy, bank, make_submission):
        """Test the top global band with no growth areas."""
        submission = make_submission(answers_for({"D1": 4, "D2": 4}, {"D1": 4, "D2": 6}))

        interpretation = strategy.score(submission, bank).interpretation

        assert interpretation.level == "EXCELENTE"
        assert interpretation.categories["D1"] == "Muy Bueno"
        assert interpretation.metadata["growth_areas"] == [catalog.NO_GROWTH_AREAS_TEXT]

    def test_low_scores(self, strategy, bank, make_submission):
        """Test the lowest band and the missing strengths text."""
        submission = make_submission(answers_for({"D1": 1, "D2": 1}, {"D1": 4, "D2": 6}))

        interpretation = strategy.score(submission, bank).interpretation

        assert interpretation.level == "REQUIERE_MEJORA"
        assert interpretation.categories["D2"] == "Deficiente"
        assert interpretation.metadata["strengths"] == [catalog.NO_STRENGTHS_TEXT]

    def test_only_present_dimensions_are_scored(self, strategy, bank, make_submission):
        """Test that absent dimensions get no scores."""
        submission = make_submission(answers_for({"D1": 3, "D2": 3}, {"D1": 4, "D2": 6}))

        outcome = strategy.score(submission, bank)

        assert set(outcome.raw_scores) == {"D1", "D2"}
        assert "D3" not in outcome.interpretation.categories

    def test_malformed_answers_do_not_count(self, strategy, bank, make_submission):
        """Test that the global mean uses valid answers only."""
        answers = answers_for({"D1": 4, "D2": 2}, {"D1": 4, "D2": 6})
        answers["D2-1"] = 9

        outcome = strategy.score(make_submission(answers), bank)

        assert outcome.malformed_answers == ("D2-1",)
        # (16 + 10) / 9
        assert outcome.scaled_scores[GLOBAL_SCORE_KEY] == 2.89

    def test_unknown_dimension(self, strategy, make_likert_bank, make_submission):
        """Test that a dimension outside D1-D7 is a configuration error."""
        bank = make_likert_bank({"D9": 1})

        with pytest.raises(ConfigurationError) as exc_info:
            strategy.score(make_submission({"D9-1": 3}), bank)

        assert exc_info.value.error_code == ErrorCodes.UNKNOWN_DIMENSION
