"""Unit tests for the CFR risk behaviour scoring strategy."""

import pytest
from hypothesis import given, settings as hypothesis_settings
from hypothesis import strategies as st

from psychometrics.catalogs import cfr as catalog
from psychometrics.services.answer_normalizer import AnswerNormalizer
from psychometrics.services.scoring.cfr import CFRScoringStrategy
from tests.builders import build_submission, likert_bank

QUESTION_IDS = [f"q{i}" for i in range(1, 61)]


@pytest.fixture
def bank(make_likert_bank):
    """Sixty non-reversed Likert questions."""
    return make_likert_bank({None: 60}, test_id="TEST_CFR")


@pytest.fixture
def strategy():
    """CFR strategy."""
    return CFRScoringStrategy()


def uniform_answers(value):
    """Answer every question with the same value."""
    return {question_id: value for question_id in QUESTION_IDS}


class TestCFRTotals:
    """Test total, percentage and average."""

    def test_all_threes_is_medio(self, strategy, bank, make_submission):
        """Test sixty answers of 3 over non-reversed questions."""
        outcome = strategy.score(make_submission(uniform_answers(3)), bank)

        assert outcome.raw_scores == {"total": 180.0}
        assert outcome.scaled_scores["total"] == 180.0
        assert outcome.scaled_scores["percentage"] == 50.0
        assert outcome.scaled_scores["average"] == 3.0
        assert outcome.interpretation.level == "MEDIO"
        assert outcome.interpretation.overall_score == 180.0

    def test_reversed_items_are_mirrored(self, strategy, make_likert_bank, make_submission):
        """Test that a reversed item scores 6 - value."""
        bank = make_likert_bank({None: 2}, reversed_ids=["q2"])

        outcome = strategy.score(make_submission({"q1": 1, "q2": 1}), bank)

        assert outcome.raw_scores["total"] == 6.0

    def test_reversed_items_follow_the_configured_scale(self, make_likert_bank, make_submission):
        """Test the mirror on a 1-7 scale."""
        strategy = CFRScoringStrategy(normalizer=AnswerNormalizer(likert_min=1, likert_max=7))
        bank = make_likert_bank({None: 2}, reversed_ids=["q1", "q2"])

        outcome = strategy.score(make_submission({"q1": 7, "q2": 7}), bank)

        assert outcome.raw_scores["total"] == 2.0
        assert outcome.scaled_scores["percentage"] == 0.0
        assert outcome.scaled_scores["average"] == 1.0

    @pytest.mark.parametrize("fours, expected_total, expected_level", [
        (0, 180, "MEDIO"),
        (20, 200, "MEDIO"),
        (21, 201, "ALTO"),
    ])
    def test_upper_band_boundary(
        self, strategy, bank, make_submission, fours, expected_total, expected_level
    ):
        """Test that 200 is still MEDIO and 201 is ALTO."""
        answers = {qid: 4 if index < fours else 3 for index, qid in enumerate(QUESTION_IDS)}

        outcome = strategy.score(make_submission(answers), bank)

        assert outcome.raw_scores["total"] == expected_total
        assert outcome.interpretation.level == expected_level

    def test_lower_band_boundary(self, strategy, bank, make_submission):
        """Test that 120 is BAJO and 121 is MEDIO."""
        twos = strategy.score(make_submission(uniform_answers(2)), bank)
        answers = uniform_answers(2)
        answers["q1"] = 3
        one_more = strategy.score(make_submission(answers), bank)

        assert twos.interpretation.level == "BAJO"
        assert one_more.raw_scores["total"] == 121.0
        assert one_more.interpretation.level == "MEDIO"

    def test_malformed_answers_are_excluded(self, strategy, bank, make_submission):
        """Test that out-of-range and non-integral answers are skipped."""
        answers = uniform_answers(3)
        answers["q1"] = 6
        answers["q2"] = 2.5
        answers["q3"] = "tres"
        answers["q4"] = "4"

        outcome = strategy.score(make_submission(answers), bank)

        assert outcome.malformed_answers == ("q1", "q2", "q3")
        # 56 threes plus one four
        assert outcome.raw_scores["total"] == 172.0

    @hypothesis_settings(max_examples=50, deadline=None)
    @given(data=st.data())
    def test_total_is_order_invariant(self, data):
        """Test that reordering the answers keeps the total."""
        bank = likert_bank({None: 60}, reversed_ids=["q5", "q17", "q42"])
        values = data.draw(st.lists(st.integers(min_value=1, max_value=5), min_size=60, max_size=60))
        order = data.draw(st.permutations(range(60)))

        answers = list(zip(QUESTION_IDS, values))
        shuffled = [answers[index] for index in order]

        strategy = CFRScoringStrategy()
        first = strategy.score(build_submission(answers), bank)
        reordered = strategy.score(build_submission(shuffled), bank)

        assert first.raw_scores == reordered.raw_scores
        assert first.interpretation == reordered.interpretation


class TestCFRInterpretation:
    """Test the risk band reading."""

    def test_alto_band_flags(self, strategy, bank, make_submission):
        """Test the high-risk placement flags."""
        interpretation = strategy.score(make_submission(uniform_answers(5)), bank).interpretation

        assert interpretation.level == "ALTO"
        assert interpretation.categories["risk"] == "IMPULSIVO"
        assert interpretation.categories["alert_level"] == "danger"
        assert interpretation.metadata["fit_for_safety_roles"] is False
        assert interpretation.metadata["training_required"] is True
        assert interpretation.recommendations[0] == catalog.BANDS[0].placement
        assert interpretation.recommendations[1:] == catalog.BANDS[0].recommendations

    def test_bajo_band(self, strategy, bank, make_submission):
        """Test the low-risk reading."""
        interpretation = strategy.score(make_submission(uniform_answers(1)), bank).interpretation

        assert interpretation.level == "BAJO"
        assert interpretation.categories["risk"] == "PRUDENTE"
        assert interpretation.metadata["catalog_version"] == catalog.CATALOG_VERSION
