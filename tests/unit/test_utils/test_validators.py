"""Unit tests for validators and validation utilities."""

from datetime import timedelta

import pytest

from psychometrics.utils.constants import InstrumentCode
from psychometrics.utils.validators import (
    ValidationResult,
    find_mismatched_question_ids,
    find_unresolved_question_ids,
    validate_numeric_range,
    validate_question_bank,
    validate_submission,
)


class TestValidationResult:
    """Test the validation result container."""

    def test_success(self):
        """Test a successful result."""
        result = ValidationResult.success("value")

        assert result.is_valid
        assert result.cleaned_value == "value"
        assert result.errors == []

    def test_failure_from_string(self):
        """Test that a single message becomes a list."""
        result = ValidationResult.failure("broken")

        assert not result.is_valid
        assert result.errors == ["broken"]

    def test_add_error_invalidates(self):
        """Test that adding an error flips the result."""
        result = ValidationResult.success()
        result.add_warning("careful")
        assert result.is_valid

        result.add_error("broken")

        assert not result.is_valid
        assert result.warnings == ["careful"]


class TestQuestionBankValidation:
    """Test question bank checks."""

    def test_valid_bank_with_nominal_count(self, make_likert_bank):
        """Test a full-size CFR bank."""
        result = validate_question_bank(make_likert_bank({None: 60}), InstrumentCode.TEST_CFR)

        assert result.is_valid
        assert result.warnings == []

    def test_short_form_is_a_warning(self, make_likert_bank):
        """Test a bank smaller than the standard form."""
        result = validate_question_bank(make_likert_bank({None: 10}), InstrumentCode.TEST_CFR)

        assert result.is_valid
        assert len(result.warnings) == 1

    def test_empty_bank(self, make_bank):
        """Test a bank without questions."""
        result = validate_question_bank(make_bank([]), InstrumentCode.TEST_CFR)

        assert not result.is_valid

    def test_type_mismatch(self, make_question, make_bank):
        """Test questions of the wrong type."""
        bank = make_bank([
            make_question("q1", "likert"),
            make_question("q2", "multiple_choice", correct_answer="A"),
        ])

        result = validate_question_bank(bank, InstrumentCode.TEST_IL)

        assert not result.is_valid
        assert "q1" in result.errors[0]
        assert find_mismatched_question_ids(bank, InstrumentCode.TEST_IL) == ["q1"]


class TestSubmissionValidation:
    """Test submission checks."""

    @pytest.fixture
    def bank(self, make_likert_bank):
        """Three-question Likert bank."""
        return make_likert_bank({None: 3}, test_id="TEST_CFR")

    def test_valid_submission(self, bank, make_submission):
        """Test a complete submission."""
        submission = make_submission({"q1": 1, "q2": 2, "q3": 3}, test_id="TEST_CFR")

        result = validate_submission(submission, bank, InstrumentCode.TEST_CFR)

        assert result.is_valid
        assert result.cleaned_value is submission

    def test_unresolved_ids_in_answer_order(self, bank, make_submission):
        """Test that unknown ids are reported once each."""
        submission = make_submission([("x2", 1), ("q1", 1), ("x1", 1), ("x2", 2)])

        assert find_unresolved_question_ids(submission, bank) == ["x2", "x1"]

    def test_incomplete_submission(self, bank, make_submission):
        """Test a missing answer."""
        submission = make_submission({"q1": 1}, test_id="TEST_CFR")

        result = validate_submission(submission, bank, InstrumentCode.TEST_CFR)

        assert not result.is_valid
        assert result.errors == ["Incomplete submission: 1/3 answers"]

    def test_incomplete_allowed_is_a_warning(self, bank, make_submission):
        """Test partial submissions when they are allowed."""
        submission = make_submission({"q1": 1}, test_id="TEST_CFR")

        result = validate_submission(
            submission, bank, InstrumentCode.TEST_CFR, allow_incomplete=True
        )

        assert result.is_valid
        assert "Incomplete submission: 1/3 answers" in result.warnings

    def test_clock_ordering(self, bank, make_submission):
        """Test a completion time before the start time."""
        submission = make_submission(
            {"q1": 1, "q2": 2, "q3": 3}, test_id="TEST_CFR", duration=timedelta(hours=-1)
        )

        result = validate_submission(submission, bank, InstrumentCode.TEST_CFR)

        assert result.errors == ["completed_at is earlier than started_at"]

    def test_test_id_mismatch_is_a_warning(self, bank, make_submission):
        """Test a submission labelled with another test."""
        submission = make_submission({"q1": 1, "q2": 2, "q3": 3}, test_id="OTHER")

        result = validate_submission(submission, bank, InstrumentCode.TEST_CFR)

        assert result.is_valid
        assert any("OTHER" in warning for warning in result.warnings)


class TestNumericRangeValidation:
    """Test numeric range validation."""

    def test_valid_range(self):
        """Test values inside the range."""
        assert validate_numeric_range(3, 1, 5).is_valid
        assert validate_numeric_range(1.0, 1, 5).cleaned_value == 1.0

    @pytest.mark.parametrize("value", [0, 6, None, "3", True])
    def test_invalid_values(self, value):
        """Test values outside the range or not numeric."""
        assert not validate_numeric_range(value, 1, 5).is_valid
