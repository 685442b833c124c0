"""Validation utilities for the scoring engine.

This module provides the non-raising pre-checks run on a submission and its
question bank before scoring, plus the small range checks used by the
answer normalizer.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from psychometrics.models.question import QuestionBank
from psychometrics.models.submission import Submission
from psychometrics.utils.constants import InstrumentCode


class ValidationResult(BaseModel):
    """Result of a validation operation."""

    is_valid: bool = Field(..., description="Whether validation passed")
    errors: List[str] = Field(default_factory=list, description="List of validation errors")
    warnings: List[str] = Field(default_factory=list, description="List of validation warnings")
    cleaned_value: Optional[Any] = Field(default=None, description="Cleaned/normalized value")

    def add_error(self, error: str) -> None:
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a validation warning."""
        self.warnings.append(warning)

    @classmethod
    def success(cls, cleaned_value: Optional[Any] = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True, cleaned_value=cleaned_value)

    @classmethod
    def failure(cls, errors: Union[str, List[str]]) -> "ValidationResult":
        """Create a failed validation result."""
        if isinstance(errors, str):
            errors = [errors]
        return cls(is_valid=False, errors=errors)


def find_unresolved_question_ids(submission: Submission, bank: QuestionBank) -> List[str]:
    """Get the answered question ids missing from the bank, in answer order."""
    unresolved: List[str] = []
    for answer in submission.answers:
        if bank.get(answer.question_id) is None and answer.question_id not in unresolved:
            unresolved.append(answer.question_id)
    return unresolved


def find_mismatched_question_ids(bank: QuestionBank, instrument: InstrumentCode) -> List[str]:
    """Get the ids of bank questions whose type the instrument cannot score."""
    expected = instrument.question_type
    return [question.id for question in bank.questions if question.type != expected]


def validate_question_bank(bank: QuestionBank, instrument: InstrumentCode) -> ValidationResult:
    """Validate that a question bank can be scored as an instrument.

    Args:
        bank: Question bank to check
        instrument: Instrument the bank is scored as

    Returns:
        ValidationResult: Validation result
    """
    if len(bank) == 0:
        return ValidationResult.failure(f"Question bank {bank.test_id} has no questions")

    mismatched = find_mismatched_question_ids(bank, instrument)
    if mismatched:
        return ValidationResult.failure(
            f"{len(mismatched)} question(s) are not of type "
            f"{instrument.question_type.value}: {', '.join(mismatched)}"
        )

    result = ValidationResult.success(bank)
    if len(bank) != instrument.nominal_question_count:
        result.add_warning(
            f"Question bank has {len(bank)} questions; the standard "
            f"{instrument.value} form has {instrument.nominal_question_count}"
        )
    return result


def validate_submission(
    submission: Submission,
    bank: QuestionBank,
    instrument: InstrumentCode,
    allow_incomplete: bool = False
) -> ValidationResult:
    """Validate a submission against its question bank without raising.

    Collects every problem the scoring call would reject: an unusable bank,
    duplicate or unresolved answers, a completion time before the start time
    and, unless partial scoring is allowed, a missing answer.

    Args:
        submission: Worker submission
        bank: Question bank of the instrument
        instrument: Instrument the submission is scored as
        allow_incomplete: Whether fewer answers than questions is acceptable

    Returns:
        ValidationResult: Validation result with every error found
    """
    result = validate_question_bank(bank, instrument)

    duplicates = submission.duplicate_question_ids()
    if duplicates:
        result.add_error(f"Questions answered more than once: {', '.join(duplicates)}")

    unresolved = find_unresolved_question_ids(submission, bank)
    if unresolved:
        result.add_error(f"Answers reference unknown questions: {', '.join(unresolved)}")

    if submission.completion_time_ms < 0:
        result.add_error("completed_at is earlier than started_at")

    answered = len({answer.question_id for answer in submission.answers})
    if answered != len(bank):
        message = f"Incomplete submission: {answered}/{len(bank)} answers"
        if allow_incomplete:
            result.add_warning(message)
        else:
            result.add_error(message)

    if submission.test_id != bank.test_id:
        result.add_warning(
            f"Submission test {submission.test_id} differs from bank test {bank.test_id}"
        )

    if result.is_valid:
        result.cleaned_value = submission
    return result


def validate_numeric_range(
    value: Union[int, float],
    min_value: Optional[Union[int, float]] = None,
    max_value: Optional[Union[int, float]] = None,
    field_name: str = "value"
) -> ValidationResult:
    """Validate numeric value within range.

    Args:
        value: Numeric value to validate
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        field_name: Field name for error messages

    Returns:
        ValidationResult: Validation result
    """
    if value is None:
        return ValidationResult.failure(f"{field_name} is required")

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ValidationResult.failure(f"{field_name} must be a number")

    if min_value is not None and value < min_value:
        return ValidationResult.failure(
            f"{field_name} must be at least {min_value}"
        )

    if max_value is not None and value > max_value:
        return ValidationResult.failure(
            f"{field_name} cannot exceed {max_value}"
        )

    return ValidationResult.success(value)


__all__ = [
    "ValidationResult",
    "find_mismatched_question_ids",
    "find_unresolved_question_ids",
    "validate_numeric_range",
    "validate_question_bank",
    "validate_submission",
]
