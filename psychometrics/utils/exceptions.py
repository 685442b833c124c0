"""Custom exception classes for the psychometric scoring engine.

This module defines the error taxonomy of the engine. Configuration and
submission errors abort the scoring call; malformed answers are recovered
per answer by the strategies.
"""

from typing import Any, Dict, List, Optional

from psychometrics.utils.constants import ErrorCodes


class ScoringEngineError(Exception):
    """Base exception class for all scoring engine errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize scoring engine error.

        Args:
            message: Error message
            error_code: Engine-specific error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation.

        Returns:
            Dict[str, Any]: Exception data
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class ConfigurationError(ScoringEngineError):
    """Question bank or normative data is missing required entries."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        question_id: Optional[str] = None,
        **kwargs
    ):
        """Initialize configuration error.

        Args:
            message: Error message
            config_key: Configuration key (factor code, option key, ...)
            config_value: Offending configuration value
            question_id: Question the configuration belongs to
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = str(config_value)
        if question_id:
            details["question_id"] = question_id

        kwargs["details"] = details
        kwargs.setdefault("error_code", ErrorCodes.CONFIGURATION_ERROR)
        super().__init__(message, **kwargs)

        self.config_key = config_key
        self.config_value = config_value
        self.question_id = question_id


class UnknownInstrumentError(ConfigurationError):
    """No scoring strategy is registered for the requested instrument."""

    def __init__(self, instrument: Any, **kwargs):
        """Initialize unknown instrument error.

        Args:
            instrument: Requested instrument code
            **kwargs: Additional arguments for parent class
        """
        kwargs.setdefault("error_code", ErrorCodes.UNKNOWN_INSTRUMENT)
        super().__init__(
            f"No scoring strategy registered for instrument: {instrument}",
            config_key="instrument",
            config_value=instrument,
            **kwargs
        )
        self.instrument = instrument


class SubmissionError(ScoringEngineError):
    """Submission does not satisfy the scoring preconditions."""

    def __init__(
        self,
        message: str,
        test_id: Optional[str] = None,
        worker_id: Optional[str] = None,
        question_ids: Optional[List[str]] = None,
        **kwargs
    ):
        """Initialize submission error.

        Args:
            message: Error message
            test_id: Test the submission belongs to
            worker_id: Worker who answered
            question_ids: Question identifiers involved
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if test_id:
            details["test_id"] = test_id
        if worker_id:
            details["worker_id"] = worker_id
        if question_ids:
            details["question_ids"] = list(question_ids)

        kwargs["details"] = details
        super().__init__(message, **kwargs)

        self.test_id = test_id
        self.worker_id = worker_id
        self.question_ids = list(question_ids or [])


class IncompleteSubmissionError(SubmissionError):
    """Answer count does not match the expected question count."""

    def __init__(self, answered: int, expected: int, **kwargs):
        """Initialize incomplete submission error.

        Args:
            answered: Number of answers received
            expected: Number of questions in the bank
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        details["answered"] = answered
        details["expected"] = expected
        kwargs["details"] = details
        kwargs.setdefault("error_code", ErrorCodes.INCOMPLETE_SUBMISSION)
        super().__init__(
            f"Incomplete submission: {answered}/{expected} answers",
            **kwargs
        )
        self.answered = answered
        self.expected = expected


class UnresolvedQuestionError(SubmissionError):
    """Answers reference questions that are not in the question bank."""

    def __init__(self, question_ids: List[str], **kwargs):
        """Initialize unresolved question error.

        Args:
            question_ids: Question identifiers missing from the bank
            **kwargs: Additional arguments for parent class
        """
        kwargs.setdefault("error_code", ErrorCodes.UNRESOLVED_QUESTION)
        super().__init__(
            f"Answers reference {len(question_ids)} unknown question(s)",
            question_ids=question_ids,
            **kwargs
        )


class ClockOrderingError(SubmissionError):
    """Submission completed before it started."""

    def __init__(self, started_at: Any, completed_at: Any, **kwargs):
        """Initialize clock ordering error.

        Args:
            started_at: Submission start timestamp
            completed_at: Submission completion timestamp
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        details["started_at"] = str(started_at)
        details["completed_at"] = str(completed_at)
        kwargs["details"] = details
        kwargs.setdefault("error_code", ErrorCodes.CLOCK_ORDERING)
        super().__init__("completed_at is earlier than started_at", **kwargs)
        self.started_at = started_at
        self.completed_at = completed_at


class MalformedAnswerError(ScoringEngineError):
    """A single answer cannot be normalized for its question type."""

    def __init__(
        self,
        message: str,
        question_id: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        """Initialize malformed answer error.

        Args:
            message: Error message
            question_id: Question the answer belongs to
            value: Raw answer value
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if question_id:
            details["question_id"] = question_id
        if value is not None:
            details["value"] = repr(value)

        kwargs["details"] = details
        kwargs.setdefault("error_code", ErrorCodes.MALFORMED_ANSWER)
        super().__init__(message, **kwargs)

        self.question_id = question_id
        self.value = value


__all__ = [
    "ScoringEngineError",
    "ConfigurationError",
    "UnknownInstrumentError",
    "SubmissionError",
    "IncompleteSubmissionError",
    "UnresolvedQuestionError",
    "ClockOrderingError",
    "MalformedAnswerError",
]
