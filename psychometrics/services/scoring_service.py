"""Scoring service for psychometric assessments.

This service is the entry point of the engine: it resolves the strategy of
an instrument, checks the submission against its question bank, runs the
strategy and assembles the final result. It keeps no state between calls.
"""

from typing import List, Optional, Union

from psychometrics.core.config import Settings, get_settings
from psychometrics.models.question import NormativeTable, QuestionBank
from psychometrics.models.result import ScoringResult
from psychometrics.models.submission import Submission
from psychometrics.services.answer_normalizer import AnswerNormalizer
from psychometrics.services.result_assembler import ResultAssembler
from psychometrics.services.scoring.registry import StrategyRegistry, get_strategy
from psychometrics.utils.constants import ErrorCodes, InstrumentCode
from psychometrics.utils.datetime_utils import format_duration
from psychometrics.utils.exceptions import (
    ClockOrderingError,
    ConfigurationError,
    IncompleteSubmissionError,
    ScoringEngineError,
    SubmissionError,
    UnknownInstrumentError,
    UnresolvedQuestionError,
)
from psychometrics.utils.logger import PerformanceLogger, get_engine_logger
from psychometrics.utils.validators import (
    ValidationResult,
    find_mismatched_question_ids,
    find_unresolved_question_ids,
    validate_submission,
)

logger = get_engine_logger()


class ScoringService:
    """Service that scores submissions of every supported instrument."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize scoring service.

        Args:
            settings: Engine settings (defaults to the cached settings)
        """
        self.settings = settings or get_settings()
        self.normalizer = AnswerNormalizer(
            likert_min=self.settings.LIKERT_MIN,
            likert_max=self.settings.LIKERT_MAX,
        )
        self.assembler = ResultAssembler(scoring_version=self.settings.SCORING_VERSION)

    def score_submission(
        self,
        instrument: Union[str, InstrumentCode],
        submission: Submission,
        question_bank: QuestionBank,
        normative_table: Optional[NormativeTable] = None,
        allow_incomplete: Optional[bool] = None
    ) -> ScoringResult:
        """Score a submission.

        Args:
            instrument: Instrument enum or its string value, case-insensitive
            submission: Worker submission
            question_bank: Question bank of the instrument
            normative_table: Normative data overriding the bank's own
            allow_incomplete: Score submissions with missing answers; defaults
                to the ALLOW_INCOMPLETE_DEFAULT setting

        Returns:
            ScoringResult: Frozen scoring result

        Raises:
            UnknownInstrumentError: If no strategy is registered for the instrument
            ConfigurationError: If the bank or normative data cannot be scored
            SubmissionError: If the submission does not match the bank
        """
        code = StrategyRegistry.resolve_code(instrument)
        if allow_incomplete is None:
            allow_incomplete = self.settings.ALLOW_INCOMPLETE_DEFAULT

        log_context = {
            "instrument": code.value,
            "test_id": submission.test_id,
            "worker_id": submission.worker_id,
            "worker_process_id": submission.worker_process_id,
        }

        try:
            with PerformanceLogger("score_submission", logger, log_context):
                strategy = get_strategy(code, normalizer=self.normalizer)
                self._check_submission(code, submission, question_bank, allow_incomplete)
                outcome = strategy.score(submission, question_bank, normative_table)
                result = self.assembler.assemble(code, submission, question_bank, outcome)

        except ScoringEngineError as e:
            logger.error(
                f"Scoring failed for {code.value}: {e.message}",
                extra={
                    **log_context,
                    "error_type": e.__class__.__name__,
                    "error_code": e.error_code,
                    "error_details": e.details,
                }
            )
            raise

        logger.info(
            "Submission scored",
            extra={
                **log_context,
                "result_level": result.level,
                "completion_time": format_duration(result.completion_time),
                "is_complete": result.is_complete,
                "malformed_answers": len(result.malformed_answers),
            }
        )
        return result

    def validate_submission(
        self,
        instrument: Union[str, InstrumentCode],
        submission: Submission,
        question_bank: QuestionBank,
        allow_incomplete: Optional[bool] = None
    ) -> ValidationResult:
        """Check a submission without scoring it or raising.

        Args:
            instrument: Instrument enum or its string value
            submission: Worker submission
            question_bank: Question bank of the instrument
            allow_incomplete: Accept missing answers; defaults to the setting

        Returns:
            ValidationResult: Every problem the scoring call would reject
        """
        try:
            code = StrategyRegistry.resolve_code(instrument)
        except UnknownInstrumentError as e:
            return ValidationResult.failure(e.message)

        if allow_incomplete is None:
            allow_incomplete = self.settings.ALLOW_INCOMPLETE_DEFAULT

        return validate_submission(submission, question_bank, code, allow_incomplete)

    def supported_instruments(self) -> List[InstrumentCode]:
        """Get the instruments this service can score."""
        return StrategyRegistry.get_supported_instruments()

    def _check_submission(
        self,
        instrument: InstrumentCode,
        submission: Submission,
        bank: QuestionBank,
        allow_incomplete: bool
    ) -> None:
        """Raise on the first problem that prevents scoring."""
        if len(bank) == 0:
            raise ConfigurationError(
                f"Question bank {bank.test_id} has no questions",
                config_key="questions",
                error_code=ErrorCodes.EMPTY_QUESTION_BANK,
            )

        mismatched = find_mismatched_question_ids(bank, instrument)
        if mismatched:
            raise ConfigurationError(
                f"{len(mismatched)} question(s) cannot be scored as {instrument.value}",
                config_key="type",
                config_value=mismatched,
                error_code=ErrorCodes.QUESTION_TYPE_MISMATCH,
            )

        duplicates = submission.duplicate_question_ids()
        if duplicates:
            raise SubmissionError(
                "Questions answered more than once",
                test_id=submission.test_id,
                worker_id=submission.worker_id,
                question_ids=duplicates,
                error_code=ErrorCodes.DUPLICATE_ANSWER,
            )

        unresolved = find_unresolved_question_ids(submission, bank)
        if unresolved:
            raise UnresolvedQuestionError(
                unresolved, test_id=submission.test_id, worker_id=submission.worker_id
            )

        if submission.completion_time_ms < 0:
            raise ClockOrderingError(
                submission.started_at,
                submission.completed_at,
                test_id=submission.test_id,
                worker_id=submission.worker_id,
            )

        answered = len(submission.answers)
        if answered != len(bank):
            if not allow_incomplete:
                raise IncompleteSubmissionError(
                    answered,
                    len(bank),
                    test_id=submission.test_id,
                    worker_id=submission.worker_id,
                )
            logger.warning(
                f"Scoring incomplete submission: {answered}/{len(bank)} answers",
                extra={
                    "instrument": instrument.value,
                    "test_id": submission.test_id,
                    "worker_id": submission.worker_id,
                    "answered": answered,
                    "expected": len(bank),
                }
            )
