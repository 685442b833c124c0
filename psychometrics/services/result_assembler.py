"""Scoring result assembler.

Builds the immutable ScoringResult from a strategy outcome and the identity
and timing of the submission it was computed from.
"""

from typing import Tuple

from psychometrics.models.question import QuestionBank
from psychometrics.models.result import ScoringResult
from psychometrics.models.submission import Submission
from psychometrics.services.scoring.base import ScoringOutcome
from psychometrics.utils.constants import InstrumentCode
from psychometrics.utils.exceptions import ClockOrderingError
from psychometrics.utils.logger import get_engine_logger

logger = get_engine_logger()


class ResultAssembler:
    """Assembles scoring results."""

    def __init__(self, scoring_version: str):
        """Initialize result assembler.

        Args:
            scoring_version: Version stamped on every result
        """
        self.scoring_version = scoring_version

    def assemble(
        self,
        instrument: InstrumentCode,
        submission: Submission,
        bank: QuestionBank,
        outcome: ScoringOutcome
    ) -> ScoringResult:
        """Build the result of a scoring call.

        Args:
            instrument: Instrument that was scored
            submission: Scored submission
            bank: Question bank the submission was scored against
            outcome: Strategy output

        Returns:
            ScoringResult: Frozen, JSON-serializable result

        Raises:
            ClockOrderingError: If the submission completed before it started
        """
        completion_time = submission.completion_time_ms
        if completion_time < 0:
            raise ClockOrderingError(
                submission.started_at,
                submission.completed_at,
                test_id=submission.test_id,
                worker_id=submission.worker_id,
            )

        answered_count, expected_count = self.count_answers(submission, bank)

        result = ScoringResult(
            instrument=instrument,
            test_id=submission.test_id,
            worker_id=submission.worker_id,
            worker_process_id=submission.worker_process_id,
            raw_scores=dict(outcome.raw_scores),
            scaled_scores=dict(outcome.scaled_scores),
            interpretation=outcome.interpretation,
            completion_time=completion_time,
            scoring_version=self.scoring_version,
            is_complete=answered_count == expected_count,
            answered_count=answered_count,
            expected_count=expected_count,
            malformed_answers=outcome.malformed_answers,
        )

        logger.debug(
            "Assembled scoring result",
            extra={
                "instrument": instrument.value,
                "test_id": submission.test_id,
                "worker_process_id": submission.worker_process_id,
                "is_complete": result.is_complete,
            }
        )
        return result

    @staticmethod
    def count_answers(submission: Submission, bank: QuestionBank) -> Tuple[int, int]:
        """Count the distinct questions answered and the questions expected."""
        answered = len({answer.question_id for answer in submission.answers})
        return answered, len(bank)
