"""Base class for the per-instrument scoring strategies.

A strategy turns the answers of one submission into raw scores, scaled
scores and an interpretation. The answer loop, malformed-answer recovery and
logging live here; each instrument supplies the arithmetic and the reading
of its catalog.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, NamedTuple, Optional, Tuple

from pydantic import Field

from psychometrics.models.base import EngineModel, ReadOnlyScores
from psychometrics.models.question import NormativeTable, Question, QuestionBank
from psychometrics.models.result import Interpretation
from psychometrics.models.submission import Submission
from psychometrics.services.answer_normalizer import AnswerNormalizer
from psychometrics.utils.constants import InstrumentCode
from psychometrics.utils.exceptions import MalformedAnswerError, UnresolvedQuestionError
from psychometrics.utils.logger import get_scoring_logger, log_malformed_answer

logger = get_scoring_logger()


class ScoredItem(NamedTuple):
    """A question paired with its normalized answer."""

    question: Question
    value: Any


class ScoringOutcome(EngineModel):
    """Scores and interpretation produced by a strategy."""

    raw_scores: ReadOnlyScores = Field(default_factory=dict)
    scaled_scores: ReadOnlyScores = Field(default_factory=dict)
    interpretation: Interpretation = Field(default_factory=Interpretation)
    malformed_answers: Tuple[str, ...] = Field(default_factory=tuple)


class ScoringStrategy(ABC):
    """Abstract base class for all instrument scoring strategies."""

    instrument: ClassVar[InstrumentCode]
    catalog_version: ClassVar[str]

    def __init__(self, normalizer: Optional[AnswerNormalizer] = None):
        """Initialize scoring strategy.

        Args:
            normalizer: Answer normalizer, a default one when omitted
        """
        self.normalizer = normalizer or AnswerNormalizer()

    def score(
        self,
        submission: Submission,
        bank: QuestionBank,
        normative_table: Optional[NormativeTable] = None
    ) -> ScoringOutcome:
        """Score a submission.

        Args:
            submission: Worker submission
            bank: Question bank of the instrument
            normative_table: Normative data overriding the bank's own

        Returns:
            ScoringOutcome: Raw scores, scaled scores and interpretation

        Raises:
            ConfigurationError: If the bank or normative data cannot be scored
            UnresolvedQuestionError: If an answer references an unknown question
        """
        norms = normative_table if normative_table is not None else bank.normative_table
        self.validate_configuration(bank, norms)

        items, malformed = self.normalize_answers(submission, bank)
        raw_scores, scaled_scores = self.calculate(items, bank, norms)
        interpretation = self.interpret(raw_scores, scaled_scores)

        logger.info(
            f"Scored {self.instrument.value} submission",
            extra={
                "instrument": self.instrument.value,
                "test_id": submission.test_id,
                "worker_id": submission.worker_id,
                "valid_answers": len(items),
                "malformed_answers": len(malformed),
                "result_level": interpretation.level,
            }
        )

        return ScoringOutcome(
            raw_scores=raw_scores,
            scaled_scores=scaled_scores,
            interpretation=interpretation,
            malformed_answers=tuple(malformed),
        )

    def normalize_answers(
        self,
        submission: Submission,
        bank: QuestionBank
    ) -> Tuple[List[ScoredItem], List[str]]:
        """Normalize every answer, setting malformed ones aside.

        Args:
            submission: Worker submission
            bank: Question bank of the instrument

        Returns:
            Tuple[List[ScoredItem], List[str]]: Valid items in answer order and
            the ids of the questions whose answer was malformed
        """
        items: List[ScoredItem] = []
        malformed: List[str] = []

        for answer in submission.answers:
            question = bank.get(answer.question_id)
            if question is None:
                raise UnresolvedQuestionError(
                    [answer.question_id],
                    test_id=submission.test_id,
                    worker_id=submission.worker_id,
                )

            try:
                value = self.normalizer.normalize(question, answer)
            except MalformedAnswerError as e:
                log_malformed_answer(
                    self.instrument.value, question.id, answer.value, e.message, logger=logger
                )
                malformed.append(question.id)
                continue

            items.append(ScoredItem(question, value))

        return items, malformed

    def validate_configuration(
        self,
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> None:
        """Check that the bank carries what this instrument needs.

        Raises:
            ConfigurationError: If the bank or normative data is incomplete
        """

    @abstractmethod
    def calculate(
        self,
        items: List[ScoredItem],
        bank: QuestionBank,
        normative_table: Optional[NormativeTable]
    ) -> Tuple[Dict[str, float], Dict[str, float]]:
        """Compute raw and scaled scores.

        Args:
            items: Valid normalized answers
            bank: Question bank of the instrument
            normative_table: Normative data, if any

        Returns:
            Tuple[Dict[str, float], Dict[str, float]]: Raw and scaled scores
        """
        pass

    @abstractmethod
    def interpret(
        self,
        raw_scores: Dict[str, float],
        scaled_scores: Dict[str, float]
    ) -> Interpretation:
        """Read the scores against the instrument catalog.

        Args:
            raw_scores: Raw scores from calculate
            scaled_scores: Scaled scores from calculate

        Returns:
            Interpretation: Qualitative reading of the scores
        """
        pass
