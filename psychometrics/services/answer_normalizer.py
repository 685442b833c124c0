"""Answer normalizer for the scoring engine.

This module turns the loosely shaped answers stored by the test runner into
the typed values the scoring strategies consume. There is one normalizer per
question type; any answer it cannot read raises MalformedAnswerError.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from psychometrics.models.answer import (
    Answer,
    ChoiceValue,
    LikertValue,
    MostLeastValue,
    TableSelectionValue,
    TernaryChoiceValue,
)
from psychometrics.models.question import Question
from psychometrics.utils.constants import (
    DISC_DIMENSIONS,
    TERNARY_OPTIONS,
    QuestionType,
    ScoringConstants,
)
from psychometrics.utils.exceptions import ConfigurationError, MalformedAnswerError
from psychometrics.utils.helpers import coerce_number
from psychometrics.utils.logger import get_normalizer_logger
from psychometrics.utils.validators import validate_numeric_range

logger = get_normalizer_logger()

WRAPPER_KEYS: Tuple[str, ...] = ("value", "answer")
MOST_KEYS: Tuple[str, ...] = ("most", "mas")
LEAST_KEYS: Tuple[str, ...] = ("least", "menos")


def unwrap_value(value: Any) -> Any:
    """Strip ``{"value": x}`` and ``{"answer": x}`` wrappers.

    Args:
        value: Raw answer payload

    Returns:
        Any: Innermost wrapped payload
    """
    while isinstance(value, Mapping):
        key = next((k for k in WRAPPER_KEYS if k in value), None)
        if key is None:
            break
        value = value[key]
    return value


def _to_integer(value: Any) -> Optional[int]:
    """Read an integral number from an int, float or numeric string."""
    number = coerce_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _choice_key(value: Any) -> Optional[str]:
    """Read one multiple-choice key as an upper-cased string."""
    if isinstance(value, str):
        key = value.strip().upper()
        return key or None
    number = coerce_number(value)
    if number is None:
        return None
    return str(int(number)) if number.is_integer() else str(number)


def parse_choices(value: Any) -> Optional[Tuple[str, ...]]:
    """Read a single or multi-select choice as option keys.

    Used for both the worker's answer and the question's answer key.

    Args:
        value: Key, number, list of those, or a wrapper around them

    Returns:
        Tuple[str, ...]: Upper-cased option keys, or None if unreadable
    """
    raw = unwrap_value(value)
    items = list(raw) if isinstance(raw, (list, tuple)) else [raw]

    choices = [_choice_key(item) for item in items]
    if not choices or any(choice is None for choice in choices):
        return None
    return tuple(choices)


def parse_table_selection(value: Any) -> Optional[Dict[str, Tuple[int, ...]]]:
    """Read a column to marked rows mapping.

    Used for both the worker's marks and the question's expected marks.
    Repeated rows in a column are kept once.

    Args:
        value: Mapping of column key to a list of row numbers, possibly wrapped

    Returns:
        Dict[str, Tuple[int, ...]]: Rows per column, or None if unreadable
    """
    raw = value
    # Columns may be named anything, so only a lone wrapper key is unwrapped
    while isinstance(raw, Mapping) and len(raw) == 1 and next(iter(raw)) in WRAPPER_KEYS:
        raw = next(iter(raw.values()))

    if not isinstance(raw, Mapping):
        return None

    columns: Dict[str, Tuple[int, ...]] = {}
    for column, rows in raw.items():
        if not isinstance(rows, (list, tuple)):
            return None
        indices: List[int] = []
        for row in rows:
            index = _to_integer(row)
            if index is None:
                return None
            if index not in indices:
                indices.append(index)
        columns[str(column)] = tuple(indices)

    return columns


def _first_present(data: Mapping[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


class AnswerNormalizer:
    """Normalizes raw answers per question type."""

    def __init__(
        self,
        likert_min: int = ScoringConstants.LIKERT_MIN,
        likert_max: int = ScoringConstants.LIKERT_MAX
    ):
        """Initialize answer normalizer.

        Args:
            likert_min: Lowest accepted Likert value
            likert_max: Highest accepted Likert value
        """
        self.likert_min = likert_min
        self.likert_max = likert_max

        self._normalizers: Dict[QuestionType, Callable[[Question, Any], Any]] = {
            QuestionType.TERNARY_CHOICE: self._normalize_ternary_choice,
            QuestionType.LIKERT: self._normalize_likert,
            QuestionType.FORCED_CHOICE_QUAD: self._normalize_forced_choice,
            QuestionType.MULTIPLE_CHOICE: self._normalize_multiple_choice,
            QuestionType.TABLE_CHECKBOX: self._normalize_table_checkbox,
        }

    @property
    def supported_types(self) -> List[QuestionType]:
        """Question types with a registered normalizer."""
        return list(self._normalizers)

    def normalize(self, question: Question, answer: Answer) -> Any:
        """Normalize an answer for its question.

        Args:
            question: Question the answer belongs to
            answer: Raw answer

        Returns:
            NormalizedAnswer: Typed answer value

        Raises:
            MalformedAnswerError: If the answer cannot be read for the question type
            ConfigurationError: If no normalizer handles the question type
        """
        normalizer = self._normalizers.get(question.type)
        if normalizer is None:
            raise ConfigurationError(
                f"No answer normalizer for question type {question.type}",
                config_key="type",
                config_value=question.type,
                question_id=question.id,
            )

        if answer.value is None:
            raise MalformedAnswerError(
                "Answer is empty", question_id=answer.question_id, value=None
            )

        return normalizer(question, answer.value)

    # Per-type normalizers

    def _normalize_ternary_choice(self, question: Question, value: Any) -> TernaryChoiceValue:
        raw = unwrap_value(value)

        if isinstance(raw, str) and raw.strip().upper() in TERNARY_OPTIONS:
            return TernaryChoiceValue(letter=raw.strip().upper())

        index = _to_integer(raw)
        if index is not None and 1 <= index <= len(TERNARY_OPTIONS):
            return TernaryChoiceValue(letter=TERNARY_OPTIONS[index - 1])

        raise MalformedAnswerError(
            "Expected A, B, C or 1-3", question_id=question.id, value=value
        )

    def _normalize_likert(self, question: Question, value: Any) -> LikertValue:
        raw = unwrap_value(value)

        number = _to_integer(raw)
        if number is None:
            raise MalformedAnswerError(
                "Likert answer is not an integer", question_id=question.id, value=value
            )

        check = validate_numeric_range(
            number, self.likert_min, self.likert_max, field_name="Likert answer"
        )
        if not check.is_valid:
            raise MalformedAnswerError(
                "; ".join(check.errors), question_id=question.id, value=value
            )

        return LikertValue(value=number)

    def _normalize_forced_choice(self, question: Question, value: Any) -> MostLeastValue:
        raw = unwrap_value(value)
        if not isinstance(raw, Mapping):
            raise MalformedAnswerError(
                "Expected a most/least pair", question_id=question.id, value=value
            )

        most = self._resolve_dimension(question, _first_present(raw, MOST_KEYS))
        least = self._resolve_dimension(question, _first_present(raw, LEAST_KEYS))

        if most is None or least is None:
            raise MalformedAnswerError(
                "Most/least pair does not name two known words",
                question_id=question.id,
                value=value,
            )
        if most == least:
            raise MalformedAnswerError(
                "Most and least point to the same dimension",
                question_id=question.id,
                value=value,
            )

        return MostLeastValue(most=most, least=least)

    def _resolve_dimension(self, question: Question, choice: Any) -> Optional[str]:
        """Map a chosen word, or a dimension code, to its dimension."""
        if not isinstance(choice, str) or not choice.strip():
            return None

        words = question.options.get("words") or {}
        for dimension, word in words.items():
            if word == choice:
                return str(dimension).upper()

        wanted = choice.strip().lower()
        for dimension, word in words.items():
            if isinstance(word, str) and word.strip().lower() == wanted:
                return str(dimension).upper()

        codes = [str(code).upper() for code in words] or list(DISC_DIMENSIONS)
        code = choice.strip().upper()
        if code not in codes:
            return None

        if words:
            logger.debug(
                f"Question {question.id}: answer names dimension code {code} instead of a word",
                extra={"question_id": question.id, "dimension": code}
            )
        return code

    def _normalize_multiple_choice(self, question: Question, value: Any) -> ChoiceValue:
        choices = parse_choices(value)
        if choices is None:
            raise MalformedAnswerError(
                "Expected an option key or a list of option keys",
                question_id=question.id,
                value=value,
            )

        return ChoiceValue(choices=choices)

    def _normalize_table_checkbox(self, question: Question, value: Any) -> TableSelectionValue:
        columns = parse_table_selection(value)
        if columns is None:
            raise MalformedAnswerError(
                "Expected a mapping of column to a list of row numbers",
                question_id=question.id,
                value=value,
            )

        return TableSelectionValue(columns=columns)
