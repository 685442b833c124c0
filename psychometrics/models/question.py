"""Question bank and normative data models.

This module defines the read-only inputs of the scoring engine: the
questions of an instrument, the bank that groups them and the normative
table used to standardize trait scores.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import AliasChoices, Field, PrivateAttr, field_validator, model_validator

from psychometrics.models.base import EngineModel
from psychometrics.utils.constants import LEGACY_QUESTION_TYPES, ErrorCodes, QuestionType
from psychometrics.utils.exceptions import ConfigurationError


class Question(EngineModel):
    """A single item of an instrument question bank."""

    id: str = Field(..., validation_alias=AliasChoices("id", "_id", "questionId"))
    number: int = Field(default=0, ge=0, validation_alias=AliasChoices("number", "questionNumber"))
    text: str = Field(default="", validation_alias=AliasChoices("text", "questionText"))
    type: QuestionType = Field(..., validation_alias=AliasChoices("type", "questionType"))
    factor: Optional[str] = None
    options: Dict[str, Any] = Field(default_factory=dict)
    correct_answer: Optional[Any] = Field(
        default=None, validation_alias=AliasChoices("correct_answer", "correctAnswer")
    )
    points: float = Field(default=1.0, ge=0)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> str:
        """Accept numeric identifiers."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> Any:
        """Map legacy question type names onto the current ones."""
        if isinstance(value, str):
            key = value.strip().lower()
            return LEGACY_QUESTION_TYPES.get(key, key)
        return value

    @field_validator("factor", mode="before")
    @classmethod
    def validate_factor(cls, value: Any) -> Optional[str]:
        """Normalize the dimension code."""
        if value is None:
            return None
        code = str(value).strip().upper()
        return code or None

    @property
    def polarity(self) -> int:
        """Direction applied to the item's points (+1 or -1).

        Raises:
            ConfigurationError: If the metadata holds another value
        """
        polarity = self.metadata.get("polarity", 1)
        if polarity not in (1, -1) or isinstance(polarity, bool):
            raise ConfigurationError(
                f"Question {self.id} has invalid polarity",
                config_key="polarity",
                config_value=polarity,
                question_id=self.id,
                error_code=ErrorCodes.CONFIGURATION_ERROR,
            )
        return int(polarity)

    @property
    def is_reversed(self) -> bool:
        """Whether a Likert item is reverse scored."""
        return bool(self.metadata.get("isReversed", self.metadata.get("is_reversed", False)))


class NormativeEntry(EngineModel):
    """Population mean and standard deviation of one factor."""

    factor: str
    mean: float
    std_dev: float = Field(..., validation_alias=AliasChoices("std_dev", "stdDev", "std"))
    description: Optional[str] = None

    @field_validator("factor", mode="before")
    @classmethod
    def validate_factor(cls, value: Any) -> str:
        """Normalize the factor code."""
        return str(value).strip().upper()

    @model_validator(mode="after")
    def validate_std_dev(self) -> "NormativeEntry":
        """Reject degenerate distributions."""
        if self.std_dev <= 0:
            raise ConfigurationError(
                f"Normative entry for factor {self.factor} needs a positive std_dev",
                config_key=self.factor,
                config_value=self.std_dev,
                error_code=ErrorCodes.INVALID_NORMATIVE_ENTRY,
            )
        return self


class NormativeTable(EngineModel):
    """Normative data of an instrument, one entry per factor."""

    entries: Tuple[NormativeEntry, ...] = Field(default_factory=tuple)

    _index: Dict[str, NormativeEntry] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        """Build the factor index, rejecting duplicate factors."""
        index: Dict[str, NormativeEntry] = {}
        for entry in self.entries:
            if entry.factor in index:
                raise ConfigurationError(
                    f"Duplicate normative entry for factor {entry.factor}",
                    config_key=entry.factor,
                    error_code=ErrorCodes.INVALID_NORMATIVE_ENTRY,
                )
            index[entry.factor] = entry
        self._index = index

    def get(self, factor: str) -> Optional[NormativeEntry]:
        """Get the entry of a factor, or None."""
        return self._index.get(factor.upper())

    def factors(self) -> List[str]:
        """Get the factor codes in table order."""
        return list(self._index)

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_entries(cls, entries: Iterable[Any]) -> "NormativeTable":
        """Create a table from entry dictionaries or models.

        Args:
            entries: Entries as dictionaries or NormativeEntry instances

        Returns:
            NormativeTable: Validated table
        """
        return cls(entries=tuple(
            entry if isinstance(entry, NormativeEntry) else NormativeEntry.model_validate(entry)
            for entry in entries
        ))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Any]]) -> "NormativeTable":
        """Create a table from ``{factor: {"mean": ..., "std_dev": ...}}``.

        Args:
            data: Mapping of factor code to its statistics

        Returns:
            NormativeTable: Validated table
        """
        return cls.from_entries({"factor": factor, **values} for factor, values in data.items())


class QuestionBank(EngineModel):
    """Ordered questions of one instrument, with optional normative data."""

    test_id: str = Field(..., validation_alias=AliasChoices("test_id", "testId", "code"))
    questions: Tuple[Question, ...] = Field(default_factory=tuple)
    normative_table: Optional[NormativeTable] = Field(
        default=None, validation_alias=AliasChoices("normative_table", "normativeData", "normative_data")
    )

    _index: Dict[str, Question] = PrivateAttr(default_factory=dict)

    @field_validator("normative_table", mode="before")
    @classmethod
    def validate_normative_table(cls, value: Any) -> Any:
        """Accept a bare list of entries."""
        if isinstance(value, (list, tuple)):
            return {"entries": list(value)}
        return value

    def model_post_init(self, __context: Any) -> None:
        """Build the id index, rejecting duplicate question ids."""
        index: Dict[str, Question] = {}
        for question in self.questions:
            if question.id in index:
                raise ConfigurationError(
                    f"Duplicate question id {question.id} in bank {self.test_id}",
                    question_id=question.id,
                )
            index[question.id] = question
        self._index = index

    def get(self, question_id: str) -> Optional[Question]:
        """Get a question by id, or None."""
        return self._index.get(str(question_id))

    def by_factor(self) -> Dict[str, List[Question]]:
        """Group the questions by dimension code, in bank order.

        Questions without a factor are grouped under the empty string.
        """
        groups: Dict[str, List[Question]] = {}
        for question in self.questions:
            groups.setdefault(question.factor or "", []).append(question)
        return groups

    def __len__(self) -> int:
        return len(self.questions)
