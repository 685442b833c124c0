"""Unit tests for the engine input models."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from psychometrics.models.question import NormativeEntry, NormativeTable, Question, QuestionBank
from psychometrics.models.result import Interpretation
from psychometrics.models.submission import Submission
from psychometrics.utils.constants import ErrorCodes, QuestionType
from psychometrics.utils.exceptions import ConfigurationError


class TestQuestion:
    """Test question parsing."""

    def test_camel_case_document(self):
        """Test a question stored with camelCase keys."""
        question = Question.model_validate({
            "_id": 17,
            "questionNumber": 3,
            "questionType": "likert_scale",
            "factor": " d2 ",
            "correctAnswer": None,
            "metadata": {"isReversed": True},
        })

        assert question.id == "17"
        assert question.type == QuestionType.LIKERT
        assert question.factor == "D2"
        assert question.is_reversed is True

    def test_unknown_type_is_rejected(self):
        """Test a question type the engine does not know."""
        with pytest.raises(ValidationError):
            Question(id="q1", type="essay")

    @pytest.mark.parametrize("polarity, expected", [(1, 1), (-1, -1)])
    def test_polarity(self, make_question, polarity, expected):
        """Test the accepted polarities."""
        question = make_question("q1", "ternary_choice", metadata={"polarity": polarity})

        assert question.polarity == expected

    @pytest.mark.parametrize("polarity", [0, 2, True, "-1"])
    def test_invalid_polarity(self, make_question, polarity):
        """Test polarities other than +1 and -1."""
        question = make_question("q1", "ternary_choice", metadata={"polarity": polarity})

        with pytest.raises(ConfigurationError):
            question.polarity

    def test_question_is_frozen(self, make_question):
        """Test that questions cannot be modified."""
        question = make_question("q1", "likert")

        with pytest.raises(ValidationError):
            question.factor = "D1"


class TestNormativeTable:
    """Test normative data."""

    def test_from_mapping(self):
        """Test lookup by factor code, case-insensitively."""
        table = NormativeTable.from_mapping({"q1": {"mean": 10.0, "stdDev": 2.5}})

        assert table.get("Q1").std_dev == 2.5
        assert table.get("q1").mean == 10.0
        assert table.get("A") is None
        assert table.factors() == ["Q1"]

    @pytest.mark.parametrize("std_dev", [0, -1.5])
    def test_std_dev_must_be_positive(self, std_dev):
        """Test degenerate distributions."""
        with pytest.raises(ConfigurationError) as exc_info:
            NormativeEntry(factor="A", mean=5.0, std_dev=std_dev)

        assert exc_info.value.error_code == ErrorCodes.INVALID_NORMATIVE_ENTRY

    def test_duplicate_factor(self):
        """Test two entries for one factor."""
        with pytest.raises(ConfigurationError):
            NormativeTable.from_entries([
                {"factor": "A", "mean": 1, "std_dev": 1},
                {"factor": "a", "mean": 2, "std_dev": 1},
            ])


class TestQuestionBank:
    """Test question banks."""

    def test_from_dict(self):
        """Test a bank with a bare list of normative entries."""
        bank = QuestionBank.from_dict({
            "code": "TEST_16PF",
            "questions": [
                {"id": "a1", "type": "ternary_choice", "factor": "A"},
                {"id": "c1", "type": "ternary_choice", "factor": "C"},
                {"id": "a2", "type": "ternary_choice", "factor": "A"},
            ],
            "normativeData": [{"factor": "A", "mean": 3, "std": 1.5}],
        })

        assert len(bank) == 3
        assert bank.get("c1").factor == "C"
        assert bank.get("zz") is None
        assert [q.id for q in bank.by_factor()["A"]] == ["a1", "a2"]
        assert len(bank.normative_table) == 1

    def test_duplicate_question_ids(self, make_question, make_bank):
        """Test that ids are unique within a bank."""
        with pytest.raises(ConfigurationError):
            make_bank([make_question("q1", "likert"), make_question("q1", "likert")])


class TestSubmission:
    """Test submissions."""

    def test_camel_case_document(self):
        """Test a submission with offsets and numeric ids."""
        submission = Submission.from_dict({
            "testId": "TEST_TAC",
            "workerId": 42,
            "workerProcessId": "p-1",
            "startedAt": "2024-05-06T10:00:00+02:00",
            "completedAt": "2024-05-06T08:05:00Z",
            "answers": [{"questionId": 1, "answer": 4, "timeTaken": 3.5}],
        })

        assert submission.worker_id == "42"
        assert submission.started_at == datetime(2024, 5, 6, 8, 0, tzinfo=timezone.utc)
        assert submission.completion_time_ms == 300_000
        assert submission.answer_for("1").value == 4
        assert submission.answer_for("2") is None

    def test_naive_timestamps_are_utc(self, make_submission):
        """Test that naive timestamps are taken as UTC."""
        submission = make_submission(
            {}, started_at=datetime(2024, 1, 1, 12, 0), duration=timedelta(seconds=1)
        )

        assert submission.completed_at.tzinfo == timezone.utc
        assert submission.completion_time_ms == 1000

    def test_duplicate_question_ids(self, make_submission):
        """Test duplicates in first-seen order."""
        submission = make_submission([("b", 1), ("a", 1), ("b", 2), ("a", 3), ("c", 1)])

        assert submission.duplicate_question_ids() == ["b", "a"]


class TestInterpretation:
    """Test interpretation mappings."""

    def test_default_mappings_are_read_only(self):
        """Test that empty defaults are frozen like supplied values."""
        interpretation = Interpretation()

        with pytest.raises(TypeError):
            interpretation.categories["level"] = "ALTO"
        with pytest.raises(TypeError):
            interpretation.metadata["notes"] = []

    def test_dump_gives_plain_dicts(self):
        """Test that serialization returns ordinary dictionaries."""
        interpretation = Interpretation(level="ALTO", descriptions={"level": "Alto"})

        data = interpretation.model_dump()

        assert type(data["descriptions"]) is dict
        assert data["descriptions"] == {"level": "Alto"}
