"""Unit tests for the answer normalizer."""

import pytest

from psychometrics.models.answer import (
    Answer,
    ChoiceValue,
    LikertValue,
    MostLeastValue,
    TableSelectionValue,
    TernaryChoiceValue,
)
from psychometrics.services.answer_normalizer import (
    AnswerNormalizer,
    parse_choices,
    parse_table_selection,
    unwrap_value,
)
from psychometrics.utils.constants import QuestionType
from psychometrics.utils.exceptions import MalformedAnswerError


@pytest.fixture
def normalizer():
    """Normalizer on the default 1-5 scale."""
    return AnswerNormalizer()


def answer(value, question_id="q1"):
    """Raw answer to question q1."""
    return Answer(question_id=question_id, value=value)


class TestUnwrapping:
    """Test wrapper and shape helpers."""

    def test_unwrap_nested_wrappers(self):
        """Test that value and answer wrappers are removed."""
        assert unwrap_value({"answer": {"value": "B"}}) == "B"
        assert unwrap_value({"most": "x"}) == {"most": "x"}
        assert unwrap_value(3) == 3

    @pytest.mark.parametrize("value, expected", [
        ("a", ("A",)),
        (2, ("2",)),
        (["c", "A"], ("C", "A")),
        ({"value": ["b"]}, ("B",)),
    ])
    def test_parse_choices(self, value, expected):
        """Test the accepted choice shapes."""
        assert parse_choices(value) == expected

    @pytest.mark.parametrize("value", [None, [], ["A", None], {"x": 1}, True])
    def test_parse_choices_rejects(self, value):
        """Test unreadable choices."""
        assert parse_choices(value) is None

    def test_parse_table_selection(self):
        """Test column keys and numeric rows."""
        assert parse_table_selection({"c1": ["1", 3.0], 2: []}) == {"c1": (1, 3), "2": ()}

    def test_parse_table_selection_keeps_value_column(self):
        """Test that a column named value is not unwrapped next to others."""
        assert parse_table_selection({"value": [1], "c2": [2]}) == {"value": (1,), "c2": (2,)}


class TestAnswerNormalizer:
    """Test per-type normalization."""

    @pytest.mark.parametrize("value, letter", [
        ("A", "A"), (" b ", "B"), (3, "C"), ("2", "B"), ({"value": "c"}, "C"), (1.0, "A"),
    ])
    def test_ternary_choice(self, normalizer, make_question, value, letter):
        """Test letters and 1-3 indices."""
        question = make_question("q1", "ternary_choice")

        assert normalizer.normalize(question, answer(value)) == TernaryChoiceValue(letter=letter)

    @pytest.mark.parametrize("value", ["D", 0, 4, 1.5, True, [1]])
    def test_ternary_choice_rejects(self, normalizer, make_question, value):
        """Test values outside A-C."""
        question = make_question("q1", "ternary_choice")

        with pytest.raises(MalformedAnswerError) as exc_info:
            normalizer.normalize(question, answer(value))

        assert exc_info.value.question_id == "q1"

    @pytest.mark.parametrize("value, expected", [(1, 1), ("5", 5), (4.0, 4), ({"value": 3}, 3)])
    def test_likert(self, normalizer, make_question, value, expected):
        """Test integral values on the scale."""
        question = make_question("q1", "likert")

        assert normalizer.normalize(question, answer(value)) == LikertValue(value=expected)

    @pytest.mark.parametrize("value", [0, 6, 2.5, "tres", False, [3]])
    def test_likert_rejects(self, normalizer, make_question, value):
        """Test values off the scale or not integral."""
        question = make_question("q1", "likert")

        with pytest.raises(MalformedAnswerError):
            normalizer.normalize(question, answer(value))

    def test_likert_custom_scale(self, make_question):
        """Test a normalizer built for a 0-10 scale."""
        normalizer = AnswerNormalizer(likert_min=0, likert_max=10)
        question = make_question("q1", "likert")

        assert normalizer.normalize(question, answer(10)).value == 10

    def test_forced_choice(self, normalizer, make_question, disc_words):
        """Test most/least words mapped to dimensions."""
        question = make_question("q1", "forced_choice_quad", options={"words": disc_words})

        value = normalizer.normalize(question, answer({"most": "Sociable", "least": "Paciente"}))

        assert value == MostLeastValue(most="I", least="S")

    def test_forced_choice_without_words_accepts_codes(self, normalizer, make_question):
        """Test a block that carries no word map."""
        question = make_question("q1", "forced_choice_quad")

        value = normalizer.normalize(question, answer({"most": "c", "least": "d"}))

        assert value == MostLeastValue(most="C", least="D")

    def test_multiple_choice(self, normalizer, make_question):
        """Test a multi-select answer."""
        question = make_question("q1", "multiple_choice")

        assert normalizer.normalize(question, answer(["a", "d"])) == ChoiceValue(choices=("A", "D"))

    def test_table_checkbox(self, normalizer, make_question):
        """Test a column mapping."""
        question = make_question("q1", "table_checkbox")

        value = normalizer.normalize(question, answer({"c1": [2, 2, 1]}))

        assert value == TableSelectionValue(columns={"c1": (2, 1)})

    def test_empty_answer_is_malformed(self, normalizer, make_question):
        """Test that a missing value is malformed for every type."""
        for question_type in QuestionType:
            question = make_question("q1", question_type.value)
            with pytest.raises(MalformedAnswerError):
                normalizer.normalize(question, answer(None))

    def test_supported_types(self, normalizer):
        """Test that every question type has a normalizer."""
        assert set(normalizer.supported_types) == set(QuestionType)
