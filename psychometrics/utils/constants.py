"""Constants and enums for the psychometric scoring engine.

This module defines the instrument codes, question types, dimension codes and
numeric constants shared by every scoring strategy.
"""

from enum import Enum
from typing import Dict, List, Tuple, Union


# ============================================================================
# CORE ENUMS
# ============================================================================

class InstrumentCode(str, Enum):
    """Codes of the psychometric instruments the engine can score."""

    TEST_16PF = "TEST_16PF"  # Ternary-choice trait inventory
    TEST_CFR = "TEST_CFR"  # Reversible Likert risk inventory
    TEST_DISC = "TEST_DISC"  # Forced-choice quad profile
    TEST_IL = "TEST_IL"  # Multiple-choice aptitude (Wonderlic style)
    TEST_IC = "TEST_IC"  # Criteria-matching table
    TEST_TAC = "TEST_TAC"  # Multi-dimension Likert competency

    @property
    def display_name(self) -> str:
        """Get display name for the instrument."""
        return INSTRUMENT_DISPLAY_NAMES[self]

    @property
    def question_type(self) -> "QuestionType":
        """Get the question type every item of this instrument uses."""
        return INSTRUMENT_QUESTION_TYPES[self]

    @property
    def nominal_question_count(self) -> int:
        """Get the question count of the standard form of the instrument."""
        return NOMINAL_QUESTION_COUNTS[self]

    @classmethod
    def get_all_codes(cls) -> List[str]:
        """Get all instrument codes as a list."""
        return [code.value for code in cls]

    @classmethod
    def from_code(cls, code: Union[str, "InstrumentCode"]) -> "InstrumentCode":
        """Get instrument from its code.

        Args:
            code: Instrument code, case-insensitive

        Returns:
            InstrumentCode: Matching instrument

        Raises:
            ValueError: If code is unknown
        """
        if isinstance(code, cls):
            return code
        normalized = str(code).strip().upper()
        for instrument in cls:
            if instrument.value == normalized:
                return instrument
        raise ValueError(f"Invalid instrument code: {code}")


class QuestionType(str, Enum):
    """Types of questions found in the instrument question banks."""

    TERNARY_CHOICE = "ternary_choice"  # A/B/C mapped through a scoring table
    LIKERT = "likert"  # 1-5 agreement scale
    FORCED_CHOICE_QUAD = "forced_choice_quad"  # Most/least out of four words
    MULTIPLE_CHOICE = "multiple_choice"  # Single or multi-select with a key
    TABLE_CHECKBOX = "table_checkbox"  # Column -> marked rows

    @property
    def display_name(self) -> str:
        """Get display name for the question type."""
        return QUESTION_TYPE_DISPLAY_NAMES[self]


class AlertLevel(str, Enum):
    """Severity tag consumed by the UI for risk results."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


# ============================================================================
# INSTRUMENT MAPPINGS
# ============================================================================

INSTRUMENT_DISPLAY_NAMES: Dict[InstrumentCode, str] = {
    InstrumentCode.TEST_16PF: "Cuestionario Factorial de Personalidad 16PF",
    InstrumentCode.TEST_CFR: "Conducta Frente al Riesgo",
    InstrumentCode.TEST_DISC: "Perfil Conductual DISC",
    InstrumentCode.TEST_IL: "Inteligencia Laboral (Wonderlic)",
    InstrumentCode.TEST_IC: "Instrucciones Complejas",
    InstrumentCode.TEST_TAC: "Atención al Cliente",
}

INSTRUMENT_QUESTION_TYPES: Dict[InstrumentCode, QuestionType] = {
    InstrumentCode.TEST_16PF: QuestionType.TERNARY_CHOICE,
    InstrumentCode.TEST_CFR: QuestionType.LIKERT,
    InstrumentCode.TEST_DISC: QuestionType.FORCED_CHOICE_QUAD,
    InstrumentCode.TEST_IL: QuestionType.MULTIPLE_CHOICE,
    InstrumentCode.TEST_IC: QuestionType.TABLE_CHECKBOX,
    InstrumentCode.TEST_TAC: QuestionType.LIKERT,
}

NOMINAL_QUESTION_COUNTS: Dict[InstrumentCode, int] = {
    InstrumentCode.TEST_16PF: 187,
    InstrumentCode.TEST_CFR: 60,
    InstrumentCode.TEST_DISC: 24,
    InstrumentCode.TEST_IL: 20,
    InstrumentCode.TEST_IC: 1,
    InstrumentCode.TEST_TAC: 30,
}

# Question type names used by older question bank exports
LEGACY_QUESTION_TYPES: Dict[str, QuestionType] = {
    "multiple_choice_ternary": QuestionType.TERNARY_CHOICE,
    "likert_scale": QuestionType.LIKERT,
    "forced_choice": QuestionType.FORCED_CHOICE_QUAD,
}

QUESTION_TYPE_DISPLAY_NAMES: Dict[QuestionType, str] = {
    QuestionType.TERNARY_CHOICE: "Ternary Choice",
    QuestionType.LIKERT: "Likert Scale",
    QuestionType.FORCED_CHOICE_QUAD: "Forced Choice (Most/Least)",
    QuestionType.MULTIPLE_CHOICE: "Multiple Choice",
    QuestionType.TABLE_CHECKBOX: "Table Checkbox",
}


# ============================================================================
# DIMENSION CODES
# ============================================================================

SIXTEEN_PF_FACTORS: Tuple[str, ...] = (
    "A", "B", "C", "E", "F", "G", "H", "I",
    "L", "M", "N", "O", "Q1", "Q2", "Q3", "Q4",
)

DISC_DIMENSIONS: Tuple[str, ...] = ("D", "I", "S", "C")

TAC_DIMENSIONS: Tuple[str, ...] = ("D1", "D2", "D3", "D4", "D5", "D6", "D7")

TERNARY_OPTIONS: Tuple[str, ...] = ("A", "B", "C")


# ============================================================================
# SCORING CONSTANTS
# ============================================================================

class ScoringConstants:
    """Numeric constants for the scoring algorithms."""

    # Likert scale bounds shared by CFR and TAC
    LIKERT_MIN = 1
    LIKERT_MAX = 5

    # Decatipo transform: round(z * 2 + 5.5), clamped
    DECATIPO_SLOPE = 2.0
    DECATIPO_OFFSET = 5.5
    DECATIPO_MIN = 1
    DECATIPO_MAX = 10

    # 16PF highlight thresholds
    DECATIPO_HIGHLIGHT_LOW = 2
    DECATIPO_HIGHLIGHT_HIGH = 9

    # DISC thresholds (percentage of the four-dimension total)
    DISC_STRENGTH_THRESHOLD = 30
    DISC_STYLE_LOW = 20
    DISC_STYLE_HIGH = 35
    DISC_PAIRED_PROFILE_GAP = 3
    DISC_EVEN_SPLIT = 25

    # TAC thresholds (dimension mean)
    TAC_STRENGTH_THRESHOLD = 4.0
    TAC_GROWTH_THRESHOLD = 3.0

    # Rounding precision
    PERCENTAGE_DECIMALS = 1
    MEAN_DECIMALS = 2


# ============================================================================
# ERROR CODES
# ============================================================================

class ErrorCodes:
    """Standardized error codes."""

    # Configuration errors (2000-2099)
    CONFIGURATION_ERROR = "2001"
    UNKNOWN_INSTRUMENT = "2002"
    MISSING_NORMATIVE_ENTRY = "2003"
    INVALID_NORMATIVE_ENTRY = "2004"
    MISSING_SCORING_MAP = "2005"
    MISSING_CORRECT_ANSWER = "2006"
    UNKNOWN_DIMENSION = "2007"
    QUESTION_TYPE_MISMATCH = "2008"
    EMPTY_QUESTION_BANK = "2009"

    # Submission errors (2100-2199)
    INCOMPLETE_SUBMISSION = "2101"
    UNRESOLVED_QUESTION = "2102"
    DUPLICATE_ANSWER = "2103"
    CLOCK_ORDERING = "2104"

    # Answer errors (2200-2299)
    MALFORMED_ANSWER = "2201"


def get_instrument_codes() -> List[str]:
    """Get all supported instrument codes.

    Returns:
        List[str]: Instrument codes
    """
    return InstrumentCode.get_all_codes()
