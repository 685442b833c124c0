"""Psychometrics utilities package.

This package provides the constants, exceptions, logging and numeric helpers
shared by the scoring engine. Validators live in
``psychometrics.utils.validators`` and are imported from there, since they
depend on the domain models.
"""

from psychometrics.utils.constants import (
    DISC_DIMENSIONS,
    SIXTEEN_PF_FACTORS,
    TAC_DIMENSIONS,
    AlertLevel,
    ErrorCodes,
    InstrumentCode,
    QuestionType,
    ScoringConstants,
    get_instrument_codes,
)
from psychometrics.utils.datetime_utils import (
    calculate_duration_ms,
    format_duration,
    normalize_datetime_to_utc,
)
from psychometrics.utils.exceptions import (
    ClockOrderingError,
    ConfigurationError,
    IncompleteSubmissionError,
    MalformedAnswerError,
    ScoringEngineError,
    SubmissionError,
    UnknownInstrumentError,
    UnresolvedQuestionError,
)
from psychometrics.utils.helpers import (
    calculate_mean,
    calculate_percentage,
    clamp,
    coerce_number,
    rank_dimensions,
    round_decimal,
    round_half_up,
)
from psychometrics.utils.logger import (
    PerformanceLogger,
    get_engine_logger,
    get_logger,
    get_normalizer_logger,
    get_scoring_logger,
    log_malformed_answer,
    setup_logging,
)

__all__ = [
    # Constants and Enums
    "AlertLevel",
    "DISC_DIMENSIONS",
    "ErrorCodes",
    "InstrumentCode",
    "QuestionType",
    "SIXTEEN_PF_FACTORS",
    "ScoringConstants",
    "TAC_DIMENSIONS",
    "get_instrument_codes",

    # DateTime utilities
    "calculate_duration_ms",
    "format_duration",
    "normalize_datetime_to_utc",

    # Exception classes
    "ClockOrderingError",
    "ConfigurationError",
    "IncompleteSubmissionError",
    "MalformedAnswerError",
    "ScoringEngineError",
    "SubmissionError",
    "UnknownInstrumentError",
    "UnresolvedQuestionError",

    # Helper functions
    "calculate_mean",
    "calculate_percentage",
    "clamp",
    "coerce_number",
    "rank_dimensions",
    "round_decimal",
    "round_half_up",

    # Logger functions
    "PerformanceLogger",
    "get_engine_logger",
    "get_logger",
    "get_normalizer_logger",
    "get_scoring_logger",
    "log_malformed_answer",
    "setup_logging",
]
