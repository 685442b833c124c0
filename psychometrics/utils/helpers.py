"""Helper utilities for the scoring engine.

This module provides the numeric helpers shared by the scoring strategies:
half-up rounding, percentages, means and dimension ranking.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from psychometrics.utils.logger import get_logger

logger = get_logger(__name__)


# Rounding utilities

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards positive infinity.

    Python's ``round`` uses banker's rounding; scores are rounded the
    conventional way so that 5.5 becomes 6 and -2.5 becomes -2.

    Args:
        value: Number to round

    Returns:
        int: Rounded value
    """
    return int(math.floor(value + 0.5))


def round_decimal(value: float, places: int) -> float:
    """Round to a number of decimal places, halves away from zero.

    Args:
        value: Number to round
        places: Decimal places to keep

    Returns:
        float: Rounded value
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp a value into the inclusive range ``[lower, upper]``."""
    return max(lower, min(upper, value))


# Scoring utilities

def calculate_percentage(part: float, whole: float, places: Optional[int] = 1) -> float:
    """Calculate ``part`` as a percentage of ``whole``.

    Args:
        part: Numerator
        whole: Denominator
        places: Decimal places to keep, None for no rounding

    Returns:
        float: Percentage, 0.0 when ``whole`` is 0
    """
    if whole == 0:
        return 0.0

    percentage = (part / whole) * 100
    if places is None:
        return percentage
    return round_decimal(percentage, places)


def calculate_mean(values: Iterable[float], places: Optional[int] = 2) -> float:
    """Calculate the arithmetic mean of some values.

    Args:
        values: Values to average
        places: Decimal places to keep, None for no rounding

    Returns:
        float: Mean, 0.0 for an empty input
    """
    items = list(values)
    if not items:
        return 0.0

    mean = sum(items) / len(items)
    if places is None:
        return mean
    return round_decimal(mean, places)


def rank_dimensions(
    scores: Dict[str, float],
    order: Sequence[str]
) -> List[Tuple[str, float]]:
    """Sort dimensions by score, highest first.

    Ties keep the position the dimension has in ``order``.

    Args:
        scores: Score per dimension code
        order: Canonical dimension order

    Returns:
        List[Tuple[str, float]]: Ranked (dimension, score) pairs
    """
    position = {code: index for index, code in enumerate(order)}
    return sorted(
        scores.items(),
        key=lambda item: (-item[1], position.get(item[0], len(position)))
    )


def coerce_number(value: Any) -> Optional[float]:
    """Convert an answer payload into a number.

    Accepts ints, floats and numeric strings. Booleans and non-finite
    values are rejected.

    Args:
        value: Raw value

    Returns:
        float: Parsed number or None if the value is not numeric
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number
