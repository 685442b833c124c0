"""Unit tests for numeric and datetime helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from psychometrics.utils.datetime_utils import (
    calculate_duration_ms,
    format_duration,
    normalize_datetime_to_utc,
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


class TestRounding:
    """Test rounding helpers."""

    @pytest.mark.parametrize("value, expected", [
        (5.5, 6), (4.5, 5), (4.49, 4), (-2.5, -2), (-2.51, -3), (0.0, 0),
    ])
    def test_round_half_up(self, value, expected):
        """Test that halves round up, unlike round()."""
        assert round_half_up(value) == expected

    @pytest.mark.parametrize("value, places, expected", [
        (66.666, 1, 66.7), (2.675, 2, 2.68), (0.05, 1, 0.1), (3.2, 2, 3.2),
    ])
    def test_round_decimal(self, value, places, expected):
        """Test decimal rounding of binary-inexact values."""
        assert round_decimal(value, places) == expected

    def test_clamp(self):
        """Test clamping to the inclusive range."""
        assert clamp(0, 1, 10) == 1
        assert clamp(11, 1, 10) == 10
        assert clamp(7, 1, 10) == 7


class TestScoringHelpers:
    """Test percentage, mean and ranking helpers."""

    def test_calculate_percentage(self):
        """Test percentages and the zero denominator."""
        assert calculate_percentage(2, 3) == 66.7
        assert calculate_percentage(1, 8, places=2) == 12.5
        assert calculate_percentage(1, 3, places=None) == pytest.approx(33.333, abs=0.001)
        assert calculate_percentage(5, 0) == 0.0

    def test_calculate_mean(self):
        """Test means and the empty input."""
        assert calculate_mean([5, 5, 5, 5, 2, 2, 2, 2, 2, 2]) == 3.2
        assert calculate_mean(iter([1, 2])) == 1.5
        assert calculate_mean([]) == 0.0

    def test_rank_dimensions_breaks_ties_by_order(self):
        """Test that equal scores keep their canonical order."""
        ranked = rank_dimensions({"S": 3, "D": 3, "I": 5, "C": 1}, ["D", "I", "S", "C"])

        assert ranked == [("I", 5), ("D", 3), ("S", 3), ("C", 1)]

    @pytest.mark.parametrize("value, expected", [
        (3, 3.0), (2.5, 2.5), (" 4 ", 4.0), ("1e1", 10.0),
        ("x", None), (True, None), (None, None), ([1], None),
        (float("nan"), None), ("inf", None),
    ])
    def test_coerce_number(self, value, expected):
        """Test numeric payload parsing."""
        assert coerce_number(value) == expected


class TestDatetimeHelpers:
    """Test datetime helpers."""

    def test_naive_datetimes_are_utc(self):
        """Test that naive values are taken as UTC."""
        value = normalize_datetime_to_utc(datetime(2024, 1, 15, 14, 30))

        assert value.tzinfo == timezone.utc
        assert value.hour == 14

    def test_offsets_are_converted(self):
        """Test conversion of an offset-aware value."""
        offset = timezone(timedelta(hours=-5))

        value = normalize_datetime_to_utc(datetime(2024, 1, 15, 9, 0, tzinfo=offset))

        assert value.hour == 14

    def test_calculate_duration_ms(self):
        """Test signed millisecond durations."""
        start = datetime(2024, 1, 15, 10, 0, 0)
        end = datetime(2024, 1, 15, 10, 30, 15, 250000)

        assert calculate_duration_ms(start, end) == 1815250
        assert calculate_duration_ms(end, start) == -1815250

    @pytest.mark.parametrize("milliseconds, expected", [
        (45_000, "45s"), (125_000, "2m 5s"), (5_430_000, "1h 30m"), (7_200_000, "2h"),
    ])
    def test_format_duration(self, milliseconds, expected):
        """Test human-readable durations."""
        assert format_duration(milliseconds) == expected
