"""
Tests for duration parsing.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cruisefit.errors import EmptySampleListError, MalformedDurationError
from cruisefit.flights.timing import format_hours, parse_time, parse_time_list


class TestParseTime:
    """Tests for parse_time function."""

    def test_hours_minutes(self):
        """Minutes count as sixtieths of an hour."""
        assert parse_time("1:30") == 1.5

    def test_seconds(self):
        """Third field counts as seconds."""
        assert parse_time("0:00:30") == pytest.approx(1 / 120)

    def test_leading_zero(self):
        """Zero-padded fields parse as decimal numbers."""
        assert parse_time("08:29") == pytest.approx(8 + 29 / 60)

    def test_hours_only(self):
        """A single field is whole hours."""
        assert parse_time("7") == 7.0

    def test_surrounding_whitespace(self):
        """Whitespace around fields is ignored."""
        assert parse_time("  13:08 ") == pytest.approx(13 + 8 / 60)

    @pytest.mark.parametrize("text", ["ab:10", "1:", "", "1:3o", "-1:00", "nan:00", "inf"])
    def test_malformed(self, text):
        """Malformed fields fail instead of producing NaN."""
        with pytest.raises(MalformedDurationError):
            parse_time(text)

    def test_malformed_is_value_error(self):
        """Duration errors are ValueErrors."""
        with pytest.raises(ValueError):
            parse_time("x")


class TestParseTimeList:
    """Tests for parse_time_list function."""

    def test_padded_block(self):
        """Three padded lines give three values in source order."""
        block = """
            13:08
            13:21
            13:17
        """
        result = parse_time_list(block)

        assert len(result) == 3
        assert result == pytest.approx([13 + 8 / 60, 13 + 21 / 60, 13 + 17 / 60])

    def test_single_line(self):
        """A block without newlines holds one value."""
        assert parse_time_list("07:45") == [7.75]

    def test_empty_block(self):
        """Empty or blank blocks are rejected."""
        with pytest.raises(EmptySampleListError):
            parse_time_list("")
        with pytest.raises(EmptySampleListError):
            parse_time_list("   \n\t  \n ")

    def test_two_values_on_one_line(self):
        """Values are separated by newlines, not by spaces."""
        with pytest.raises(MalformedDurationError):
            parse_time_list("13:08 13:10")

    def test_bad_line_fails_whole_block(self):
        """One malformed line rejects the block."""
        with pytest.raises(MalformedDurationError):
            parse_time_list("13:08\n13:xx\n13:10")


class TestFormatHours:
    """Tests for format_hours function."""

    def test_format(self):
        assert format_hours(13.5) == "13:30"
        assert format_hours(7.75) == "7:45"

    def test_minute_rounding(self):
        """Rounding up to a full hour carries over."""
        assert format_hours(1.9999) == "2:00"

    def test_invalid(self):
        assert format_hours(None) == "N/A"
        assert format_hours(-1) == "N/A"
