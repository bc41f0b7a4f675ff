"""
Tests for CruiseFit utility functions.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cruisefit.utils import format_percent, format_speed, validate_coordinates


class TestValidateCoordinates:
    """Tests for validate_coordinates function."""

    def test_valid(self):
        assert validate_coordinates(-23.43, -46.47)
        assert validate_coordinates(90, 180)
        assert validate_coordinates(-90, -180)

    def test_invalid(self):
        assert not validate_coordinates(100, 0)
        assert not validate_coordinates(0, 200)
        assert not validate_coordinates(float("nan"), 0)


class TestFormatting:
    """Tests for formatting functions."""

    def test_format_percent(self):
        assert format_percent(0.0412) == "4.1%"
        assert format_percent(-0.1234) == "-12.3%"
        assert format_percent(0.5, decimals=0) == "50%"

    def test_format_speed(self):
        assert format_speed(833.4) == "833 km/h"
        assert format_speed(None) == "N/A"
        assert format_speed(float("inf")) == "N/A"
