"""
CruiseFit Utility Functions
Common helpers for coordinate validation and value formatting.
"""

import math
from typing import Optional


def validate_coordinates(lat: float, lon: float) -> bool:
    """
    Validate latitude and longitude coordinates.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees

    Returns:
        True if coordinates are valid

    Example:
        >>> validate_coordinates(-23.43, -46.47)
        True
        >>> validate_coordinates(100, 200)
        False
    """
    return -90 <= lat <= 90 and -180 <= lon <= 180


def format_percent(fraction: float, decimals: int = 1) -> str:
    """
    Format a signed fraction as a percentage.

    Example:
        >>> format_percent(-0.0412)
        '-4.1%'
    """
    return f"{fraction * 100:.{decimals}f}%"


def format_speed(speed_kmh: Optional[float]) -> str:
    """
    Format a ground speed in km/h.

    Example:
        >>> format_speed(850.44)
        '850 km/h'
    """
    if speed_kmh is None or not math.isfinite(speed_kmh):
        return "N/A"

    return f"{speed_kmh:.0f} km/h"
