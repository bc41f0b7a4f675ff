"""
Duration Parsing
Converts "HH:MM[:SS...]" duration strings into fractional hours.
"""

import math
import re
from typing import List

from ..config import Constants
from ..errors import EmptySampleListError, MalformedDurationError

# Line separator of a duration block: any whitespace run holding a newline
LINE_SEPARATOR = re.compile(r"\s*\n\s*")


def parse_time(text: str) -> float:
    """
    Parse a colon-separated duration into fractional hours.

    Field i contributes value / 60**i hours: hours, minutes, seconds, ...

    Args:
        text: Duration string such as "13:08" or "0:00:30"

    Returns:
        Duration in hours

    Raises:
        MalformedDurationError: If any field is empty, non-numeric,
            negative or non-finite

    Example:
        >>> parse_time("1:30")
        1.5
    """
    total = 0.0

    for i, field in enumerate(text.split(":")):
        field = field.strip()
        try:
            value = float(field)
        except ValueError:
            raise MalformedDurationError(
                f"Malformed duration {text!r}: field {field!r} is not numeric"
            ) from None

        if not math.isfinite(value) or value < 0:
            raise MalformedDurationError(
                f"Malformed duration {text!r}: field {field!r} is out of range"
            )

        total += value / Constants.MINUTES_PER_HOUR ** i

    return total


def parse_time_list(block: str) -> List[float]:
    """
    Parse a newline-delimited block of durations.

    Args:
        block: One duration per line, outer and per-line whitespace allowed

    Returns:
        Durations in hours, in source order

    Raises:
        EmptySampleListError: If the block holds no durations
        MalformedDurationError: If any line is malformed
    """
    block = block.strip()
    if not block:
        raise EmptySampleListError("Duration block is empty")

    return [parse_time(line) for line in LINE_SEPARATOR.split(block)]


def format_hours(hours: float) -> str:
    """
    Format fractional hours as "H:MM".

    Example:
        >>> format_hours(13.5)
        '13:30'
    """
    if hours is None or hours < 0:
        return "N/A"

    total_minutes = int(round(hours * Constants.MINUTES_PER_HOUR))
    h, m = divmod(total_minutes, Constants.MINUTES_PER_HOUR)
    return f"{h}:{m:02d}"
