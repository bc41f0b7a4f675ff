"""
Error Colors
Maps a signed fit error to a display color.

Positive errors (flight covers more distance than the fitted speed predicts)
fade from white towards blue, negative errors fade from white towards red.
"""

import math
from typing import NamedTuple

from .constants import ANSI_FOREGROUND, CHANNEL_MAX


class Color(NamedTuple):
    """RGB color with 0-255 integer channels."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def css(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"

    @property
    def ansi(self) -> str:
        """Terminal escape setting this color as foreground."""
        return ANSI_FOREGROUND.format(r=self.red, g=self.green, b=self.blue)


def _channel(intensity: float) -> int:
    """Scale 0-1 intensity to a byte, truncating toward zero and clamping."""
    if math.isnan(intensity):
        return 0
    if math.isinf(intensity):
        return CHANNEL_MAX if intensity > 0 else 0
    return max(0, min(CHANNEL_MAX, int(intensity * CHANNEL_MAX)))


def error_to_color(error: float) -> Color:
    """
    Map a signed error to a color.

    Args:
        error: Signed fractional error (usually scaled for contrast)

    Returns:
        (alpha, alpha, 255) for error >= 0, (255, alpha, alpha) otherwise.
        Error 0 is white in both branches.

    Raises:
        ValueError: If the error is not finite

    Example:
        >>> error_to_color(0.5)
        Color(red=127, green=127, blue=255)
    """
    if not math.isfinite(error):
        raise ValueError(f"Cannot map non-finite error to a color: {error}")

    if error >= 0:
        alpha = _channel(1 - error)
        return Color(alpha, alpha, CHANNEL_MAX)

    # Mirror the positive scale: error -0.5 is as strong as +1
    if error == -1:
        inv = math.inf
    else:
        inv = 1 / (error + 1) - 1
    alpha = _channel(1 - inv)
    return Color(CHANNEL_MAX, alpha, alpha)
