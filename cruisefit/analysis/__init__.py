"""
CruiseFit Analysis Component

Speed fitting, error coloring, and reporting of flight batches.

Main Classes:
    - FlightAnalyzer: Two-pass scale fit and per-flight error
    - ReportGenerator: Console and text report output
    - Color: RGB display hint of a flight's error

Example:
    >>> from cruisefit.analysis import FlightAnalyzer, ReportGenerator
    >>> from cruisefit.flights import load_catalog
    >>> from cruisefit.geometry import SPHERE
    >>> batch = FlightAnalyzer().analyze(load_catalog(), SPHERE)
    >>> ReportGenerator().print_batch(batch)
"""

# Main analysis components
from .analyzer import FlightAnalyzer, calculate_error, fit_scale
from .colors import Color, error_to_color
from .reporter import ReportGenerator

# Utilities
from . import constants

__all__ = [
    # Main classes
    "FlightAnalyzer",
    "ReportGenerator",
    "Color",
    # Functions
    "fit_scale",
    "calculate_error",
    "error_to_color",
    # Modules
    "constants",
]
