"""
CruiseFit - Flight Speed Model Comparison

Estimates the average ground speed implied by observed flight durations and
compares two distance models against them: great-circle distance on a
sphere and distance on a polar azimuthal-equidistant map.

Components:
    - flights: Duration parsing, flight records, airport table and catalog
    - geometry: Coordinate projections and distance metrics
    - analysis: Speed fit, error colors, and reports

Example:
    >>> from cruisefit.flights import load_catalog
    >>> from cruisefit.geometry import METRICS
    >>> from cruisefit.analysis import FlightAnalyzer
    >>> batches = FlightAnalyzer().analyze_all(load_catalog(), METRICS.values())
"""

# Component imports for easy access
from . import errors
from . import utils
from . import config
from . import flights
from . import geometry
from . import analysis

CRUISEFIT_VERSION = "v0.1.0"

__version__ = CRUISEFIT_VERSION
__license__ = "MIT"

__all__ = [
    "flights",
    "geometry",
    "analysis",
    "errors",
    "utils",
    "config",
]
