"""
CruiseFit Flights Component

Flight input data: duration parsing, immutable records, the static airport
table and flight catalog, and airport code resolution.

Main Classes:
    - Coordinate: Latitude/longitude point
    - Flight: Route with observed durations
    - AnalyzedFlight: Per-flight fit result
    - ScaleFactor: Fitted distance/duration ratio
    - BatchResult: One complete fit under one distance metric

Example:
    >>> from cruisefit.flights import load_catalog
    >>> flights = load_catalog()
    >>> flights[0].name, flights[0].route
    ('QTR780', 'GRU-DOH')
"""

# Records
from .models import AnalyzedFlight, BatchResult, Coordinate, Flight, ScaleFactor

# Parsing and resolution
from .timing import format_hours, parse_time, parse_time_list
from .resolver import build_flight, load_catalog, resolve_coordinate

# Static data
from .airports import AIRPORTS
from .catalog import FLIGHT_RECORDS

__all__ = [
    # Records
    "Coordinate",
    "Flight",
    "AnalyzedFlight",
    "ScaleFactor",
    "BatchResult",
    # Parsing and resolution
    "parse_time",
    "parse_time_list",
    "format_hours",
    "resolve_coordinate",
    "build_flight",
    "load_catalog",
    # Static data
    "AIRPORTS",
    "FLIGHT_RECORDS",
]
