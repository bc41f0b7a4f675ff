"""
CruiseFit Geometry Component

Coordinate projections and the distance models built on them.

Main Objects:
    - to_unit_sphere / to_azimuthal_equidistant: Coordinate projections
    - sphere_distance / map_distance: Distance functions
    - DistanceMetric: Named distance function with unit scale
    - METRICS: Registry of available metrics ("sphere", "ae_map")

Example:
    >>> from cruisefit.geometry import get_metric
    >>> from cruisefit.flights import AIRPORTS
    >>> sphere = get_metric("sphere")
    >>> angle = sphere(AIRPORTS["GRU"], AIRPORTS["DOH"])
"""

from .projection import to_azimuthal_equidistant, to_unit_sphere
from .distance import (
    AE_MAP,
    METRICS,
    SPHERE,
    DistanceMetric,
    get_metric,
    map_distance,
    sphere_distance,
)

__all__ = [
    # Projections
    "to_unit_sphere",
    "to_azimuthal_equidistant",
    # Distances
    "sphere_distance",
    "map_distance",
    "DistanceMetric",
    "SPHERE",
    "AE_MAP",
    "METRICS",
    "get_metric",
]
