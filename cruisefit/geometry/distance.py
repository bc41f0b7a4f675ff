"""
Distance Metrics
Two interchangeable distance models between coordinates.

- Sphere: central angle (radians) between points on a unit sphere
- AE Map: straight-line distance on the polar disk map

The two are not proportional to each other. Running the fit under each one
shows which model better explains the observed flight times.
"""

from dataclasses import dataclass
from math import asin, pi, sqrt
from typing import Callable, Dict

from ..config import Constants
from ..flights.models import Coordinate
from .projection import to_azimuthal_equidistant, to_unit_sphere


def sphere_distance(a: Coordinate, b: Coordinate) -> float:
    """
    Great-circle distance as a central angle on the unit sphere.

    Args:
        a: First point
        b: Second point

    Returns:
        Angle in radians, within [0, π]
    """
    ax, ay, az = to_unit_sphere(a)
    bx, by, bz = to_unit_sphere(b)

    dx = bx - ax
    dy = by - ay
    dz = bz - az
    chord = sqrt(dx * dx + dy * dy + dz * dz)

    # Rounding can push the chord of antipodal points just above 2
    return asin(min(chord / 2, 1.0)) * 2


def map_distance(a: Coordinate, b: Coordinate) -> float:
    """Euclidean distance between two points on the polar disk map."""
    ax, ay = to_azimuthal_equidistant(a)
    bx, by = to_azimuthal_equidistant(b)

    dx = bx - ax
    dy = by - ay
    return sqrt(dx * dx + dy * dy)


@dataclass(frozen=True)
class DistanceMetric:
    """A named distance function with its physical unit scale."""

    key: str
    label: str  # Batch header in reports
    function: Callable[[Coordinate, Coordinate], float]
    km_per_unit: float  # Kilometers per unit of returned distance

    def __call__(self, a: Coordinate, b: Coordinate) -> float:
        return self.function(a, b)


SPHERE = DistanceMetric(
    key="sphere",
    label="Sphere",
    function=sphere_distance,
    km_per_unit=Constants.EARTH_RADIUS_KM,
)

# One map unit along a meridian spans 360° of latitude
AE_MAP = DistanceMetric(
    key="ae_map",
    label="AE Map",
    function=map_distance,
    km_per_unit=2 * pi * Constants.EARTH_RADIUS_KM,
)

METRICS: Dict[str, DistanceMetric] = {
    SPHERE.key: SPHERE,
    AE_MAP.key: AE_MAP,
}


def get_metric(key: str) -> DistanceMetric:
    """
    Look up a distance metric by key.

    Raises:
        ValueError: If the key is unknown
    """
    try:
        return METRICS[key]
    except KeyError:
        raise ValueError(
            f"Unknown distance metric: {key} (choose from {', '.join(METRICS)})"
        ) from None
