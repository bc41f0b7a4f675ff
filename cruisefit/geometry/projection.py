"""
Coordinate Projections
Maps latitude/longitude onto a unit sphere and onto a polar disk map.
"""

from math import cos, sin
from typing import Tuple

from ..config import Constants
from ..flights.models import Coordinate


def to_unit_sphere(coord: Coordinate) -> Tuple[float, float, float]:
    """
    Embed a coordinate as a point on the unit sphere.

    Axes: y points to the north pole, z to (0°, 0°), x to (0°, 90°E).
    Only chord lengths between points are used, so the orientation is
    irrelevant as long as every point goes through this function.

    Args:
        coord: Point in degrees

    Returns:
        (x, y, z) with x² + y² + z² == 1
    """
    lat = coord.latitude * Constants.DEG_TO_RAD
    lon = coord.longitude * Constants.DEG_TO_RAD

    rad = cos(lat)
    x = sin(lon) * rad
    y = sin(lat)
    z = cos(lon) * rad
    return x, y, z


def to_azimuthal_equidistant(coord: Coordinate) -> Tuple[float, float]:
    """
    Project a coordinate onto a north-pole-centered disk map.

    The pole sits at (0.5, 0.5) and the radius grows linearly with the
    colatitude, (90 - lat) / 360, so the south pole lands on a circle of
    radius 0.5 around the center.

    Args:
        coord: Point in degrees

    Returns:
        (u, v) map position, within [0, 1]²
    """
    lon = coord.longitude * Constants.DEG_TO_RAD

    rad = (90 - coord.latitude) / 360
    u = 0.5 + sin(lon) * rad
    v = 0.5 + cos(lon) * rad
    return u, v
