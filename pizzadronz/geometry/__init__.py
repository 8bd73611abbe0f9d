"""Mini README: Flat-plane geometry used by validation and path planning.

Distances are Euclidean in (longitude, latitude) degrees rather than
geodesic; every threshold in the service is expressed in the same unit.
"""

from .calculations import (
    bearing_towards,
    distance,
    is_close,
    is_in_any_region,
    move,
    next_position,
    point_in_polygon,
)
from .positions import (
    CoordinateOutOfRange,
    NamedRegion,
    Position,
    validate_position,
    validate_region,
)

__all__ = [
    "CoordinateOutOfRange",
    "NamedRegion",
    "Position",
    "bearing_towards",
    "distance",
    "is_close",
    "is_in_any_region",
    "move",
    "next_position",
    "point_in_polygon",
    "validate_position",
    "validate_region",
]
