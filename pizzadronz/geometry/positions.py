"""Mini README: Position and region value types plus range validation.

Structure:
    * Position - immutable longitude/latitude pair.
    * NamedRegion - named polygon (no-fly zone or central area).
    * CoordinateOutOfRange - raised when a coordinate leaves its interval.
    * validate_position / validate_region - range and shape checks applied
      to every position-bearing request and every feed polygon.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

LNG_RANGE = (-180.0, 180.0)
LAT_RANGE = (-90.0, 90.0)
MIN_REGION_VERTICES = 3


class CoordinateOutOfRange(ValueError):
    """Raised when a longitude or latitude lies outside its legal interval."""


@dataclass(frozen=True, slots=True)
class Position:
    """Point in the flat (lng, lat) plane, in degrees."""

    lng: float
    lat: float

    def as_dict(self) -> Dict[str, float]:
        return {"lng": self.lng, "lat": self.lat}


@dataclass(frozen=True, slots=True)
class NamedRegion:
    """Polygon whose last vertex implicitly connects back to the first."""

    name: str
    vertices: Tuple[Position, ...]


def validate_position(position: Position) -> Position:
    """Return ``position`` unchanged, or raise for out-of-range coordinates.

    Longitude is checked before latitude so a point wrong on both axes
    reports the longitude problem.
    """

    if position.lng < LNG_RANGE[0] or position.lng > LNG_RANGE[1]:
        raise CoordinateOutOfRange("Longitude must be between -180 and 180.")
    if position.lat < LAT_RANGE[0] or position.lat > LAT_RANGE[1]:
        raise CoordinateOutOfRange("Latitude must be between -90 and 90.")
    return position


def validate_region(region: NamedRegion) -> NamedRegion:
    """Check the vertex count and every vertex's range."""

    if len(region.vertices) < MIN_REGION_VERTICES:
        raise ValueError("Region must have at least 3 vertices.")
    for vertex in region.vertices:
        validate_position(vertex)
    return region
