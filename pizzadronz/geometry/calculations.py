"""Mini README: Pure geometry primitives for drone navigation.

Structure:
    * distance / is_close - Euclidean distance and the one-move proximity test.
    * bearing_towards / move / next_position - bearing-based stepping.
    * point_in_polygon / is_in_any_region - crossing-number membership test.

All functions are stateless and operate on ``Position`` values.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from ..constants import DRONE_MOVE_DISTANCE
from .positions import NamedRegion, Position


def distance(a: Position, b: Position) -> float:
    """Euclidean distance treating degrees as a flat Cartesian plane."""

    d_lng = a.lng - b.lng
    d_lat = a.lat - b.lat
    return math.sqrt(d_lng * d_lng + d_lat * d_lat)


def is_close(a: Position, b: Position) -> bool:
    return distance(a, b) < DRONE_MOVE_DISTANCE


def bearing_towards(origin: Position, target: Position) -> float:
    """Bearing in radians from ``origin`` to ``target``."""

    return math.atan2(target.lat - origin.lat, target.lng - origin.lng)


def move(start: Position, bearing: float) -> Position:
    """Return the position one drone move from ``start`` along ``bearing`` (radians)."""

    return Position(
        lng=start.lng + DRONE_MOVE_DISTANCE * math.cos(bearing),
        lat=start.lat + DRONE_MOVE_DISTANCE * math.sin(bearing),
    )


def next_position(start: Position, angle_degrees: float) -> Position:
    """Degree-based variant of ``move`` used by the HTTP interface."""

    return move(start, math.radians(angle_degrees))


def point_in_polygon(point: Position, vertices: Sequence[Position]) -> bool:
    """Crossing-number test over the polygon's edges.

    Points exactly on an edge are classified by the strict ``>`` on the
    latitude comparisons and the strict ``<`` on the longitude intercept;
    there is no separate on-edge rule.
    """

    inside = False
    count = len(vertices)
    j = count - 1
    for i in range(count):
        xi, yi = vertices[i].lng, vertices[i].lat
        xj, yj = vertices[j].lng, vertices[j].lat
        if (yi > point.lat) != (yj > point.lat) and point.lng < (xj - xi) * (
            point.lat - yi
        ) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def is_in_any_region(point: Position, regions: Iterable[NamedRegion]) -> bool:
    return any(point_in_polygon(point, region.vertices) for region in regions)
