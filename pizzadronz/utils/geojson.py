"""Mini README: GeoJSON helper utilities for PizzaDronz.

This module turns flight paths and regions into GeoJSON objects. Keeping the
conversion isolated avoids importing web framework dependencies when the
CLI or tests only need the data structure.
"""

from __future__ import annotations

from typing import Dict, Iterable

from ..geometry import NamedRegion, Position


def path_to_geojson(positions: Iterable[Position]) -> Dict[str, object]:
    """Return a ``LineString`` geometry with ``[lng, lat]`` coordinate pairs."""

    return {
        "type": "LineString",
        "coordinates": [[position.lng, position.lat] for position in positions],
    }


def region_to_geojson(region: NamedRegion) -> Dict[str, object]:
    """Return a polygon Feature; the ring is closed explicitly as GeoJSON requires."""

    ring = [[vertex.lng, vertex.lat] for vertex in region.vertices]
    if ring and ring[0] != ring[-1]:
        ring.append(list(ring[0]))
    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [ring]},
        "properties": {"name": region.name},
    }
