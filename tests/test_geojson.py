"""Mini README: Tests for the GeoJSON export helpers."""

from __future__ import annotations

from pizzadronz.geometry import NamedRegion, Position
from pizzadronz.utils import path_to_geojson, region_to_geojson


def test_path_to_geojson_keeps_order_and_lng_lat_pairs() -> None:
    """Waypoints should export in order as [lng, lat] pairs."""

    geojson = path_to_geojson([Position(-3.19, 55.94), Position(-3.18, 55.95)])
    assert geojson == {
        "type": "LineString",
        "coordinates": [[-3.19, 55.94], [-3.18, 55.95]],
    }


def test_path_to_geojson_empty() -> None:
    """An empty path should export an empty coordinate list."""

    assert path_to_geojson([])["coordinates"] == []


def test_region_to_geojson_closes_ring() -> None:
    """Open polygons should be closed by repeating the first vertex."""

    region = NamedRegion("zone", (Position(0, 0), Position(0, 1), Position(1, 1)))
    feature = region_to_geojson(region)
    ring = feature["geometry"]["coordinates"][0]
    assert ring[0] == ring[-1] == [0, 0]
    assert len(ring) == 4
    assert feature["properties"] == {"name": "zone"}


def test_region_to_geojson_leaves_closed_ring() -> None:
    """Already closed polygons should not gain an extra vertex."""

    region = NamedRegion("zone", (Position(0, 0), Position(0, 1), Position(1, 1), Position(0, 0)))
    assert len(region_to_geojson(region)["geometry"]["coordinates"][0]) == 4
