"""Mini README: Utility helpers for PizzaDronz.

Currently exports the GeoJSON helpers used to hand flight paths and regions
to map viewers.
"""

from .geojson import path_to_geojson, region_to_geojson

__all__ = ["path_to_geojson", "region_to_geojson"]
