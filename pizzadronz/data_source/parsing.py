"""Mini README: Conversion of feed JSON into validated domain records.

Structure:
    * MalformedPayload - structural problems (missing or non-numeric fields).
    * parse_position / parse_region / parse_restaurant - per-record parsers.

Every parsed position passes through ``validate_position`` and every region
through ``validate_region`` before any geometry runs on it.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from ..geometry import NamedRegion, Position, validate_position, validate_region
from ..orders.models import Pizza, Restaurant


class MalformedPayload(ValueError):
    """Raised when a payload is missing fields or has the wrong types."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_position(payload: Any) -> Position:
    """Build a range-checked ``Position`` from ``{"lng": .., "lat": ..}``."""

    if not isinstance(payload, Mapping):
        raise MalformedPayload(f"Invalid coordinate object: {payload}")
    lng, lat = payload.get("lng"), payload.get("lat")
    if not (_is_number(lng) and _is_number(lat)):
        raise MalformedPayload(f"Coordinates must be numeric: lng={lng}, lat={lat}")
    return validate_position(Position(lng=float(lng), lat=float(lat)))


def parse_region(payload: Any, *, default_name: str = "") -> NamedRegion:
    if not isinstance(payload, Mapping):
        raise MalformedPayload(f"Invalid region object: {payload}")
    vertices = payload.get("vertices")
    if not isinstance(vertices, list):
        raise MalformedPayload("Region is missing 'vertices'.")
    region = NamedRegion(
        name=str(payload.get("name") or default_name),
        vertices=tuple(parse_position(vertex) for vertex in vertices),
    )
    return validate_region(region)


def _parse_pizza(payload: Any) -> Pizza:
    if not isinstance(payload, Mapping):
        raise MalformedPayload(f"Invalid menu item: {payload}")
    name, price = payload.get("name"), payload.get("priceInPence")
    if not isinstance(name, str) or not isinstance(price, int) or isinstance(price, bool):
        raise MalformedPayload(f"Menu item needs a name and integer priceInPence: {payload}")
    return Pizza(name=name, price_in_pence=price)


def parse_restaurant(payload: Any) -> Restaurant:
    if not isinstance(payload, Mapping) or not isinstance(payload.get("name"), str):
        raise MalformedPayload(f"Invalid restaurant object: {payload}")
    menu = payload.get("menu") or []
    if not isinstance(menu, list):
        raise MalformedPayload(f"Restaurant {payload['name']} has an invalid menu.")
    return Restaurant(
        name=payload["name"],
        location=parse_position(payload.get("location")),
        menu=tuple(_parse_pizza(item) for item in menu),
    )


def parse_restaurants(payload: Any) -> List[Restaurant]:
    if not isinstance(payload, list):
        raise MalformedPayload("Restaurant feed must be a list.")
    return [parse_restaurant(item) for item in payload]


def parse_regions(payload: Any) -> List[NamedRegion]:
    if not isinstance(payload, list):
        raise MalformedPayload("No-fly zone feed must be a list.")
    return [parse_region(item) for item in payload]
