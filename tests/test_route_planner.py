"""Mini README: Tests for the greedy delivery path planner.

Synthetic regions around the origin keep the geometry easy to reason about:
a straight run east with a small no-fly box in the way. The tests check the
central-area invariant, the fixed move length, no-fly zone avoidance and the
fatal failure modes.
"""

from __future__ import annotations

from typing import Sequence

import pytest

from pizzadronz.constants import APPLETON_LAT, APPLETON_LNG, DRONE_MOVE_DISTANCE
from pizzadronz.data_source import StaticDataSource
from pizzadronz.geometry import (
    NamedRegion,
    Position,
    bearing_towards,
    distance,
    is_close,
    move,
    point_in_polygon,
)
from pizzadronz.orders import Order, Pizza
from pizzadronz.route_planning import (
    CentralAreaExitViolation,
    FlightPath,
    NoLegalPathFound,
    PathPlanner,
    PlanningBudgetExceeded,
    RestaurantNotFound,
)

ORIGIN = Position(0.0, 0.0)
TARGET = Position(0.00302, 0.0)


def _box(name: str, lng_min: float, lat_min: float, lng_max: float, lat_max: float) -> NamedRegion:
    return NamedRegion(
        name=name,
        vertices=(
            Position(lng_min, lat_min),
            Position(lng_min, lat_max),
            Position(lng_max, lat_max),
            Position(lng_max, lat_min),
        ),
    )


BLOCKER = _box("blocker", 0.001, -0.0003, 0.0015, 0.0003)
WIDE_CENTRAL = _box("central", -0.001, -0.001, 0.004, 0.001)


@pytest.fixture
def planner(static_feed) -> PathPlanner:
    return PathPlanner(static_feed, destination=TARGET)


def _assert_stays_inside_after_entering(waypoints: Sequence[Position], central: NamedRegion) -> None:
    entered = False
    for waypoint in waypoints:
        inside = point_in_polygon(waypoint, central.vertices)
        entered = entered or inside
        if entered:
            assert inside, f"{waypoint} left the central area after entering"


def test_straight_path_without_obstacles(planner) -> None:
    """An open sky should give a straight run of single moves."""

    path = planner.plan(ORIGIN, no_fly_zones=[], central_area=WIDE_CENTRAL)

    assert path.waypoints[0] == ORIGIN
    assert path.waypoints[-1] == TARGET
    assert len(path) == 21
    assert all(waypoint.lat == pytest.approx(0.0) for waypoint in path.waypoints)


def test_path_avoids_no_fly_zone(planner) -> None:
    """The planner should detour around a no-fly zone in the direct line."""

    path = planner.plan(ORIGIN, no_fly_zones=[BLOCKER], central_area=WIDE_CENTRAL)

    assert path.waypoints[0] == ORIGIN
    assert path.waypoints[-1] == TARGET
    assert not any(point_in_polygon(waypoint, BLOCKER.vertices) for waypoint in path.waypoints[:-1])
    assert any(waypoint.lat > 0.0003 for waypoint in path.waypoints)


def test_consecutive_waypoints_are_one_move_apart(planner) -> None:
    """Every waypoint before the destination should be one move from the last."""

    path = planner.plan(ORIGIN, no_fly_zones=[BLOCKER], central_area=WIDE_CENTRAL)

    stepped = path.waypoints[:-1]
    for previous, current in zip(stepped, stepped[1:]):
        assert distance(previous, current) == pytest.approx(DRONE_MOVE_DISTANCE, abs=1e-12)
    # The move that lands within reach of the target is replaced by the target itself.
    assert distance(stepped[-1], TARGET) < 2 * DRONE_MOVE_DISTANCE
    assert is_close(move(stepped[-1], bearing_towards(stepped[-1], TARGET)), TARGET)


def test_path_entering_central_area_stays_inside(planner) -> None:
    """Once inside the central area the path should never leave it."""

    central = _box("central", 0.002, -0.001, 0.004, 0.001)

    path = planner.plan(ORIGIN, no_fly_zones=[BLOCKER], central_area=central)

    assert not point_in_polygon(path.waypoints[0], central.vertices)
    assert point_in_polygon(path.waypoints[-1], central.vertices)
    _assert_stays_inside_after_entering(path.waypoints, central)


def test_leaving_central_area_is_fatal(planner) -> None:
    """A path forced out of the central area should abort planning."""

    central = _box("central", -0.001, -0.001, 0.001, 0.001)

    with pytest.raises(CentralAreaExitViolation):
        planner.plan(ORIGIN, no_fly_zones=[], central_area=central)


def test_fully_blocked_move_raises(planner) -> None:
    """A start with every direction blocked should raise NoLegalPathFound."""

    enclosure = _box("enclosure", -1.0, -1.0, 1.0, 1.0)

    with pytest.raises(NoLegalPathFound):
        planner.plan(
            ORIGIN,
            Position(0.5, 0.5),
            no_fly_zones=[enclosure],
            central_area=WIDE_CENTRAL,
        )


def test_step_budget_is_enforced(static_feed) -> None:
    """Planning should stop once the step budget is spent."""

    planner = PathPlanner(static_feed, destination=TARGET, max_steps=5)

    with pytest.raises(PlanningBudgetExceeded):
        planner.plan(ORIGIN, no_fly_zones=[], central_area=WIDE_CENTRAL)


def test_start_already_close_returns_destination_only(planner) -> None:
    """A start within reach of the destination should yield only the destination."""

    path = planner.plan(Position(0.00299, 0.0), no_fly_zones=[], central_area=WIDE_CENTRAL)
    assert path.waypoints == [TARGET]


def test_invalid_budget_rejected(static_feed) -> None:
    """A step budget below one should be refused."""

    with pytest.raises(ValueError):
        PathPlanner(static_feed, max_steps=0)


def test_plan_for_order_flies_from_restaurant_to_appleton(restaurants, central_area) -> None:
    """Order paths should run from the restaurant to Appleton Tower."""

    feed = StaticDataSource(restaurants=restaurants, no_fly_zones=[], central_area=central_area)
    planner = PathPlanner(feed)
    order = Order(pizzas=(Pizza("R1: Margarita", 1000),), price_total_in_pence=1100)

    path = planner.plan_for_order(order)

    assert path.waypoints[0] == restaurants[0].location
    assert path.waypoints[-1] == Position(APPLETON_LNG, APPLETON_LAT)
    _assert_stays_inside_after_entering(path.waypoints, central_area)


@pytest.mark.parametrize("name", ["R99: GhostPizza", "Margarita"])
def test_unknown_restaurant_prefix(planner, name) -> None:
    """Unknown or missing prefixes should raise RestaurantNotFound."""

    order = Order(pizzas=(Pizza(name, 1000),), price_total_in_pence=1100)
    with pytest.raises(RestaurantNotFound):
        planner.resolve_restaurant_location(order)


def test_flight_path_exports() -> None:
    """Flight paths should export as lng/lat objects and a LineString."""

    path = FlightPath(waypoints=[Position(1.0, 2.0), Position(3.0, 4.0)])
    assert path.as_lng_lat() == [{"lng": 1.0, "lat": 2.0}, {"lng": 3.0, "lat": 4.0}]
    assert path.as_geojson() == {"type": "LineString", "coordinates": [[1.0, 2.0], [3.0, 4.0]]}
