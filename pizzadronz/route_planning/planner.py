"""Mini README: Greedy delivery path planner.

Structure:
    * PlanningError (+ NoLegalPathFound, CentralAreaExitViolation,
      PlanningBudgetExceeded) - fatal planning failures.
    * RestaurantNotFound - the order's restaurant prefix matches no restaurant.
    * FlightPath - ordered waypoints with export helpers.
    * PathPlanner - steps from a restaurant towards the delivery point.

The planner moves one ``DRONE_MOVE_DISTANCE`` at a time straight at the
destination. When that move would enter a no-fly zone it sweeps offsets of
15 degrees from the direct bearing and takes the first legal one. Once a
waypoint lies inside the central area every later waypoint must too. The
result is a legal path, not a shortest one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from ..constants import (
    APPLETON_LAT,
    APPLETON_LNG,
    AVOIDANCE_ANGLE_INCREMENT_DEGREES,
    AVOIDANCE_SWEEP_DEGREES,
    DEFAULT_MAX_PLANNING_STEPS,
)
from ..geometry import (
    NamedRegion,
    Position,
    bearing_towards,
    is_close,
    is_in_any_region,
    move,
    point_in_polygon,
    validate_position,
)
from ..logging_utils import get_logger
from ..orders.models import Order
from ..utils.geojson import path_to_geojson

if TYPE_CHECKING:
    from ..data_source import DeliveryDataSource

LOGGER = get_logger(__name__)

APPLETON_TOWER = Position(lng=APPLETON_LNG, lat=APPLETON_LAT)


class PlanningError(RuntimeError):
    """Base class for failures that leave an order without a flight path."""


class NoLegalPathFound(PlanningError):
    """Every bearing in the avoidance sweep lands in a no-fly zone."""


class CentralAreaExitViolation(PlanningError):
    """The path left the central area after entering it."""


class PlanningBudgetExceeded(PlanningError):
    """The destination was not reached within the configured number of moves."""


class RestaurantNotFound(LookupError):
    """No restaurant matches the prefix of the order's pizza names."""


@dataclass(slots=True)
class FlightPath:
    """Ordered waypoints from the restaurant to the delivery point."""

    waypoints: List[Position] = field(default_factory=list)
    description: str = ""

    def as_lng_lat(self) -> List[Dict[str, float]]:
        return [waypoint.as_dict() for waypoint in self.waypoints]

    def as_geojson(self) -> Dict[str, object]:
        return path_to_geojson(self.waypoints)

    def __len__(self) -> int:
        return len(self.waypoints)


class PathPlanner:
    """Plan delivery paths around no-fly zones using a bounded local search."""

    def __init__(
        self,
        data_source: DeliveryDataSource,
        *,
        destination: Position = APPLETON_TOWER,
        max_steps: int = DEFAULT_MAX_PLANNING_STEPS,
    ) -> None:
        if max_steps < 1:
            raise ValueError("max_steps must be at least 1")
        self.data_source = data_source
        self.destination = validate_position(destination)
        self.max_steps = max_steps
        LOGGER.debug(
            "Initialised PathPlanner with destination=%s max_steps=%s",
            destination,
            max_steps,
        )

    def resolve_restaurant_location(self, order: Order) -> Position:
        """Locate the restaurant named by the first pizza's prefix."""

        if not order.pizzas:
            raise RestaurantNotFound("Order contains no pizzas.")
        first = order.pizzas[0]
        prefix = first.restaurant_prefix
        if prefix is None:
            raise RestaurantNotFound(f"Invalid pizza name: {first.name}")
        for restaurant in self.data_source.restaurants():
            if any(pizza.name.startswith(f"{prefix}:") for pizza in restaurant.menu):
                return validate_position(restaurant.location)
        raise RestaurantNotFound(f"Restaurant not found for prefix: {prefix}")

    def plan_for_order(self, order: Order) -> FlightPath:
        """Fetch the flight regions and plan from the order's restaurant."""

        start = self.resolve_restaurant_location(order)
        return self.plan(
            start,
            no_fly_zones=self.data_source.no_fly_zones(),
            central_area=self.data_source.central_area(),
        )

    def plan(
        self,
        start: Position,
        destination: Optional[Position] = None,
        *,
        no_fly_zones: Sequence[NamedRegion],
        central_area: NamedRegion,
    ) -> FlightPath:
        """Step from ``start`` until within one move of ``destination``.

        The exact destination is appended as the final waypoint.
        """

        destination = validate_position(destination or self.destination)
        LOGGER.info(
            "Planning path from (%s, %s) to (%s, %s) avoiding %s no-fly zones",
            start.lng,
            start.lat,
            destination.lng,
            destination.lat,
            len(no_fly_zones),
        )
        waypoints: List[Position] = []
        has_entered_central = False
        current = start

        while not is_close(current, destination):
            if len(waypoints) >= self.max_steps:
                raise PlanningBudgetExceeded(
                    f"No path within {self.max_steps} moves; "
                    f"stopped at ({current.lng}, {current.lat})."
                )
            waypoints.append(current)

            inside_central = point_in_polygon(current, central_area.vertices)
            if inside_central:
                has_entered_central = True
            if has_entered_central and not inside_central:
                raise CentralAreaExitViolation(
                    "Illegal path: Exited Central Area after entering."
                )

            current = self._next_step(current, destination, no_fly_zones)

        waypoints.append(destination)
        LOGGER.info("Planned path with %s waypoints", len(waypoints))
        return FlightPath(waypoints=waypoints, description="Delivery path")

    def _next_step(
        self,
        current: Position,
        destination: Position,
        no_fly_zones: Sequence[NamedRegion],
    ) -> Position:
        bearing = bearing_towards(current, destination)
        step = move(current, bearing)
        if not is_in_any_region(step, no_fly_zones):
            return step

        LOGGER.debug("Direct move from (%s, %s) blocked; sweeping", current.lng, current.lat)
        for offset in range(
            0, AVOIDANCE_SWEEP_DEGREES + 1, AVOIDANCE_ANGLE_INCREMENT_DEGREES
        ):
            candidate = move(current, bearing + math.radians(offset))
            if not is_in_any_region(candidate, no_fly_zones):
                return candidate
        raise NoLegalPathFound("No valid path found avoiding no-fly zones.")
