"""Mini README: Route planning subsystem for delivery flights.

Exports the greedy ``PathPlanner``, the ``FlightPath`` container and the
planning errors so interfaces can tell fatal geometry failures apart from
an unknown restaurant.
"""

from .planner import (
    APPLETON_TOWER,
    CentralAreaExitViolation,
    FlightPath,
    NoLegalPathFound,
    PathPlanner,
    PlanningBudgetExceeded,
    PlanningError,
    RestaurantNotFound,
)

__all__ = [
    "APPLETON_TOWER",
    "CentralAreaExitViolation",
    "FlightPath",
    "NoLegalPathFound",
    "PathPlanner",
    "PlanningBudgetExceeded",
    "PlanningError",
    "RestaurantNotFound",
]
