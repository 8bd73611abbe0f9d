"""Mini README: Fixed constants shared by the validation and planning engines.

These values are part of the published delivery contract: clients compute
order totals with ``ORDER_CHARGE_IN_PENCE`` and plot paths whose moves are
``DRONE_MOVE_DISTANCE`` long, so they are not exposed as settings.
"""

from __future__ import annotations

# Distance in degrees covered by one drone move; also the "close to" threshold.
DRONE_MOVE_DISTANCE = 0.00015

ORDER_CHARGE_IN_PENCE = 100
MAX_PIZZAS_PER_ORDER = 4

# Appleton Tower, the single delivery point.
APPLETON_LNG = -3.186874
APPLETON_LAT = 55.944494

# Fallback sweep used when the direct move would enter a no-fly zone.
AVOIDANCE_ANGLE_INCREMENT_DEGREES = 15
AVOIDANCE_SWEEP_DEGREES = 360

DEFAULT_MAX_PLANNING_STEPS = 10_000

# Card expiry is accepted up to this many years after the current month.
MAX_CARD_VALIDITY_YEARS = 5
