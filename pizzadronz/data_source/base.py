"""Mini README: Abstract base class describing the delivery data feed.

Structure:
    * DataSourceError - raised when the feed cannot be read or understood.
    * DeliveryDataSource - interface with one read operation per dataset.

Validators and planners receive a ``DeliveryDataSource`` instead of reaching
for a global client, so tests can substitute an in-memory feed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List

from ..geometry import NamedRegion
from ..orders.models import Restaurant


class DataSourceError(RuntimeError):
    """Raised when restaurant or region data cannot be fetched or parsed."""


class DeliveryDataSource(ABC):
    """Base interface for restaurant and flight-region providers."""

    source_name: str = "generic"

    @abstractmethod
    def restaurants(self) -> List[Restaurant]:
        """Return every participating restaurant with its menu."""

    @abstractmethod
    def no_fly_zones(self) -> List[NamedRegion]:
        """Return the polygons a drone must never enter."""

    @abstractmethod
    def central_area(self) -> NamedRegion:
        """Return the central area boundary."""

    def metadata(self) -> Dict[str, str]:
        return {"source": self.source_name}
