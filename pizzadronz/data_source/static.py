"""Mini README: In-memory delivery data feed.

Structure:
    * StaticDataSource - serves fixed restaurants and regions, optionally
      loaded from a JSON document shaped like the REST feed.

Used by the test-suite and by the CLI's offline planning mode.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Union

from ..geometry import NamedRegion
from ..logging_utils import get_logger
from ..orders.models import Restaurant
from .base import DataSourceError, DeliveryDataSource
from .parsing import parse_region, parse_regions, parse_restaurants

LOGGER = get_logger(__name__)


class StaticDataSource(DeliveryDataSource):
    """Serve a fixed feed; returned lists are copies so callers cannot mutate it."""

    source_name = "static"

    def __init__(
        self,
        *,
        restaurants: Iterable[Restaurant],
        no_fly_zones: Iterable[NamedRegion],
        central_area: NamedRegion,
    ) -> None:
        self._restaurants = list(restaurants)
        self._no_fly_zones = list(no_fly_zones)
        self._central_area = central_area

    @classmethod
    def from_json(cls, document: Union[str, Path]) -> "StaticDataSource":
        """Load ``{"restaurants": [...], "noFlyZones": [...], "centralArea": {...}}``."""

        path = Path(document)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
            source = cls(
                restaurants=parse_restaurants(payload.get("restaurants", [])),
                no_fly_zones=parse_regions(payload.get("noFlyZones", [])),
                central_area=parse_region(payload.get("centralArea"), default_name="central"),
            )
        except (OSError, ValueError, AttributeError) as error:
            raise DataSourceError(f"Could not load feed file {path}: {error}") from error
        LOGGER.info(
            "Loaded static feed from %s with %s restaurants and %s no-fly zones",
            path,
            len(source._restaurants),
            len(source._no_fly_zones),
        )
        return source

    def restaurants(self) -> List[Restaurant]:
        return list(self._restaurants)

    def no_fly_zones(self) -> List[NamedRegion]:
        return list(self._no_fly_zones)

    def central_area(self) -> NamedRegion:
        return self._central_area
