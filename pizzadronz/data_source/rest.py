"""Mini README: HTTP implementation of the delivery data feed.

Structure:
    * RestDataSource - blocking ``httpx`` reads of ``/restaurants``,
      ``/noFlyZones`` and ``/centralArea``.

Each call performs a fresh request; nothing is cached and failures are not
retried. Transport faults, error statuses and unparsable bodies all surface
as ``DataSourceError`` for the request that triggered them.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import httpx

from ..geometry import NamedRegion
from ..logging_utils import get_logger
from ..orders.models import Restaurant
from .base import DataSourceError, DeliveryDataSource
from .parsing import MalformedPayload, parse_region, parse_regions, parse_restaurants

LOGGER = get_logger(__name__)


class RestDataSource(DeliveryDataSource):
    """Read restaurants and regions from the published REST service."""

    source_name = "rest"

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        LOGGER.debug("Initialised RestDataSource for %s", self.base_url)

    def _fetch(self, endpoint: str) -> Any:
        url = f"{self.base_url}{endpoint}"
        LOGGER.debug("Fetching %s", url)
        try:
            with httpx.Client(
                timeout=self.timeout_seconds,
                transport=self._transport,
                headers={"Accept": "application/json"},
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as error:
            raise DataSourceError(f"Failed to fetch data from REST service: {endpoint}") from error
        except ValueError as error:
            raise DataSourceError(f"REST service returned invalid JSON: {endpoint}") from error

    def _parse(self, endpoint: str, parser: Callable[[Any], Any], payload: Any) -> Any:
        try:
            return parser(payload)
        except ValueError as error:
            raise DataSourceError(f"Unexpected payload from {endpoint}: {error}") from error

    def restaurants(self) -> List[Restaurant]:
        return self._parse("/restaurants", parse_restaurants, self._fetch("/restaurants"))

    def no_fly_zones(self) -> List[NamedRegion]:
        return self._parse("/noFlyZones", parse_regions, self._fetch("/noFlyZones"))

    def central_area(self) -> NamedRegion:
        payload = self._fetch("/centralArea")
        if not isinstance(payload, dict) or payload.get("vertices") is None:
            raise DataSourceError("Central Area response is missing 'vertices'.")
        return self._parse(
            "/centralArea",
            lambda data: parse_region(data, default_name="central"),
            payload,
        )

    def metadata(self) -> Dict[str, str]:
        return {"source": self.source_name, "base_url": self.base_url}
