"""Mini README: Read-only providers for restaurants and flight regions.

The package is divided into ``base`` for the abstract provider and its
errors, ``parsing`` for turning feed JSON into domain records, and the
concrete ``rest`` (HTTP feed) and ``static`` (in-memory) providers.
"""

from .base import DataSourceError, DeliveryDataSource
from .parsing import MalformedPayload, parse_position, parse_region, parse_restaurant
from .rest import RestDataSource
from .static import StaticDataSource

__all__ = [
    "DataSourceError",
    "DeliveryDataSource",
    "MalformedPayload",
    "RestDataSource",
    "StaticDataSource",
    "parse_position",
    "parse_region",
    "parse_restaurant",
]
