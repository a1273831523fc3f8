from mgtapi.transit.client import DEFAULT_BASE_URL, StopDataFetcher, TransitClient
from mgtapi.transit.errors import (
    DecodeError,
    NetworkError,
    RequestConstructionError,
    TransitAPIError,
    UnexpectedStatusError,
)
from mgtapi.transit.models import Forecast, RoutePath, StopData

__all__ = [
    "DEFAULT_BASE_URL",
    "DecodeError",
    "Forecast",
    "NetworkError",
    "RequestConstructionError",
    "RoutePath",
    "StopData",
    "StopDataFetcher",
    "TransitAPIError",
    "TransitClient",
    "UnexpectedStatusError",
]
