from src.exceptions.base import WeatherProxyError
from src.exceptions.weather import (
    CityNotFoundError,
    InternalError,
    InvalidResponseError,
    MissingParameterError,
    ServerMisconfiguredError,
    UpstreamError,
    UpstreamTimeoutError,
    WeatherServiceError,
)

__all__ = [
    "WeatherProxyError",
    "CityNotFoundError",
    "InternalError",
    "InvalidResponseError",
    "MissingParameterError",
    "ServerMisconfiguredError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "WeatherServiceError",
]
