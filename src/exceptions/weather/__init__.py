from src.exceptions.weather.city_not_found_error import CityNotFoundError
from src.exceptions.weather.internal_error import InternalError
from src.exceptions.weather.invalid_response_error import InvalidResponseError
from src.exceptions.weather.missing_parameter_error import MissingParameterError
from src.exceptions.weather.server_misconfigured_error import ServerMisconfiguredError
from src.exceptions.weather.upstream_error import UpstreamError
from src.exceptions.weather.upstream_timeout_error import UpstreamTimeoutError
from src.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "CityNotFoundError",
    "InternalError",
    "InvalidResponseError",
    "MissingParameterError",
    "ServerMisconfiguredError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "WeatherServiceError",
]
