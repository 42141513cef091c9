from src.exceptions.base import WeatherProxyError


class WeatherServiceError(WeatherProxyError):
    """Base exception for weather service errors."""

    pass
