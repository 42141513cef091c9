from src.models.weather.weather import (
    NOT_AVAILABLE,
    MainWeatherData,
    OpenWeatherMapResponse,
    WeatherCondition,
    WeatherQuery,
    WeatherResult,
)

__all__ = [
    "NOT_AVAILABLE",
    "MainWeatherData",
    "OpenWeatherMapResponse",
    "WeatherCondition",
    "WeatherQuery",
    "WeatherResult",
]
