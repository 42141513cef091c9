from src.exceptions.weather.weather_service_error import WeatherServiceError


class InvalidResponseError(WeatherServiceError):
    """Exception for successful upstream replies that cannot be parsed."""

    pass
