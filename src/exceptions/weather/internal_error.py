from src.exceptions.weather.weather_service_error import WeatherServiceError


class InternalError(WeatherServiceError):
    """Exception for unexpected failures while handling a weather lookup."""

    pass
