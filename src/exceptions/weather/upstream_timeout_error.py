from src.exceptions.weather.weather_service_error import WeatherServiceError


class UpstreamTimeoutError(WeatherServiceError):
    """Exception for upstream calls that exceed the configured timeout."""

    status_code = 504
    public_message = "Délai d'attente dépassé pour l'API météo."
