from src.exceptions.weather.weather_service_error import WeatherServiceError


class UpstreamError(WeatherServiceError):
    """Exception for non-404 error statuses returned by the upstream API."""

    status_code = 500
    public_message = "Erreur lors de l'appel à l'API météo."
