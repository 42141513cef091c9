from src.exceptions.weather.weather_service_error import WeatherServiceError


class CityNotFoundError(WeatherServiceError):
    """Exception for cities the upstream API does not know."""

    status_code = 404
    public_message = "Ville introuvable."
