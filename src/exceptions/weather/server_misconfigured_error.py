from src.exceptions.weather.weather_service_error import WeatherServiceError


class ServerMisconfiguredError(WeatherServiceError):
    """Exception for a missing OpenWeatherMap API key."""

    status_code = 500
    public_message = "Clé API manquante côté serveur."
