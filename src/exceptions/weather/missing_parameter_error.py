from src.exceptions.weather.weather_service_error import WeatherServiceError


class MissingParameterError(WeatherServiceError):
    """Exception for a missing or empty 'city' query parameter."""

    status_code = 400
    public_message = "Paramètre 'city' manquant."
