from typing import Any, Dict

import httpx
import structlog
from pydantic import ValidationError

from src.config.config import Config
from src.exceptions.weather import (
    CityNotFoundError,
    InternalError,
    InvalidResponseError,
    ServerMisconfiguredError,
    UpstreamError,
    UpstreamTimeoutError,
)
from src.models.weather.weather import OpenWeatherMapResponse, WeatherQuery, WeatherResult

logger = structlog.get_logger(__name__)


def build_timeout(settings: Config) -> httpx.Timeout:
    """Build the upstream timeout from settings."""
    return httpx.Timeout(settings.openweather_timeout, connect=min(settings.openweather_timeout, 5.0))


class WeatherService:
    """
    Service for fetching current weather from the OpenWeatherMap API.

    The HTTP client is injected so that the application can share one
    connection pool and tests can substitute a fake upstream transport.
    """

    def __init__(self, settings: Config, client: httpx.AsyncClient):
        """Initialize the weather service."""
        self.settings = settings
        self.client = client

        self.base_url = settings.openweather_base_url
        self.api_key = settings.openweather_api_key
        self.units = settings.openweather_units
        self.lang = settings.openweather_lang
        self.timeout = build_timeout(settings)

    def _build_params(self, city: str) -> Dict[str, Any]:
        return {
            "q": city,
            "appid": self.api_key,
            "units": self.units,
            "lang": self.lang,
        }

    async def _make_request(self, params: Dict[str, Any]) -> str:
        """
        Make an HTTP request to the OpenWeatherMap API.

        Args:
            params: Query parameters, including the API key

        Returns:
            Raw response body of a successful request

        Raises:
            CityNotFoundError: If the city is not found (404)
            UpstreamError: For other error statuses
            UpstreamTimeoutError: If the upstream accepts the request but does not answer in time
            InternalError: If the request fails at the transport level, connect timeouts included
        """
        city = params.get("q")
        logger.info("Making API request", url=self.base_url, city=city)

        try:
            response = await self.client.get(self.base_url, params=params, timeout=self.timeout)
        # A connect timeout means the upstream is unreachable, not slow
        except (httpx.ReadTimeout, httpx.WriteTimeout, httpx.PoolTimeout) as e:
            logger.error("Request timeout", city=city, error=str(e))
            raise UpstreamTimeoutError(f"Request timeout for {city}") from e
        except httpx.RequestError as e:
            logger.error("Request error", city=city, error=str(e), exc_info=True)
            raise InternalError(f"Request failed for {city}: {str(e)}") from e

        # Kept as raw text so the full payload can be logged on failure
        raw_text = response.text
        logger.debug("Raw upstream response", status_code=response.status_code, response_text=raw_text)

        if response.is_success:
            return raw_text

        logger.warning(
            "API request failed",
            city=city,
            status_code=response.status_code,
            response_text=raw_text,
        )
        if response.status_code == 404:
            raise CityNotFoundError(f"City not found: {city}")
        raise UpstreamError(f"Upstream returned status {response.status_code} for {city}")

    async def get_current_weather(self, query: WeatherQuery) -> WeatherResult:
        """
        Get current weather data for a city.

        Args:
            query: Validated weather query

        Returns:
            WeatherResult with the reduced weather data

        Raises:
            ServerMisconfiguredError: If no API key is configured
            CityNotFoundError: If the city is not found
            InvalidResponseError: If the upstream payload cannot be parsed
            WeatherServiceError: For other upstream errors
        """
        if not self.api_key:
            logger.error("OpenWeatherMap API key is not configured")
            raise ServerMisconfiguredError("OpenWeatherMap API key is required")

        logger.info("Fetching current weather", city=query.city)
        raw_text = await self._make_request(self._build_params(query.city))

        try:
            response = OpenWeatherMapResponse.model_validate_json(raw_text)
        except ValidationError as e:
            logger.error(
                "Failed to parse weather data",
                city=query.city,
                error=str(e),
                response_text=raw_text,
            )
            raise InvalidResponseError(f"Invalid weather data received for {query.city}: {str(e)}") from e

        result = WeatherResult.from_openweather_response(response)
        logger.info("Successfully fetched current weather", city=result.city, temperature=result.temp)
        return result
