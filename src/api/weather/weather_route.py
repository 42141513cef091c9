from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_weather_service
from src.exceptions.weather import InternalError, MissingParameterError, WeatherServiceError
from src.models.weather.weather import WeatherQuery, WeatherResult
from src.services.weather_service import WeatherService

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get("", response_model=WeatherResult, summary="Get Current Weather")
async def get_current_weather(
    city: Optional[str] = Query(default=None, description="City name to look up"),
    weather_service: WeatherService = Depends(get_weather_service),
):
    """
    Get current weather data for a city.

    Args:
        city: City name to query.
        weather_service: Service performing the upstream lookup.

    Returns:
        JSON object with the city name, temperature, description and icon code.

    Raises:
        HTTPException: 400 if city is missing, 404 if the city is not found,
            504 on upstream timeout, 500 for any other failure.
    """
    logger.info("API request: Get current weather", city=city)
    try:
        if not city:
            raise MissingParameterError("Query parameter 'city' is missing")

        return await weather_service.get_current_weather(WeatherQuery(city=city))

    except WeatherServiceError as e:
        logger.warning(
            "Failed to get current weather",
            city=city,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise HTTPException(status_code=e.status_code, detail=e.public_message)

    except Exception as e:
        logger.error("Unexpected error while getting current weather", city=city, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=InternalError.public_message,
        )
