from fastapi import Request

from src.services.weather_service import WeatherService


async def get_weather_service(request: Request) -> WeatherService:
    """
    Return the weather service created by the application lifespan.

    Tests replace this dependency through ``app.dependency_overrides``.
    """
    return request.app.state.weather_service
