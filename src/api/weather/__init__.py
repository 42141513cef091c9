from src.api.weather.weather_route import router as weather_router

__all__ = ["weather_router"]
