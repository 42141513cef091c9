from fastapi import APIRouter

from src.api.health import health_router
from src.api.weather import weather_router

# Create main router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(health_router)
api_router.include_router(weather_router)
