from typing import Any, List, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from main import create_app
from src.config.config import Config
from src.services.weather_service import WeatherService

PARIS_RESPONSE = {
    "coord": {"lon": 2.3488, "lat": 48.8534},
    "weather": [{"id": 800, "main": "Clear", "description": "ciel dégagé", "icon": "01d"}],
    "base": "stations",
    "main": {"temp": 15.2, "feels_like": 14.1, "pressure": 1021, "humidity": 62},
    "dt": 1696161600,
    "sys": {"country": "FR", "sunrise": 1696138800, "sunset": 1696182000},
    "timezone": 7200,
    "id": 2988507,
    "name": "Paris",
    "cod": 200,
}


class FakeUpstream:
    """Fake OpenWeatherMap upstream served through httpx.MockTransport."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.json: Optional[Any] = PARIS_RESPONSE
        self.text: Optional[str] = None
        self.error: Optional[Exception] = None

    def reply(self, status_code: int = 200, json: Optional[Any] = None, text: Optional[str] = None):
        self.status_code = status_code
        self.json = json
        self.text = text

    def fail(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json)


@pytest.fixture
def settings():
    """Settings with a test API key and no .env lookup."""
    return Config(_env_file=None, openweather_api_key="test-weather-key")


@pytest.fixture
def unconfigured_settings():
    """Settings without an OpenWeatherMap API key."""
    return Config(_env_file=None, openweather_api_key=None)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest_asyncio.fixture
async def http_client(upstream):
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler)) as client:
        yield client


@pytest.fixture
def weather_service(settings, http_client):
    return WeatherService(settings, http_client)


@pytest.fixture
def client(settings, weather_service):
    """Test client for an app wired to the fake upstream."""
    app = create_app(settings, weather_service=weather_service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unconfigured_client(unconfigured_settings, http_client):
    """Test client for an app started without an API key."""
    service = WeatherService(unconfigured_settings, http_client)
    app = create_app(unconfigured_settings, weather_service=service)
    with TestClient(app) as test_client:
        yield test_client
