from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

NOT_AVAILABLE = "N/A"


class WeatherCondition(BaseModel):
    """Weather condition details."""

    description: Optional[str] = Field(None, description="Detailed weather description")
    icon: Optional[str] = Field(None, description="Weather icon code")

    @field_validator("description", "icon", mode="before")
    def drop_non_text(cls, v):
        return v if isinstance(v, str) else None


class MainWeatherData(BaseModel):
    """Main weather measurements."""

    temp: float = Field(..., description="Current temperature")


class OpenWeatherMapResponse(BaseModel):
    """
    Subset of the OpenWeatherMap current weather response read by the proxy.

    Fields the proxy does not use are ignored. ``name`` and ``main.temp`` are
    required; only the first weather condition is read, and anything other
    than an object there counts as no condition.
    """

    name: str = Field(..., description="City name")
    main: MainWeatherData = Field(..., description="Main weather data")
    weather: List[WeatherCondition] = Field(default_factory=list, description="Primary weather condition")

    @field_validator("weather", mode="before")
    def keep_primary_condition(cls, v):
        if isinstance(v, list) and v and isinstance(v[0], dict):
            return [v[0]]
        return []

    @property
    def primary_condition(self) -> Optional[WeatherCondition]:
        return self.weather[0] if self.weather else None


class WeatherQuery(BaseModel):
    """Validated weather lookup input."""

    city: str = Field(..., min_length=1, description="City name to look up")


class WeatherResult(BaseModel):
    """Weather data returned to the frontend."""

    city: str = Field(..., description="City name as reported by the upstream API")
    temp: float = Field(..., description="Temperature")
    description: str = Field(NOT_AVAILABLE, description="Weather description")
    icon: str = Field(NOT_AVAILABLE, description="Weather icon code")

    @field_validator("description", "icon", mode="before")
    def default_missing(cls, v):
        """Replace absent condition fields with the N/A sentinel."""
        return NOT_AVAILABLE if v is None else v

    @classmethod
    def from_openweather_response(cls, response: OpenWeatherMapResponse) -> "WeatherResult":
        """
        Create a WeatherResult from an OpenWeatherMap API response.

        Args:
            response: Parsed OpenWeatherMap API response

        Returns:
            WeatherResult: Reduced weather data
        """
        primary_weather = response.primary_condition

        return cls(
            city=response.name,
            temp=response.main.temp,
            description=primary_weather.description if primary_weather else None,
            icon=primary_weather.icon if primary_weather else None,
        )
