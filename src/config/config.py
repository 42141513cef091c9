from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Values are read once at startup; the resulting object is immutable and is
    handed to the application factory and the weather service.
    """

    # API Keys
    openweather_api_key: Optional[str] = Field(
        default=None, description="OpenWeatherMap API key for weather data"
    )

    # OpenWeatherMap Configuration
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current weather endpoint",
    )
    openweather_units: str = Field(default="metric", description="Temperature units (metric/imperial)")
    openweather_lang: str = Field(default="fr", description="Language of weather descriptions")
    openweather_timeout: float = Field(default=10.0, gt=0, description="Upstream timeout in seconds")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="Server bind address")
    api_port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("port", "api_port"),
        description="Server port",
    )

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_to_file: bool = Field(default=False, description="Also write logs to the logs/ directory")

    @field_validator("openweather_api_key")
    def normalize_openweather_api_key(cls, v):
        # An empty key is treated the same as a missing one
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    @property
    def is_weather_configured(self) -> bool:
        return bool(self.openweather_api_key)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )


config = Config()
