"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from skyglance.models.location import Location
from skyglance.models.weather import MeasurementUnit

OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_USER_AGENT = "skyglance/0.1.0"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weather_base_url: str = OPEN_METEO_FORECAST_URL
    geocoding_base_url: str = OPEN_METEO_GEOCODING_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    max_retries: int = Field(default=1, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)
    search_result_count: int = Field(default=10, ge=1, le=100)
    search_language: str = "en"


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    id: str
    name: str
    region: str
    country: str = ""
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def to_location(self) -> Location:
        return Location(
            id=self.id,
            name=self.name,
            region=self.region,
            country=self.country,
            latitude=self.latitude,
            longitude=self.longitude,
        )


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    default_location: LocationConfig | None = None
    default_unit: MeasurementUnit = MeasurementUnit.METRIC
    db_path: str = "data/skyglance.db"
    log_level: str = "INFO"
