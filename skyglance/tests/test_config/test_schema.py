"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from skyglance.config.schema import (
    OPEN_METEO_FORECAST_URL,
    OPEN_METEO_GEOCODING_URL,
    ApiConfig,
    AppConfig,
    LocationConfig,
)
from skyglance.models.weather import MeasurementUnit


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.api.weather_base_url == OPEN_METEO_FORECAST_URL
        assert config.api.geocoding_base_url == OPEN_METEO_GEOCODING_URL
        assert config.default_unit == MeasurementUnit.METRIC

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ApiConfig(bogus=True)

    def test_unit_from_string(self):
        assert AppConfig(default_unit="imperial").default_unit == MeasurementUnit.IMPERIAL

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(default_unit="kelvin")


class TestApiConfig:
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ApiConfig(timeout_seconds=0)

    def test_retries_not_negative(self):
        with pytest.raises(ValidationError):
            ApiConfig(max_retries=-1)

    def test_search_count_bounds(self):
        with pytest.raises(ValidationError):
            ApiConfig(search_result_count=0)
        with pytest.raises(ValidationError):
            ApiConfig(search_result_count=101)


class TestLocationConfig:
    def test_to_location(self):
        loc = LocationConfig(
            id="oslo", name="Oslo", region="Oslo", latitude=59.91, longitude=10.75
        ).to_location()
        assert loc.id == "oslo"
        assert loc.country == ""

    @pytest.mark.parametrize("lat,lon", [(91.0, 0.0), (-91.0, 0.0), (0.0, 181.0)])
    def test_coordinates_bounded(self, lat: float, lon: float):
        with pytest.raises(ValidationError):
            LocationConfig(id="x", name="X", region="Y", latitude=lat, longitude=lon)
