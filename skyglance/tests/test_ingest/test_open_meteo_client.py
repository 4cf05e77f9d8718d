"""Tests for the Open-Meteo gateway with mocked httpx."""

from datetime import date

import httpx
import pytest
import respx

from skyglance.config.schema import ApiConfig
from skyglance.ingest.errors import (
    ConfigError,
    DecodeError,
    IncompleteDataError,
    RemoteError,
)
from skyglance.ingest.open_meteo_client import WeatherGateway
from skyglance.models.location import Location
from skyglance.models.weather import MeasurementUnit

FORECAST_URL = "https://test-weather.example.com/v1/forecast"
GEOCODING_URL = "https://test-geo.example.com/v1/search"


@pytest.fixture
def api() -> ApiConfig:
    return ApiConfig(
        weather_base_url=FORECAST_URL,
        geocoding_base_url=GEOCODING_URL,
        max_retries=1,
        retry_base_delay=0.01,  # Fast retries in tests
    )


@pytest.fixture
def weather_gateway(api: ApiConfig) -> WeatherGateway:
    return WeatherGateway(api, clock=lambda: date(2024, 12, 24))


class TestFetchWeather:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success(
        self, weather_gateway: WeatherGateway, toronto: Location, forecast_payload: dict
    ):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        bundle = await weather_gateway.fetch_weather(toronto, MeasurementUnit.METRIC)
        assert [d.date.isoformat() for d in bundle.days] == [
            "2024-12-23", "2024-12-24", "2024-12-25",
        ]
        assert bundle.location_id == "toronto"
        assert bundle.today.current_temp == -3

    @pytest.mark.asyncio
    @respx.mock
    async def test_query_parameters(
        self, weather_gateway: WeatherGateway, toronto: Location, forecast_payload: dict
    ):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        await weather_gateway.fetch_weather(toronto, MeasurementUnit.IMPERIAL)
        params = route.calls.last.request.url.params
        assert params["latitude"] == "43.6532"
        assert params["longitude"] == "-79.3832"
        assert params["daily"] == "temperature_2m_max,temperature_2m_min,weathercode"
        assert params["hourly"] == "temperature_2m"
        assert params["current_weather"] == "true"
        assert params["temperature_unit"] == "fahrenheit"
        assert params["timezone"] == "auto"
        assert params["start_date"] == "2024-12-23"
        assert params["end_date"] == "2024-12-25"

    @pytest.mark.asyncio
    @respx.mock
    async def test_user_agent_header(
        self, weather_gateway: WeatherGateway, toronto: Location, forecast_payload: dict
    ):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        await weather_gateway.fetch_weather(toronto, MeasurementUnit.METRIC)
        assert "skyglance" in route.calls.last.request.headers["user-agent"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error(self, weather_gateway: WeatherGateway, toronto: Location):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(RemoteError) as exc_info:
            await weather_gateway.fetch_weather(toronto, MeasurementUnit.METRIC)
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_retry_on_503(
        self, weather_gateway: WeatherGateway, toronto: Location, forecast_payload: dict
    ):
        route = respx.get(FORECAST_URL).mock(
            side_effect=[
                httpx.Response(503),
                httpx.Response(200, json=forecast_payload),
            ]
        )

        bundle = await weather_gateway.fetch_weather(toronto, MeasurementUnit.METRIC)
        assert bundle.today.high_temp == 1
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_exhausted_retries(self, weather_gateway: WeatherGateway, toronto: Location):
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(429))

        with pytest.raises(RemoteError) as exc_info:
            await weather_gateway.fetch_weather(toronto, MeasurementUnit.METRIC)
        assert exc_info.value.status_code == 429
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error(self, weather_gateway: WeatherGateway, toronto: Location):
        route = respx.get(FORECAST_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(RemoteError) as exc_info:
            await weather_gateway.fetch_weather(toronto, MeasurementUnit.METRIC)
        assert exc_info.value.status_code is None
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_json(self, weather_gateway: WeatherGateway, toronto: Location):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, content=b"<html>oops</html>")
        )

        with pytest.raises(DecodeError):
            await weather_gateway.fetch_weather(toronto, MeasurementUnit.METRIC)

    @pytest.mark.asyncio
    @respx.mock
    async def test_incomplete_daily(
        self, weather_gateway: WeatherGateway, toronto: Location, forecast_payload: dict
    ):
        forecast_payload["daily"]["time"] = forecast_payload["daily"]["time"][:1]
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        with pytest.raises(IncompleteDataError):
            await weather_gateway.fetch_weather(toronto, MeasurementUnit.METRIC)

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_invalid_coordinates(self, weather_gateway: WeatherGateway):
        route = respx.get(FORECAST_URL)
        nowhere = Location(name="Nowhere", region="", latitude=123.0, longitude=0.0)

        with pytest.raises(ConfigError):
            await weather_gateway.fetch_weather(nowhere, MeasurementUnit.METRIC)
        assert not route.called

    @pytest.mark.asyncio
    async def test_invalid_base_url(self, toronto: Location):
        gateway = WeatherGateway(ApiConfig(weather_base_url="ftp://example.com/forecast"))

        with pytest.raises(ConfigError):
            await gateway.fetch_weather(toronto, MeasurementUnit.METRIC)

    @pytest.mark.asyncio
    @respx.mock
    async def test_shared_client_left_open(
        self, api: ApiConfig, toronto: Location, forecast_payload: dict
    ):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )
        async with httpx.AsyncClient() as client:
            async with WeatherGateway(api, client=client, clock=lambda: date(2024, 12, 24)) as gw:
                await gw.fetch_weather(toronto, MeasurementUnit.METRIC)
            assert not client.is_closed


class TestSearchLocations:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, weather_gateway: WeatherGateway, geocoding_payload: dict):
        route = respx.get(GEOCODING_URL).mock(
            return_value=httpx.Response(200, json=geocoding_payload)
        )

        results = await weather_gateway.search_locations("Toronto")
        assert [loc.display_name for loc in results] == [
            "Toronto, Ontario", "Toronto, Ohio", "Monaco, Monaco",
        ]
        params = route.calls.last.request.url.params
        assert params["name"] == "Toronto"
        assert params["count"] == "10"
        assert params["language"] == "en"
        assert params["format"] == "json"

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_empty_query_makes_no_request(self, weather_gateway: WeatherGateway):
        route = respx.get(GEOCODING_URL)

        assert await weather_gateway.search_locations("") == []
        assert await weather_gateway.search_locations("   ") == []
        assert not route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_null_results(self, weather_gateway: WeatherGateway):
        respx.get(GEOCODING_URL).mock(
            return_value=httpx.Response(200, json={"results": None})
        )

        assert await weather_gateway.search_locations("Atlantis") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_raises(self, weather_gateway: WeatherGateway):
        respx.get(GEOCODING_URL).mock(return_value=httpx.Response(502))

        with pytest.raises(RemoteError):
            await weather_gateway.search_locations("Toronto")
