"""Open-Meteo forecast and geocoding client with retry and error mapping."""

import asyncio
import logging
import math
from collections.abc import Callable
from datetime import date, timedelta
from typing import Any

import httpx

from skyglance.config.schema import ApiConfig
from skyglance.ingest.errors import ConfigError, DecodeError, RemoteError
from skyglance.ingest.response_parser import (
    parse_geocoding_response,
    parse_weather_response,
)
from skyglance.models.common import local_today
from skyglance.models.location import Location
from skyglance.models.weather import CityWeatherBundle, MeasurementUnit

logger = logging.getLogger(__name__)

DAILY_VARIABLES = "temperature_2m_max,temperature_2m_min,weathercode"
HOURLY_VARIABLES = "temperature_2m"
RETRYABLE_STATUS = (429, 503)


class WeatherGateway:
    """Outbound reads against the weather and geocoding endpoints.

    Holds no state beyond configuration and an HTTP client. Pass ``client``
    to share one (it is then left open by ``aclose``); ``clock`` supplies the
    date treated as "today".
    """

    def __init__(
        self,
        api: ApiConfig | None = None,
        client: httpx.AsyncClient | None = None,
        clock: Callable[[], date] = local_today,
    ):
        self.api = api or ApiConfig()
        self.clock = clock
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "WeatherGateway":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch_weather(
        self, location: Location, unit: MeasurementUnit
    ) -> CityWeatherBundle:
        """Fetch yesterday, today and tomorrow for a location in one request."""
        _validate_coordinates(location)
        today = self.clock()
        dates = (today - timedelta(days=1), today, today + timedelta(days=1))

        params = {
            "latitude": str(location.latitude),
            "longitude": str(location.longitude),
            "daily": DAILY_VARIABLES,
            "hourly": HOURLY_VARIABLES,
            "current_weather": "true",
            "temperature_unit": unit.api_value,
            "timezone": "auto",
            "start_date": dates[0].isoformat(),
            "end_date": dates[2].isoformat(),
        }
        raw = await self._get_json(self.api.weather_base_url, params)
        bundle = parse_weather_response(raw, location.id, dates)
        logger.info(
            "Fetched weather for %s (%s): today %d/%d%s",
            location.display_name, unit, bundle.today.low_temp,
            bundle.today.high_temp, unit.symbol,
        )
        return bundle

    async def search_locations(self, query: str) -> list[Location]:
        """Look up places by free text. An empty query makes no request."""
        query = query.strip()
        if not query:
            return []

        params = {
            "name": query,
            "count": str(self.api.search_result_count),
            "language": self.api.search_language,
            "format": "json",
        }
        raw = await self._get_json(self.api.geocoding_base_url, params)
        return parse_geocoding_response(raw)

    async def _get_json(self, url: str, params: dict[str, str]) -> Any:
        """GET a JSON document, retrying 503/429 and transport errors."""
        _validate_url(url)
        client = self._get_client()
        headers = {"User-Agent": self.api.user_agent, "Accept": "application/json"}

        for attempt in range(self.api.max_retries + 1):
            delay = self.api.retry_base_delay * (2**attempt)
            try:
                resp = await client.get(
                    url, params=params, headers=headers, timeout=self.api.timeout_seconds
                )
            except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
                raise ConfigError(f"Invalid URL: {url}") from e
            except httpx.RequestError as e:
                if attempt < self.api.max_retries:
                    logger.warning(
                        "Request to %s failed, retrying in %.1fs: %s", url, delay, e
                    )
                    await asyncio.sleep(delay)
                    continue
                raise RemoteError("Unable to reach the weather service.") from e

            if resp.status_code in RETRYABLE_STATUS and attempt < self.api.max_retries:
                logger.warning(
                    "%s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, self.api.max_retries,
                )
                await asyncio.sleep(delay)
                continue
            if not resp.is_success:
                logger.error("%s returned %d", url, resp.status_code)
                raise RemoteError(status_code=resp.status_code)

            try:
                return resp.json()
            except ValueError as e:
                raise DecodeError() from e

        raise RemoteError()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.api.timeout_seconds)
        return self._client


def _validate_url(url: str) -> None:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigError(f"Invalid URL: {url}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigError(f"Invalid URL: {url}")


def _validate_coordinates(location: Location) -> None:
    lat, lon = location.latitude, location.longitude
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ConfigError(f"Invalid coordinates for {location.display_name}")
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise ConfigError(f"Invalid coordinates for {location.display_name}")
