"""Open-Meteo response parsing: daily snapshots, hourly bucketing, geocoding."""

import logging
import math
from datetime import date, datetime
from typing import Any

from skyglance.ingest.conditions import map_condition
from skyglance.ingest.errors import DecodeError, IncompleteDataError
from skyglance.models.common import LocationId, round_half_away
from skyglance.models.location import Location
from skyglance.models.weather import CityWeatherBundle, DaySnapshot, HourlyReading

logger = logging.getLogger(__name__)

DAILY_FIELDS = ("time", "temperature_2m_max", "temperature_2m_min", "weathercode")
HOURLY_TIME_FORMAT = "%Y-%m-%dT%H:%M"


def parse_weather_response(
    raw: Any, location_id: LocationId, dates: tuple[date, date, date]
) -> CityWeatherBundle:
    """Build the yesterday/today/tomorrow bundle from a forecast response.

    ``dates`` is the requested (yesterday, today, tomorrow) window. Raises
    IncompleteDataError when the daily block cannot supply three days.
    """
    if not isinstance(raw, dict):
        raise DecodeError()

    daily = raw.get("daily")
    if not isinstance(daily, dict):
        raise IncompleteDataError()
    for name in DAILY_FIELDS:
        values = daily.get(name)
        if not isinstance(values, list) or len(values) < 3:
            logger.warning(
                "Daily field %s missing or short for %s", name, location_id
            )
            raise IncompleteDataError()

    indexes = _daily_indexes(daily["time"], dates)
    hourly_by_day = bucket_hourly(raw.get("hourly"), dates)

    snapshots = []
    for day_date, index, readings in zip(dates, indexes, hourly_by_day):
        high = daily["temperature_2m_max"][index]
        low = daily["temperature_2m_min"][index]
        if high is None or low is None:
            raise IncompleteDataError()
        try:
            snapshots.append(
                DaySnapshot(
                    date=day_date,
                    high_temp=round_half_away(float(high)),
                    low_temp=round_half_away(float(low)),
                    condition=map_condition(daily["weathercode"][index]),
                    hourly_temps=tuple(readings),
                )
            )
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning("Malformed daily entry %d for %s: %s", index, location_id, e)
            raise DecodeError() from e

    yesterday, today, tomorrow = snapshots
    try:
        current_temp = _current_temperature(raw.get("current_weather"))
    except (TypeError, ValueError, OverflowError) as e:
        raise DecodeError() from e
    if current_temp is not None:
        today = DaySnapshot(
            date=today.date,
            high_temp=today.high_temp,
            low_temp=today.low_temp,
            condition=today.condition,
            hourly_temps=today.hourly_temps,
            current_temp=current_temp,
        )

    return CityWeatherBundle(
        location_id=location_id,
        yesterday=yesterday,
        today=today,
        tomorrow=tomorrow,
        timezone=str(raw.get("timezone") or ""),
    )


def bucket_hourly(
    hourly: Any, dates: tuple[date, ...]
) -> list[list[HourlyReading]]:
    """Group hourly readings by calendar date, one list per entry in ``dates``.

    Each list is sorted by hour. Readings for other dates, unparseable
    timestamps and null or non-numeric temperatures are skipped. If an hour
    repeats within a day (DST fall-back) the first reading wins.
    """
    buckets: list[list[HourlyReading]] = [[] for _ in dates]
    if not isinstance(hourly, dict):
        return buckets

    times = hourly.get("time")
    temps = hourly.get("temperature_2m")
    if not isinstance(times, list) or not isinstance(temps, list):
        return buckets
    position = {d: i for i, d in enumerate(dates)}
    seen: list[set[int]] = [set() for _ in dates]

    for time_str, temp in zip(times, temps):
        ts = _parse_local_timestamp(time_str)
        if ts is None:
            continue
        temperature = _finite_float(temp)
        if temperature is None:
            continue
        index = position.get(ts.date())
        if index is None:
            continue
        if ts.hour in seen[index]:
            logger.debug("Repeated hour %s on %s, keeping first", ts.hour, ts.date())
            continue
        seen[index].add(ts.hour)
        buckets[index].append(HourlyReading(hour=ts.hour, temperature=temperature))

    for bucket in buckets:
        bucket.sort(key=lambda r: r.hour)
    return buckets


def parse_geocoding_response(raw: Any) -> list[Location]:
    if not isinstance(raw, dict):
        raise DecodeError()
    results = raw.get("results")
    if results is None:
        return []
    if not isinstance(results, list):
        raise DecodeError()

    locations = []
    for r in results:
        try:
            country = r.get("country") or ""
            locations.append(
                Location(
                    id=str(r["id"]),
                    name=r["name"],
                    region=r.get("admin1") or country,
                    country=country,
                    latitude=float(r["latitude"]),
                    longitude=float(r["longitude"]),
                )
            )
        except (AttributeError, KeyError, TypeError, ValueError):
            logger.warning("Skipping malformed geocoding result: %r", r)
    return locations


def _daily_indexes(
    times: list[Any], dates: tuple[date, date, date]
) -> tuple[int, int, int]:
    """Index of each target date in ``daily.time``, positional if any is absent."""
    lookup = {str(t): i for i, t in enumerate(times)}
    found = [lookup.get(d.isoformat()) for d in dates]
    if any(i is None for i in found):
        logger.debug(
            "Daily dates %s do not cover %s, using positional entries", times, dates
        )
        return (0, 1, 2)
    return (found[0], found[1], found[2])  # type: ignore[return-value]


def _current_temperature(current: Any) -> int | None:
    if not isinstance(current, dict):
        return None
    temp = current.get("temperature")
    if temp is None:
        return None
    return round_half_away(float(temp))


def _parse_local_timestamp(value: Any) -> datetime | None:
    """Parse ``YYYY-MM-DDTHH:MM`` local time, falling back to ISO-8601."""
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, HOURLY_TIME_FORMAT)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _finite_float(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None
