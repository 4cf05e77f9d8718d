"""In-process stand-in for the weather gateway used by store tests."""

import asyncio
from datetime import date, timedelta

from skyglance.models.location import Location
from skyglance.models.weather import (
    CityWeatherBundle,
    Condition,
    DaySnapshot,
    HourlyReading,
    MeasurementUnit,
)

TODAY = date(2024, 12, 24)


def make_bundle(
    location_id: str,
    today_high: int = 10,
    current: int | None = 7,
    today: date = TODAY,
    timezone: str = "America/Toronto",
) -> CityWeatherBundle:
    def day(offset: int, high: int, current_temp: int | None = None) -> DaySnapshot:
        return DaySnapshot(
            date=today + timedelta(days=offset),
            high_temp=high,
            low_temp=high - 8,
            condition=Condition.PARTLY_CLOUDY,
            hourly_temps=(HourlyReading(hour=9, temperature=high - 4.0),),
            current_temp=current_temp,
        )

    return CityWeatherBundle(
        location_id=location_id,
        yesterday=day(-1, today_high - 1),
        today=day(0, today_high, current),
        tomorrow=day(1, today_high + 1),
        timezone=timezone,
    )


class FakeGateway:
    """Records calls and returns synthetic bundles.

    ``failures`` maps a location id to the exception to raise; ``gates`` maps
    a location id to an event the fetch waits on before returning.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, MeasurementUnit]] = []
        self.failures: dict[str, Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.search_results: list[Location] = []
        self.search_error: Exception | None = None
        self.search_calls: list[str] = []

    async def fetch_weather(
        self, location: Location, unit: MeasurementUnit
    ) -> CityWeatherBundle:
        self.calls.append((location.id, unit))
        call_number = len(self.calls)
        gate = self.gates.get(location.id)
        if gate is not None:
            await gate.wait()
        error = self.failures.get(location.id)
        if error is not None:
            raise error
        high = 10 if unit is MeasurementUnit.METRIC else 50
        return make_bundle(location.id, today_high=high + call_number)

    async def search_locations(self, query: str) -> list[Location]:
        self.search_calls.append(query)
        if self.search_error is not None:
            raise self.search_error
        return list(self.search_results)

    def calls_for(self, location_id: str) -> int:
        return sum(1 for loc_id, _ in self.calls if loc_id == location_id)
