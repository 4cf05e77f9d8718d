"""Weather data models: units, conditions, day snapshots and bundles."""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum

from skyglance.models.common import LocationId, utc_now_iso


class MeasurementUnit(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def symbol(self) -> str:
        return "°C" if self is MeasurementUnit.METRIC else "°F"

    @property
    def api_value(self) -> str:
        """Token sent as ``temperature_unit`` and used when persisting."""
        return "celsius" if self is MeasurementUnit.METRIC else "fahrenheit"

    @classmethod
    def from_api_value(cls, token: str) -> "MeasurementUnit":
        for unit in cls:
            if unit.api_value == token:
                return unit
        raise ValueError(f"Unknown temperature unit token: {token!r}")


class Condition(StrEnum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly-cloudy"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"
    STORM = "storm"
    FOG = "fog"


@dataclass(frozen=True)
class HourlyReading:
    hour: int  # 0-23, local to the location
    temperature: float


@dataclass(frozen=True)
class DaySnapshot:
    date: date
    high_temp: int
    low_temp: int
    condition: Condition
    hourly_temps: tuple[HourlyReading, ...] = ()
    current_temp: int | None = None

    def __post_init__(self) -> None:
        hours = [r.hour for r in self.hourly_temps]
        if len(hours) != len(set(hours)):
            raise ValueError(f"Duplicate hourly readings on {self.date}")
        if hours != sorted(hours):
            raise ValueError(f"Hourly readings out of order on {self.date}")


@dataclass(frozen=True)
class CityWeatherSummary:
    """Compact projection of a bundle's today snapshot for list display."""

    current_temp: int | None
    low_temp: int
    high_temp: int
    condition: Condition
    timezone: str


@dataclass(frozen=True)
class CityWeatherBundle:
    """Yesterday, today and tomorrow for one location. The unit of caching."""

    location_id: LocationId
    yesterday: DaySnapshot
    today: DaySnapshot
    tomorrow: DaySnapshot
    timezone: str = ""
    fetched_at: str = ""

    def __post_init__(self) -> None:
        one_day = timedelta(days=1)
        if (
            self.today.date - self.yesterday.date != one_day
            or self.tomorrow.date - self.today.date != one_day
        ):
            raise ValueError(
                "Bundle days must be consecutive: "
                f"{self.yesterday.date}, {self.today.date}, {self.tomorrow.date}"
            )
        if self.yesterday.current_temp is not None or self.tomorrow.current_temp is not None:
            raise ValueError("Only today's snapshot may carry a current temperature")
        if not self.fetched_at:
            object.__setattr__(self, "fetched_at", utc_now_iso())

    @property
    def days(self) -> tuple[DaySnapshot, DaySnapshot, DaySnapshot]:
        return (self.yesterday, self.today, self.tomorrow)

    def summary(self) -> CityWeatherSummary:
        return CityWeatherSummary(
            current_temp=self.today.current_temp,
            low_temp=self.today.low_temp,
            high_temp=self.today.high_temp,
            condition=self.today.condition,
            timezone=self.timezone,
        )
