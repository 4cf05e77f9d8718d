"""Output formatters for weather bundles and city lists."""

import json
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from skyglance.models.location import Location
from skyglance.models.weather import (
    CityWeatherBundle,
    CityWeatherSummary,
    DaySnapshot,
    MeasurementUnit,
)

DAY_LABELS = ("Yesterday", "Today", "Tomorrow")


def format_day_text(label: str, day: DaySnapshot, unit: MeasurementUnit) -> str:
    line = (
        f"{label:<9} {day.date.isoformat()}  {day.condition:<13} "
        f"H {day.high_temp}{unit.symbol}  L {day.low_temp}{unit.symbol}"
    )
    if day.current_temp is not None:
        line += f"  now {day.current_temp}{unit.symbol}"
    return line


def format_bundle_text(
    location: Location, bundle: CityWeatherBundle, unit: MeasurementUnit
) -> str:
    """Plain text three-day view."""
    lines = [f"=== {location.display_name} ({bundle.timezone or 'local'}) ==="]
    for label, day in zip(DAY_LABELS, bundle.days):
        lines.append(format_day_text(label, day, unit))
    if bundle.today.hourly_temps:
        hourly = ", ".join(
            f"{r.hour:02d}h {r.temperature:.0f}" for r in bundle.today.hourly_temps
        )
        lines.append(f"Hourly: {hourly}")
    return "\n".join(lines)


def format_bundle_json(
    location: Location, bundle: CityWeatherBundle, unit: MeasurementUnit
) -> str:
    """JSON view for programmatic consumption."""
    data = {
        "location": location.to_dict(),
        "unit": unit.value,
        "timezone": bundle.timezone,
        "fetched_at": bundle.fetched_at,
        "days": [
            {
                "label": label.lower(),
                "date": day.date.isoformat(),
                "high": day.high_temp,
                "low": day.low_temp,
                "current": day.current_temp,
                "condition": day.condition.value,
                "hourly": [
                    {"hour": r.hour, "temperature": r.temperature}
                    for r in day.hourly_temps
                ],
            }
            for label, day in zip(DAY_LABELS, bundle.days)
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_city_line(
    index: int,
    location: Location,
    summary: CityWeatherSummary | None,
    unit: MeasurementUnit,
    now: datetime | None = None,
) -> str:
    """One row of the tracked-city list: name, local time and temperatures."""
    prefix = f"{index:>2}. {location.display_name}"
    if summary is None:
        return f"{prefix}  --"
    current = (
        f"{summary.current_temp}{unit.symbol}"
        if summary.current_temp is not None
        else "--"
    )
    return (
        f"{prefix}  {local_time(summary.timezone, now)}  {current}  "
        f"{summary.condition}  H {summary.high_temp} L {summary.low_temp}"
    )


def local_time(timezone: str, now: datetime | None = None) -> str:
    """Current time in an IANA timezone as e.g. ``3:05PM``; ``--`` if unknown."""
    if not timezone:
        return "--"
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        return "--"
    moment = (now or datetime.now(tz)).astimezone(tz)
    return moment.strftime("%I:%M%p").lstrip("0")
