"""Repository for persisted user preferences: tracked cities, active city, unit."""

import json
import logging
import sqlite3

from skyglance.models.location import Location
from skyglance.models.weather import MeasurementUnit

logger = logging.getLogger(__name__)

TRACKED_LOCATIONS_KEY = "tracked_locations"
ACTIVE_LOCATION_KEY = "active_location"
TEMPERATURE_UNIT_KEY = "temperature_unit"


def get_preference(conn: sqlite3.Connection, key: str) -> str | None:
    row = conn.execute(
        "SELECT value FROM preferences WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_preference(conn: sqlite3.Connection, key: str, value: str) -> None:
    conn.execute(
        "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


# --- Tracked cities ---

def load_tracked_locations(conn: sqlite3.Connection) -> list[Location]:
    """Stored tracked list, or [] when absent or unreadable."""
    raw = get_preference(conn, TRACKED_LOCATIONS_KEY)
    if raw is None:
        return []
    try:
        return [Location.from_dict(d) for d in json.loads(raw)]
    except (ValueError, KeyError, TypeError):
        logger.warning("Ignoring unreadable %s preference", TRACKED_LOCATIONS_KEY)
        return []


def save_tracked_locations(
    conn: sqlite3.Connection, locations: list[Location]
) -> None:
    set_preference(
        conn, TRACKED_LOCATIONS_KEY, json.dumps([loc.to_dict() for loc in locations])
    )


# --- Active city ---

def load_active_location(conn: sqlite3.Connection) -> Location | None:
    raw = get_preference(conn, ACTIVE_LOCATION_KEY)
    if raw is None:
        return None
    try:
        return Location.from_dict(json.loads(raw))
    except (ValueError, KeyError, TypeError):
        logger.warning("Ignoring unreadable %s preference", ACTIVE_LOCATION_KEY)
        return None


def save_active_location(conn: sqlite3.Connection, location: Location) -> None:
    set_preference(conn, ACTIVE_LOCATION_KEY, json.dumps(location.to_dict()))


# --- Unit ---

def load_unit(conn: sqlite3.Connection) -> MeasurementUnit | None:
    raw = get_preference(conn, TEMPERATURE_UNIT_KEY)
    if raw is None:
        return None
    try:
        return MeasurementUnit.from_api_value(raw)
    except ValueError:
        logger.warning("Ignoring unknown temperature unit %r", raw)
        return None


def save_unit(conn: sqlite3.Connection, unit: MeasurementUnit) -> None:
    set_preference(conn, TEMPERATURE_UNIT_KEY, unit.api_value)
