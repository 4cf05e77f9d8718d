"""Tests for the preferences repository."""

import sqlite3

from skyglance.models.location import Location
from skyglance.models.weather import MeasurementUnit
from skyglance.storage import preferences_repo


class TestRawPreferences:
    def test_missing_key(self, tmp_db: sqlite3.Connection):
        assert preferences_repo.get_preference(tmp_db, "nope") is None

    def test_set_then_overwrite(self, tmp_db: sqlite3.Connection):
        preferences_repo.set_preference(tmp_db, "k", "one")
        preferences_repo.set_preference(tmp_db, "k", "two")
        assert preferences_repo.get_preference(tmp_db, "k") == "two"
        count = tmp_db.execute("SELECT COUNT(*) FROM preferences").fetchone()[0]
        assert count == 1


class TestTrackedLocations:
    def test_empty_by_default(self, tmp_db: sqlite3.Connection):
        assert preferences_repo.load_tracked_locations(tmp_db) == []

    def test_round_trip_keeps_order_and_fields(
        self, tmp_db: sqlite3.Connection, paris: Location, tokyo: Location
    ):
        preferences_repo.save_tracked_locations(tmp_db, [tokyo, paris])
        loaded = preferences_repo.load_tracked_locations(tmp_db)

        assert loaded == [tokyo, paris]
        assert loaded[1].region == "Île-de-France"
        assert loaded[1].latitude == paris.latitude

    def test_corrupt_value_falls_back(self, tmp_db: sqlite3.Connection):
        preferences_repo.set_preference(
            tmp_db, preferences_repo.TRACKED_LOCATIONS_KEY, "{not json"
        )
        assert preferences_repo.load_tracked_locations(tmp_db) == []

    def test_missing_field_falls_back(self, tmp_db: sqlite3.Connection):
        preferences_repo.set_preference(
            tmp_db, preferences_repo.TRACKED_LOCATIONS_KEY, '[{"name": "Paris"}]'
        )
        assert preferences_repo.load_tracked_locations(tmp_db) == []


class TestActiveLocation:
    def test_none_by_default(self, tmp_db: sqlite3.Connection):
        assert preferences_repo.load_active_location(tmp_db) is None

    def test_round_trip(self, tmp_db: sqlite3.Connection, toronto: Location):
        preferences_repo.save_active_location(tmp_db, toronto)
        loaded = preferences_repo.load_active_location(tmp_db)
        assert loaded == toronto
        assert loaded.display_name == "Toronto, ON"

    def test_corrupt_value_falls_back(self, tmp_db: sqlite3.Connection):
        preferences_repo.set_preference(
            tmp_db, preferences_repo.ACTIVE_LOCATION_KEY, "[]"
        )
        assert preferences_repo.load_active_location(tmp_db) is None


class TestUnit:
    def test_none_by_default(self, tmp_db: sqlite3.Connection):
        assert preferences_repo.load_unit(tmp_db) is None

    def test_stored_as_api_token(self, tmp_db: sqlite3.Connection):
        preferences_repo.save_unit(tmp_db, MeasurementUnit.IMPERIAL)
        raw = preferences_repo.get_preference(
            tmp_db, preferences_repo.TEMPERATURE_UNIT_KEY
        )
        assert raw == "fahrenheit"
        assert preferences_repo.load_unit(tmp_db) == MeasurementUnit.IMPERIAL

    def test_unknown_token_falls_back(self, tmp_db: sqlite3.Connection):
        preferences_repo.set_preference(
            tmp_db, preferences_repo.TEMPERATURE_UNIT_KEY, "kelvin"
        )
        assert preferences_repo.load_unit(tmp_db) is None
