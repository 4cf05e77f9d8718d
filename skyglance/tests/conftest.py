"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest

from skyglance.models.location import Location
from skyglance.storage.database import connect, run_migrations
from skyglance.tests.fakes import FakeGateway

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def tmp_db(tmp_path: Path) -> sqlite3.Connection:
    """A migrated SQLite database in a temp directory."""
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    yield conn
    conn.close()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "open_meteo_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def geocoding_payload() -> dict:
    with open(FIXTURE_DIR / "open_meteo_geocoding.json") as f:
        return json.load(f)


@pytest.fixture
def toronto() -> Location:
    return Location(
        id="toronto", name="Toronto", region="ON", country="Canada",
        latitude=43.6532, longitude=-79.3832,
    )


@pytest.fixture
def paris() -> Location:
    return Location(
        id="paris", name="Paris", region="Île-de-France", country="France",
        latitude=48.8566, longitude=2.3522,
    )


@pytest.fixture
def tokyo() -> Location:
    return Location(
        id="tokyo", name="Tokyo", region="Tokyo", country="Japan",
        latitude=35.6762, longitude=139.6503,
    )


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()
