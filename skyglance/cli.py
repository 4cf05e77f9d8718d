"""CLI entry point: a terminal front end over the weather store."""

import argparse
import asyncio
import logging

from skyglance.config.defaults import find_presets
from skyglance.config.loader import default_location, load_config
from skyglance.config.schema import AppConfig
from skyglance.ingest.open_meteo_client import WeatherGateway
from skyglance.models.location import Location
from skyglance.models.weather import MeasurementUnit
from skyglance.reporting.formatters import (
    format_bundle_json,
    format_bundle_text,
    format_city_line,
)
from skyglance.storage.database import connect, run_migrations
from skyglance.store.weather_store import WeatherStore

DEFAULT_CONFIG = "skyglance.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skyglance",
        description="Yesterday, today and tomorrow weather for your cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")

    sub = parser.add_subparsers(dest="command")

    show_p = sub.add_parser("show", help="Show weather for the active city")
    show_p.add_argument("--json", action="store_true", help="Emit JSON")

    sub.add_parser("cities", help="Refresh and list tracked cities")
    sub.add_parser("refresh", help="Refetch full weather for every city")

    search_p = sub.add_parser("search", help="Search for places by name")
    search_p.add_argument("query")

    presets_p = sub.add_parser("presets", help="List built-in cities")
    presets_p.add_argument("query", nargs="?", default="")

    add_p = sub.add_parser("add", help="Track a city")
    add_p.add_argument("query")
    add_p.add_argument(
        "--select", action="store_true", help="Also make it the active city"
    )

    select_p = sub.add_parser("select", help="Switch the active city")
    select_p.add_argument("query")

    remove_p = sub.add_parser("remove", help="Stop tracking a city")
    remove_p.add_argument("query")

    move_p = sub.add_parser("move", help="Reorder tracked cities (1-based)")
    move_p.add_argument("source", type=int)
    move_p.add_argument("destination", type=int)

    unit_p = sub.add_parser("unit", help="Set the temperature unit")
    unit_p.add_argument("unit", choices=[u.value for u in MeasurementUnit])

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "presets":
        return _cmd_presets(args)
    return asyncio.run(_run(config, args))


async def _run(config: AppConfig, args: argparse.Namespace) -> int:
    conn = connect(args.db or config.db_path)
    run_migrations(conn)
    try:
        async with WeatherGateway(config.api) as gateway:
            store = WeatherStore(
                gateway,
                conn,
                default_location=default_location(config),
                default_unit=config.default_unit,
            )
            handler = _HANDLERS[args.command]
            return await handler(store, args)
    finally:
        conn.close()


async def _cmd_show(store: WeatherStore, args: argparse.Namespace) -> int:
    location = store.active_location
    bundle = await store.ensure_weather(location)
    if bundle is None:
        print(f"Error: {store.last_error}")
        return 1
    if args.json:
        print(format_bundle_json(location, bundle, store.unit))
    else:
        print(format_bundle_text(location, bundle, store.unit))
    return 0


async def _cmd_cities(store: WeatherStore, args: argparse.Namespace) -> int:
    await store.refresh_active_and_tracked()
    print(f"Active: {store.active_location.display_name}")
    if not store.tracked_locations:
        print("No tracked cities")
    for i, location in enumerate(store.tracked_locations, start=1):
        print(format_city_line(i, location, store.summary_for(location), store.unit))
    if store.last_error:
        print(f"Error: {store.last_error}")
        return 1
    return 0


async def _cmd_refresh(store: WeatherStore, args: argparse.Namespace) -> int:
    failed = await store.refresh_all_tracked_full()
    cities = set(store.tracked_locations) | {store.active_location}
    for location in failed:
        print(f"Failed: {location.display_name}")
    print(f"Refreshed {len(cities) - len(failed)} of {len(cities)} cities")
    return 0 if not failed else 1


async def _cmd_search(store: WeatherStore, args: argparse.Namespace) -> int:
    results = await store.search_locations(args.query)
    if not results:
        print("No results")
        return 1
    for i, location in enumerate(results, start=1):
        print(f"{i:>2}. {location.display_name} ({location.country})")
    return 0


def _cmd_presets(args: argparse.Namespace) -> int:
    for location in find_presets(args.query):
        print(f"{location.display_name} ({location.country})")
    return 0


async def _cmd_add(store: WeatherStore, args: argparse.Namespace) -> int:
    location = await _resolve(store, args.query)
    if location is None:
        print(f"No place found for {args.query!r}")
        return 1
    if args.select:
        await store.add_and_select(location)
        print(f"Tracking and showing {location.display_name}")
        return 0
    if not await store.add_location(location):
        print(f"{location.display_name} is already tracked")
        return 0
    print(f"Tracking {location.display_name}")
    return 0


async def _cmd_select(store: WeatherStore, args: argparse.Namespace) -> int:
    location = _match_tracked(store, args.query) or await _resolve(store, args.query)
    if location is None:
        print(f"No place found for {args.query!r}")
        return 1
    await store.select_location(location)
    print(f"Active city: {location.display_name}")
    if store.today is None:
        print(f"Error: {store.last_error}")
        return 1
    return 0


async def _cmd_remove(store: WeatherStore, args: argparse.Namespace) -> int:
    location = _match_tracked(store, args.query)
    if location is None:
        print(f"{args.query!r} is not tracked")
        return 1
    store.remove_location(location)
    print(f"Removed {location.display_name}")
    return 0


async def _cmd_move(store: WeatherStore, args: argparse.Namespace) -> int:
    if not store.reorder(args.source - 1, args.destination - 1):
        print("Nothing moved")
        return 1
    for i, location in enumerate(store.tracked_locations, start=1):
        print(f"{i:>2}. {location.display_name}")
    return 0


async def _cmd_unit(store: WeatherStore, args: argparse.Namespace) -> int:
    unit = MeasurementUnit(args.unit)
    await store.set_unit(unit)
    if store.unit != unit:
        print(f"Error: {store.last_error or 'unit unchanged'}")
        return 1
    print(f"Unit: {unit.value} ({unit.symbol})")
    return 0


def _match_tracked(store: WeatherStore, query: str) -> Location | None:
    q = query.strip().lower()
    for location in store.tracked_locations:
        if q in (location.name.lower(), location.display_name.lower()):
            return location
    return None


async def _resolve(store: WeatherStore, query: str) -> Location | None:
    """Exact preset name first, then the first geocoding result."""
    q = query.strip().lower()
    for location in find_presets(query):
        if q in (location.name.lower(), location.display_name.lower()):
            return location
    results = await store.search_locations(query)
    return results[0] if results else None


_HANDLERS = {
    "show": _cmd_show,
    "cities": _cmd_cities,
    "refresh": _cmd_refresh,
    "search": _cmd_search,
    "add": _cmd_add,
    "select": _cmd_select,
    "remove": _cmd_remove,
    "move": _cmd_move,
    "unit": _cmd_unit,
}
