"""Weather store: cache, tracked cities, active city and unit preference.

The store is the single owner of cross-request state. It coordinates fetches
against the gateway so that at most one request per (location, purpose) is in
flight; later callers for the same key await the running task. Results are
committed atomically per location id and observers are notified through
``subscribe``.
"""

import asyncio
import logging
import sqlite3
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from functools import partial
from types import MappingProxyType

from skyglance.config.defaults import DEFAULT_LOCATION
from skyglance.ingest.errors import Cancelled, WeatherError
from skyglance.ingest.open_meteo_client import WeatherGateway
from skyglance.models.common import LocationId
from skyglance.models.location import Location
from skyglance.models.weather import (
    CityWeatherBundle,
    CityWeatherSummary,
    DaySnapshot,
    MeasurementUnit,
)
from skyglance.storage import preferences_repo
from skyglance.store.events import EventHub, EventKind, Listener, StoreEvent

logger = logging.getLogger(__name__)


class FetchPurpose(StrEnum):
    FULL = "full"
    SUMMARY = "summary"


@dataclass(frozen=True)
class StoreSnapshot:
    active_location: Location
    tracked_locations: tuple[Location, ...]
    bundles: Mapping[LocationId, CityWeatherBundle]
    summaries: Mapping[LocationId, CityWeatherSummary]
    unit: MeasurementUnit
    is_loading: bool
    last_error: str | None


class WeatherStore:
    def __init__(
        self,
        gateway: WeatherGateway,
        conn: sqlite3.Connection,
        default_location: Location = DEFAULT_LOCATION,
        default_unit: MeasurementUnit = MeasurementUnit.METRIC,
    ):
        self.gateway = gateway
        self.conn = conn
        self._events = EventHub()

        self._active = preferences_repo.load_active_location(conn) or default_location
        self._tracked = preferences_repo.load_tracked_locations(conn)
        self._unit = preferences_repo.load_unit(conn) or default_unit

        self._bundles: dict[LocationId, CityWeatherBundle] = {}
        self._summaries: dict[LocationId, CityWeatherSummary] = {}
        self._displayed: CityWeatherBundle | None = None
        self._inflight: dict[
            tuple[LocationId, FetchPurpose], asyncio.Task[CityWeatherBundle]
        ] = {}
        # Count of full-bundle commits per location; a summary fetch that
        # started before the latest full commit is dropped.
        self._full_commits: dict[LocationId, int] = {}
        self._is_loading = False
        self._last_error: str | None = None

    # --- Observation ---

    @property
    def active_location(self) -> Location:
        return self._active

    @property
    def tracked_locations(self) -> tuple[Location, ...]:
        return tuple(self._tracked)

    @property
    def unit(self) -> MeasurementUnit:
        return self._unit

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def yesterday(self) -> DaySnapshot | None:
        return self._displayed.yesterday if self._displayed else None

    @property
    def today(self) -> DaySnapshot | None:
        return self._displayed.today if self._displayed else None

    @property
    def tomorrow(self) -> DaySnapshot | None:
        return self._displayed.tomorrow if self._displayed else None

    def bundle_for(self, location: Location) -> CityWeatherBundle | None:
        return self._bundles.get(location.id)

    cached_bundle = bundle_for

    def summary_for(self, location: Location) -> CityWeatherSummary | None:
        return self._summaries.get(location.id)

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            active_location=self._active,
            tracked_locations=tuple(self._tracked),
            bundles=MappingProxyType(dict(self._bundles)),
            summaries=MappingProxyType(dict(self._summaries)),
            unit=self._unit,
            is_loading=self._is_loading,
            last_error=self._last_error,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._events.subscribe(listener)

    # --- Fetch intents ---

    async def ensure_weather(
        self, location: Location, force_refresh: bool = False
    ) -> CityWeatherBundle | None:
        """Make sure a bundle is cached for ``location``.

        A cache hit without ``force_refresh`` makes no request. A failed fetch
        records the error and keeps whatever was cached before.
        """
        if not force_refresh and location.id in self._bundles:
            return self._bundles[location.id]
        try:
            return await self._fetch(location, FetchPurpose.FULL)
        except Cancelled as e:
            logger.debug("%s", e)
        except WeatherError as e:
            self._record_error(location, e)
        return self._bundles.get(location.id)

    async def refresh_active_and_tracked(self) -> None:
        """Refetch the active city, then summaries for the tracked cities.

        A call made while another refresh is running is a no-op.
        """
        if self._is_loading:
            logger.debug("Refresh already in progress, skipping")
            return

        self._set_loading(True)
        self._last_error = None
        try:
            active = self._active
            try:
                await self._fetch(active, FetchPurpose.FULL)
            except Cancelled as e:
                logger.debug("%s", e)
                return
            except WeatherError as e:
                self._record_error(active, e)
                return
            await self._refresh_summaries(loc for loc in self._tracked if loc != active)
        finally:
            self._set_loading(False)

    async def refresh_tracked_summaries(self) -> None:
        await self._refresh_summaries(self._tracked)

    async def refresh_all_tracked_full(self) -> list[Location]:
        """Refetch full bundles for every tracked city plus the active one.

        Fetches run concurrently and each settles on its own. Returns the
        locations whose fetch failed.
        """
        targets = list(self._tracked)
        if self._active not in targets:
            targets.append(self._active)

        results = await asyncio.gather(
            *(self._fetch(loc, FetchPurpose.FULL) for loc in targets),
            return_exceptions=True,
        )

        failed = []
        for location, result in zip(targets, results):
            if isinstance(result, Cancelled):
                logger.debug("%s", result)
            elif isinstance(result, WeatherError):
                self._record_error(location, result)
                failed.append(location)
            elif isinstance(result, BaseException):
                raise result
        logger.info(
            "Refreshed %d/%d cities", len(targets) - len(failed), len(targets)
        )
        return failed

    async def set_unit(self, unit: MeasurementUnit) -> None:
        """Switch units. The new unit is committed only after the active city
        has been fetched under it; on failure nothing changes.
        """
        if self._is_loading:
            logger.debug("Fetch in progress, ignoring unit change to %s", unit)
            return
        if unit == self._unit:
            return

        self._set_loading(True)
        try:
            active = self._active
            try:
                bundle = await self.gateway.fetch_weather(active, unit)
            except Cancelled as e:
                logger.debug("%s", e)
                return
            except WeatherError as e:
                self._record_error(active, e)
                return

            for task in self._inflight.values():
                task.cancel()
            self._inflight.clear()
            self._bundles.clear()
            self._summaries.clear()

            self._unit = unit
            preferences_repo.save_unit(self.conn, unit)
            self._last_error = None
            self._commit_bundle(active, bundle)
            logger.info("Temperature unit set to %s", unit)
            self._events.publish(StoreEvent(EventKind.UNIT_CHANGED))

            if self._active != active:
                await self.ensure_weather(self._active)
            await self._refresh_summaries(loc for loc in self._tracked if loc != active)
        finally:
            self._set_loading(False)

    async def search_locations(self, query: str) -> list[Location]:
        """Search degrades to no results on any failure."""
        try:
            return await self.gateway.search_locations(query)
        except WeatherError as e:
            logger.warning("City search failed for %r: %s", query, e)
            return []

    # --- City list intents ---

    async def select_location(self, location: Location) -> None:
        self._active = location
        preferences_repo.save_active_location(self.conn, location)
        self._displayed = self._bundles.get(location.id)
        self._events.publish(StoreEvent(EventKind.ACTIVE_CHANGED, location.id))
        await self.ensure_weather(location)

    async def add_location(self, location: Location) -> bool:
        """Track a city and fetch its summary. Returns False for duplicates."""
        if not self._track(location):
            return False
        await self._refresh_summaries([location])
        return True

    async def add_and_select(self, location: Location) -> None:
        existing = self._find_tracked(location)
        if existing is None:
            self._track(location)
        else:
            location = existing
        await self.select_location(location)
        await self._refresh_summaries(loc for loc in self._tracked if loc != location)

    def remove_location(self, location: Location) -> None:
        remaining = [loc for loc in self._tracked if loc.id != location.id]
        if len(remaining) == len(self._tracked):
            return

        self._summaries.pop(location.id, None)
        if location.id != self._active.id:
            self._bundles.pop(location.id, None)
            self._cancel_inflight(location.id)
        # Only the active city left: back to the "no tracked cities" state.
        if len(remaining) == 1 and remaining[0].id == self._active.id:
            remaining = []

        self._tracked = remaining
        preferences_repo.save_tracked_locations(self.conn, self._tracked)
        self._events.publish(StoreEvent(EventKind.TRACKED_CHANGED, location.id))

    def reorder(self, from_index: int, to_index: int) -> bool:
        """Move a tracked city. Out-of-range or equal indices are ignored."""
        count = len(self._tracked)
        if (
            from_index == to_index
            or not 0 <= from_index < count
            or not 0 <= to_index < count
        ):
            return False
        location = self._tracked.pop(from_index)
        self._tracked.insert(to_index, location)
        preferences_repo.save_tracked_locations(self.conn, self._tracked)
        self._events.publish(StoreEvent(EventKind.TRACKED_CHANGED))
        return True

    # --- Internals ---

    def _cancel_inflight(self, location_id: LocationId) -> None:
        for key in [k for k in self._inflight if k[0] == location_id]:
            self._inflight.pop(key).cancel()

    def _find_tracked(self, location: Location) -> Location | None:
        for loc in self._tracked:
            if loc.id == location.id or loc.dedupe_key == location.dedupe_key:
                return loc
        return None

    def _track(self, location: Location) -> bool:
        if self._find_tracked(location) is not None:
            logger.info("%s is already tracked", location.display_name)
            return False
        self._tracked.append(location)
        preferences_repo.save_tracked_locations(self.conn, self._tracked)
        self._events.publish(StoreEvent(EventKind.TRACKED_CHANGED, location.id))
        return True

    async def _refresh_summaries(self, locations: Iterable[Location]) -> None:
        locations = list(locations)
        results = await asyncio.gather(
            *(self._fetch(loc, FetchPurpose.SUMMARY) for loc in locations),
            return_exceptions=True,
        )
        for location, result in zip(locations, results):
            if isinstance(result, Cancelled):
                logger.debug("%s", result)
            elif isinstance(result, WeatherError):
                logger.warning(
                    "Failed to fetch weather for %s: %s", location.display_name, result
                )
            elif isinstance(result, BaseException):
                raise result

    async def _fetch(
        self, location: Location, purpose: FetchPurpose
    ) -> CityWeatherBundle:
        """Await the shared fetch for (location, purpose), starting it if needed.

        Raises Cancelled when the shared fetch was superseded; cancellation of
        the calling task itself propagates unchanged.
        """
        task = self._start_fetch(location, purpose)
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            raise Cancelled(
                f"Fetch for {location.display_name} was superseded"
            ) from None

    def _start_fetch(
        self, location: Location, purpose: FetchPurpose
    ) -> asyncio.Task[CityWeatherBundle]:
        key = (location.id, purpose)
        task = self._inflight.get(key)
        if task is None and purpose is FetchPurpose.SUMMARY:
            task = self._inflight.get((location.id, FetchPurpose.FULL))
        if task is not None:
            logger.debug("Joining in-flight fetch for %s", location.display_name)
            return task

        task = asyncio.create_task(
            self._fetch_and_commit(
                location, purpose, self._unit, self._full_commits.get(location.id, 0)
            )
        )
        self._inflight[key] = task
        task.add_done_callback(partial(self._forget, key))
        return task

    def _forget(
        self, key: tuple[LocationId, FetchPurpose], task: asyncio.Task[CityWeatherBundle]
    ) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if not task.cancelled():
            # Mark the outcome retrieved; waiters see it through the shield.
            task.exception()

    async def _fetch_and_commit(
        self,
        location: Location,
        purpose: FetchPurpose,
        unit: MeasurementUnit,
        full_commits_at_start: int,
    ) -> CityWeatherBundle:
        bundle = await self.gateway.fetch_weather(location, unit)
        if unit != self._unit:
            raise Cancelled(
                f"Discarding {location.display_name} fetched in {unit}, now {self._unit}"
            )
        if purpose is FetchPurpose.FULL:
            self._commit_bundle(location, bundle)
        else:
            self._commit_summary(location, bundle, full_commits_at_start)
        return bundle

    def _commit_bundle(self, location: Location, bundle: CityWeatherBundle) -> None:
        self._bundles[location.id] = bundle
        self._summaries[location.id] = bundle.summary()
        self._full_commits[location.id] = self._full_commits.get(location.id, 0) + 1
        if location.id == self._active.id:
            self._displayed = bundle
        self._events.publish(StoreEvent(EventKind.WEATHER_UPDATED, location.id))
        self._events.publish(StoreEvent(EventKind.SUMMARY_UPDATED, location.id))

    def _commit_summary(
        self, location: Location, bundle: CityWeatherBundle, full_commits_at_start: int
    ) -> None:
        if self._full_commits.get(location.id, 0) != full_commits_at_start:
            logger.debug(
                "Newer full bundle for %s, dropping summary", location.display_name
            )
            return
        if location.id != self._active.id and self._find_tracked(location) is None:
            logger.debug("%s no longer tracked, dropping summary", location.display_name)
            return
        self._summaries[location.id] = bundle.summary()
        self._events.publish(StoreEvent(EventKind.SUMMARY_UPDATED, location.id))

    def _record_error(self, location: Location, error: WeatherError) -> None:
        logger.warning(
            "Weather fetch failed for %s: %s", location.display_name, error
        )
        self._last_error = str(error)
        self._events.publish(StoreEvent(EventKind.ERROR, location.id))

    def _set_loading(self, value: bool) -> None:
        self._is_loading = value
        self._events.publish(StoreEvent(EventKind.LOADING_CHANGED))
