"""Change notifications published by the weather store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from skyglance.models.common import LocationId

logger = logging.getLogger(__name__)


class EventKind(StrEnum):
    ACTIVE_CHANGED = "active_changed"
    TRACKED_CHANGED = "tracked_changed"
    WEATHER_UPDATED = "weather_updated"
    SUMMARY_UPDATED = "summary_updated"
    UNIT_CHANGED = "unit_changed"
    LOADING_CHANGED = "loading_changed"
    ERROR = "error"


@dataclass(frozen=True)
class StoreEvent:
    kind: EventKind
    location_id: LocationId | None = None


Listener = Callable[[StoreEvent], None]


class EventHub:
    """Synchronous fan-out to subscribed listeners."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener failed handling %s", event.kind)
