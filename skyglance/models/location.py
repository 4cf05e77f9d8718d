"""Trackable place model."""

import uuid
from dataclasses import dataclass, field
from typing import Any

from skyglance.models.common import LocationId


def _new_id() -> LocationId:
    return str(uuid.uuid4())


@dataclass(frozen=True, eq=False)
class Location:
    """A place the user can track. Equality and hashing use ``id`` only."""

    name: str
    region: str
    latitude: float
    longitude: float
    country: str = ""
    id: LocationId = field(default_factory=_new_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def dedupe_key(self) -> tuple[str, str]:
        return (self.name, self.region)

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.region}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "region": self.region,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Location":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            region=data.get("region", ""),
            country=data.get("country", ""),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
        )
