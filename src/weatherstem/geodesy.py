"""Great-circle geometry between the operator and a station."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, computed_field

EARTH_RADIUS_KM = 6371.0088
KM_PER_MILE = 1.609344
KM_PER_NAUTICAL_MILE = 1.852


class Coord(BaseModel):
    """Latitude/longitude in decimal degrees with its radian form."""

    model_config = ConfigDict(frozen=True)

    lat: float = 0.0
    lon: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def lat_rad(self) -> float:
        return math.radians(self.lat)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def lon_rad(self) -> float:
        return math.radians(self.lon)


def distance_km(origin: Coord, target: Coord) -> float:
    """Haversine distance in kilometers."""
    dlat = target.lat_rad - origin.lat_rad
    dlon = target.lon_rad - origin.lon_rad
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(origin.lat_rad) * math.cos(target.lat_rad) * math.sin(dlon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_mi(origin: Coord, target: Coord) -> float:
    """Haversine distance in statute miles."""
    return distance_km(origin, target) / KM_PER_MILE


def distance_nm(origin: Coord, target: Coord) -> float:
    """Haversine distance in nautical miles."""
    return distance_km(origin, target) / KM_PER_NAUTICAL_MILE
