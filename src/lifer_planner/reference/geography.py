"""Geographic search area for the hotspot query."""

from __future__ import annotations

import math
from dataclasses import dataclass

from lifer_planner.exceptions import InvalidConfigurationError

# eBird's ref/hotspot/geo endpoint caps ``dist`` at 50 km
MAX_RADIUS_KM = 50.0


def validate_center(lat: float, lng: float) -> None:
    """Raise InvalidConfigurationError unless (lat, lng) is a finite, in-range point."""
    if not (math.isfinite(lat) and math.isfinite(lng)):
        msg = f"Center coordinates must be finite numbers, got ({lat}, {lng})"
        raise InvalidConfigurationError(msg)
    if not -90.0 <= lat <= 90.0:
        msg = f"Center latitude must be within [-90, 90], got {lat}"
        raise InvalidConfigurationError(msg)
    if not -180.0 <= lng <= 180.0:
        msg = f"Center longitude must be within [-180, 180], got {lng}"
        raise InvalidConfigurationError(msg)


@dataclass(frozen=True)
class SearchArea:
    """Center point + radius that bounds the candidate hotspots."""

    name: str
    lat: float
    lng: float
    radius_km: float

    def __post_init__(self) -> None:
        validate_center(self.lat, self.lng)
        if not math.isfinite(self.radius_km) or self.radius_km <= 0:
            msg = f"Search radius must be a positive number of km, got {self.radius_km}"
            raise InvalidConfigurationError(msg)
        if self.radius_km > MAX_RADIUS_KM:
            msg = f"Search radius {self.radius_km} km exceeds the eBird limit of {MAX_RADIUS_KM:g}"
            raise InvalidConfigurationError(msg)

    def as_query_params(self) -> dict[str, str]:
        """Return the lat/lng/dist params for ``ref/hotspot/geo``."""
        return {"lat": str(self.lat), "lng": str(self.lng), "dist": f"{self.radius_km:g}"}


# Chicago West Side
CHICAGO_WEST = SearchArea(name="Chicago West Side", lat=41.94, lng=-87.67, radius_km=20)
