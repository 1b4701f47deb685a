"""Hotspot lookup around a search center."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from lifer_planner.analysis.distance import distance_km
from lifer_planner.datasources.ebird import client
from lifer_planner.schemas import Hotspot

if TYPE_CHECKING:
    from lifer_planner.reference.geography import SearchArea

logger = logging.getLogger(__name__)


def _parse_hotspot(raw: dict[str, Any]) -> Hotspot | None:
    """Parse one ref/hotspot/geo entry. Returns None if required fields are bad."""
    try:
        return Hotspot.model_validate(raw)
    except ValidationError:
        logger.debug("Skipping malformed hotspot record: %r", raw)
        return None


def fetch_hotspots_near(
    area: SearchArea,
    api_key: str,
    *,
    limit: int | None = None,
) -> list[Hotspot]:
    """
    Fetch hotspots within the search area, nearest first.

    eBird's geo query is approximate at the edge of the circle, so hotspots
    whose haversine distance exceeds ``area.radius_km`` are dropped.

    Args:
        area: Center point and radius.
        api_key: eBird API key.
        limit: Keep only the nearest ``limit`` hotspots (None keeps all).

    Returns:
        Hotspots sorted by distance from the center, ascending.
    """
    raw = client.get_hotspots_geo(api_key, area.as_query_params())

    by_distance: list[tuple[float, Hotspot]] = []
    for entry in raw:
        hotspot = _parse_hotspot(entry)
        if hotspot is None:
            continue
        dist = distance_km(area.lat, area.lng, hotspot.lat, hotspot.lng)
        if dist <= area.radius_km:
            by_distance.append((dist, hotspot))

    by_distance.sort(key=lambda pair: pair[0])
    hotspots = [hotspot for _, hotspot in by_distance]
    if limit is not None:
        hotspots = hotspots[:limit]
    return hotspots
