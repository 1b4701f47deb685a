"""Recent observations per hotspot and their species frequency summaries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests
from pydantic import ValidationError

from lifer_planner.datasources.ebird import client
from lifer_planner.schemas import LocationObservationSummary, ObservationRecord, SpeciesTally

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lifer_planner.schemas import Hotspot

logger = logging.getLogger(__name__)

DEFAULT_BACK_DAYS = 30

# =============================================================================
# Parsing
# =============================================================================


def _parse_observation(raw: dict[str, Any]) -> ObservationRecord | None:
    """Parse one recent-observation entry. Returns None if fields are missing."""
    try:
        return ObservationRecord.model_validate(raw)
    except ValidationError:
        logger.debug("Skipping malformed observation record: %r", raw)
        return None


def summarize_observations(
    location_id: str, records: Iterable[ObservationRecord]
) -> LocationObservationSummary:
    """Tally observation records by species code.

    Each record counts once toward its species and once toward
    ``total_checklists``. ``last_seen`` keeps the date of the first record
    seen for a species; eBird returns the most recent sighting first.
    """
    counts: dict[str, int] = {}
    first: dict[str, ObservationRecord] = {}
    total = 0
    for record in records:
        total += 1
        if record.species_code not in first:
            first[record.species_code] = record
        counts[record.species_code] = counts.get(record.species_code, 0) + 1

    species = {
        code: SpeciesTally(
            common_name=rec.common_name,
            scientific_name=rec.scientific_name,
            count=counts[code],
            last_seen=rec.observed_at,
        )
        for code, rec in first.items()
    }
    return LocationObservationSummary(
        location_id=location_id, species=species, total_checklists=total
    )


# =============================================================================
# API Fetching
# =============================================================================


def fetch_recent_observations(
    loc_id: str,
    api_key: str,
    *,
    back_days: int = DEFAULT_BACK_DAYS,
) -> list[ObservationRecord]:
    """
    Fetch the recent observations reported at one hotspot.

    Args:
        loc_id: eBird location ID.
        api_key: eBird API key.
        back_days: Lookback window in days (1-30).

    Returns:
        Parsed observation records; malformed entries are dropped.
    """
    back = max(1, min(back_days, client.MAX_BACK_DAYS))
    raw = client.get_recent_observations(api_key, loc_id, {"back": back})
    records: list[ObservationRecord] = []
    for entry in raw:
        parsed = _parse_observation(entry)
        if parsed is not None:
            records.append(parsed)
    return records


def fetch_summaries(
    hotspots: Iterable[Hotspot],
    api_key: str,
    *,
    back_days: int = DEFAULT_BACK_DAYS,
) -> dict[str, LocationObservationSummary]:
    """
    Fetch and summarize recent observations for each hotspot, one at a time.

    A hotspot whose request fails is logged and left out of the result; the
    recommendation engine then skips it. A missing API key raises
    EBirdAuthError before the first request.

    Returns:
        Dict mapping hotspot ID -> LocationObservationSummary.
    """
    summaries: dict[str, LocationObservationSummary] = {}
    for hotspot in hotspots:
        try:
            records = fetch_recent_observations(hotspot.loc_id, api_key, back_days=back_days)
        except requests.RequestException as exc:
            logger.warning(
                "Could not fetch observations for %s (%s): %s", hotspot.name, hotspot.loc_id, exc
            )
            continue
        summaries[hotspot.loc_id] = summarize_observations(hotspot.loc_id, records)
    return summaries
