"""Rank hotspots by how many new life-list species a visit is likely to turn up.

For each hotspot the per-species occurrence rate is ``count / total_checklists``.
Expected new species is the plain sum of those rates over species missing
from the life list (an optimistic expected value, not the probability of
seeing at least one). The ranking score divides that by the square root of
the distance from the search center, so remote sites are penalized
sub-linearly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import groupby
from typing import TYPE_CHECKING

from lifer_planner.analysis.distance import distance_km
from lifer_planner.exceptions import InvalidConfigurationError
from lifer_planner.reference.geography import validate_center

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping, Sequence

    from lifer_planner.schemas import Hotspot, LocationObservationSummary, SpeciesTally

DEFAULT_TOP_SPECIES = 5

# =============================================================================
# Data Models
# =============================================================================


@dataclass(frozen=True)
class SpeciesChance:
    """A likely new species at a hotspot."""

    name: str
    probability_percent: int


@dataclass(frozen=True)
class Recommendation:
    """Score and supporting numbers for one hotspot."""

    location: Hotspot
    new_species_count: int
    expected_new_species: float
    distance_km: float
    score: float
    top_new_species: tuple[SpeciesChance, ...] = ()


# =============================================================================
# Scoring
# =============================================================================


def _percent(count: int, total: int) -> int:
    """Round ``count / total`` to a whole percent, halves rounding up."""
    return math.floor(count / total * 100 + 0.5)


def _top_species(
    new_species: list[SpeciesTally], total_checklists: int, limit: int
) -> tuple[SpeciesChance, ...]:
    # sorted() is stable with reverse=True, so equal counts keep first-seen order
    ranked = sorted(new_species, key=lambda tally: tally.count, reverse=True)[:limit]
    return tuple(
        SpeciesChance(name=t.common_name, probability_percent=_percent(t.count, total_checklists))
        for t in ranked
    )


def score_hotspot(
    hotspot: Hotspot,
    summary: LocationObservationSummary,
    life_list: Collection[str],
    center_lat: float,
    center_lng: float,
    *,
    top_species_limit: int = DEFAULT_TOP_SPECIES,
) -> Recommendation:
    """Build the Recommendation for a single hotspot."""
    new_species = [
        tally for code, tally in summary.species.items() if code not in life_list
    ]
    total = summary.total_checklists

    if total > 0:
        expected = sum(tally.count / total for tally in new_species)
        top = _top_species(new_species, total, top_species_limit)
    else:
        # No checklists: no data to estimate from
        expected = 0.0
        top = ()

    distance = distance_km(center_lat, center_lng, hotspot.lat, hotspot.lng)
    score = expected / math.sqrt(distance) if distance > 0 else expected

    return Recommendation(
        location=hotspot,
        new_species_count=len(new_species),
        expected_new_species=expected,
        distance_km=distance,
        score=score,
        top_new_species=top,
    )


def recommend(
    locations: Sequence[Hotspot],
    summaries_by_location_id: Mapping[str, LocationObservationSummary],
    life_list: Collection[str],
    center_lat: float,
    center_lng: float,
    *,
    top_species_limit: int = DEFAULT_TOP_SPECIES,
) -> list[Recommendation]:
    """
    Score every hotspot that has a summary and rank them best first.

    Hotspots missing from ``summaries_by_location_id`` are left out of the
    result. Hotspots with zero checklists are kept with a score of 0.
    Ranking is a stable sort on score, so equal scores keep the order of
    ``locations``.

    Args:
        locations: Candidate hotspots.
        summaries_by_location_id: Species frequency per hotspot ID.
        life_list: Species codes the user has already seen.
        center_lat: Latitude of the reference point for distance.
        center_lng: Longitude of the reference point for distance.
        top_species_limit: Maximum entries in each ``top_new_species``.

    Returns:
        Recommendations sorted by descending score.

    Raises:
        InvalidConfigurationError: If the center point is malformed or
            ``top_species_limit`` is negative.
    """
    validate_center(center_lat, center_lng)
    if top_species_limit < 0:
        msg = f"top_species_limit must be >= 0, got {top_species_limit}"
        raise InvalidConfigurationError(msg)

    recommendations = [
        score_hotspot(
            hotspot,
            summaries_by_location_id[hotspot.loc_id],
            life_list,
            center_lat,
            center_lng,
            top_species_limit=top_species_limit,
        )
        for hotspot in locations
        if hotspot.loc_id in summaries_by_location_id
    ]
    return sorted(recommendations, key=lambda rec: rec.score, reverse=True)


def group_ties(recommendations: Iterable[Recommendation]) -> list[list[Recommendation]]:
    """Split a ranked sequence into consecutive runs of equal score."""
    return [list(group) for _, group in groupby(recommendations, key=lambda rec: rec.score)]
