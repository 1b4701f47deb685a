"""
Prefect flow that turns a search area and a life list into ranked hotspots.

Stages: fetch hotspots -> fetch per-hotspot summaries -> score and rank.
Summaries are fully fetched before scoring starts.

Run locally:
    LIFER_EBIRD_API_KEY=... python -m lifer_planner.flows.recommend

Run with Prefect dashboard:
    prefect server start &
    python -m lifer_planner.flows.recommend
"""

from __future__ import annotations

from collections.abc import Collection  # noqa: TC003 - Prefect resolves flow hints at runtime

from prefect import flow, task

from lifer_planner.analysis.recommend import DEFAULT_TOP_SPECIES, Recommendation, recommend
from lifer_planner.config import Settings, get_settings
from lifer_planner.datasources import ebird
from lifer_planner.datasources.ebird.observations import DEFAULT_BACK_DAYS
from lifer_planner.exceptions import EBirdAuthError
from lifer_planner.reference.geography import SearchArea
from lifer_planner.reference.life_lists import DEMO_LIFE_LIST
from lifer_planner.schemas import Hotspot, LocationObservationSummary


@task(name="fetch-hotspots", retries=2, retry_delay_seconds=5)
def fetch_hotspots(area: SearchArea, api_key: str, limit: int | None = None) -> list[Hotspot]:
    """Fetch hotspots inside the search area, nearest first."""
    return ebird.fetch_hotspots_near(area, api_key, limit=limit)


@task(name="fetch-summaries", retries=2, retry_delay_seconds=5)
def fetch_summaries(
    hotspots: list[Hotspot], api_key: str, lookback_days: int = DEFAULT_BACK_DAYS
) -> dict[str, LocationObservationSummary]:
    """Fetch recent observations for every hotspot and tally them per species."""
    return ebird.fetch_summaries(hotspots, api_key, back_days=lookback_days)


@task(name="score-hotspots")
def score_hotspots(
    hotspots: list[Hotspot],
    summaries: dict[str, LocationObservationSummary],
    life_list: frozenset[str],
    area: SearchArea,
    top_species_limit: int = DEFAULT_TOP_SPECIES,
) -> list[Recommendation]:
    """Rank hotspots by expected new species per sqrt(km)."""
    return recommend(
        hotspots,
        summaries,
        life_list,
        area.lat,
        area.lng,
        top_species_limit=top_species_limit,
    )


@flow(name="recommend-hotspots", log_prints=True, validate_parameters=False)
def recommend_hotspots(
    life_list: Collection[str],
    settings: Settings | None = None,
) -> list[Recommendation]:
    """
    Fetch hotspot data and rank it against a life list.

    This is the main Prefect flow. The life list is snapshotted at the start
    so later edits don't leak into this run.
    """
    settings = settings or get_settings()
    if not settings.ebird_api_key:
        msg = "An eBird API key is required (set LIFER_EBIRD_API_KEY)"
        raise EBirdAuthError(msg)
    area = settings.search_area()
    seen = frozenset(life_list)

    print(f"Fetching hotspots within {area.radius_km:g} km of {area.name}...")
    hotspots = fetch_hotspots(area, settings.ebird_api_key, settings.max_hotspots)
    print(f"Found {len(hotspots)} hotspots.")
    if not hotspots:
        return []

    print(f"Fetching the last {settings.lookback_days} days of observations per hotspot...")
    summaries = fetch_summaries(hotspots, settings.ebird_api_key, settings.lookback_days)
    missing = len(hotspots) - len(summaries)
    if missing:
        print(f"Warning: no observation data for {missing} hotspot(s); they will be skipped.")

    print(f"Scoring against a life list of {len(seen)} species...")
    recommendations = score_hotspots(hotspots, summaries, seen, area, settings.top_species_limit)
    print(f"Ranked {len(recommendations)} hotspots.")
    return recommendations


if __name__ == "__main__":
    result = recommend_hotspots(DEMO_LIFE_LIST)
    for rank, rec in enumerate(result[:10], start=1):
        print(f"{rank:2}. {rec.location.name}: {rec.expected_new_species:.1f} expected lifers")
