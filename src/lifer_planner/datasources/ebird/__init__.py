"""eBird hotspot and recent-observation data source.

Fetches the candidate hotspots around a search center and, for each one,
the species reported there over the lookback window.

Public API:
  - client: Low-level HTTP (API key header, request pacing)
  - hotspots: fetch_hotspots_near
  - observations: fetch_recent_observations, fetch_summaries, summarize_observations
"""

from lifer_planner.datasources.ebird.hotspots import fetch_hotspots_near
from lifer_planner.datasources.ebird.observations import (
    fetch_recent_observations,
    fetch_summaries,
    summarize_observations,
)

__all__ = [
    "fetch_hotspots_near",
    "fetch_recent_observations",
    "fetch_summaries",
    "summarize_observations",
]
