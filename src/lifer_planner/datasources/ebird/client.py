"""
eBird API 2.0 client.

Low-level HTTP helpers for the eBird API: request building, the API-key
header, and request pacing.

API docs: https://documenter.getpostman.com/view/664302/S1ENwy59
Keys: https://ebird.org/api/keygen
Rate limits are not published; a short pause between requests keeps a
sequential per-hotspot crawl well-behaved.
"""

from __future__ import annotations

import time
from typing import Any

from lifer_planner.exceptions import EBirdAuthError
from lifer_planner.services import http

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.ebird.org/v2"
TOKEN_HEADER = "X-eBirdApiToken"
MAX_BACK_DAYS = 30  # data/obs/*/recent accepts back=1..30

# ---------------------------------------------------------------------------
# Rate limiting (module-level state)
# ---------------------------------------------------------------------------
_last_request_time: float = 0.0
MIN_REQUEST_INTERVAL: float = 0.2  # seconds


def _rate_limit() -> None:
    """Sleep if needed so consecutive requests are at least MIN_REQUEST_INTERVAL apart."""
    global _last_request_time  # noqa: PLW0603
    now = time.monotonic()
    elapsed = now - _last_request_time
    if elapsed < MIN_REQUEST_INTERVAL:
        time.sleep(MIN_REQUEST_INTERVAL - elapsed)
    _last_request_time = time.monotonic()


def _get(endpoint: str, api_key: str, params: dict[str, Any] | None = None) -> Any:
    """Make a paced, authenticated GET request to the eBird API."""
    if not api_key:
        msg = "An eBird API key is required (set LIFER_EBIRD_API_KEY)"
        raise EBirdAuthError(msg)
    _rate_limit()
    return http.get_json(f"{API_BASE}/{endpoint}", params, headers={TOKEN_HEADER: api_key})


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def get_hotspots_geo(api_key: str, params: dict[str, Any]) -> list[dict[str, Any]]:
    """GET /ref/hotspot/geo - hotspots within ``dist`` km of ``lat``/``lng``."""
    data: list[dict[str, Any]] = _get("ref/hotspot/geo", api_key, {**params, "fmt": "json"})
    return data


def get_recent_observations(
    api_key: str, loc_id: str, params: dict[str, Any] | None = None
) -> list[dict[str, Any]]:
    """GET /data/obs/{locId}/recent - recent observations at one location."""
    data: list[dict[str, Any]] = _get(f"data/obs/{loc_id}/recent", api_key, params)
    return data
