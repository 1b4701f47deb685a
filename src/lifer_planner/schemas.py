"""
Domain models for lifer planner.

Pydantic models for data from the eBird API and the per-hotspot summaries
built from it. These define the canonical schema - the data source parses API
responses into these and the recommendation engine reads them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Locations
# =============================================================================


class Hotspot(BaseModel):
    """A named, geocoded birding site (eBird hotspot)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    loc_id: str = Field(..., alias="locId", description="Unique eBird location ID")
    name: str = Field(..., alias="locName", description="Display name")
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    country_code: str | None = Field(default=None, alias="countryCode")
    subnational1_code: str | None = Field(default=None, alias="subnational1Code")
    latest_obs_date: str | None = Field(default=None, alias="latestObsDt")
    num_species_all_time: int | None = Field(default=None, alias="numSpeciesAllTime")


# =============================================================================
# Observations
# =============================================================================


class ObservationRecord(BaseModel):
    """One sighting of one species at a hotspot, from the recent-observations feed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    species_code: str = Field(..., alias="speciesCode", min_length=1)
    common_name: str = Field(..., alias="comName")
    scientific_name: str = Field(..., alias="sciName")
    observed_at: str = Field(..., alias="obsDt", description="eBird date, e.g. 2025-05-14 07:32")
    how_many: int | None = Field(default=None, alias="howMany")
    sub_id: str | None = Field(default=None, alias="subId")


class SpeciesTally(BaseModel):
    """Aggregate of all ObservationRecords for one species at one hotspot."""

    model_config = ConfigDict(frozen=True)

    common_name: str
    scientific_name: str
    count: int = Field(..., ge=0)
    last_seen: str


class LocationObservationSummary(BaseModel):
    """Species frequency table for one hotspot over the lookback window.

    ``species`` maps species code -> tally, in first-seen order. A tally's
    ``count`` may exceed ``total_checklists`` when the source reports a
    species more than once per checklist; it is deliberately not capped.
    """

    model_config = ConfigDict(frozen=True)

    location_id: str
    species: dict[str, SpeciesTally] = Field(default_factory=dict)
    total_checklists: int = Field(default=0, ge=0)
