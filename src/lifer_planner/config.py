"""
Application settings.

Values come from environment variables prefixed ``LIFER_`` (or a ``.env``
file in the working directory), e.g.::

    LIFER_EBIRD_API_KEY=abc123
    LIFER_CENTER_LAT=41.94
    LIFER_CENTER_LNG=-87.67
    LIFER_RADIUS_KM=20
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lifer_planner.analysis.recommend import DEFAULT_TOP_SPECIES
from lifer_planner.datasources.ebird.client import MAX_BACK_DAYS
from lifer_planner.reference.geography import CHICAGO_WEST, SearchArea


class Settings(BaseSettings):
    """Operator-tunable configuration for a recommendation run."""

    model_config = SettingsConfigDict(
        env_prefix="LIFER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "lifer-planner"
    app_env: str = "development"
    debug: bool = False

    area_name: str = CHICAGO_WEST.name
    center_lat: float = CHICAGO_WEST.lat
    center_lng: float = CHICAGO_WEST.lng
    radius_km: float = CHICAGO_WEST.radius_km
    lookback_days: int = Field(default=MAX_BACK_DAYS, ge=1, le=MAX_BACK_DAYS)
    top_species_limit: int = Field(default=DEFAULT_TOP_SPECIES, ge=0)
    max_hotspots: int | None = Field(default=None, ge=1)

    ebird_api_key: str = Field(default="", repr=False)

    @model_validator(mode="after")
    def _check_search_area(self) -> Settings:
        # InvalidConfigurationError is a ValueError, so pydantic reports it
        # as a ValidationError naming the bad center/radius.
        self.search_area()
        return self

    def search_area(self) -> SearchArea:
        return SearchArea(
            name=self.area_name,
            lat=self.center_lat,
            lng=self.center_lng,
            radius_km=self.radius_km,
        )


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
