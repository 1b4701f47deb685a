"""Pure scoring logic over already-fetched data.

Dependency rule: analysis/ imports from schemas and reference/ only.
It never fetches data or produces output.

Modules:
  - distance: haversine great-circle distance
  - recommend: hotspots + summaries + life list -> ranked Recommendations

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function::

       from lifer_planner.schemas import Hotspot, LocationObservationSummary

       def rank_something(
           hotspots: list[Hotspot],
           summaries: dict[str, LocationObservationSummary],
       ) -> list[SomeResult]:
           ...

2. Rules:
   - No I/O, no HTTP, no Prefect decorators.
   - Never mutate the inputs; return fresh dataclasses.

3. Wire into the pipeline (see ``flows/recommend.py``).

4. Re-export in ``__init__.py`` and add tests in ``tests/test_{name}.py``.
"""

from lifer_planner.analysis.distance import EARTH_RADIUS_KM, distance_km
from lifer_planner.analysis.recommend import (
    DEFAULT_TOP_SPECIES,
    Recommendation,
    SpeciesChance,
    group_ties,
    recommend,
    score_hotspot,
)

__all__ = [
    "DEFAULT_TOP_SPECIES",
    "EARTH_RADIUS_KM",
    "Recommendation",
    "SpeciesChance",
    "distance_km",
    "group_ties",
    "recommend",
    "score_hotspot",
]
