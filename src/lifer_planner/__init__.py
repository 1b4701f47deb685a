"""Lifer Planner - rank nearby birding hotspots by expected new life-list species.

Architecture::

    datasources/   External APIs (eBird hotspots and recent observations)
    analysis/      Pure scoring logic (haversine distance, recommendation engine)
    reference/     Static data (search area defaults, preset life lists)
    life_list.py   The user's set of already-seen species codes
    renderers/     Pure data -> text/HTML (ranked recommendations)
    flows/         Prefect orchestration (fetch hotspots, fetch summaries, score)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources -> summaries -> analysis (+ life list) -> renderers

Extension points - see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
"""

__version__ = "0.1.0"

from lifer_planner.config import Settings

__all__ = ["Settings", "__version__"]
