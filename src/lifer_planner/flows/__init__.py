"""
Prefect flows for the recommendation pipeline.

Flows:
- recommend: fetch eBird hotspots and recent observations, then rank
  hotspots against a life list

Usage (local):
    python -m lifer_planner.flows.recommend

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m lifer_planner.flows.recommend
"""
