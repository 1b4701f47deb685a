"""Ranked hotspot recommendations as a terminal table or an HTML report."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from lifer_planner.analysis.recommend import group_ties
from lifer_planner.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lifer_planner.analysis.recommend import Recommendation, SpeciesChance
    from lifer_planner.reference.geography import SearchArea

DEFAULT_LIMIT = 10

EBIRD_HOTSPOT_URL = "https://ebird.org/hotspot/{loc_id}"

TIE_NOTE = "= marks hotspots with equal scores."


def _species_label(chance: SpeciesChance) -> str:
    return f"{chance.name} ({chance.probability_percent}%)"


def _ranked(recommendations: Sequence[Recommendation]) -> list[tuple[str, Recommendation]]:
    """Pair each recommendation with its rank label.

    Equal scores share a rank, marked with a leading ``=`` (competition
    ranking: two hotspots tied for 2nd are both ``=2`` and the next is 4).
    """
    ranked: list[tuple[str, Recommendation]] = []
    position = 1
    for group in group_ties(recommendations):
        label = f"={position}" if len(group) > 1 else str(position)
        ranked.extend((label, rec) for rec in group)
        position += len(group)
    return ranked


def format_recommendations_table(
    recommendations: Sequence[Recommendation], limit: int = DEFAULT_LIMIT
) -> str:
    """Plain-text table of the top ``limit`` recommendations."""
    if not recommendations:
        return "No hotspots with observation data found."

    shown = _ranked(recommendations)[:limit]
    name_width = max(len("Hotspot"), *(len(rec.location.name) for _, rec in shown))
    header = (
        f"{'#':>3}  {'Hotspot':<{name_width}}  {'Lifers':>6}  {'Possible':>8}"
        f"  {'km':>5}  {'Score':>6}"
    )
    lines = [header, "-" * len(header)]
    for rank, rec in shown:
        lines.append(
            f"{rank:>3}  {rec.location.name:<{name_width}}  {rec.expected_new_species:>6.1f}"
            f"  {rec.new_species_count:>8}  {rec.distance_km:>5.1f}  {rec.score:>6.2f}"
        )
        if rec.top_new_species:
            top = ", ".join(_species_label(c) for c in rec.top_new_species)
            lines.append(f"{'':>3}  Most likely new: {top}")
    if any(rank.startswith("=") for rank, _ in shown):
        lines.append(TIE_NOTE)
    return "\n".join(lines)


def _rows(recommendations: Sequence[Recommendation], limit: int) -> list[dict[str, Any]]:
    return [
        {
            "rank": rank,
            "tied": rank.startswith("="),
            "name": rec.location.name,
            "url": EBIRD_HOTSPOT_URL.format(loc_id=rec.location.loc_id),
            "expected": f"{rec.expected_new_species:.1f}",
            "possible": rec.new_species_count,
            "distance": f"{rec.distance_km:.1f}",
            "score": f"{rec.score:.2f}",
            "top_species": [_species_label(c) for c in rec.top_new_species],
        }
        for rank, rec in _ranked(recommendations)[:limit]
    ]


def build_recommendations_html(
    recommendations: Sequence[Recommendation],
    area: SearchArea,
    life_list_size: int,
    limit: int = DEFAULT_LIMIT,
    generated_at: datetime | None = None,
) -> str:
    """Full HTML page listing the top ``limit`` recommendations."""
    fragment = render_template(
        "recommendations.html.j2",
        rows=_rows(recommendations, limit),
        total=len(recommendations),
        tie_note=TIE_NOTE,
        life_list_size=life_list_size,
    )
    updated = (generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M")
    return render_template(
        "base.html.j2",
        area=area,
        updated=updated,
        recommendations_html=fragment,
    )
