"""Tests for the recommendation renderers."""

from __future__ import annotations

from datetime import datetime

from lifer_planner.analysis.recommend import Recommendation, SpeciesChance
from lifer_planner.reference.geography import CHICAGO_WEST
from lifer_planner.renderers.recommendations import (
    TIE_NOTE,
    build_recommendations_html,
    format_recommendations_table,
)
from lifer_planner.schemas import Hotspot


def _rec(
    loc_id: str, name: str, score: float, top: tuple[SpeciesChance, ...] = ()
) -> Recommendation:
    return Recommendation(
        location=Hotspot(loc_id=loc_id, name=name, lat=41.9, lng=-87.7),
        new_species_count=4,
        expected_new_species=1.26,
        distance_km=3.456,
        score=score,
        top_new_species=top,
    )


SAMPLE = [
    _rec(
        "L1",
        "Montrose Point",
        0.72,
        (SpeciesChance("Piping Plover", 40), SpeciesChance("Snowy Owl", 5)),
    ),
    _rec("L2", "Humboldt Park", 0.31),
]

TIED = [
    _rec("T1", "Alpha Woods", 0.9),
    _rec("T2", "Beta Beach", 0.5),
    _rec("T3", "Gamma Grove", 0.5),
    _rec("T4", "Delta Marsh", 0.2),
]


class TestFormatTable:
    """Test the plain-text table."""

    def test_rows_in_rank_order(self) -> None:
        text = format_recommendations_table(SAMPLE)
        assert text.index("Montrose Point") < text.index("Humboldt Park")

    def test_rounding(self) -> None:
        text = format_recommendations_table(SAMPLE)
        assert "1.3" in text
        assert "3.5" in text
        assert "0.72" in text

    def test_top_species_line(self) -> None:
        text = format_recommendations_table(SAMPLE)
        assert "Most likely new: Piping Plover (40%), Snowy Owl (5%)" in text

    def test_limit(self) -> None:
        text = format_recommendations_table(SAMPLE, limit=1)
        assert "Humboldt Park" not in text

    def test_empty(self) -> None:
        assert "No hotspots" in format_recommendations_table([])

    def test_equal_scores_share_a_rank(self) -> None:
        lines = format_recommendations_table(TIED).splitlines()
        ranks = {line.split()[1]: line.split()[0] for line in lines[2:6]}
        assert ranks == {"Alpha": "1", "Beta": "=2", "Gamma": "=2", "Delta": "4"}
        assert lines[-1] == TIE_NOTE

    def test_no_tie_note_without_ties(self) -> None:
        assert TIE_NOTE not in format_recommendations_table(SAMPLE)

    def test_rank_survives_limit(self) -> None:
        text = format_recommendations_table(TIED, limit=3)
        assert "Delta Marsh" not in text
        assert text.count("=2") == 2


class TestBuildHtml:
    """Test the HTML report."""

    def test_contains_hotspots_and_links(self) -> None:
        html = build_recommendations_html(SAMPLE, CHICAGO_WEST, life_list_size=15)
        assert "<!DOCTYPE html>" in html
        assert "Montrose Point" in html
        assert "https://ebird.org/hotspot/L1" in html
        assert "Piping Plover (40%)" in html
        assert "15 species in your life list" in html
        assert "Chicago West Side" in html

    def test_fragment_not_escaped(self) -> None:
        html = build_recommendations_html(SAMPLE, CHICAGO_WEST, life_list_size=0)
        assert '<div class="rec">' in html
        assert "&lt;div" not in html

    def test_names_are_escaped(self) -> None:
        recs = [_rec("L3", "<script>alert(1)</script>", 1.0)]
        html = build_recommendations_html(recs, CHICAGO_WEST, life_list_size=0)
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_generated_at(self) -> None:
        html = build_recommendations_html(
            SAMPLE, CHICAGO_WEST, 1, generated_at=datetime(2025, 5, 1, 6, 30)
        )
        assert "2025-05-01 06:30" in html

    def test_equal_scores_share_a_rank(self) -> None:
        html = build_recommendations_html(TIED, CHICAGO_WEST, life_list_size=0)
        assert html.count('<span class="rank">=2</span>') == 2
        assert '<span class="rank">4</span>' in html
        assert TIE_NOTE in html

    def test_no_tie_note_without_ties(self) -> None:
        html = build_recommendations_html(SAMPLE, CHICAGO_WEST, life_list_size=0)
        assert '<span class="rank">2</span>' in html
        assert TIE_NOTE not in html

    def test_empty(self) -> None:
        html = build_recommendations_html([], CHICAGO_WEST, life_list_size=3)
        assert "No hotspots with observation data found." in html
