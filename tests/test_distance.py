"""Tests for the haversine distance module."""

from __future__ import annotations

import math

import pytest

from lifer_planner.analysis.distance import EARTH_RADIUS_KM, distance_km

POINTS = [
    (41.94, -87.67),
    (41.88, -87.75),
    (0.0, 0.0),
    (-33.87, 151.21),
    (89.9, 179.9),
    (-89.9, -179.9),
]


class TestDistanceKm:
    """Test great-circle distance."""

    def test_known_chicago_distance(self) -> None:
        assert distance_km(41.94, -87.67, 41.88, -87.75) == pytest.approx(9.40, abs=0.05)

    def test_identical_points_are_zero(self) -> None:
        for lat, lon in POINTS:
            assert distance_km(lat, lon, lat, lon) == 0.0

    @pytest.mark.parametrize("a", POINTS)
    @pytest.mark.parametrize("b", POINTS)
    def test_symmetric(self, a: tuple[float, float], b: tuple[float, float]) -> None:
        assert distance_km(*a, *b) == pytest.approx(distance_km(*b, *a))

    def test_never_negative(self) -> None:
        for a in POINTS:
            for b in POINTS:
                assert distance_km(*a, *b) >= 0

    def test_one_degree_of_latitude(self) -> None:
        expected = EARTH_RADIUS_KM * math.pi / 180
        assert distance_km(10.0, 20.0, 11.0, 20.0) == pytest.approx(expected)

    def test_antipodal_points(self) -> None:
        assert distance_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)

    @pytest.mark.parametrize(
        ("lat1", "lon1", "lat2", "lon2"),
        [(-74.6, 0.0, 74.6, 180.0), (41.94, -87.67, -41.94, 92.33), (12.3, 45.6, -12.3, -134.4)],
    )
    def test_near_antipodal_rounding(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> None:
        assert distance_km(lat1, lon1, lat2, lon2) == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_tiny_separation_is_stable(self) -> None:
        # ~1.1 cm apart; acos-based formulas collapse to 0 here
        d = distance_km(41.94, -87.67, 41.9400001, -87.67)
        assert d == pytest.approx(EARTH_RADIUS_KM * math.radians(1e-7), rel=1e-3)
        assert d > 0
