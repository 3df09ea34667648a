"""Tests for bearing, angle conversion and longitude span."""

from __future__ import annotations

import math

import pytest

from map_footprint.geometry import (
    bearing,
    compass_bearing,
    degrees_to_radians,
    longitude_span,
    radians_to_degrees,
    wrap_longitude,
)
from map_footprint.schemas import GeoPoint


def P(lon: float, lat: float) -> GeoPoint:
    """Point from (longitude, latitude), x before y."""
    return GeoPoint(latitude=lat, longitude=lon)


class TestDegreesToRadians:
    """Test degrees_to_radians."""

    def test_half_turn(self) -> None:
        assert degrees_to_radians(180) == pytest.approx(math.pi)

    def test_periodic(self) -> None:
        assert degrees_to_radians(360) == degrees_to_radians(0)
        assert degrees_to_radians(450) == pytest.approx(degrees_to_radians(90))

    def test_negative_keeps_sign(self) -> None:
        """Truncating modulo: -90 stays -90 rather than becoming 270."""
        assert degrees_to_radians(-90) == pytest.approx(-math.pi / 2)
        assert degrees_to_radians(-450) == pytest.approx(-math.pi / 2)

    def test_nan_propagates(self) -> None:
        assert math.isnan(degrees_to_radians(float("nan")))


class TestRadiansToDegrees:
    """Test radians_to_degrees."""

    def test_half_turn(self) -> None:
        assert radians_to_degrees(math.pi) == pytest.approx(180)

    def test_reduces_full_turns(self) -> None:
        assert radians_to_degrees(2 * math.pi + math.pi / 2) == pytest.approx(90)

    def test_negative_keeps_sign(self) -> None:
        assert radians_to_degrees(-math.pi / 2) == pytest.approx(-90)

    @pytest.mark.parametrize("degrees", [0, 45.5, 90, 179.9, 270, 359.5])
    def test_inverse_of_degrees_to_radians(self, degrees: float) -> None:
        assert radians_to_degrees(degrees_to_radians(degrees)) == pytest.approx(degrees % 360)


class TestBearing:
    """Test the signed initial bearing."""

    def test_identical_points(self) -> None:
        p = P(12.5, 41.9)
        assert bearing(p, p) == pytest.approx(0, abs=1e-9)

    def test_due_north(self) -> None:
        assert bearing(P(0, 0), P(0, 10)) == pytest.approx(0, abs=1e-9)

    def test_due_east(self) -> None:
        assert bearing(P(0, 0), P(10, 0)) == pytest.approx(90)

    def test_due_west_is_negative(self) -> None:
        assert bearing(P(0, 0), P(-10, 0)) == pytest.approx(-90)

    def test_due_south(self) -> None:
        assert bearing(P(0, 0), P(0, -10)) == pytest.approx(180)

    def test_across_antimeridian_heads_east(self) -> None:
        """179 -> -179 is a short hop east, not a trip west around the globe."""
        assert bearing(P(179, 0), P(-179, 0)) == pytest.approx(90, abs=1e-6)
        assert bearing(P(-179, 0), P(179, 0)) == pytest.approx(-90, abs=1e-6)

    def test_northeast_at_mid_latitude(self) -> None:
        b = bearing(P(-122.6, 45.5), P(-122.0, 46.0))
        assert 0 < b < 90


class TestCompassBearing:
    """Test bearing normalized to [0, 360)."""

    def test_west_is_270(self) -> None:
        assert compass_bearing(P(0, 0), P(-10, 0)) == pytest.approx(270)

    def test_east_unchanged(self) -> None:
        assert compass_bearing(P(0, 0), P(10, 0)) == pytest.approx(90)

    def test_identical_points(self) -> None:
        p = P(0, 0)
        assert compass_bearing(p, p) == 0.0


class TestLongitudeSpan:
    """Test antimeridian-aware longitude span."""

    def test_simple_span(self) -> None:
        assert longitude_span(30, 10) == 20

    def test_antimeridian_span(self) -> None:
        assert longitude_span(-170, 170) == 20

    def test_east_greater_than_west_takes_raw_path(self) -> None:
        assert longitude_span(10, -170) == 180

    def test_reversed_arguments_wrap(self) -> None:
        assert longitude_span(10, 30) == 340

    def test_equal_longitudes_wrap_fully(self) -> None:
        assert longitude_span(5, 5) == 360

    def test_in_range(self) -> None:
        values = [-179.5, -90.0, -0.5, 0.0, 45.0, 179.5]
        for east in values:
            for west in values:
                if east == west:
                    continue
                assert 0 <= longitude_span(east, west) < 360


class TestWrapLongitude:
    """Test wrap_longitude."""

    @pytest.mark.parametrize(
        ("lon", "expected"),
        [(0, 0), (180, -180), (190, -170), (-190, 170), (540, -180), (-180, -180)],
    )
    def test_wraps(self, lon: float, expected: float) -> None:
        assert wrap_longitude(lon) == pytest.approx(expected)
