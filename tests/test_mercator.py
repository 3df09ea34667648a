"""Tests for Web Mercator helpers."""

from __future__ import annotations

import pytest

from map_footprint import mercator
from map_footprint.reference.geometry import EARTH_CIRCUMFERENCE_M, MAX_MERCATOR_LATITUDE
from map_footprint.schemas import GeoPoint, ProjectedMeters


class TestWorldPixels:
    """Test conversion between geographic points and world pixels."""

    def test_world_size(self) -> None:
        assert mercator.world_size(0, 512) == 512
        assert mercator.world_size(3, 256) == 2048

    def test_origin_is_world_center(self) -> None:
        x, y = mercator.latlng_to_world_pixel(GeoPoint(latitude=0, longitude=0), 0, 512)
        assert x == pytest.approx(256)
        assert y == pytest.approx(256)

    def test_northwest_corner(self) -> None:
        x, y = mercator.latlng_to_world_pixel(
            GeoPoint(latitude=MAX_MERCATOR_LATITUDE, longitude=-180), 2, 256
        )
        assert x == pytest.approx(0)
        assert y == pytest.approx(0, abs=1e-6)

    def test_round_trip(self) -> None:
        point = GeoPoint(latitude=45.5, longitude=-122.6)
        x, y = mercator.latlng_to_world_pixel(point, 12.5)
        back = mercator.world_pixel_to_latlng(x, y, 12.5)
        assert back.latitude == pytest.approx(point.latitude)
        assert back.longitude == pytest.approx(point.longitude)

    def test_x_wraps_around_world(self) -> None:
        point = mercator.world_pixel_to_latlng(512 + 256, 256, 0, 512)
        assert point.longitude == pytest.approx(0)

    def test_y_clamped_to_world(self) -> None:
        north = mercator.world_pixel_to_latlng(256, -1000, 0, 512)
        south = mercator.world_pixel_to_latlng(256, 10_000, 0, 512)
        assert north.latitude == pytest.approx(MAX_MERCATOR_LATITUDE)
        assert south.latitude == pytest.approx(-MAX_MERCATOR_LATITUDE)


class TestMetersPerPixel:
    """Test ground resolution."""

    def test_equator_zoom_zero(self) -> None:
        assert mercator.meters_per_pixel(0, 0, 512) == pytest.approx(EARTH_CIRCUMFERENCE_M / 512)

    def test_halves_per_zoom_level(self) -> None:
        assert mercator.meters_per_pixel(0, 1) == pytest.approx(mercator.meters_per_pixel(0, 0) / 2)

    def test_shrinks_with_latitude(self) -> None:
        assert mercator.meters_per_pixel(60, 10) == pytest.approx(mercator.meters_per_pixel(0, 10) / 2)

    def test_pole_clamped(self) -> None:
        assert mercator.meters_per_pixel(90, 0) == mercator.meters_per_pixel(MAX_MERCATOR_LATITUDE, 0)
        assert mercator.meters_per_pixel(90, 0) > 0


class TestProjectedMeters:
    """Test EPSG:3857 conversion."""

    def test_origin(self) -> None:
        meters = mercator.projected_meters_for_latlng(GeoPoint(latitude=0, longitude=0))
        assert meters.easting == pytest.approx(0)
        assert meters.northing == pytest.approx(0, abs=1e-6)

    def test_easting_at_90_east(self) -> None:
        meters = mercator.projected_meters_for_latlng(GeoPoint(latitude=0, longitude=90))
        assert meters.easting == pytest.approx(EARTH_CIRCUMFERENCE_M / 4)

    def test_round_trip(self) -> None:
        point = GeoPoint(latitude=-33.86, longitude=151.21)
        back = mercator.latlng_for_projected_meters(mercator.projected_meters_for_latlng(point))
        assert back.latitude == pytest.approx(point.latitude)
        assert back.longitude == pytest.approx(point.longitude)

    def test_meters_to_latlng(self) -> None:
        point = mercator.latlng_for_projected_meters(ProjectedMeters(northing=0, easting=-EARTH_CIRCUMFERENCE_M / 4))
        assert point.latitude == pytest.approx(0, abs=1e-9)
        assert point.longitude == pytest.approx(-90)
