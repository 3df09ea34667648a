"""
Spherical (Web) Mercator math.

World pixels: the whole Mercator square rendered at ``zoom`` is
``tile_size * 2**zoom`` pixels wide, x growing east from -180 and y growing
south from the northern Mercator limit.

Projected meters (EPSG:3857) go through ``mercantile``.
"""

from __future__ import annotations

import math

import mercantile

from map_footprint.geometry import wrap_longitude
from map_footprint.reference.geometry import (
    DEFAULT_TILE_SIZE,
    EARTH_CIRCUMFERENCE_M,
    MAX_MERCATOR_LATITUDE,
    MIN_MERCATOR_LATITUDE,
)
from map_footprint.schemas import GeoPoint, ProjectedMeters


def clamp_latitude(latitude: float) -> float:
    """Clamp a latitude to the range Web Mercator can represent."""
    return max(MIN_MERCATOR_LATITUDE, min(MAX_MERCATOR_LATITUDE, latitude))


def world_size(zoom: float, tile_size: int = DEFAULT_TILE_SIZE) -> float:
    """Width (and height) of the world in pixels at ``zoom``."""
    return tile_size * 2**zoom


def latlng_to_world_pixel(
    point: GeoPoint, zoom: float, tile_size: int = DEFAULT_TILE_SIZE
) -> tuple[float, float]:
    """Return world pixel ``(x, y)`` for a geographic point."""
    size = world_size(zoom, tile_size)
    x = (point.longitude + 180.0) / 360.0 * size

    sin_lat = math.sin(math.radians(clamp_latitude(point.latitude)))
    y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * size
    return x, y


def world_pixel_to_latlng(
    x: float, y: float, zoom: float, tile_size: int = DEFAULT_TILE_SIZE
) -> GeoPoint:
    """
    Return the geographic point at world pixel ``(x, y)``.

    x wraps around the world; y is clamped to the world's north/south edges.
    """
    size = world_size(zoom, tile_size)
    lon = wrap_longitude(x / size * 360.0 - 180.0)

    y = max(0.0, min(size, y))
    n = math.pi * (1 - 2 * y / size)
    lat = math.degrees(math.atan(math.sinh(n)))
    return GeoPoint(latitude=lat, longitude=lon)


def meters_per_pixel(latitude: float, zoom: float, tile_size: int = DEFAULT_TILE_SIZE) -> float:
    """
    Ground distance covered by one pixel at ``latitude``.

    The distance shrinks towards the poles by cos(latitude), the same way a
    degree of longitude does.
    """
    lat_rad = math.radians(clamp_latitude(latitude))
    return math.cos(lat_rad) * EARTH_CIRCUMFERENCE_M / world_size(zoom, tile_size)


def projected_meters_for_latlng(point: GeoPoint) -> ProjectedMeters:
    """Spherical Mercator meters for a geographic point."""
    easting, northing = mercantile.xy(point.longitude, clamp_latitude(point.latitude))
    return ProjectedMeters(northing=float(northing), easting=float(easting))


def latlng_for_projected_meters(meters: ProjectedMeters) -> GeoPoint:
    """Geographic point for spherical Mercator meters."""
    lnglat = mercantile.lnglat(meters.easting, meters.northing)
    return GeoPoint(latitude=float(lnglat.lat), longitude=wrap_longitude(float(lnglat.lng)))
