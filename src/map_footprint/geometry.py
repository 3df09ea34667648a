"""
Spherical geometry helpers: angle conversion, bearing and longitude span.

Angle normalization uses truncating modulo (``math.fmod``), so a negative
angle stays negative after reduction. ``bearing`` relies on this: it returns
the signed atan2 result in [-180, 180], and callers classify a point as east
(>= 0) or west (< 0) of the origin from that sign. Use ``compass_bearing``
when a [0, 360) heading is wanted.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from map_footprint.reference.geometry import LONGITUDE_SPAN

if TYPE_CHECKING:
    from map_footprint.schemas import GeoPoint


def degrees_to_radians(degrees: float) -> float:
    """Reduce ``degrees`` modulo 360 (sign-following) and convert to radians."""
    return math.fmod(degrees, 360) * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    """Reduce ``radians`` modulo 2*pi (sign-following) and convert to degrees."""
    return math.fmod(radians, 2 * math.pi) * 180 / math.pi


def bearing(point1: GeoPoint, point2: GeoPoint) -> float:
    """
    Initial great-circle bearing from ``point1`` to ``point2``.

    Returns:
        Signed bearing in degrees, [-180, 180]. Positive means the path
        starts eastward, negative westward. Identical points give 0.
    """
    lon1 = degrees_to_radians(point1.longitude)
    lon2 = degrees_to_radians(point2.longitude)
    lat1 = degrees_to_radians(point1.latitude)
    lat2 = degrees_to_radians(point2.latitude)

    x = math.sin(lon2 - lon1) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1)

    return radians_to_degrees(math.atan2(x, y))


def compass_bearing(point1: GeoPoint, point2: GeoPoint) -> float:
    """Initial bearing normalized to a compass heading in [0, 360)."""
    heading = bearing(point1, point2) % 360
    # tiny negative bearings round up to exactly 360.0
    return 0.0 if heading == 360 else heading


def longitude_span(east: float, west: float) -> float:
    """
    Angular distance in degrees travelling east from ``west`` to ``east``.

    When ``east`` is not greater than ``west`` the span wraps through the
    antimeridian, so ``longitude_span(-170, 170) == 20``. Equal inputs wrap
    all the way round and give 360.
    """
    span = abs(east - west)
    if east > west:
        return span

    # span contains the antimeridian
    return LONGITUDE_SPAN - span


def wrap_longitude(longitude: float) -> float:
    """Normalize a longitude into [-180, 180)."""
    return (longitude + 180) % LONGITUDE_SPAN - 180
