"""
Conversion between screen locations and geographic coordinates.

Screen locations are in viewport pixels relative to the top-left corner of
the map (not of the whole screen).

The interesting part is ``compute_visible_region``: turning the four
unprojected viewport corners into a latitude/longitude box. A plain min/max
over corner longitudes breaks when the viewport straddles the antimeridian
(179 and -179 are numerically far apart but geographically adjacent).
Instead each corner is classified as east or west of the viewport center by
the sign of the great-circle bearing from the center, and on each side the
corner with the widest antimeridian-aware span from the center wins.

This assumes the four corners bound the visible area, which holds for a
rectangular viewport with moderate rotation and tilt. It is not a general
geodesic bounding algorithm.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from map_footprint import mercator
from map_footprint.errors import UnprojectableLocationError, UnprojectableViewportError
from map_footprint.geometry import bearing, longitude_span
from map_footprint.reference.geometry import MAX_LATITUDE, MIN_LATITUDE
from map_footprint.schemas import (
    BoundingBox,
    ContentPadding,
    GeoPoint,
    PixelPoint,
    ProjectedMeters,
    VisibleRegion,
)
from map_footprint.surface import MapSurface

logger = logging.getLogger(__name__)

Unproject = Callable[[PixelPoint], GeoPoint | None]


def compute_visible_region(width: float, height: float, unproject: Unproject) -> VisibleRegion:
    """
    Build the visible region of a ``width`` x ``height`` viewport.

    Args:
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        unproject: Screen-to-geographic conversion; returns None where the
            ray through a pixel misses the ground.

    Raises:
        UnprojectableViewportError: If the center or any corner cannot be
            unprojected. No partial region is produced.
    """
    left, top, right, bottom = 0.0, 0.0, float(width), float(height)

    def resolve(x: float, y: float) -> GeoPoint:
        pixel = PixelPoint(x=x, y=y)
        point = unproject(pixel)
        if point is None:
            logger.warning("Viewport %sx%s: pixel (%s, %s) does not hit the map", width, height, x, y)
            raise UnprojectableViewportError(pixel)
        return point

    center = resolve(right / 2, bottom / 2)

    top_left = resolve(left, top)
    top_right = resolve(right, top)
    bottom_right = resolve(right, bottom)
    bottom_left = resolve(left, bottom)

    max_east_span = 0.0
    max_west_span = 0.0
    east = 0.0
    west = 0.0
    north = MIN_LATITUDE
    south = MAX_LATITUDE

    for corner in (top_right, bottom_right, bottom_left, top_left):
        if bearing(center, corner) >= 0:
            span = longitude_span(corner.longitude, center.longitude)
            if span > max_east_span:
                max_east_span = span
                east = corner.longitude
        else:
            span = longitude_span(center.longitude, corner.longitude)
            if span > max_west_span:
                max_west_span = span
                west = corner.longitude

        north = max(north, corner.latitude)
        south = min(south, corner.latitude)

    bounds = BoundingBox(north=north, south=south, east=east, west=west)
    logger.debug("Visible region around %s: %s", center, bounds)

    return VisibleRegion(
        top_left=top_left,
        top_right=top_right,
        bottom_left=bottom_left,
        bottom_right=bottom_right,
        bounds=bounds,
    )


class Projection:
    """
    Translates between screen locations and geographic coordinates.

    A thin layer over a ``MapSurface``. Content padding is an immutable value
    forwarded to the surface, which moves its focal point accordingly.
    ``with_content_padding`` returns a new ``Projection`` rather than
    mutating this one.
    """

    def __init__(self, surface: MapSurface, content_padding: ContentPadding | None = None) -> None:
        if content_padding is not None:
            surface = surface.with_content_padding(content_padding)
        self.surface = surface
        self.content_padding = content_padding or ContentPadding()

    def with_content_padding(self, content_padding: ContentPadding) -> Projection:
        return Projection(self.surface, content_padding)

    @property
    def width(self) -> float:
        return self.surface.width()

    @property
    def height(self) -> float:
        return self.surface.height()

    def from_screen_location(self, pixel: PixelPoint) -> GeoPoint:
        """
        Geographic location under a screen location.

        Raises:
            UnprojectableViewportError: If the ray through ``pixel`` does
                not intersect the ground plane.
        """
        point = self.surface.unproject(pixel)
        if point is None:
            raise UnprojectableViewportError(pixel)
        return point

    def to_screen_location(self, point: GeoPoint) -> PixelPoint:
        """
        Screen location of a geographic point.

        Raises:
            UnprojectableLocationError: If the point is behind the camera.
        """
        pixel = self.surface.project(point)
        if pixel is None:
            raise UnprojectableLocationError(point)
        return pixel

    def visible_region(self) -> VisibleRegion:
        """Geographic footprint of the whole viewport in its current state."""
        return compute_visible_region(self.width, self.height, self.surface.unproject)

    def meters_per_pixel_at_latitude(self, latitude: float) -> float:
        """
        Distance spanned by one pixel at ``latitude`` and the current zoom.

        The distance decreases towards the poles, as longitude degrees do.
        """
        if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
            msg = f"latitude must be in [{MIN_LATITUDE}, {MAX_LATITUDE}], got {latitude}"
            raise ValueError(msg)
        return self.surface.meters_per_pixel_at_latitude(latitude)

    def projected_meters_for_latlng(self, point: GeoPoint) -> ProjectedMeters:
        return mercator.projected_meters_for_latlng(point)

    def latlng_for_projected_meters(self, meters: ProjectedMeters) -> GeoPoint:
        return mercator.latlng_for_projected_meters(meters)

    def calculate_zoom(self, min_scale: float) -> float:
        """Zoom level at which the map is ``min_scale`` times its current scale."""
        if min_scale <= 0:
            msg = f"min_scale must be positive, got {min_scale}"
            raise ValueError(msg)
        return self.surface.zoom() + math.log2(min_scale)
