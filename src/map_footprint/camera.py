"""
Reference map surface: a Web Mercator camera.

``MercatorCamera`` implements ``MapSurface`` with a pinhole camera looking at
the map plane. The camera sits ``1.5 * height`` pixels from the point it looks
at (a vertical field of view of about 37 degrees), rotated by ``bearing`` and
tilted by ``pitch``. With enough pitch the top of the viewport shows sky, and
``unproject`` returns None for those pixels. Content padding moves the
look-at point from the middle of the viewport to the middle of the padded area.

Ground offsets are computed in world pixels at the camera zoom, then turned
into geographic points with the Mercator helpers::

    screen (x, y) -> ground (gx, gy)   perspective, pitch
    ground -> (east, north)            rotation, bearing
    world pixel -> GeoPoint            mercator.world_pixel_to_latlng
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from map_footprint import mercator
from map_footprint.reference.geometry import DEFAULT_TILE_SIZE
from map_footprint.schemas import ContentPadding, GeoPoint, PixelPoint

MAX_PITCH = 85.0

#: Camera distance from the look-at point, in multiples of viewport height.
CAMERA_DISTANCE_FACTOR = 1.5

# rays closer than this to the horizon are treated as missing the ground
_HORIZON_EPSILON = 1e-9


@dataclass(frozen=True)
class MercatorCamera:
    """Camera over a Web Mercator map.

    Args:
        center: Geographic point at the middle of the viewport.
        zoom_level: Map zoom; the world is ``tile_size * 2**zoom_level`` px wide.
        viewport_width: Viewport width in pixels.
        viewport_height: Viewport height in pixels.
        bearing: Direction screen-up points to, degrees clockwise from north.
        pitch: Tilt away from looking straight down, degrees in [0, 85).
        tile_size: Tile edge in pixels.
        content_padding: Viewport insets. ``center`` is drawn at the middle
            of the padded area rather than the middle of the viewport.
    """

    center: GeoPoint
    zoom_level: float
    viewport_width: float
    viewport_height: float
    bearing: float = 0.0
    pitch: float = 0.0
    tile_size: int = DEFAULT_TILE_SIZE
    content_padding: ContentPadding = ContentPadding()
    _center_world: tuple[float, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            msg = f"Viewport must be non-empty, got {self.viewport_width}x{self.viewport_height}"
            raise ValueError(msg)
        if not 0 <= self.pitch < MAX_PITCH:
            msg = f"pitch must be in [0, {MAX_PITCH}), got {self.pitch}"
            raise ValueError(msg)
        left, top, right, bottom = self.content_padding.as_tuple()
        if left + right >= self.viewport_width or top + bottom >= self.viewport_height:
            msg = f"content padding {self.content_padding.as_tuple()} leaves no room in the viewport"
            raise ValueError(msg)
        object.__setattr__(
            self,
            "_center_world",
            mercator.latlng_to_world_pixel(self.center, self.zoom_level, self.tile_size),
        )

    @property
    def _distance(self) -> float:
        return CAMERA_DISTANCE_FACTOR * self.viewport_height

    @property
    def focal_point(self) -> PixelPoint:
        """Screen location of ``center``: the middle of the padded viewport."""
        left, top, right, bottom = self.content_padding.as_tuple()
        return PixelPoint(
            x=self.viewport_width / 2 + (left - right) / 2,
            y=self.viewport_height / 2 + (top - bottom) / 2,
        )

    def with_content_padding(self, padding: ContentPadding) -> MercatorCamera:
        return replace(self, content_padding=padding)

    # -- MapSurface -----------------------------------------------------------

    def width(self) -> float:
        return self.viewport_width

    def height(self) -> float:
        return self.viewport_height

    def zoom(self) -> float:
        return self.zoom_level

    def meters_per_pixel_at_latitude(self, latitude: float) -> float:
        return mercator.meters_per_pixel(latitude, self.zoom_level, self.tile_size)

    def unproject(self, pixel: PixelPoint) -> GeoPoint | None:
        focal = self.focal_point
        dx = pixel.x - focal.x
        dy = pixel.y - focal.y
        d = self._distance
        sin_p, cos_p = _sin_cos(self.pitch)

        # downward component of the ray; <= 0 means at or above the horizon
        descent = d * cos_p + dy * sin_p
        if descent <= _HORIZON_EPSILON * d:
            return None

        t = d * cos_p / descent
        gx = t * dx
        gy = -d * sin_p + t * (d * sin_p - dy * cos_p)

        sin_b, cos_b = _sin_cos(self.bearing)
        east = gx * cos_b + gy * sin_b
        north = -gx * sin_b + gy * cos_b

        cx, cy = self._center_world
        return mercator.world_pixel_to_latlng(cx + east, cy - north, self.zoom_level, self.tile_size)

    def project(self, point: GeoPoint) -> PixelPoint | None:
        px, py = mercator.latlng_to_world_pixel(point, self.zoom_level, self.tile_size)
        cx, cy = self._center_world
        size = mercator.world_size(self.zoom_level, self.tile_size)

        # take the nearest copy of the point across the antimeridian
        east = (px - cx + size / 2) % size - size / 2
        north = cy - py

        sin_b, cos_b = _sin_cos(self.bearing)
        gx = east * cos_b - north * sin_b
        gy = east * sin_b + north * cos_b

        d = self._distance
        sin_p, cos_p = _sin_cos(self.pitch)
        depth = gy * sin_p + d
        if depth <= _HORIZON_EPSILON * d:
            return None

        focal = self.focal_point
        x = focal.x + d * gx / depth
        y = focal.y - d * gy * cos_p / depth
        return PixelPoint(x=x, y=y)


def _sin_cos(degrees: float) -> tuple[float, float]:
    rad = math.radians(degrees)
    return math.sin(rad), math.cos(rad)
