"""
The capability a map renderer provides to the projection layer.

Anything that can convert between viewport pixels and geographic points can
back a ``Projection``: a native engine binding, a test fake, or the
``MercatorCamera`` shipped in ``map_footprint.camera``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from map_footprint.schemas import ContentPadding, GeoPoint, PixelPoint


@runtime_checkable
class MapSurface(Protocol):
    """Screen/geographic conversion for the current camera."""

    def unproject(self, pixel: PixelPoint) -> GeoPoint | None:
        """Geographic point under ``pixel``, or None if its ray misses the ground."""
        ...

    def project(self, point: GeoPoint) -> PixelPoint | None:
        """Screen location of ``point``, or None if it is behind the camera."""
        ...

    def width(self) -> float: ...

    def height(self) -> float: ...

    def meters_per_pixel_at_latitude(self, latitude: float) -> float: ...

    def zoom(self) -> float: ...

    def with_content_padding(self, padding: ContentPadding) -> MapSurface:
        """Same camera with ``padding``; the focal point moves to the padded area's middle."""
        ...
