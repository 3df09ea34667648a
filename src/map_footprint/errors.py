"""Exceptions raised by projection and visible-region computation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from map_footprint.schemas import GeoPoint, PixelPoint


class ProjectionError(Exception):
    """Base class for screen/geographic conversion failures."""


class UnprojectableViewportError(ProjectionError):
    """A screen location has no geographic counterpart.

    Raised when the ray through ``pixel`` misses the ground plane, typically
    a point above the horizon of a steeply tilted map. The failure follows
    from the camera geometry, so calling again with the same camera fails
    the same way.
    """

    def __init__(self, pixel: PixelPoint) -> None:
        self.pixel = pixel
        super().__init__(f"Screen location ({pixel.x}, {pixel.y}) does not intersect the map")


class UnprojectableLocationError(ProjectionError):
    """A geographic point cannot be placed on screen (it is behind the camera)."""

    def __init__(self, point: GeoPoint) -> None:
        self.point = point
        super().__init__(f"Location {point} is not in front of the camera")
