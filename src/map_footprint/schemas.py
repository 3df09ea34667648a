"""
Value types for map footprint computation.

Pydantic models shared by the geometry helpers, the projection facade and
map surfaces. Every model is frozen: values are built once per query and
handed to the caller, never mutated afterwards.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from map_footprint.geometry import longitude_span, wrap_longitude
from map_footprint.reference.geometry import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE

# =============================================================================
# Points
# =============================================================================


class GeoPoint(BaseModel):
    """Geographic point in degrees."""

    model_config = {"frozen": True}

    latitude: float = Field(..., ge=MIN_LATITUDE, le=MAX_LATITUDE)
    longitude: float = Field(..., ge=MIN_LONGITUDE, le=MAX_LONGITUDE)

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"


class PixelPoint(BaseModel):
    """Screen location in viewport pixels, origin at the top-left corner."""

    model_config = {"frozen": True}

    x: float
    y: float


class ProjectedMeters(BaseModel):
    """Spherical Mercator (EPSG:3857) coordinate in meters."""

    model_config = {"frozen": True}

    northing: float
    easting: float


# =============================================================================
# Regions
# =============================================================================


class BoundingBox(BaseModel):
    """
    Latitude/longitude box.

    ``east < west`` is legal and means the box crosses the antimeridian.
    """

    model_config = {"frozen": True}

    north: float = Field(..., ge=MIN_LATITUDE, le=MAX_LATITUDE)
    south: float = Field(..., ge=MIN_LATITUDE, le=MAX_LATITUDE)
    east: float = Field(..., ge=MIN_LONGITUDE, le=MAX_LONGITUDE)
    west: float = Field(..., ge=MIN_LONGITUDE, le=MAX_LONGITUDE)

    @model_validator(mode="after")
    def _check_latitude_order(self) -> Self:
        if self.north < self.south:
            msg = f"north ({self.north}) must be >= south ({self.south})"
            raise ValueError(msg)
        return self

    @property
    def latitude_span(self) -> float:
        return self.north - self.south

    @property
    def longitude_span(self) -> float:
        """Angular width in degrees, measured eastward from west to east."""
        return longitude_span(self.east, self.west)

    @property
    def crosses_antimeridian(self) -> bool:
        return self.east < self.west

    @property
    def center(self) -> GeoPoint:
        lon = wrap_longitude(self.west + self.longitude_span / 2)
        return GeoPoint(latitude=(self.north + self.south) / 2, longitude=lon)

    def contains(self, point: GeoPoint) -> bool:
        """Whether ``point`` lies inside the box (edges included)."""
        if not self.south <= point.latitude <= self.north:
            return False
        if self.crosses_antimeridian:
            return point.longitude >= self.west or point.longitude <= self.east
        return self.west <= point.longitude <= self.east


class VisibleRegion(BaseModel):
    """Footprint of the viewport: its four corners and the box enclosing them."""

    model_config = {"frozen": True}

    top_left: GeoPoint
    top_right: GeoPoint
    bottom_left: GeoPoint
    bottom_right: GeoPoint
    bounds: BoundingBox

    @property
    def corners(self) -> tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]:
        """Corners clockwise from the top-left."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)


# =============================================================================
# Configuration values
# =============================================================================


class ContentPadding(BaseModel):
    """Viewport insets in pixels reserved for overlaid UI."""

    model_config = {"frozen": True}

    left: float = Field(default=0, ge=0)
    top: float = Field(default=0, ge=0)
    right: float = Field(default=0, ge=0)
    bottom: float = Field(default=0, ge=0)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)
