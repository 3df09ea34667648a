"""Map Footprint - geographic footprint of a map viewport.

Architecture::

    reference/      Latitude/longitude and Web Mercator constants
    schemas.py      Frozen value types (GeoPoint, BoundingBox, VisibleRegion, ...)
    geometry.py     Bearing, angle conversion, antimeridian-aware longitude span
    mercator.py     Web Mercator world pixels, projected meters, pixel scale
    surface.py      MapSurface protocol: what a renderer must provide
    camera.py       MercatorCamera, a reference MapSurface with bearing and pitch
    projection.py   Projection facade and visible-region assembly

Data flow: MapSurface.unproject → compute_visible_region → VisibleRegion

Extension point: any object implementing ``MapSurface`` (a native engine
binding, a test fake) can back a ``Projection``.
"""

__version__ = "0.1.0"

from map_footprint.camera import MercatorCamera
from map_footprint.config import Settings
from map_footprint.errors import ProjectionError, UnprojectableLocationError, UnprojectableViewportError
from map_footprint.projection import Projection, compute_visible_region
from map_footprint.schemas import BoundingBox, ContentPadding, GeoPoint, PixelPoint, VisibleRegion
from map_footprint.surface import MapSurface

__all__ = [
    "BoundingBox",
    "ContentPadding",
    "GeoPoint",
    "MapSurface",
    "MercatorCamera",
    "PixelPoint",
    "Projection",
    "ProjectionError",
    "Settings",
    "UnprojectableLocationError",
    "UnprojectableViewportError",
    "VisibleRegion",
    "__version__",
    "compute_visible_region",
]
