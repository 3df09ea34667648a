"""Geographic and Web Mercator constants."""

from __future__ import annotations

import math

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

#: Full turn of longitude, used when a span wraps through the antimeridian.
LONGITUDE_SPAN = 360.0

#: Latitude at which Web Mercator becomes square (atan(sinh(pi))).
MAX_MERCATOR_LATITUDE = 85.051128779806604
MIN_MERCATOR_LATITUDE = -MAX_MERCATOR_LATITUDE

#: WGS84 equatorial radius in meters (the sphere EPSG:3857 uses).
EARTH_RADIUS_M = 6378137.0
EARTH_CIRCUMFERENCE_M = 2 * math.pi * EARTH_RADIUS_M

DEFAULT_TILE_SIZE = 512
