"""Static geometry constants.

Reference values that never change at runtime: latitude/longitude limits,
Web Mercator bounds and the Earth circumference used for pixel scale math.

Adding a new module:
1. Create ``reference/{name}.py`` with constants
2. Re-export from this ``__init__.py``
"""

from map_footprint.reference.geometry import DEFAULT_TILE_SIZE as DEFAULT_TILE_SIZE
from map_footprint.reference.geometry import EARTH_CIRCUMFERENCE_M as EARTH_CIRCUMFERENCE_M
from map_footprint.reference.geometry import LONGITUDE_SPAN as LONGITUDE_SPAN
from map_footprint.reference.geometry import MAX_LATITUDE as MAX_LATITUDE
from map_footprint.reference.geometry import MAX_LONGITUDE as MAX_LONGITUDE
from map_footprint.reference.geometry import MAX_MERCATOR_LATITUDE as MAX_MERCATOR_LATITUDE
from map_footprint.reference.geometry import MIN_LATITUDE as MIN_LATITUDE
from map_footprint.reference.geometry import MIN_LONGITUDE as MIN_LONGITUDE
from map_footprint.reference.geometry import MIN_MERCATOR_LATITUDE as MIN_MERCATOR_LATITUDE
