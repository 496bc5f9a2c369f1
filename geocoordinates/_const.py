"""
Constants declarations for geocoordinates
"""

import sys

# Spherical Earth radius (meters), shared by every distance/area calculation
EARTH_RADIUS_METERS = 6_371_000.0

# Two coordinates closer than this (degrees) are the same point
EPSILON = sys.float_info.epsilon

# Coordinates smaller than this (degrees) do not contribute to a point's hash
EXACT_HASH_MAGNITUDE = 2.

# Default number of decimal digits when rendering a point as text
DEFAULT_DECIMAL_DIGITS = 7

# Tolerance for boundary tests on projected (unit tangent plane) coordinates
GEOMETRY_TOLERANCE = 1e-12
