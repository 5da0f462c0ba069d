"""
Constants declarations for geodetics
"""

# WGS84 Ellipsoid Constants (EPSG::7030)
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_INVERSE_F = 298.257223563
WGS84_F = 1 / WGS84_INVERSE_F  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# GRS 1980 Ellipsoid Constants (EPSG::7019)
GRS80_A = 6378137.0
GRS80_INVERSE_F = 298.257222101

# Angular tolerance (radians) for pole and meridian tests in geodetic computations
COMPUTATION_TOLERANCE = 1e-10

# Simpson intervals used for meridian arcs unless configured otherwise
DEFAULT_INTEGRATION_INTERVALS = 2

# Simpson intervals used by projections that integrate the meridian arc
PROJECTION_INTEGRATION_INTERVALS = 100
