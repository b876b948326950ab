"""
Constants declarations for geocodec
"""
import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_B = 6356752.314245  # Semi-minor axis (meters)

# (WGS84_A^2 - WGS84_B^2) / WGS84_A^2
WGS84_E2 = 0.006694379990197

# Meridian numerator, WGS84_A * (1 - WGS84_E2)
MERIDIAN_NUMERATOR = 6335439.327292464877011

# Degree/radian multipliers
RAD = math.pi / 180
DEG = 180 / math.pi
PI2 = math.pi * 2

# Geohash
GEOHASH_ALPHABET = '0123456789bcdefghjkmnpqrstuvwxyz'
GEOHASH_MAX_PRECISION = 16

# Quadkeys (Web Mercator tile pyramid)
QUADKEY_ALPHABET = '0123'
QUADKEY_MAX_LEVEL = 23
QUADKEY_DEFAULT_LEVEL = 23
TILE_SIZE = 256
MERCATOR_MIN_LATITUDE = -85.05112878
MERCATOR_MAX_LATITUDE = 85.05112878
MERCATOR_MIN_LONGITUDE = -180.
MERCATOR_MAX_LONGITUDE = 180.
