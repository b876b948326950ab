"""
Representation of a validated point on earth
"""

__all__ = [
    'GeoPoint', 'LatLon', 'deg_to_rad', 'is_valid_latlon', 'make_point', 'rad_to_deg'
]

from functools import cached_property
import math
from typing import NamedTuple

from geocodec._const import DEG, RAD
from geocodec.exceptions import OutOfRangeError


class LatLon(NamedTuple):
    """A (latitude, longitude) pair, in degrees"""
    lat: float
    lon: float


def deg_to_rad(degrees: float) -> float:
    """Converts degrees to radians"""
    return degrees * RAD


def rad_to_deg(radians: float) -> float:
    """Converts radians to degrees"""
    return radians * DEG


def is_valid_latlon(lat: float, lon: float, inclusive: bool = False) -> bool:
    """
    Test whether a latitude/longitude pair falls within the valid range.

    Args:
        lat:
            The latitude, in degrees

        lon:
            The longitude, in degrees

        inclusive: (Default False)
            If True, accepts the closed range [-90, 90] / [-180, 180]. Otherwise
            the open range (-90, 90) / (-180, 180) is required.

    Returns:
        bool
    """
    if inclusive:
        return -90 <= lat <= 90 and -180 <= lon <= 180

    return -90 < lat < 90 and -180 < lon < 180


class GeoPoint:
    """
    A validated latitude/longitude pair with its radian and trigonometric forms.

    Args:
        lat:
            The latitude, in degrees. Must be within (-90, 90).

        lon:
            The longitude, in degrees. Must be within (-180, 180).

        with_trig: (Default False)
            If True, the sine and cosine of both radian values are computed
            immediately. Otherwise they are computed on first access.

    Raises:
        OutOfRangeError if either value is outside its range
    """

    def __init__(self, lat: float, lon: float, with_trig: bool = False):
        lat, lon = float(lat), float(lon)
        if not is_valid_latlon(lat, lon):
            raise OutOfRangeError(
                f'Coordinate out of range: latitude {lat} must be within (-90, 90) '
                f'and longitude {lon} within (-180, 180)'
            )

        self._lat = lat
        self._lon = lon
        self._lat_rad = deg_to_rad(lat)
        self._lon_rad = deg_to_rad(lon)

        if with_trig:
            _ = self.lat_sin, self.lat_cos, self.lon_sin, self.lon_cos

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self.lat == other.lat and self.lon == other.lon

    def __hash__(self):
        return hash((self.lat, self.lon))

    def __repr__(self):
        return f'<GeoPoint({self.lat}, {self.lon})>'

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lon(self) -> float:
        return self._lon

    @property
    def lat_rad(self) -> float:
        return self._lat_rad

    @property
    def lon_rad(self) -> float:
        return self._lon_rad

    @cached_property
    def lat_sin(self) -> float:
        return math.sin(self._lat_rad)

    @cached_property
    def lat_cos(self) -> float:
        return math.cos(self._lat_rad)

    @cached_property
    def lon_sin(self) -> float:
        return math.sin(self._lon_rad)

    @cached_property
    def lon_cos(self) -> float:
        return math.cos(self._lon_rad)

    def to_tuple(self) -> LatLon:
        """Returns the point as a (lat, lon) pair"""
        return LatLon(self.lat, self.lon)


def make_point(lat: float, lon: float, with_trig: bool = False) -> GeoPoint:
    """
    Creates a GeoPoint, raising OutOfRangeError if the coordinate is outside
    (-90, 90) / (-180, 180).
    """
    return GeoPoint(lat, lon, with_trig=with_trig)
