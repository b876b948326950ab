"""
Geodesic calculations: ellipsoidal distance and spherical destination points.

The two use different earth models. Distance follows an ellipsoidal
(Bowring-style) approximation on WGS84; destination points are projected on a
sphere whose radius is the WGS84 semi-major axis.
"""

__all__ = ['GeodesicRay', 'distance', 'distance_matrix', 'new_ray']

import math
from typing import Sequence

import numpy as np

from geocodec._const import DEG, MERIDIAN_NUMERATOR, PI2, RAD, WGS84_A, WGS84_E2
from geocodec.coordinates import GeoPoint, LatLon


def distance(from_point: GeoPoint, to_point: GeoPoint) -> float:
    """
    Calculate the distance in meters between two points on the WGS84 ellipsoid.

    This is an approximation built from the meridian and prime vertical radii
    of curvature at the mean latitude; it loses accuracy over long distances.

    Args:
        from_point:
            A GeoPoint

        to_point:
            A second GeoPoint

    Returns:
        (float) the distance in meters
    """
    lat_avg = (from_point.lat_rad + to_point.lat_rad) / 2
    w = math.sqrt(1 - WGS84_E2 * math.sin(lat_avg) ** 2)
    meridian = MERIDIAN_NUMERATOR / w ** 3
    prime_vertical = WGS84_A / w

    d_lat = (from_point.lat_rad - to_point.lat_rad) * meridian
    d_lon = (from_point.lon_rad - to_point.lon_rad) * prime_vertical * math.cos(lat_avg)

    return math.sqrt(d_lat ** 2 + d_lon ** 2)


def distance_matrix(points: Sequence[GeoPoint]) -> np.ndarray:
    """
    Calculate the pairwise distances between a set of points, using the same
    approximation as distance().

    Args:
        points:
            A sequence of GeoPoints

    Returns:
        An (n, n) array where [i, j] is the distance in meters between
        points[i] and points[j]
    """
    rads = np.array([[x.lat_rad, x.lon_rad] for x in points], dtype=float).reshape(-1, 2)
    lat, lon = rads[:, 0], rads[:, 1]

    lat_avg = (lat[:, None] + lat[None, :]) / 2
    w = np.sqrt(1 - WGS84_E2 * np.sin(lat_avg) ** 2)

    d_lat = (lat[:, None] - lat[None, :]) * (MERIDIAN_NUMERATOR / w ** 3)
    d_lon = (lon[:, None] - lon[None, :]) * (WGS84_A / w) * np.cos(lat_avg)

    return np.sqrt(d_lat ** 2 + d_lon ** 2)


class GeodesicRay:
    """
    The destination reached by travelling a distance along a bearing from a pivot
    point. Changing either the distance or the bearing recomputes the destination
    before the setter returns.

    Args:
        pivot:
            The starting GeoPoint

        distance:
            The distance of travel, in meters

        bearing:
            The direction of travel, in degrees clockwise from north
    """

    def __init__(self, pivot: GeoPoint, distance: float, bearing: float):
        self._pivot = pivot
        self._update_distance(distance)
        self._update_bearing(bearing)
        self._recompute()

    def __repr__(self):
        return (
            f'<GeodesicRay({self.pivot.lat}, {self.pivot.lon}) '
            f'{self.distance}m @ {self.bearing} -> ({self.lat}, {self.lon})>'
        )

    def _update_distance(self, distance: float):
        self._distance = float(distance)
        self._angular_distance = self._distance / WGS84_A
        self._angular_distance_sin = math.sin(self._angular_distance)
        self._angular_distance_cos = math.cos(self._angular_distance)

    def _update_bearing(self, bearing: float):
        self._bearing = float(bearing)
        self._bearing_rad = self._bearing * RAD

    def _recompute(self):
        pivot = self._pivot
        lat_cos_dist_sin = pivot.lat_cos * self._angular_distance_sin
        lat_sin = (
            pivot.lat_sin * self._angular_distance_cos
            + lat_cos_dist_sin * math.cos(self._bearing_rad)
        )

        # Rounding can push the sine just past 1 for destinations on a pole
        self._lat_rad = math.asin(max(-1., min(1., lat_sin)))
        self._lon_rad = (
            pivot.lon_rad
            + math.atan2(
                lat_cos_dist_sin * math.sin(self._bearing_rad),
                self._angular_distance_cos - pivot.lat_sin ** 2
            )
            + math.pi
        ) % PI2 - math.pi

        self._lat = self._lat_rad * DEG
        self._lon = self._lon_rad * DEG

    def set_distance(self, distance: float) -> 'GeodesicRay':
        """Sets the distance of travel (in meters) and recomputes the destination"""
        self._update_distance(distance)
        self._recompute()
        return self

    def set_bearing(self, bearing: float) -> 'GeodesicRay':
        """Sets the bearing (in degrees) and recomputes the destination"""
        self._update_bearing(bearing)
        self._recompute()
        return self

    def set_pivot(self, pivot: GeoPoint) -> 'GeodesicRay':
        """Sets the pivot point and recomputes the destination"""
        self._pivot = pivot
        self._recompute()
        return self

    @property
    def pivot(self) -> GeoPoint:
        return self._pivot

    @pivot.setter
    def pivot(self, value: GeoPoint):
        self.set_pivot(value)

    @property
    def distance(self) -> float:
        return self._distance

    @distance.setter
    def distance(self, value: float):
        self.set_distance(value)

    @property
    def bearing(self) -> float:
        return self._bearing

    @bearing.setter
    def bearing(self, value: float):
        self.set_bearing(value)

    @property
    def angular_distance(self) -> float:
        """The distance normalized by the WGS84 semi-major axis, in radians"""
        return self._angular_distance

    @property
    def angular_distance_sin(self) -> float:
        return self._angular_distance_sin

    @property
    def angular_distance_cos(self) -> float:
        return self._angular_distance_cos

    @property
    def bearing_rad(self) -> float:
        return self._bearing_rad

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

    @property
    def destination(self) -> LatLon:
        return LatLon(self._lat, self._lon)

    def to_point(self, with_trig: bool = False) -> GeoPoint:
        """
        Converts the destination into a GeoPoint.

        Raises:
            OutOfRangeError if the destination falls on a pole or on -180 degrees
        """
        return GeoPoint(self._lat, self._lon, with_trig=with_trig)


def new_ray(pivot: GeoPoint, distance: float, bearing: float) -> GeodesicRay:
    """
    Creates a GeodesicRay from a pivot point, a distance (meters) and a
    bearing (degrees).
    """
    return GeodesicRay(pivot, distance, bearing)
