import math

import numpy as np
import pytest
from pytest import approx

from geocodec._const import WGS84_A
from geocodec.coordinates import GeoPoint
from geocodec.exceptions import OutOfRangeError
from geocodec.geodesic import *

from tests.functions import assert_latlon_equal


def test_distance():
    # One degree of longitude along the equator
    expected = 111_319.490793
    actual = distance(GeoPoint(0., 0.), GeoPoint(0., 1.))
    assert actual == approx(expected, abs=1e-6)

    # One degree of latitude, at the meridian radius of curvature
    actual = distance(GeoPoint(0., 0.), GeoPoint(1., 0.))
    assert actual == approx(110_574.36, rel=1e-4)


def test_distance_same_point():
    for lat, lon in ((0., 0.), (45., -122.), (-89.5, 179.5)):
        p = GeoPoint(lat, lon)
        assert distance(p, p) == 0.
        assert distance(p, GeoPoint(lat, lon)) == 0.


def test_distance_symmetry():
    points = [
        GeoPoint(0., 0.), GeoPoint(35.681236, 139.767125), GeoPoint(34.702485, 135.495951),
        GeoPoint(-33.8688, 151.2093), GeoPoint(51.509865, -0.118092),
    ]
    for a in points:
        for b in points:
            assert distance(a, b) == distance(b, a)


def test_distance_matrix():
    points = [
        GeoPoint(0., 0.), GeoPoint(35.681236, 139.767125), GeoPoint(34.702485, 135.495951),
    ]
    matrix = distance_matrix(points)
    assert matrix.shape == (3, 3)
    assert np.allclose(np.diag(matrix), 0.)
    assert np.allclose(matrix, matrix.T)
    for i, a in enumerate(points):
        for j, b in enumerate(points):
            assert matrix[i, j] == approx(distance(a, b), rel=1e-12)

    assert distance_matrix([]).shape == (0, 0)


def test_ray_zero_distance():
    pivot = GeoPoint(35.681236, 139.767125)
    for bearing in (0., 45., 90., 180., 271.5, 360.):
        ray = new_ray(pivot, 0., bearing)
        assert_latlon_equal(ray.destination, (pivot.lat, pivot.lon), abs_tol=1e-9)


def test_ray_destination():
    pivot = GeoPoint(0., 0.)

    # A quarter of the way around the equator
    ray = new_ray(pivot, WGS84_A * math.pi / 2, 90.)
    assert_latlon_equal((ray.lat, ray.lon), (0., 90.), abs_tol=1e-9)

    # Due north
    ray = new_ray(pivot, WGS84_A * 0.1, 0.)
    assert ray.lat_rad == approx(0.1)
    assert ray.lat == approx(math.degrees(0.1))
    assert ray.lon == approx(0., abs=1e-12)


def test_ray_wraps_antimeridian():
    ray = new_ray(GeoPoint(0., 179.), WGS84_A * math.radians(2.), 90.)
    assert_latlon_equal(ray.destination, (0., -179.), abs_tol=1e-9)

    ray = new_ray(GeoPoint(0., -179.), WGS84_A * math.radians(2.), 270.)
    assert_latlon_equal(ray.destination, (0., 179.), abs_tol=1e-9)


def test_ray_attributes():
    ray = GeodesicRay(GeoPoint(10., 20.), 1000., 30.)
    assert ray.distance == 1000.
    assert ray.angular_distance == 1000. / WGS84_A
    assert ray.angular_distance_sin == math.sin(1000. / WGS84_A)
    assert ray.angular_distance_cos == math.cos(1000. / WGS84_A)
    assert ray.bearing == 30.
    assert ray.bearing_rad == approx(math.radians(30.))
    assert ray.lat_rad == approx(math.radians(ray.lat))
    assert ray.lon_rad == approx(math.radians(ray.lon))
    assert 'GeodesicRay' in repr(ray)


def test_ray_setters_recompute():
    pivot = GeoPoint(35.681236, 139.767125)
    ray = new_ray(pivot, 1000., 0.)
    north = ray.destination

    assert ray.set_bearing(45.) is ray
    assert ray.destination == new_ray(pivot, 1000., 45.).destination
    assert ray.destination != north

    assert ray.set_distance(5000.) is ray
    assert ray.destination == new_ray(pivot, 5000., 45.).destination

    ray.bearing = 180.
    assert ray.bearing == 180.
    assert ray.destination == new_ray(pivot, 5000., 180.).destination

    ray.distance = 0.
    assert ray.distance == 0.
    assert_latlon_equal(ray.destination, (pivot.lat, pivot.lon), abs_tol=1e-9)


def test_ray_distance_roughly_matches():
    # The two earth models agree closely over short distances
    pivot = GeoPoint(35.681236, 139.767125)
    ray = new_ray(pivot, 1000., 60.)
    assert distance(pivot, ray.to_point()) == approx(1000., rel=1e-2)


def test_ray_to_point():
    ray = new_ray(GeoPoint(10., 20.), 1000., 30.)
    point = ray.to_point()
    assert isinstance(point, GeoPoint)
    assert (point.lat, point.lon) == ray.destination

    # Destination on the pole isn't a valid GeoPoint
    ray = new_ray(GeoPoint(0., 0.), WGS84_A * math.pi / 2, 0.)
    with pytest.raises(OutOfRangeError):
        ray.to_point()


def test_ray_destination_on_pole():
    # Rounding in the spherical formula lands just past sin(lat) == 1 here
    ray = new_ray(GeoPoint(54.13378477057185, 0.), 3992608.819511189, 0.)
    assert ray.lat == approx(90.)
    assert math.isfinite(ray.lon)

    for lat in (-60., -12.5, 0., 1e-3, 33.3, 54.13378477057185, 89.):
        ray = new_ray(GeoPoint(lat, 10.), (90. - lat) * math.pi / 180 * WGS84_A, 0.)
        assert ray.lat == approx(90.)

        ray = new_ray(GeoPoint(lat, 10.), (90. + lat) * math.pi / 180 * WGS84_A, 180.)
        assert ray.lat == approx(-90.)


def test_ray_set_pivot_recomputes():
    ray = new_ray(GeoPoint(0., 0.), 1000., 0.)
    pivot = GeoPoint(10., 10.)

    assert ray.set_pivot(pivot) is ray
    assert ray.pivot is pivot
    assert ray.destination == new_ray(pivot, 1000., 0.).destination

    ray.pivot = GeoPoint(-20., 150.)
    assert ray.destination == new_ray(GeoPoint(-20., 150.), 1000., 0.).destination
    assert ray.lat > -20.
