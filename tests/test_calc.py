
import math

import pytest
from pytest import approx

from geocoordinates.calc import *
from geocoordinates.coordinates import GeoPoint
from geocoordinates.vectors import GeoVector
from tests.functions import assert_points_equal


def test_to_radians():
    assert to_radians(180.) == approx(math.pi)
    assert to_radians(-90.) == approx(-math.pi / 2)
    assert to_radians(0.) == 0.


def test_to_degrees():
    assert to_degrees(math.pi) == approx(180.)
    assert to_degrees(to_radians(42.)) == approx(42.)


@pytest.mark.parametrize('heading, expected', [
    (0., 0.), (90., 90.), (360., 0.), (720., 0.), (-90., 270.), (-450., 270.), (359.5, 359.5)
])
def test_normalize_heading(heading, expected):
    assert normalize_heading(heading) == approx(expected)


@pytest.mark.parametrize('longitude, expected', [
    (0., 0.), (180., 180.), (-180., -180.), (190., -170.), (-190., 170.), (540., -180.)
])
def test_normalize_longitude(longitude, expected):
    assert normalize_longitude(longitude) == approx(expected)


def test_haversine_distance():
    assert haversine_distance(
        GeoPoint(-43.2126812, -22.951911),
        GeoPoint(-43.1589638, -22.9492483)
    ) == approx(5508.24386676248, abs=1e-4)

    assert haversine_distance(GeoPoint(0., 0.), GeoPoint(0.001, 0.001)) == approx(157.253373, abs=1e-6)
    assert haversine_distance(GeoPoint(0., 0.), GeoPoint(1., 1.)) == approx(157249.381271, abs=1e-6)

    # Short way across the antimeridian
    assert haversine_distance(GeoPoint(179., 0.), GeoPoint(-179., 0.)) == approx(222389.853289, abs=1e-6)

    # Antipodal points are half the circumference apart
    assert haversine_distance(GeoPoint(0., 0.), GeoPoint(180., 0.)) == approx(math.pi * 6_371_000)


def test_bearing_degrees():
    assert bearing_degrees(GeoPoint(0., 0.), GeoPoint(1., 1.)) == approx(44.9985456, abs=1e-5)
    assert bearing_degrees(GeoPoint(1., 1.), GeoPoint(0., 0.)) == approx(224.9985456, abs=1e-5)

    # Crossing the antimeridian heads east, not all the way around the globe
    assert bearing_degrees(GeoPoint(179., 0.), GeoPoint(-179., 0.)) == approx(90.)
    assert bearing_degrees(GeoPoint(-179., 0.), GeoPoint(179., 0.)) == approx(270.)

    # Poles do not blow up
    assert bearing_degrees(GeoPoint(0., 89.9), GeoPoint(0., 90.)) == approx(0.)
    assert 0. < bearing_degrees(GeoPoint(0., -90.), GeoPoint(10., -89.)) < 1.

    assert bearing_degrees(GeoPoint(0., 0.), GeoPoint(0., 0.)) == 0.


def test_initial_bearing_degrees():
    assert initial_bearing_degrees(GeoPoint(0., 0.), GeoPoint(90., 0.)) == approx(90.)
    assert initial_bearing_degrees(GeoPoint(0., 0.), GeoPoint(0., 90.)) == approx(0.)
    assert initial_bearing_degrees(GeoPoint(0., 0.), GeoPoint(-10., 0.)) == approx(270.)

    # Great circles leave high latitudes bending toward the pole
    assert initial_bearing_degrees(GeoPoint(0., 60.), GeoPoint(90., 60.)) < 90.


def test_destination_point():
    assert_points_equal(
        destination_point(GeoPoint(0., 0.), 45., 111_000.),
        GeoPoint(0.7059029, 0.7058494)
    )
    assert_points_equal(
        destination_point(GeoPoint(0., 0.), 0., 6_371_000 * math.pi / 180),
        GeoPoint(0., 1.)
    )

    # No movement returns the start
    assert_points_equal(destination_point(GeoPoint(10., 20.), 123., 0.), GeoPoint(10., 20.))

    # Negative distances travel backwards
    assert_points_equal(
        destination_point(GeoPoint(0., 0.), 90., -1_000.),
        destination_point(GeoPoint(0., 0.), 270., 1_000.)
    )


def test_destination_point_antimeridian(caplog):
    caplog.set_level('DEBUG', logger='geocoordinates')
    result = destination_point(GeoPoint(179.5, 0.), 90., 6_371_000 * math.pi / 180)
    assert result.longitude == approx(-179.5)
    assert 'crossed the antimeridian' in caplog.text


def test_destination_point_over_pole():
    result = destination_point(GeoPoint(0., 89.), 0., 6_371_000 * math.pi / 90)
    assert result.latitude == approx(89.)
    assert abs(result.longitude) == approx(180.)


def test_average_heading():
    assert average_heading([]) == 0.
    assert average_heading([GeoPoint(0., 0.)]) == 0.
    assert average_heading([GeoPoint(0., 0.), GeoPoint(0., 0.)]) == 0.

    assert average_heading([GeoPoint(0., 0.), GeoPoint(0., 1.), GeoPoint(0., 2.)]) == approx(0.)
    assert average_heading([GeoPoint(0., 0.), GeoPoint(1., 0.), GeoPoint(2., 0.)]) == approx(90.)

    # Headings of 10 and 350 average to North, not South
    start = GeoPoint(0., 0.)
    middle = start + GeoVector(1_000., 10.)
    end = middle + GeoVector(1_000., 350.)
    heading = average_heading([start, middle, end])
    assert min(heading, 360 - heading) == approx(0., abs=1e-6)

    # Longer legs count for more
    path = [GeoPoint(0., 0.), GeoPoint(0., 3.), GeoPoint(1., 3.)]
    assert 0. < average_heading(path) < 45.
