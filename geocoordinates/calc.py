""" Spherical calculations for GeoPoints """

__all__ = [
    'average_heading', 'bearing_degrees', 'destination_point', 'haversine_distance',
    'initial_bearing_degrees', 'normalize_heading', 'normalize_longitude',
    'to_degrees', 'to_radians',
]

import math
from typing import Sequence, TYPE_CHECKING

from geocoordinates._const import EARTH_RADIUS_METERS
from geocoordinates.utils.logging import LOGGER

if TYPE_CHECKING:  # pragma: no cover
    from geocoordinates.coordinates import GeoPoint


def to_radians(degrees: float) -> float:
    """Converts an angle in degrees to radians"""
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    """Converts an angle in radians to degrees"""
    return radians * 180 / math.pi


def normalize_heading(degrees: float) -> float:
    """
    Wraps a heading into [0, 360).

    Args:
        degrees:
            Any angle, in degrees clockwise from North

    Returns:
        float
    """
    heading = (degrees + 360) % 360
    # Tiny negative remainders round up to exactly 360
    return 0. if heading == 360 else heading


def normalize_longitude(degrees: float) -> float:
    """
    Wraps a longitude into [-180, 180]. Values already in range are returned as-is,
    so both -180 and 180 survive.

    Args:
        degrees:
            A longitude, possibly having travelled past the antimeridian

    Returns:
        float
    """
    if -180 <= degrees <= 180:
        return degrees

    return (degrees + 180) % 360 - 180


def haversine_distance(point1: 'GeoPoint', point2: 'GeoPoint') -> float:
    """
    Calculate the great-circle distance in meters between two points using the
    Haversine formula.

    Args:
        point1:
            A GeoPoint

        point2:
            A second GeoPoint

    Returns:
        (float) the distance in meters
    """
    lat1, lat2 = to_radians(point1.latitude), to_radians(point2.latitude)
    d_lat = to_radians(point2.latitude - point1.latitude)
    d_lon = to_radians(point2.longitude - point1.longitude)

    var1 = (math.sin(d_lat / 2) ** 2) + math.cos(lat1) * math.cos(lat2) * (
        math.sin(d_lon / 2) ** 2
    )
    # Rounding can push var1 a hair past 1 for antipodal points
    var1 = min(1., var1)
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


def bearing_degrees(start: 'GeoPoint', end: 'GeoPoint') -> float:
    """
    Calculate the bearing from start to end, in degrees clockwise from North, using
    the ratio of the longitude difference to the difference in Mercator latitude.

    If the two points are more than 180 degrees of longitude apart, the longitude
    difference is wrapped so the bearing takes the short way around the antimeridian.

    Args:
        start:
            The start point

        end:
            The finish point

    Returns:
        (float) the bearing, in [0, 360)
    """
    d_lon = to_radians(end.longitude - start.longitude)
    # asinh(tan(x)) == ln(tan(pi/4 + x/2)) but stays finite at the poles
    d_phi = (
        math.asinh(math.tan(to_radians(end.latitude))) -
        math.asinh(math.tan(to_radians(start.latitude)))
    )
    if abs(d_lon) > math.pi:
        d_lon = -(2 * math.pi - d_lon) if d_lon > 0 else (2 * math.pi + d_lon)

    return normalize_heading(to_degrees(math.atan2(d_lon, d_phi)))


def initial_bearing_degrees(start: 'GeoPoint', end: 'GeoPoint') -> float:
    """
    Calculate the initial bearing (forward azimuth) of the great circle running
    from start to end.

    Args:
        start:
            The start point

        end:
            The finish point

    Returns:
        (float) the bearing, in [0, 360)
    """
    lon1, lat1 = to_radians(start.longitude), to_radians(start.latitude)
    lon2, lat2 = to_radians(end.longitude), to_radians(end.latitude)

    d_lon = lon2 - lon1
    y_val = math.sin(d_lon) * math.cos(lat2)
    x_val = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    return normalize_heading(to_degrees(math.atan2(y_val, x_val)))


def destination_point(
    start: 'GeoPoint',
    heading_degrees: float,
    distance_meters: float
) -> 'GeoPoint':
    """
    Given a start location, a direction of travel (in degrees clockwise from North), and a
    distance of travel, returns the finish location along the great circle.

    Args:
        start:
            The starting location

        heading_degrees:
            The initial heading, in degrees

        distance_meters:
            The amount of movement, in meters

    Returns:
        GeoPoint
    """
    from geocoordinates.coordinates import GeoPoint  # pylint: disable=import-outside-toplevel

    ang_dist = distance_meters / EARTH_RADIUS_METERS
    heading = to_radians(heading_degrees)
    lon1, lat1 = to_radians(start.longitude), to_radians(start.latitude)

    sin_lat2 = (
        math.sin(lat1) * math.cos(ang_dist) +
        math.cos(lat1) * math.sin(ang_dist) * math.cos(heading)
    )
    lat2 = math.asin(max(-1., min(1., sin_lat2)))
    lon2 = lon1 + math.atan2(
        math.sin(heading) * math.sin(ang_dist) * math.cos(lat1),
        math.cos(ang_dist) - math.sin(lat1) * math.sin(lat2),
    )

    lon_degrees = to_degrees(lon2)
    if not -180 <= lon_degrees <= 180:
        LOGGER.debug(
            'Projection from %s crossed the antimeridian; wrapping longitude %s',
            start, lon_degrees
        )
        lon_degrees = normalize_longitude(lon_degrees)

    return GeoPoint(lon_degrees, max(-90., min(90., to_degrees(lat2))))


def average_heading(path: Sequence['GeoPoint']) -> float:
    """
    Calculate the average heading of an object moving through a path of points.

    Each leg contributes its initial great-circle bearing, weighted by the leg's
    length, and the headings are averaged on the circle (so 350 and 10 average to
    0, not 180). Zero-length legs are ignored.

    Args:
        path:
            An ordered sequence of GeoPoints

    Returns:
        (float) the heading in [0, 360); 0.0 if the path never moves
    """
    sum_x = sum_y = 0.
    for start, end in zip(path, path[1:]):
        dist = haversine_distance(start, end)
        if dist == 0:
            continue

        heading = to_radians(initial_bearing_degrees(start, end))
        sum_x += dist * math.cos(heading)
        sum_y += dist * math.sin(heading)

    if sum_x == 0 and sum_y == 0:
        return 0.

    return normalize_heading(to_degrees(math.atan2(sum_y, sum_x)))
