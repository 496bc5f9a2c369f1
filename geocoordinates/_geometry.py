"""
Internal module defining geometric functions used by geocoordinates
"""
import math
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np
from numpy.linalg import norm

from geocoordinates._const import GEOMETRY_TOLERANCE
from geocoordinates._types import XY

if TYPE_CHECKING:  # pragma: no cover
    from geocoordinates.coordinates import GeoPoint

# Points at least this close to 90 degrees from a projection center are not projected
_MIN_PROJECTION_COS = 1e-6


def vector_cross_product(o: XY, a: XY, b: XY) -> float:
    """
    2D cross product of OA and OB vectors, i.e. z-component of their 3D cross product.

    Args:
        o: (XY)
            The origin point

        a: (XY)
            The A point, forming the OA vector

        b: (XY)
            The B point, forming the OB vector

    Returns:
        a positive value if OAB makes a counter-clockwise turn, negative for clockwise turn,
        and zero if the points are collinear.
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def ensure_edge_bounds(point1: 'GeoPoint', point2: 'GeoPoint') -> Tuple[XY, XY]:
    """
    Ensures edges (line segments from extending from point A to point B) are properly bounded,
    such that a line which crosses the antimeridian does not mathematically circumnavigate
    the globe.

    If the shortest path between the start and end points of an edge crosses the antimeridian,
    the end point's longitude is shifted by 360 degrees so it is no longer limited to
    [-180, 180], thereby allowing the meridian crossing to be calculated correctly.

    Args:
        point1:
            A GeoPoint representing the edge start

        point2:
            A GeoPoint representing the edge finish

    Returns:
        A tuple of unbounded (longitude, latitude) pairs
    """
    lon2 = point2.longitude
    if abs(point1.longitude - lon2) > 180:
        lon2 = lon2 - 360 if point1.longitude < 0 else lon2 + 360
    return (point1.longitude, point1.latitude), (lon2, point2.latitude)


def unwrap_ring(points: Sequence['GeoPoint'], reference_longitude: float) -> List[XY]:
    """
    Converts a ring to (longitude, latitude) pairs whose longitudes are continuous,
    i.e. no consecutive pair jumps across the antimeridian. The first point is
    shifted to lie within 180 degrees of the reference longitude and every following
    point within 180 degrees of its predecessor.

    Args:
        points:
            An ordered list of GeoPoints

        reference_longitude:
            The longitude the ring should be unwrapped around

    Returns:
        List of (longitude, latitude) pairs
    """
    out: List[XY] = []
    prev = reference_longitude
    for point in points:
        lon = point.longitude
        while lon - prev > 180:
            lon -= 360
        while prev - lon > 180:
            lon += 360
        out.append((lon, point.latitude))
        prev = lon
    return out


def gnomonic_projection(
    points: Sequence['GeoPoint'],
    center: XY,
) -> Optional[List[XY]]:
    """
    Projects points onto the plane tangent to the sphere at center, as seen from
    the center of the sphere. Great circles become straight lines, so a ring of
    great-circle edges becomes an ordinary planar polygon.

    Only the hemisphere facing the center can be projected.

    Args:
        points:
            A list of GeoPoints

        center:
            The (longitude, latitude) tangent point, in degrees

    Returns:
        List of (x, y) pairs in units of the sphere radius, or None if any point
        lies (nearly) 90 degrees or more from the center
    """
    lon0, lat0 = math.radians(center[0]), math.radians(center[1])
    sin_lat0, cos_lat0 = math.sin(lat0), math.cos(lat0)

    out: List[XY] = []
    for point in points:
        lat, d_lon = math.radians(point.latitude), math.radians(point.longitude) - lon0
        sin_lat, cos_lat = math.sin(lat), math.cos(lat)
        cos_c = sin_lat0 * sin_lat + cos_lat0 * cos_lat * math.cos(d_lon)
        if cos_c < _MIN_PROJECTION_COS:
            return None

        out.append((
            cos_lat * math.sin(d_lon) / cos_c,
            (cos_lat0 * sin_lat - sin_lat0 * cos_lat * math.cos(d_lon)) / cos_c
        ))
    return out


def mean_direction(points: Sequence['GeoPoint']) -> Optional[XY]:
    """
    The (longitude, latitude) of the normalized sum of the points' unit vectors.

    Args:
        points:
            A list of GeoPoints

    Returns:
        (longitude, latitude) in degrees, or None if the vectors cancel out
    """
    if not points:
        return None

    total = np.sum([point.xyz for point in points], axis=0)
    length = norm(total)
    if length < GEOMETRY_TOLERANCE:
        return None

    return xyz_to_lonlat(total / length)


def xyz_to_lonlat(xyz: Sequence[float]) -> XY:
    """Converts a unit vector [x,y,z] to (longitude, latitude) degrees"""
    z = max(-1., min(1., float(xyz[2])))
    return (
        math.degrees(math.atan2(float(xyz[1]), float(xyz[0]))),
        math.degrees(math.asin(z)),
    )


def spherical_moment(ring: Sequence['GeoPoint']) -> np.ndarray:
    """
    The first moment of area of a spherical polygon on the unit sphere,
    integral(r dA) = 1/2 * sum(theta_i * n_i), where theta_i is the angle subtended
    by edge i and n_i is the unit normal of its great circle.

    Counter-clockwise rings yield a vector pointing out through the polygon,
    clockwise rings the opposite.

    Args:
        ring:
            A closed list of GeoPoints (first == last)

    Returns:
        numpy array [x, y, z]
    """
    xyz = np.array([point.xyz for point in ring], dtype=float)
    starts, ends = xyz[:-1], xyz[1:]
    normals = np.cross(starts, ends)
    sines = norm(normals, axis=1)
    cosines = np.einsum('ij,ij->i', starts, ends)
    thetas = np.arctan2(sines, cosines)

    # Zero-length edges have no normal
    mask = sines > 0
    return 0.5 * np.sum(
        normals[mask] / sines[mask, None] * thetas[mask, None],
        axis=0
    )


def spherical_centroid(ring: Sequence['GeoPoint']) -> Optional[XY]:
    """
    The area-weighted centroid of a spherical polygon, i.e. the direction of its
    first moment of area. Winding order does not matter; the centroid is always
    taken on the side of the sphere the vertices are on.

    Args:
        ring:
            A closed list of GeoPoints (first == last)

    Returns:
        (longitude, latitude) in degrees, or None if the ring encloses no area
    """
    moment = spherical_moment(ring)
    xyz = np.array([point.xyz for point in ring[:-1]], dtype=float)
    cosines = np.einsum('ij,ij->i', xyz, np.roll(xyz, -1, axis=0))
    perimeter = float(np.sum(np.arccos(np.clip(cosines, -1, 1))))

    # Collinear or back-tracking rings leave only rounding noise behind
    magnitude = norm(moment)
    if magnitude <= GEOMETRY_TOLERANCE * max(perimeter, GEOMETRY_TOLERANCE):
        return None

    direction = moment / magnitude
    if np.dot(direction, xyz.sum(axis=0)) < 0:
        direction = -direction

    return xyz_to_lonlat(direction)


def is_point_on_segment(point: XY, start: XY, end: XY, tolerance: float = GEOMETRY_TOLERANCE) -> bool:
    """
    Tests whether a point falls on a line segment, within a tolerance.

    Args:
        point:
            The (x, y) point to test

        start:
            The segment start

        end:
            The segment end

        tolerance:
            The maximum distance from the segment still considered "on" it

    Returns:
        bool
    """
    seg_x, seg_y = end[0] - start[0], end[1] - start[1]
    seg_len = math.hypot(seg_x, seg_y)
    if seg_len == 0:
        return math.hypot(point[0] - start[0], point[1] - start[1]) <= tolerance

    if abs(vector_cross_product(start, end, point)) / seg_len > tolerance:
        # Too far from the line through start and end
        return False

    # Project onto the segment to make sure it falls between the endpoints
    dot = (point[0] - start[0]) * seg_x + (point[1] - start[1]) * seg_y
    return -tolerance * seg_len <= dot <= seg_len ** 2 + tolerance * seg_len


def point_in_ring(point: XY, ring: Sequence[XY], include_boundary: bool = True) -> bool:
    """
    Tests whether a point is in the polygon. From the point, draws
    a straight line along the x axis and determines how many sides
    of the polygon intersect with it. If there are an odd number of
    intersections, the point is in the polygon.

    Args:
        point:
            An (x, y) pair

        ring:
            A list of (x, y) pairs (self-closing) representing a linear ring

        include_boundary:
            Whether a point on a vertex or an edge counts as inside

    Returns:
        bool
    """
    inside = False
    for start, end in zip(ring, ring[1:]):
        if is_point_on_segment(point, start, end):
            return include_boundary

        if (start[1] > point[1]) != (end[1] > point[1]):
            x_intersection = (
                start[0] + (point[1] - start[1]) * (end[0] - start[0]) / (end[1] - start[1])
            )
            if point[0] < x_intersection:
                inside = not inside

    return inside


def _is_within_arc(
    point: np.ndarray,
    start: np.ndarray,
    end: np.ndarray,
    normal: np.ndarray,
    tolerance: float = 0.
) -> bool:
    """Whether a point on an arc's great circle falls between the arc's start and end"""
    return (
        np.dot(np.cross(start, point), normal) >= -tolerance and
        np.dot(np.cross(point, end), normal) >= -tolerance
    )


def is_point_on_arc(
    point: np.ndarray,
    start: np.ndarray,
    end: np.ndarray,
    tolerance: float = GEOMETRY_TOLERANCE
) -> bool:
    """
    Tests whether a point falls on the minor great-circle arc between two others,
    within a tolerance.

    Args:
        point:
            The unit vector [x, y, z] to test

        start:
            The arc start, as a unit vector

        end:
            The arc end, as a unit vector

        tolerance:
            The maximum angular distance (radians) from the arc still considered "on" it

    Returns:
        bool
    """
    normal = np.cross(start, end)
    length = norm(normal)
    if length <= tolerance:
        # Zero-length arc
        return bool(norm(point - start) <= tolerance)

    if abs(np.dot(point, normal)) > tolerance * length:
        # Off the arc's great circle
        return False

    return bool(_is_within_arc(point, start, end, normal, tolerance * length))


def arc_cap(start: np.ndarray, end: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    The smallest spherical cap containing a great-circle arc.

    Args:
        start:
            The arc start, as a unit vector

        end:
            The arc end, as a unit vector

    Returns:
        The cap's center (unit vector) and angular radius (radians)
    """
    middle = start + end
    length = norm(middle)
    if length <= GEOMETRY_TOLERANCE:
        # Antipodal endpoints; any great circle through them qualifies
        return start, math.pi

    return middle / length, 0.5 * math.atan2(norm(np.cross(start, end)), np.dot(start, end))


def do_caps_overlap(cap1: Tuple[np.ndarray, float], cap2: Tuple[np.ndarray, float]) -> bool:
    """
    Test whether two spherical caps overlap

    Args:
        cap1:
            A (center, angular radius) pair
        cap2:
            Another (center, angular radius) pair

    Returns:
        True if the caps overlap, False if not
    """
    (center1, radius1), (center2, radius2) = cap1, cap2
    separation = math.atan2(norm(np.cross(center1, center2)), np.dot(center1, center2))
    return separation <= radius1 + radius2 + GEOMETRY_TOLERANCE


def do_arcs_intersect(
    arc1: Tuple[np.ndarray, np.ndarray],
    arc2: Tuple[np.ndarray, np.ndarray]
) -> bool:
    """
    Tests whether two minor great-circle arcs share at least one point. Touching
    endpoints and overlapping arcs of the same great circle count as intersecting.

    Args:
        arc1:
            A 2-tuple of unit vectors

        arc2:
            A second 2-tuple of unit vectors

    Returns:
        bool
    """
    (a1, a2), (b1, b2) = arc1, arc2
    if (
        is_point_on_arc(b1, a1, a2) or is_point_on_arc(b2, a1, a2) or
        is_point_on_arc(a1, b1, b2) or is_point_on_arc(a2, b1, b2)
    ):
        return True

    normal1, normal2 = np.cross(a1, a2), np.cross(b1, b2)
    crossing = np.cross(normal1, normal2)
    length = norm(crossing)
    if length <= GEOMETRY_TOLERANCE * norm(normal1) * norm(normal2):
        # Same great circle, or a zero-length arc; shared points were caught above
        return False

    # The great circles meet at two antipodal points
    crossing = crossing / length
    return any(
        _is_within_arc(x, a1, a2, normal1) and _is_within_arc(x, b1, b2, normal2)
        for x in (crossing, -crossing)
    )


def do_edges_intersect(
    edges_a: Sequence[Tuple['GeoPoint', 'GeoPoint']],
    edges_b: Sequence[Tuple['GeoPoint', 'GeoPoint']],
) -> bool:
    """
    Tests whether two shape edges ever intersect, treating each edge as a great-circle
    arc. Edge pairs whose bounding caps do not overlap are skipped without computing
    an intersection.

    Args:
        edges_a:
            The list of edges (pairs of GeoPoints) from the first group/shape

        edges_b:
            The list of edges (pairs of GeoPoints) from the second group/shape

    Returns:
        bool
    """
    arcs_a = [(np.array(x.xyz), np.array(y.xyz)) for x, y in edges_a]
    arcs_b = [(np.array(x.xyz), np.array(y.xyz)) for x, y in edges_b]
    caps_b = [arc_cap(*arc) for arc in arcs_b]

    for arc_a in arcs_a:
        cap_a = arc_cap(*arc_a)
        for arc_b, cap_b in zip(arcs_b, caps_b):
            if do_caps_overlap(cap_a, cap_b) and do_arcs_intersect(arc_a, arc_b):
                return True

    return False
