"""
Closed polygonal regions on the earth's surface
"""

__all__ = ['GeoRegion']

from functools import cached_property
import math
import re
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from typing_extensions import Self

from geocoordinates._const import EARTH_RADIUS_METERS
from geocoordinates._geometry import (
    do_edges_intersect, ensure_edge_bounds, gnomonic_projection, mean_direction,
    point_in_ring, spherical_centroid, unwrap_ring
)
from geocoordinates._types import POINT_ARRAY, XY
from geocoordinates.calc import haversine_distance, to_radians
from geocoordinates.coordinates import GeoPoint
from geocoordinates.exceptions import InvalidArgumentError, NullArgumentError
from geocoordinates.utils.functions import pairwise
from geocoordinates.utils.logging import warn_once

_RE_NUMBER_STR = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'
_RE_COORD = re.compile(r'(' + _RE_NUMBER_STR + r')\s+(' + _RE_NUMBER_STR + r')')
_RE_POLYGON_WKT = re.compile(
    r'^\s*POLYGON\s*\(\s*\(([^()]*)\)\s*\)\s*$',
    flags=re.IGNORECASE
)

_OVERSIZED_WARNING = (
    'Region spans more than a hemisphere; containment falls back to planar tests '
    'on longitude/latitude. (this warning will not repeat)'
)


class GeoRegion:

    """
    A closed polygon, expressed as an ordered list of GeoPoints joined by great-circle
    edges. The final GeoPoint must equal the first one.

    GeoRegions are immutable and keep their own copy of the points. Use
    GeoRegion.empty() for the "no region" sentinel, which has no vertices.

    Args:
        *points:
            At least 3 GeoPoints, first and last being equal. Either pass the
            points individually or as a single iterable.

    Raises:
        NullArgumentError: if points is None
        InvalidArgumentError: if the ring is too short or not closed
    """

    EMPTY: 'GeoRegion'

    def __init__(self, *points: Union[GeoPoint, Iterable[GeoPoint]], _validate: bool = True):
        if len(points) == 1 and not isinstance(points[0], GeoPoint):
            # A single iterable of points
            if points[0] is None:
                raise NullArgumentError('points must not be None.')

            points = points[0]

        vertices = tuple(points)
        if _validate:
            if not all(isinstance(x, GeoPoint) for x in vertices):
                raise InvalidArgumentError('points must all be GeoPoints.')

            if len(vertices) < 3:
                raise InvalidArgumentError(
                    f'A region must contain at least 3 points; received {len(vertices)}.'
                )

            if vertices[0] != vertices[-1]:
                raise InvalidArgumentError('A region must start and finish on the same point.')

        self._vertices = vertices

    def __bool__(self):
        return bool(self._vertices)

    def __contains__(self, other: Union[GeoPoint, 'GeoRegion']):
        return self.contains(other)

    def __eq__(self, other):
        if not isinstance(other, GeoRegion):
            return False

        if len(self._vertices) != len(other._vertices):
            return False

        return all(x == y for x, y in zip(self._vertices, other._vertices))

    def __hash__(self):
        return hash(self._vertices)

    def __iter__(self) -> Iterator[GeoPoint]:
        return iter(self._vertices)

    def __len__(self):
        return len(self._vertices)

    def __repr__(self):
        if not self:
            return '<Empty GeoRegion>'

        return f'<GeoRegion of {len(self._vertices)} vertices>'

    @property
    def __geo_interface__(self):
        return {
            'type': 'Polygon',
            'coordinates': [[point.to_array() for point in self._vertices]] if self else [],
        }

    @cached_property
    def area(self) -> float:
        """
        The area of the region in square meters, using the spherical excess of each
        edge. Winding order does not affect the result.
        """
        area = 0.
        for point1, point2 in pairwise(self._vertices):
            # Edges crossing the antimeridian take the short way round
            (lon1, lat1), (lon2, lat2) = ensure_edge_bounds(point1, point2)
            area += to_radians(lon2 - lon1) * (
                2 + math.sin(to_radians(lat1)) + math.sin(to_radians(lat2))
            )

        return abs(area * EARTH_RADIUS_METERS ** 2 / 2)

    @cached_property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """
        The longitude and latitude min/max bounds of the region.

        Returns:
            (min_longitude, min_latitude, max_longitude, max_latitude), or None if empty
        """
        if not self:
            return None

        lons = [x.longitude for x in self._vertices]
        lats = [x.latitude for x in self._vertices]
        return min(lons), min(lats), max(lons), max(lats)

    @cached_property
    def center(self) -> Optional[GeoPoint]:
        """
        The middle of the region's bounding box. Cheaper than, and usually different
        from, the centroid.

        Returns:
            GeoPoint, or None if the region is empty
        """
        if not self:
            return None

        min_lon, min_lat, max_lon, max_lat = self.bounds
        return GeoPoint((max_lon - min_lon) / 2 + min_lon, (max_lat - min_lat) / 2 + min_lat)

    @cached_property
    def centroid(self) -> Optional[GeoPoint]:
        """
        The area-weighted centroid of the region on the sphere. Degenerate regions
        which enclose no area fall back to the center of the bounding box.

        Returns:
            GeoPoint, or None if the region is empty
        """
        if not self:
            return None

        centroid = spherical_centroid(self._vertices)
        if centroid is None:
            return self.center

        return GeoPoint(*centroid)

    @property
    def edges(self) -> List[Tuple[GeoPoint, GeoPoint]]:
        """The region's edges, as (start, end) pairs of GeoPoints"""
        return pairwise(self._vertices)

    @cached_property
    def perimeter(self) -> float:
        """The total length of the region's edges, in meters"""
        return sum(haversine_distance(x, y) for x, y in pairwise(self._vertices))

    @property
    def vertices(self) -> Tuple[GeoPoint, ...]:
        """The region's points, in order, including the closing point"""
        return self._vertices

    @cached_property
    def _projected_ring(self) -> Optional[Tuple[XY, List[XY]]]:
        """
        The ring projected onto the plane tangent to the sphere at the vertices' mean
        direction, along with that tangent point. None if some vertex is too far
        from the tangent point to project.
        """
        center = mean_direction(self._vertices[:-1])
        if center is None:
            return None

        ring = gnomonic_projection(self._vertices, center)
        if ring is None:
            return None

        return center, ring

    @classmethod
    def empty(cls) -> 'GeoRegion':
        """The region with no vertices"""
        return cls.EMPTY

    def contains(self, other: Union[GeoPoint, 'GeoRegion']) -> bool:
        """
        Test whether a point or a region is contained within this region.

        Args:
            other:
                A GeoPoint or GeoRegion

        Raises:
            InvalidArgumentError: if other is neither a GeoPoint nor a GeoRegion

        Returns:
            bool
        """
        if isinstance(other, GeoRegion):
            return self.contains_region(other)

        if isinstance(other, GeoPoint):
            return self.contains_point(other)

        raise InvalidArgumentError(
            f'Expected a GeoPoint or GeoRegion; received {type(other).__name__}.'
        )

    def contains_point(self, point: GeoPoint) -> bool:
        """
        Test whether a point falls within this region. Points lying exactly on a
        vertex or an edge are contained.

        Args:
            point:
                A GeoPoint

        Returns:
            bool
        """
        if not self:
            return False

        if self._projected_ring is None:
            warn_once(_OVERSIZED_WARNING)
            ring = unwrap_ring(self._vertices, self._vertices[0].longitude)
            min_lon = min(x for x, _ in ring)
            # Shift the point onto the ring's continuous longitude range
            return point_in_ring(
                (min_lon + (point.longitude - min_lon) % 360, point.latitude),
                ring
            )

        center, ring = self._projected_ring
        projected = gnomonic_projection([point], center)
        if projected is None:
            # On the far side of the globe from this region
            return False

        return point_in_ring(projected[0], ring)

    def contains_region(self, region: 'GeoRegion') -> bool:
        """
        Test whether every vertex of another region falls within this one.

        Edges of the other region are not checked, so a region whose vertices are
        all inside but whose edges pass outside this one (e.g. around a concave
        notch) is still reported as contained. The empty region is contained in
        every region.

        Args:
            region:
                A GeoRegion

        Returns:
            bool
        """
        return all(self.contains_point(x) for x in region.vertices)

    def intersects(self, region: 'GeoRegion') -> bool:
        """
        Test whether this region and another share any point, whether along
        their boundaries or in their interiors.

        Edges are compared as great-circle arcs, so the two regions need not fit
        in a common projection.

        Args:
            region:
                A GeoRegion

        Returns:
            bool
        """
        if not isinstance(region, GeoRegion):
            raise InvalidArgumentError(f'Expected a GeoRegion; received {type(region).__name__}.')

        if not (self and region):
            return False

        if do_edges_intersect(self.edges, region.edges):
            # At least one edge pair intersects
            return True

        # If no edges intersect, one region could still contain the other
        return self.contains_point(region.vertices[0]) or region.contains_point(self._vertices[0])

    @classmethod
    def from_arrays(cls, coordinates: Optional[Sequence[POINT_ARRAY]]) -> Self:
        """
        Creates a region from a list of [longitude, latitude] pairs.

        Args:
            coordinates:
                A list of [longitude, latitude] sequences, first and last equal

        Returns:
            GeoRegion
        """
        if coordinates is None:
            raise NullArgumentError('coordinates must not be None.')

        return cls([GeoPoint.from_array(x) for x in coordinates])

    @classmethod
    def from_wkt(cls, wkt_str: str) -> Self:
        """Create a GeoRegion from a wkt string, e.g. 'POLYGON((0 0, 1 0, 1 1, 0 0))'"""
        _match = _RE_POLYGON_WKT.match(wkt_str)
        if not _match:
            raise ValueError(f'Invalid WKT Polygon: {wkt_str}')

        return cls([GeoPoint(lon, lat) for lon, lat in _RE_COORD.findall(_match.group(1))])

    def to_arrays(self) -> List[List[float]]:
        """Converts the region to a list of [longitude, latitude] pairs"""
        return [x.to_array() for x in self._vertices]

    def to_wkt(self) -> str:
        """Converts the region to its WKT string representation"""
        if not self:
            return 'POLYGON EMPTY'

        coords = ', '.join(f'{x.longitude} {x.latitude}' for x in self._vertices)
        return f'POLYGON(({coords}))'


GeoRegion.EMPTY = GeoRegion(_validate=False)
