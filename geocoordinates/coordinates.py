"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from functools import cached_property
import math
import re
from typing import Any, List, Optional, Tuple

from pydantic import NonNegativeInt, validate_call
from typing_extensions import Self

from geocoordinates._const import DEFAULT_DECIMAL_DIGITS, EPSILON, EXACT_HASH_MAGNITUDE
from geocoordinates._types import DMS, NUMBER, POINT_ARRAY
from geocoordinates.calc import (
    bearing_degrees, destination_point, haversine_distance, initial_bearing_degrees
)
from geocoordinates.exceptions import InvalidArgumentError, NullArgumentError, OutOfRangeError
from geocoordinates.utils.functions import format_fixed, round_half_up
from geocoordinates.vectors import GeoVector

_RE_NUMBER_STR = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'
_RE_POINT_WKT = re.compile(
    r'^\s*POINT\s*\(\s*(' + _RE_NUMBER_STR + r')\s+(' + _RE_NUMBER_STR + r')\s*\)\s*$',
    flags=re.IGNORECASE
)


def _to_float(value: Any, name: str) -> float:
    """Coerces a coordinate to float, translating failures into geocoordinates errors"""
    if value is None:
        raise NullArgumentError(f'{name} must not be None.')

    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f'{name} must be numeric, not {value!r}.') from exc


class GeoPoint:
    """
    Representation of a point on the globe (i.e., a lon/lat pair), in degrees.

    GeoPoints are immutable. Two points are equal when both their longitudes and
    latitudes differ by less than machine epsilon.

    Args:
        longitude:
            Longitude (λ), ranging from -180 to 180

        latitude:
            Latitude (φ), ranging from -90 to 90

    Raises:
        OutOfRangeError: if either coordinate is outside its range
        NullArgumentError: if either coordinate is None
    """

    ZERO: 'GeoPoint'

    def __init__(self, longitude: NUMBER, latitude: NUMBER):
        lon, lat = _to_float(longitude, 'longitude'), _to_float(latitude, 'latitude')

        # Comparisons against NaN are always False, so NaN is rejected too
        if not -90 <= lat <= 90:
            raise OutOfRangeError(f'Latitude must be between -90 and +90; received {lat}.')

        if not -180 <= lon <= 180:
            raise OutOfRangeError(f'Longitude must be between -180 and +180; received {lon}.')

        self._longitude = lon
        self._latitude = lat

    def __add__(self, other):
        if not isinstance(other, GeoVector):
            return NotImplemented

        return destination_point(self, other.heading, other.distance)

    __radd__ = __add__

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            abs(self.latitude - other.latitude) < EPSILON and
            abs(self.longitude - other.longitude) < EPSILON
        )

    def __hash__(self):
        # Beyond this magnitude adjacent floats are more than EPSILON apart, so
        # equal coordinates are identical; anything smaller hashes alike
        return hash(tuple(
            x if abs(x) >= EXACT_HASH_MAGNITUDE else 0.
            for x in (self.longitude, self.latitude)
        ))

    def __repr__(self):
        return f'<GeoPoint({self.longitude}, {self.latitude})>'

    def __str__(self):
        return self.to_string()

    def __sub__(self, other):
        if isinstance(other, GeoVector):
            return self + (-other)

        if not isinstance(other, GeoPoint):
            return NotImplemented

        # The vector travelling from the right-hand point to this one
        return GeoVector(
            haversine_distance(other, self),
            initial_bearing_degrees(other, self)
        )

    @property
    def __geo_interface__(self):
        return {
            'type': 'Point',
            'coordinates': self.to_array(),
        }

    @property
    def latitude(self) -> float:
        """Latitude (φ) in degrees, ranging from -90 to 90"""
        return self._latitude

    @property
    def longitude(self) -> float:
        """Longitude (λ) in degrees, ranging from -180 to 180"""
        return self._longitude

    @cached_property
    def xyz(self) -> List[float]:
        """Converts lat/lon to unit coordinates [x,y,z]"""
        r_lat = math.radians(self.latitude)
        r_lon = math.radians(self.longitude)
        return [
            math.cos(r_lat) * math.cos(r_lon),
            math.cos(r_lat) * math.sin(r_lon),
            math.sin(r_lat)
        ]

    @classmethod
    def zero(cls) -> 'GeoPoint':
        """The 0, 0 point"""
        return cls.ZERO

    def add(self, vector: GeoVector) -> 'GeoPoint':
        """
        Projects this point along a great circle, returning the point reached after
        travelling vector.distance meters at an initial heading of vector.heading.

        Equivalent to `point + vector`.

        Args:
            vector:
                The GeoVector to travel along

        Returns:
            GeoPoint
        """
        return self + vector

    def bearing_to(self, other: 'GeoPoint') -> float:
        """
        The bearing from this point to another, in [0, 360). See
        geocoordinates.calc.bearing_degrees.
        """
        return bearing_degrees(self, other)

    def distance_to(self, other: 'GeoPoint') -> float:
        """The great-circle distance from this point to another, in meters"""
        return haversine_distance(self, other)

    def initial_bearing_to(self, other: 'GeoPoint') -> float:
        """The initial great-circle bearing from this point to another, in [0, 360)"""
        return initial_bearing_degrees(self, other)

    def subtract(self, other: 'GeoPoint') -> GeoVector:
        """
        Calculates the GeoVector travelling from other to this point.

        Equivalent to `self - other`, such that `other + (self - other) == self`.

        Args:
            other:
                The starting GeoPoint

        Returns:
            GeoVector
        """
        return self - other

    @classmethod
    def from_array(cls, coordinates: Optional[POINT_ARRAY]) -> Self:
        """
        Creates a GeoPoint from a [longitude, latitude] sequence. Any additional
        elements are ignored.

        Args:
            coordinates:
                A sequence of at least two numbers

        Raises:
            NullArgumentError: if coordinates is None
            InvalidArgumentError: if fewer than two values are present

        Returns:
            GeoPoint
        """
        if coordinates is None:
            raise NullArgumentError('coordinates must not be None.')

        values = list(coordinates)
        if len(values) < 2:
            raise InvalidArgumentError(
                f'coordinates must contain two elements; received {len(values)}.'
            )

        return cls(values[0], values[1])

    @classmethod
    def from_dms(cls, lon: DMS, lat: DMS) -> Self:
        """
        Creates a GeoPoint from a Degree Minutes Seconds (lon, lat) pair.

        The quadrant value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude)

        Args:
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            GeoPoint
        """
        def convert(dms: DMS):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lon), convert(lat))

    @classmethod
    def from_wkt(cls, wkt_str: str) -> Self:
        """Create a GeoPoint from a wkt string, e.g. 'POINT(1.0 2.0)'"""
        _match = _RE_POINT_WKT.match(wkt_str)
        if not _match:
            raise ValueError(f'Invalid WKT Point: {wkt_str}')

        return cls(_match.group(1), _match.group(2))

    def to_array(self) -> List[float]:
        """Converts the point to a [longitude, latitude] list"""
        return [self.longitude, self.latitude]

    def to_dms(self) -> Tuple[DMS, DMS]:
        """
        Convert the longitude and latitude in decimal degrees to tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), (...))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
        )

    @validate_call
    def to_string(self, decimal_digits: NonNegativeInt = DEFAULT_DECIMAL_DIGITS) -> str:
        """
        Renders the point as "longitude,latitude", each with a fixed number of
        decimal places. The output does not depend on the host locale.

        Args:
            decimal_digits: (Default 7)
                The number of digits after the decimal point

        Returns:
            str
        """
        return (
            f'{format_fixed(self.longitude, decimal_digits)},'
            f'{format_fixed(self.latitude, decimal_digits)}'
        )

    def to_wkt(self) -> str:
        """Converts the point to its WKT string representation"""
        return f'POINT({self.longitude} {self.latitude})'


GeoPoint.ZERO = GeoPoint(0., 0.)
