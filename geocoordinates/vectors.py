"""
Representation of a displacement across the earth's surface
"""

__all__ = ['GeoVector']

from pydantic import validate_call

from geocoordinates.calc import normalize_heading


class GeoVector:
    """
    A distance travelled along a great circle at an initial heading.

    Scaling a GeoVector (multiplication/division by a number) changes its distance
    and leaves its heading alone. Adding or subtracting two GeoVectors does NOT
    compose them: the result is always the left-hand vector, unchanged.

    Add a GeoVector to a GeoPoint to project the point; subtract two GeoPoints to
    get the GeoVector between them.

    Args:
        distance:
            The distance, in meters

        heading:
            The initial heading, in degrees clockwise from North. Not normalized.
    """

    ZERO: 'GeoVector'

    @validate_call
    def __init__(self, distance: float, heading: float):
        self._distance = distance
        self._heading = heading

    def __add__(self, other):
        if not isinstance(other, GeoVector):
            # Lets GeoPoint.__radd__ handle vector + point
            return NotImplemented

        return self

    def __eq__(self, other):
        if not isinstance(other, GeoVector):
            return False

        return self.distance == other.distance and self.heading == other.heading

    def __hash__(self):
        return hash((self.distance, self.heading))

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented

        return GeoVector(self.distance * other, self.heading)

    __rmul__ = __mul__

    def __neg__(self):
        return GeoVector(self.distance, normalize_heading(self.heading + 180))

    def __repr__(self):
        return f'<GeoVector({self.distance} m at {self.heading}°)>'

    def __sub__(self, other):
        if not isinstance(other, GeoVector):
            return NotImplemented

        return self + other * -1

    def __truediv__(self, other):
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented

        return GeoVector(self.distance / other, self.heading)

    @property
    def distance(self) -> float:
        """The distance travelled, in meters"""
        return self._distance

    @property
    def heading(self) -> float:
        """The initial heading, in degrees clockwise from North"""
        return self._heading

    def scale(self, factor: float) -> 'GeoVector':
        """Equivalent to `vector * factor`"""
        return self * factor


GeoVector.ZERO = GeoVector(0., 0.)
