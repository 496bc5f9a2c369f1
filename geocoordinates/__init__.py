
from geocoordinates._version import __version__  # noqa: F401
from geocoordinates.utils.logging import LOGGER
from geocoordinates.exceptions import InvalidArgumentError, NullArgumentError, OutOfRangeError
from geocoordinates.vectors import GeoVector
from geocoordinates.coordinates import GeoPoint
from geocoordinates.regions import GeoRegion

__all__ = [
    'GeoPoint',
    'GeoRegion',
    'GeoVector',
    'InvalidArgumentError',
    'NullArgumentError',
    'OutOfRangeError',
    'LOGGER',
]
