from geocodec._version import __version__  # noqa: F401
from geocodec.utils.logging import LOGGER
from geocodec.coordinates import GeoPoint, LatLon, make_point
from geocodec.datum import to_tokyo_datum
from geocodec.exceptions import (
    ErrorKind, GeoCodecError, IllegalSequenceError, InvalidLengthError,
    InvalidSymbolError, OutOfRangeError
)
from geocodec.geodesic import GeodesicRay, distance, new_ray

__all__ = [
    'ErrorKind',
    'GeoCodecError',
    'GeoPoint',
    'GeodesicRay',
    'IllegalSequenceError',
    'InvalidLengthError',
    'InvalidSymbolError',
    'LatLon',
    'OutOfRangeError',
    'distance',
    'make_point',
    'new_ray',
    'to_tokyo_datum',
    'LOGGER',
]
