"""
Module for base-32 geohash encoding and decoding
"""

__all__ = ['bounds', 'decode', 'decode_exactly', 'encode']

from typing import List, Tuple, Union

from geocodec._const import GEOHASH_ALPHABET, GEOHASH_MAX_PRECISION
from geocodec.coordinates import LatLon, is_valid_latlon
from geocodec.exceptions import InvalidLengthError, InvalidSymbolError, OutOfRangeError
from geocodec.utils.functions import to_bytes


_BITS = (16, 8, 4, 2, 1)

# Byte value -> 5-bit value; -1 marks bytes outside the alphabet.
# Upper case letters decode the same as their lower case counterparts.
_INVERSE: Tuple[int, ...] = tuple(
    GEOHASH_ALPHABET.find(chr(x).lower()) for x in range(256)
)


def _bisect(geohash: Union[str, bytes, bytearray]) -> Tuple[List[float], List[float]]:
    """
    Narrows the latitude and longitude intervals according to each bit of
    the geohash.

    Args:
        geohash:
            A base-32 geohash, 1 to 16 characters long

    Returns:
        The final latitude interval and longitude interval
    """
    code = to_bytes(geohash, InvalidSymbolError)
    if not 1 <= len(code) <= GEOHASH_MAX_PRECISION:
        raise InvalidLengthError(
            f'Geohash length must be between 1 and {GEOHASH_MAX_PRECISION}, '
            f'got {len(code)}'
        )

    lat_interval = [-90., 90.]
    lon_interval = [-180., 180.]
    lon_component = True

    for byte in code:
        character_decoded = _INVERSE[byte]
        if character_decoded < 0:
            raise InvalidSymbolError(f'invalid character in geohash: {chr(byte)!r}')

        for mask in _BITS:
            interval = lon_interval if lon_component else lat_interval
            mid = (interval[0] + interval[1]) / 2
            if character_decoded & mask:
                interval[0] = mid
            else:
                interval[1] = mid
            lon_component = not lon_component

    return lat_interval, lon_interval


def encode(lat: float, lon: float, precision: int) -> str:
    """
    Find the geohash of a given length in which a lat/lon point falls.

    Unlike GeoPoint, the range check here is inclusive; the poles and the
    antimeridian itself are encodable.

    Args:
        lat:
            The latitude, within [-90, 90]

        lon:
            The longitude, within [-180, 180]

        precision:
            The length of the geohash, from 1 to 16

    Return:
        (str) the geohash in which the point falls
    """
    if not 1 <= precision <= GEOHASH_MAX_PRECISION:
        raise OutOfRangeError(
            f'Geohash precision must be between 1 and {GEOHASH_MAX_PRECISION}, '
            f'got {precision}'
        )

    if not is_valid_latlon(lat, lon, inclusive=True):
        raise OutOfRangeError(
            f'Coordinate out of range: latitude {lat} must be within [-90, 90] '
            f'and longitude {lon} within [-180, 180]'
        )

    geohash = ''
    lat_interval = [-90., 90.]
    lon_interval = [-180., 180.]
    character, bit = 0, 0
    lon_component = True

    while len(geohash) < precision:
        if lon_component:
            interval, value = lon_interval, lon
        else:
            interval, value = lat_interval, lat

        mid = (interval[0] + interval[1]) / 2
        if value >= mid:
            character |= _BITS[bit]
            interval[0] = mid
        else:
            interval[1] = mid

        if bit < len(_BITS) - 1:
            bit += 1
        else:
            geohash += GEOHASH_ALPHABET[character]
            character, bit = 0, 0

        lon_component = not lon_component

    return geohash


def decode(geohash: Union[str, bytes, bytearray]) -> LatLon:
    """
    Converts a geohash into the center of its cell. Decoding is case-insensitive.

    Args:
        geohash:
            A base-32 geohash, 1 to 16 characters long

    Returns:
        LatLon of the cell center
    """
    lat_interval, lon_interval = _bisect(geohash)
    return LatLon(
        (lat_interval[0] + lat_interval[1]) / 2,
        (lon_interval[0] + lon_interval[1]) / 2,
    )


def decode_exactly(geohash: Union[str, bytes, bytearray]) -> Tuple[float, float, float, float]:
    """
    Converts a geohash into the center lat/lon with corresponding error margins

    Args:
        geohash:
            A base-32 geohash, 1 to 16 characters long

    Returns:
        latitude, longitude, latitude_error, longitude_error
    """
    lat_interval, lon_interval = _bisect(geohash)
    lat_error = (lat_interval[1] - lat_interval[0]) / 2
    lon_error = (lon_interval[1] - lon_interval[0]) / 2

    return (
        (lat_interval[0] + lat_interval[1]) / 2,
        (lon_interval[0] + lon_interval[1]) / 2,
        lat_error,
        lon_error,
    )


def bounds(geohash: Union[str, bytes, bytearray]) -> Tuple[float, float, float, float]:
    """
    Returns the rectangle covered by a geohash.

    Returns:
        south, west, north, east
    """
    lat_interval, lon_interval = _bisect(geohash)
    return lat_interval[0], lon_interval[0], lat_interval[1], lon_interval[1]
