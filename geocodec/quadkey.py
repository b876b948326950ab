"""
Module for quadkey encoding and decoding over the Web Mercator tile pyramid
"""

__all__ = [
    'clip', 'decode', 'encode', 'latlon_to_pixel', 'map_size', 'pixel_to_latlon',
    'pixel_to_tile', 'quadkey_to_tile', 'tile_to_pixel', 'tile_to_quadkey',
]

import math
from typing import Optional, Tuple, Union

from geocodec._const import (
    MERCATOR_MAX_LATITUDE, MERCATOR_MAX_LONGITUDE, MERCATOR_MIN_LATITUDE,
    MERCATOR_MIN_LONGITUDE, QUADKEY_ALPHABET, QUADKEY_DEFAULT_LEVEL,
    QUADKEY_MAX_LEVEL, RAD, TILE_SIZE
)
from geocodec.coordinates import LatLon
from geocodec.exceptions import IllegalSequenceError, InvalidLengthError, OutOfRangeError
from geocodec.utils.functions import to_bytes
from geocodec.utils.logging import warn_once


# Byte value -> (tile x bit, tile y bit); None marks bytes that aren't quadkey digits
_DIGIT_BITS: Tuple[Optional[Tuple[int, int]], ...] = tuple(
    (
        (QUADKEY_ALPHABET.index(chr(x)) & 1, QUADKEY_ALPHABET.index(chr(x)) >> 1)
        if chr(x) in QUADKEY_ALPHABET else None
    )
    for x in range(256)
)


def clip(n: float, min_value: float, max_value: float) -> float:
    """
    Clips a number to the specified minimum and maximum values. NaN is treated
    as missing and clips to the minimum.
    """
    if math.isnan(n):
        return min_value

    return min(max(n, min_value), max_value)


def map_size(level: int) -> int:
    """
    Determines the map width and height (in pixels) at a specified level of detail.

    Args:
        level:
            Level of detail, from 0 to 23

    Returns:
        The map width and height in pixels
    """
    return TILE_SIZE << level


def latlon_to_pixel(lat: float, lon: float, level: int) -> Tuple[int, int]:
    """
    Converts a point from latitude/longitude WGS-84 coordinates (in degrees)
    into pixel XY coordinates at a specified level of detail.

    Latitudes beyond the Mercator limits (about +/-85.05 degrees) are clipped.

    Args:
        lat:
            Latitude of the point, in degrees

        lon:
            Longitude of the point, in degrees

        level:
            Level of detail, from 1 to 23

    Returns:
        pixel x, pixel y
    """
    if not MERCATOR_MIN_LATITUDE <= lat <= MERCATOR_MAX_LATITUDE:
        warn_once(
            'Latitudes beyond the Web Mercator limits are clipped to '
            f'+/-{MERCATOR_MAX_LATITUDE}. (this warning will not repeat)'
        )

    lat = clip(lat, MERCATOR_MIN_LATITUDE, MERCATOR_MAX_LATITUDE)
    lon = clip(lon, MERCATOR_MIN_LONGITUDE, MERCATOR_MAX_LONGITUDE)

    x = (lon + 180) / 360
    sin_lat = math.sin(lat * RAD)
    y = 0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)
    size = map_size(level)

    return (
        int(clip(x * size + 0.5, 0, size - 1)),
        int(clip(y * size + 0.5, 0, size - 1)),
    )


def pixel_to_latlon(pixel_x: int, pixel_y: int, level: int) -> LatLon:
    """
    Converts a pixel from pixel XY coordinates at a specified level of detail
    into latitude/longitude WGS-84 coordinates (in degrees).

    Args:
        pixel_x:
            X coordinate of the point, in pixels

        pixel_y:
            Y coordinate of the point, in pixels

        level:
            Level of detail, from 1 to 23

    Returns:
        LatLon
    """
    size = map_size(level)
    x = (clip(pixel_x, 0, size - 1) / size) - 0.5
    y = 0.5 - (clip(pixel_y, 0, size - 1) / size)

    return LatLon(
        90 - 360 * math.atan(math.exp(-y * 2 * math.pi)) / math.pi,
        360 * x,
    )


def pixel_to_tile(pixel_x: int, pixel_y: int) -> Tuple[int, int]:
    """Converts pixel XY coordinates into the XY coordinates of the tile containing it."""
    return pixel_x // TILE_SIZE, pixel_y // TILE_SIZE


def tile_to_pixel(tile_x: int, tile_y: int) -> Tuple[int, int]:
    """Converts tile XY coordinates into the XY coordinates of its upper-left pixel."""
    return tile_x * TILE_SIZE, tile_y * TILE_SIZE


def tile_to_quadkey(tile_x: int, tile_y: int, level: int) -> str:
    """
    Converts tile XY coordinates into a quadkey at a specified level of detail.

    Args:
        tile_x:
            Tile X coordinate

        tile_y:
            Tile Y coordinate

        level:
            Level of detail; the quadkey will be this many digits long

    Returns:
        (str) the quadkey, most significant digit first
    """
    quadkey = ''
    for i in range(level, 0, -1):
        mask = 1 << (i - 1)
        digit = 0
        if tile_x & mask:
            digit += 1
        if tile_y & mask:
            digit += 2
        quadkey += QUADKEY_ALPHABET[digit]

    return quadkey


def quadkey_to_tile(quadkey: Union[str, bytes, bytearray]) -> Tuple[int, int, int]:
    """
    Converts a quadkey into tile XY coordinates.

    Args:
        quadkey:
            A quadkey

    Returns:
        tile x, tile y, level of detail

    Raises:
        IllegalSequenceError if the quadkey contains anything other than '0'-'3'
    """
    code = to_bytes(quadkey, IllegalSequenceError)
    level = len(code)
    tile_x = tile_y = 0

    for position, byte in enumerate(code):
        bits = _DIGIT_BITS[byte]
        if bits is None:
            raise IllegalSequenceError(f'invalid quadkey digit: {chr(byte)!r}')

        mask = 1 << (level - position - 1)
        if bits[0]:
            tile_x |= mask
        if bits[1]:
            tile_y |= mask

    return tile_x, tile_y, level


def encode(lat: float, lon: float, level: int = QUADKEY_DEFAULT_LEVEL) -> str:
    """
    Find the quadkey of the tile in which a lat/lon point falls.

    Args:
        lat:
            The latitude, in degrees

        lon:
            The longitude, in degrees

        level: (Default 23)
            The level of detail, from 1 to 23

    Returns:
        (str) a quadkey with exactly `level` digits
    """
    if not 1 <= level <= QUADKEY_MAX_LEVEL:
        raise OutOfRangeError(
            f'Quadkey level must be between 1 and {QUADKEY_MAX_LEVEL}, got {level}'
        )

    pixel_x, pixel_y = latlon_to_pixel(lat, lon, level)
    tile_x, tile_y = pixel_to_tile(pixel_x, pixel_y)
    return tile_to_quadkey(tile_x, tile_y, level)


def decode(quadkey: Union[str, bytes, bytearray]) -> LatLon:
    """
    Converts a quadkey into the lat/lon of its tile's upper-left corner.

    Args:
        quadkey:
            A quadkey, 1 to 23 digits long

    Returns:
        LatLon
    """
    code = to_bytes(quadkey, IllegalSequenceError)
    if not 1 <= len(code) <= QUADKEY_MAX_LEVEL:
        raise InvalidLengthError(
            f'Quadkey length must be between 1 and {QUADKEY_MAX_LEVEL}, got {len(code)}'
        )

    tile_x, tile_y, level = quadkey_to_tile(code)
    pixel_x, pixel_y = tile_to_pixel(tile_x, tile_y)
    return pixel_to_latlon(pixel_x, pixel_y, level)
