"""Module for miscellaneous multi-use functions"""

__all__ = ['to_bytes']

from typing import Type, Union

from geocodec.exceptions import GeoCodecError


def to_bytes(value: Union[str, bytes, bytearray], error: Type[GeoCodecError]) -> bytes:
    """
    Converts an encoded geohash/quadkey to the bytes of its UTF-8 representation.

    Args:
        value:
            The string, bytes or bytearray to convert

        error:
            The GeoCodecError subclass raised when a string cannot be encoded,
            e.g. because it contains a lone surrogate

    Returns:
        bytes
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)

    try:
        return value.encode('utf-8')
    except UnicodeEncodeError as exc:
        raise error(f'invalid character in {value!r}') from exc
