"""
Exception declarations for geocodec

Every exception carries an ErrorKind so that callers can classify a failure
without parsing its message.
"""

__all__ = [
    'ErrorKind', 'GeoCodecError', 'IllegalSequenceError', 'InvalidLengthError',
    'InvalidSymbolError', 'OutOfRangeError',
]

from enum import Enum


class ErrorKind(Enum):
    """The classes of invalid input recognized by geocodec"""
    OUT_OF_RANGE = 'out_of_range'
    INVALID_LENGTH = 'invalid_length'
    INVALID_SYMBOL = 'invalid_symbol'
    ILLEGAL_SEQUENCE = 'illegal_sequence'


class GeoCodecError(ValueError):
    """Base class for all geocodec errors"""
    kind: ErrorKind


class OutOfRangeError(GeoCodecError):
    """
    A latitude/longitude outside its valid interval, or a geohash precision
    or quadkey level outside its accepted range.
    """
    kind = ErrorKind.OUT_OF_RANGE


class InvalidLengthError(OutOfRangeError):
    """A geohash or quadkey string whose length is outside the accepted range."""
    kind = ErrorKind.INVALID_LENGTH


class InvalidSymbolError(GeoCodecError):
    """A geohash character that is not part of the base-32 alphabet."""
    kind = ErrorKind.INVALID_SYMBOL


class IllegalSequenceError(GeoCodecError):
    """A quadkey character outside of '0'-'3'."""
    kind = ErrorKind.ILLEGAL_SEQUENCE
