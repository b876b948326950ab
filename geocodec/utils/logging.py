"""
Logging for geocodec

All modules log through LOGGER ('geocodec'), which writes WARNING and above to
stderr. Codec operations report problems by raising GeoCodecError subclasses;
the logger only carries advisories about input that was silently adjusted,
such as a quadkey latitude clamped to the Web Mercator limits.
"""

__all__ = ['LOGGER', 'reset_warnings', 'warn_once']

import logging

LOGGER = logging.getLogger('geocodec')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

# Advisories already emitted this process
_WARNINGS = set()


def warn_once(warning: str):
    """
    Logs a warning the first time a given message is seen, so that advisories
    raised from inside per-point loops (e.g. encoding many quadkeys) don't
    flood the log.

    Args:
        warning:
            The message to log
    """
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def reset_warnings():
    """Forgets every advisory logged so far, so each will be logged once more."""
    _WARNINGS.clear()
