"""Logging utility for geocoordinates"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geocoordinates')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str, *args):
    """
    Logs a warning the first time a given message is seen; repeats are dropped.

    Args:
        warning:
            The message, optionally with %-style placeholders

        *args:
            Values for the placeholders. The formatted message is what gets
            deduplicated.
    """
    msg = warning % args if args else warning
    if msg not in _WARNINGS:
        LOGGER.warning(msg)
        _WARNINGS.add(msg)
