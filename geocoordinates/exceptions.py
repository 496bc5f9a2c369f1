"""Exceptions raised by geocoordinates when a value fails validation"""

__all__ = ['InvalidArgumentError', 'NullArgumentError', 'OutOfRangeError']


class InvalidArgumentError(ValueError):
    """A value was malformed, e.g. an unclosed region or a too-short array"""


class OutOfRangeError(InvalidArgumentError):
    """A latitude or longitude fell outside its valid bounds"""


class NullArgumentError(InvalidArgumentError):
    """A required value was None"""
