"""Module for miscellaneous multi-use functions"""

__all__ = ['format_fixed', 'pairwise', 'round_half_up']

from typing import List, Sequence, Tuple, TypeVar

_T = TypeVar('_T')


def format_fixed(value: float, decimal_digits: int) -> str:
    """
    Formats a float with a fixed number of decimal places. Python's format
    mini-language ignores the host locale, so the separator is always '.'
    and no digit grouping is applied.

    Args:
        value:
            The float to format

        decimal_digits:
            The number of digits after the decimal point

    Returns:
        str
    """
    return f'{value:.{decimal_digits}f}'


def pairwise(items: Sequence[_T]) -> List[Tuple[_T, _T]]:
    """
    Pairs each item with its successor, e.g. the edges of a ring.

    Args:
        items:
            An ordered sequence

    Returns:
        List of 2-tuples; empty if fewer than two items
    """
    return list(zip(items, items[1:]))


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)
