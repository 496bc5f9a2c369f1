
from geocoordinates.utils.functions import *


def test_format_fixed():
    assert format_fixed(-43.212681212, 7) == '-43.2126812'
    assert format_fixed(-22.951911, 7) == '-22.9519110'
    assert format_fixed(-22.951911, 3) == '-22.952'
    assert format_fixed(1234567.5, 1) == '1234567.5'


def test_pairwise():
    assert pairwise([1, 2, 3]) == [(1, 2), (2, 3)]
    assert pairwise([1]) == []
    assert pairwise([]) == []


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.5
    assert round_half_up(-1.65, 1) == -1.6
