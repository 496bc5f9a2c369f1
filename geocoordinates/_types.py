from typing import Sequence, Tuple, Union


NUMBER = Union[float, int, str]
DMS = Tuple[int, int, float, str]
POINT_ARRAY = Sequence[float]
XY = Tuple[float, float]
