import math
from functools import partial
from typing import (List,
                    Sequence,
                    TypeVar)

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.ops import unary_union

from condec.hints import (Point,
                          Polygon)
from condec.utils import (is_convex,
                          signed_area)
from tests.config import ABS_TOL

T = TypeVar('T')

is_close = partial(math.isclose,
                   abs_tol=ABS_TOL)


def rotate(sequence: List[T], index: int) -> List[T]:
    return sequence[index:] + sequence[:index]


def cyclic_equivalence(sequence: Sequence[T], other: Sequence[T]) -> bool:
    if len(sequence) != len(other):
        return False
    if not sequence:
        return True
    sequence = list(sequence)
    return any(rotate(sequence, index) == list(other)
               for index in range(len(sequence)))


def to_shapely(polygon: Sequence[Point]) -> ShapelyPolygon:
    return ShapelyPolygon([(float(vertex.x), float(vertex.y))
                          for vertex in polygon])


def is_partition(polygon: Polygon, parts: Sequence[Polygon]) -> bool:
    """
    Checks that convex parts cover the polygon without gaps
    and overlaps.
    """
    if not all(is_convex(part) for part in parts):
        return False
    parts_area = sum(signed_area(part) for part in parts)
    if not is_close(parts_area, signed_area(polygon)):
        return False
    union = unary_union([to_shapely(part) for part in parts])
    return is_close(union.symmetric_difference(to_shapely(polygon)).area, 0)
