from gon.base import Point
from hypothesis import given

from condec.hints import Polygon
from condec.utils import is_simple
from tests.strategies import (U_SHAPE,
                              convex_polygons,
                              polygons)


@given(polygons)
def test_simple(polygon: Polygon) -> None:
    assert is_simple(polygon)


@given(convex_polygons)
def test_convex(polygon: Polygon) -> None:
    assert is_simple(polygon)


def test_bowtie() -> None:
    polygon = [Point(0, 0), Point(1, 1), Point(1, 0), Point(0, 1)]
    assert not is_simple(polygon)


def test_closing_edge() -> None:
    polygon = [Point(0, 0), Point(2, 0), Point(2, 2), Point(1, 2),
               Point(3, 2.5)]
    assert not is_simple(polygon)


def test_concave() -> None:
    assert is_simple(U_SHAPE)
