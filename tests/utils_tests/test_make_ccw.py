from gon.base import Point
from hypothesis import given

from condec.hints import Polygon
from condec.utils import (make_ccw,
                          reverse,
                          signed_area,
                          to_counterclockwise)
from tests.strategies import (L_SHAPE,
                              counterclockwise_polygons,
                              polygons)


@given(polygons)
def test_orientation(polygon: Polygon) -> None:
    make_ccw(polygon)
    assert signed_area(polygon) > 0


@given(polygons)
def test_idempotence(polygon: Polygon) -> None:
    make_ccw(polygon)
    result = list(polygon)
    assert not make_ccw(polygon)
    assert polygon == result


@given(polygons)
def test_reversal(polygon: Polygon) -> None:
    is_clockwise = signed_area(polygon) < 0
    assert make_ccw(polygon) is is_clockwise


@given(polygons)
def test_non_mutating(polygon: Polygon) -> None:
    original = list(polygon)
    result = to_counterclockwise(polygon)
    assert polygon == original
    assert set(result) == set(original)
    assert signed_area(result) > 0


def test_clockwise() -> None:
    polygon = list(L_SHAPE)
    reverse(polygon)
    assert make_ccw(polygon)
    assert polygon == L_SHAPE


def test_degenerate() -> None:
    assert not make_ccw([])


@given(counterclockwise_polygons)
def test_counterclockwise(polygon: Polygon) -> None:
    original = list(polygon)
    assert not make_ccw(polygon)
    assert polygon == original


def test_duplicate_anchor() -> None:
    polygon = [Point(2, 2), Point(2, 0), Point(2, 0), Point(0, 0)]
    assert make_ccw(polygon)
    assert polygon == [Point(0, 0), Point(2, 0), Point(2, 0), Point(2, 2)]
    assert not make_ccw(polygon)
