from fractions import Fraction
from math import (acos,
                  hypot)
from typing import Optional

from condec.hints import (Line,
                          Point)


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """
    Returns doubled signed area of the triangle spanned by given points.
    The area is positive when the points go counter-clockwise.
    """
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def is_left(a: Point, b: Point, c: Point) -> bool:
    return triangle_area(a, b, c) > 0


def is_left_on(a: Point, b: Point, c: Point) -> bool:
    return triangle_area(a, b, c) >= 0


def is_right(a: Point, b: Point, c: Point) -> bool:
    return triangle_area(a, b, c) < 0


def is_right_on(a: Point, b: Point, c: Point) -> bool:
    return triangle_area(a, b, c) <= 0


def collinear(a: Point,
              b: Point,
              c: Point,
              threshold_angle: float = 0) -> bool:
    """
    Checks if three points lie on one line.
    With zero threshold the check is exact, otherwise the points are
    considered collinear when the angle between vectors `ab` and `bc`
    is less than the threshold (in radians).
    Coinciding points don't define an angle, so they are reported
    as non-collinear for a non-zero threshold.
    """
    if not threshold_angle:
        return triangle_area(a, b, c) == 0
    ab_x, ab_y = b.x - a.x, b.y - a.y
    bc_x, bc_y = c.x - b.x, c.y - b.y
    magnitudes = hypot(ab_x, ab_y) * hypot(bc_x, bc_y)
    if not magnitudes:
        return False
    cosine = (ab_x * bc_x + ab_y * bc_y) / magnitudes
    angle = acos(max(-1., min(1., cosine)))
    return angle < threshold_angle


def squared_distance(a: Point, b: Point) -> float:
    dx = b.x - a.x
    dy = b.y - a.y
    return dx * dx + dy * dy


def scalars_equal(a: float, b: float, precision: float = 0) -> bool:
    return abs(a - b) <= precision


def points_equal(a: Point, b: Point, precision: float = 0) -> bool:
    return (scalars_equal(a.x, b.x, precision)
            and scalars_equal(a.y, b.y, precision))


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def to_exact(point: Point) -> Point:
    return Point(Fraction(point.x), Fraction(point.y))


def line_intersection(line: Line,
                      other: Line,
                      precision: float = 0) -> Optional[Point]:
    """
    Returns intersection point of two infinite lines
    given by pairs of points.
    :param line: first line
    :param other: second line
    :param precision: tolerance for the determinant to consider lines
    parallel
    :return: the intersection point with exact rational coordinates
    or `None` if the lines are parallel or coincide
    """
    start, end = map(to_exact, line)
    other_start, other_end = map(to_exact, other)
    a1 = end.y - start.y
    b1 = start.x - end.x
    c1 = a1 * start.x + b1 * start.y
    a2 = other_end.y - other_start.y
    b2 = other_start.x - other_end.x
    c2 = a2 * other_start.x + b2 * other_start.y
    determinant = a1 * b2 - a2 * b1
    if scalars_equal(determinant, 0, precision):
        return None
    return Point((b2 * c1 - b1 * c2) / determinant,
                 (a1 * c2 - a2 * c1) / determinant)


def segments_intersect(p1: Point,
                       p2: Point,
                       q1: Point,
                       q2: Point) -> bool:
    """
    Checks if segment `p1p2` intersects segment `q1q2`.
    Parallel segments are never reported as intersecting,
    even if they overlap.
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    da = q2.x - q1.x
    db = q2.y - q1.y
    denominator = da * dy - db * dx
    if denominator == 0:
        return False
    s = (dx * (q1.y - p1.y) + dy * (p1.x - q1.x)) / denominator
    t = (da * (p1.y - q1.y) + db * (q1.x - p1.x)) / -denominator
    return 0 <= s <= 1 and 0 <= t <= 1
