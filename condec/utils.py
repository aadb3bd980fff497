from typing import Sequence

from condec.geometry_utils import (collinear,
                                   is_left,
                                   is_left_on,
                                   is_right,
                                   is_right_on,
                                   line_intersection,
                                   points_equal,
                                   segments_intersect,
                                   squared_distance,
                                   triangle_area)
from condec.hints import (Point,
                          Polygon)


def at(polygon: Sequence[Point], index: int) -> Point:
    """Returns vertex by index wrapping around the polygon's ends"""
    return polygon[index % len(polygon)]


def copy_range(polygon: Sequence[Point], start: int, end: int) -> Polygon:
    """
    Returns a new polygon with vertices from `start` to `end` inclusive.
    If `start` is greater than `end`, the range goes over the end
    of the polygon, i.e. vertices from 0 to `end` are followed by
    vertices from `start` to the last one.
    """
    if start < end:
        return list(polygon[start:end + 1])
    return [*polygon[:end + 1], *polygon[start:]]


def append(target: Polygon,
           source: Sequence[Point],
           start: int,
           end: int) -> None:
    """Appends vertices of `source` from `start` to `end` exclusive"""
    target.extend(source[start:end])


def reverse(polygon: Polygon) -> None:
    polygon.reverse()


def make_ccw(polygon: Polygon) -> bool:
    """
    Orders polygon's vertices counter-clockwise in place.
    The orientation is checked at the lowest (and then the rightmost)
    vertex since the turn at it is convex for any simple polygon.
    Neighbours coinciding with that vertex are skipped.
    :return: `True` if the polygon was reversed
    """
    if len(polygon) < 3:
        return False
    anchor_index = 0
    for index, vertex in enumerate(polygon):
        anchor = polygon[anchor_index]
        if (vertex.y < anchor.y
                or vertex.y == anchor.y and vertex.x > anchor.x):
            anchor_index = index
    anchor = polygon[anchor_index]
    others = [*polygon[anchor_index + 1:], *polygon[:anchor_index]]
    # coinciding neighbours don't define a turn
    while others and others[0] == anchor:
        del others[0]
    while others and others[-1] == anchor:
        del others[-1]
    if len(others) < 2 or is_left(others[-1], anchor, others[0]):
        return False
    reverse(polygon)
    return True


def to_counterclockwise(polygon: Sequence[Point]) -> Polygon:
    result = list(polygon)
    make_ccw(result)
    return result


def is_reflex(polygon: Sequence[Point], index: int) -> bool:
    return is_right(at(polygon, index - 1),
                    at(polygon, index),
                    at(polygon, index + 1))


def is_convex(polygon: Sequence[Point]) -> bool:
    """
    Checks that counter-clockwise polygon has no reflex vertices.
    Collinear vertices are allowed.
    """
    return not any(is_reflex(polygon, index)
                   for index in range(len(polygon)))


def is_simple(polygon: Sequence[Point]) -> bool:
    """
    Checks that no two non-adjacent edges of the polygon intersect,
    the closing edge included.
    """
    size = len(polygon)
    for index in range(size - 1):
        for other_index in range(index - 1):
            if segments_intersect(polygon[index], polygon[index + 1],
                                  polygon[other_index],
                                  polygon[other_index + 1]):
                return False
    for index in range(1, size - 2):
        if segments_intersect(polygon[0], polygon[-1],
                              polygon[index], polygon[index + 1]):
            return False
    return True


def can_see(polygon: Sequence[Point], a: int, b: int) -> bool:
    """
    Checks if the diagonal from vertex `a` to vertex `b` is not blocked
    by any polygon's edge, i.e. if the vertices can see each other.
    """
    start, end = at(polygon, a), at(polygon, b)
    if (is_left_on(at(polygon, a + 1), start, end)
            and is_right_on(at(polygon, a - 1), start, end)):
        return False
    distance = squared_distance(start, end)
    size = len(polygon)
    for index in range(size):
        if index == a or (index + 1) % size == a:
            continue
        edge_start, edge_end = at(polygon, index), at(polygon, index + 1)
        if not (is_left_on(start, end, edge_end)
                and is_right_on(start, end, edge_start)):
            continue
        intersection = line_intersection((start, end), (edge_start, edge_end))
        if intersection is None:
            # edge lies on the diagonal's line
            if any(_lies_between(start, end, vertex, distance)
                   for vertex in (edge_start, edge_end)):
                return False
        elif squared_distance(start, intersection) < distance:
            return False
    return True


def _lies_between(start: Point,
                  end: Point,
                  point: Point,
                  squared_length: float) -> bool:
    projection = ((point.x - start.x) * (end.x - start.x)
                  + (point.y - start.y) * (end.y - start.y))
    return (projection > 0
            and squared_distance(start, point) < squared_length)


def can_see_strict(polygon: Sequence[Point], a: int, b: int) -> bool:
    """
    Checks if the segment between vertices `a` and `b` doesn't cross
    any polygon's edge which is not incident to them.
    """
    size = len(polygon)
    a, b = a % size, b % size
    for index in range(size):
        next_index = (index + 1) % size
        if index in (a, b) or next_index in (a, b):
            continue
        if segments_intersect(polygon[a], polygon[b],
                              polygon[index], polygon[next_index]):
            return False
    return True


def remove_collinear_points(polygon: Polygon,
                            threshold_angle: float = 0) -> int:
    """
    Removes in place vertices lying on the line between their
    neighbors. At least three vertices are always kept.
    :param polygon: polygon to modify
    :param threshold_angle: maximal angle (in radians) between adjacent
    edges to consider them collinear, zero means exact check
    :return: number of removed vertices
    """
    removed_count = 0
    index = len(polygon) - 1
    while len(polygon) > 3 and index >= 0:
        if collinear(at(polygon, index - 1),
                     at(polygon, index),
                     at(polygon, index + 1),
                     threshold_angle):
            del polygon[index % len(polygon)]
            removed_count += 1
        index -= 1
    return removed_count


def remove_duplicate_points(polygon: Polygon, precision: float = 0) -> None:
    """
    Removes in place vertices which coincide with any of the preceding
    ones up to the given precision.
    """
    for index in range(len(polygon) - 1, 0, -1):
        vertex = polygon[index]
        if any(points_equal(vertex, polygon[other_index], precision)
               for other_index in range(index - 1, -1, -1)):
            del polygon[index]


def normalized(polygon: Sequence[Point],
               *,
               precision: float = 0,
               threshold_angle: float = 0) -> Polygon:
    """
    Returns a copy of the polygon without duplicate and collinear
    vertices ordered counter-clockwise.
    """
    result = list(polygon)
    remove_duplicate_points(result, precision)
    remove_collinear_points(result, threshold_angle)
    make_ccw(result)
    return result


def signed_area(polygon: Sequence[Point]) -> float:
    """Returns polygon's signed area, positive for counter-clockwise"""
    if len(polygon) < 3:
        return 0
    origin = polygon[0]
    return sum(triangle_area(origin, polygon[index], polygon[index + 1])
               for index in range(1, len(polygon) - 1)) / 2
