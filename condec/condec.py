from dataclasses import (dataclass,
                         field)
from itertools import combinations
from math import inf
from typing import (List,
                    Optional,
                    Sequence,
                    Tuple)

import networkx as nx
import structlog
from gon.base import (Contour,
                      Point,
                      Polygon as GonPolygon,
                      Segment)
from ground.base import Context

from condec.config import (DEFAULT_DELTA,
                           DEFAULT_MAX_LEVEL,
                           Settings)
from condec.geometry_utils import (is_left,
                                   is_left_on,
                                   is_right,
                                   is_right_on,
                                   line_intersection,
                                   midpoint,
                                   squared_distance)
from condec.hints import (CutEdge,
                          Polygon)
from condec.utils import (append,
                          at,
                          can_see,
                          can_see_strict,
                          copy_range,
                          is_reflex,
                          normalized)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Decomposition:
    """Convex pieces with the vertices met while splitting the polygon"""
    pieces: List[Polygon] = field(default_factory=list)
    reflex_vertices: List[Point] = field(default_factory=list)
    steiner_points: List[Point] = field(default_factory=list)

    def merge(self, other: 'Decomposition') -> 'Decomposition':
        return Decomposition(
            pieces=[*self.pieces, *other.pieces],
            reflex_vertices=[*self.reflex_vertices, *other.reflex_vertices],
            steiner_points=[*self.steiner_points, *other.steiner_points])


def get_cut_edges(polygon: Sequence[Point]) -> List[CutEdge]:
    """
    Finds the smallest set of diagonals splitting the polygon
    into convex parts.
    Tries every diagonal from every reflex vertex, so the complexity
    is O(N^4) at best, impractical for more than a few dozen vertices.
    :param polygon: counter-clockwise polygon
    :return: list of diagonals, empty if the polygon is convex
    """
    result: List[CutEdge] = []
    min_count = inf
    for index in range(len(polygon)):
        if not is_reflex(polygon, index):
            continue
        for other_index in range(len(polygon)):
            if not can_see(polygon, index, other_index):
                continue
            cut_edges = [
                *get_cut_edges(copy_range(polygon, index, other_index)),
                *get_cut_edges(copy_range(polygon, other_index, index))]
            if len(cut_edges) < min_count:
                min_count = len(cut_edges)
                result = [*cut_edges,
                          (polygon[index], polygon[other_index])]
    return result


def slice_polygon(polygon: Sequence[Point],
                  cut_edges: Sequence[CutEdge]) -> Optional[List[Polygon]]:
    """
    Splits the polygon by the given diagonals one after another.
    Each diagonal cuts the first part that has both its endpoints
    as non-adjacent vertices.
    :return: resulting parts or `None` if some diagonal doesn't
    belong to any part
    """
    pieces = [list(polygon)]
    for cut_edge in cut_edges:
        for position, piece in enumerate(pieces):
            halves = _slice_piece(piece, cut_edge)
            if halves is not None:
                del pieces[position]
                pieces.extend(halves)
                break
        else:
            logger.warning("Cut edge doesn't match any polygon part",
                           start=cut_edge[0],
                           end=cut_edge[1])
            return None
    return pieces


def _slice_piece(piece: Polygon,
                 cut_edge: CutEdge) -> Optional[List[Polygon]]:
    start, end = cut_edge
    try:
        start_index = piece.index(start)
        end_index = piece.index(end)
    except ValueError:
        return None
    size = len(piece)
    if (end_index - start_index) % size in (0, 1, size - 1):
        return None
    return [copy_range(piece, start_index, end_index),
            copy_range(piece, end_index, start_index)]


def decomp(polygon: Sequence[Point]) -> Optional[List[Polygon]]:
    """
    Decomposes the polygon into the minimal number of convex parts.
    :param polygon: counter-clockwise simple polygon
    :return: convex parts or `None` if the polygon couldn't be sliced
    by the found diagonals
    """
    cut_edges = get_cut_edges(polygon)
    if not cut_edges:
        return [list(polygon)]
    return slice_polygon(polygon, cut_edges)


def quick_decomp(polygon: Sequence[Point],
                 *,
                 delta: float = DEFAULT_DELTA,
                 max_level: int = DEFAULT_MAX_LEVEL) -> Decomposition:
    """
    Decomposes the polygon into convex parts by recursively splitting
    it at reflex vertices.
    Takes O(N^3) time, the number of parts is not necessarily minimal.
    :param polygon: counter-clockwise simple polygon
    :param delta: tolerance reserved for degenerate cases,
    it doesn't affect the choice of splitting diagonals
    :param max_level: maximal recursion depth, deeper parts are dropped
    :return: convex parts with the visited reflex vertices and
    the inserted Steiner points
    """
    return _quick_decomp(list(polygon),
                         delta=delta,
                         max_level=max_level,
                         level=0)


def _quick_decomp(polygon: Polygon,
                  *,
                  delta: float,
                  max_level: int,
                  level: int) -> Decomposition:
    if len(polygon) < 3:
        return Decomposition()
    level += 1
    if level > max_level:
        logger.warning("Maximum recursion level reached",
                       max_level=max_level,
                       vertices_count=len(polygon))
        return Decomposition()
    for index, vertex in enumerate(polygon):
        if is_reflex(polygon, index):
            break
    else:
        return Decomposition(pieces=[polygon])
    halves = _split_at_reflex_vertex(polygon, index)
    if halves is None:
        logger.warning("No splitting diagonal found",
                       vertex=vertex,
                       vertices_count=len(polygon))
        return Decomposition(reflex_vertices=[vertex])
    lower_polygon, upper_polygon, steiner_point = halves
    result = Decomposition(
        reflex_vertices=[vertex],
        steiner_points=[] if steiner_point is None else [steiner_point])
    # solving the smallest part first
    if len(lower_polygon) < len(upper_polygon):
        parts = lower_polygon, upper_polygon
    else:
        parts = upper_polygon, lower_polygon
    for part in parts:
        result = result.merge(_quick_decomp(part,
                                            delta=delta,
                                            max_level=max_level,
                                            level=level))
    return result


def _split_at_reflex_vertex(
        polygon: Polygon,
        index: int) -> Optional[Tuple[Polygon, Polygon, Optional[Point]]]:
    """
    Returns lower and upper parts of the polygon split by a diagonal
    from the reflex vertex and the Steiner point if one was inserted.
    """
    size = len(polygon)
    vertex = polygon[index]
    previous_vertex, next_vertex = at(polygon, index - 1), at(polygon,
                                                              index + 1)
    lower_distance = upper_distance = inf
    lower_intersection = upper_intersection = None
    lower_index = upper_index = 0
    for other_index in range(size):
        candidate = at(polygon, other_index)
        if (is_left(previous_vertex, vertex, candidate)
                and is_right_on(previous_vertex, vertex,
                                at(polygon, other_index - 1))):
            # extension of the incoming edge crosses this edge
            point = line_intersection((previous_vertex, vertex),
                                      (candidate,
                                       at(polygon, other_index - 1)))
            if point is not None and is_right(next_vertex, vertex, point):
                distance = squared_distance(vertex, point)
                if distance < lower_distance:
                    lower_distance = distance
                    lower_intersection = point
                    lower_index = other_index
        if (is_left(next_vertex, vertex, at(polygon, other_index + 1))
                and is_right_on(next_vertex, vertex, candidate)):
            point = line_intersection((next_vertex, vertex),
                                      (candidate,
                                       at(polygon, other_index + 1)))
            if point is not None and is_left(previous_vertex, vertex, point):
                distance = squared_distance(vertex, point)
                if distance < upper_distance:
                    upper_distance = distance
                    upper_intersection = point
                    upper_index = other_index
    if lower_intersection is None or upper_intersection is None:
        return None
    lower_polygon: Polygon = []
    upper_polygon: Polygon = []
    if lower_index == (upper_index + 1) % size:
        # no vertices to connect to, both extensions hit the same edge
        steiner_point = midpoint(lower_intersection, upper_intersection)
        if index < upper_index:
            append(lower_polygon, polygon, index, upper_index + 1)
            lower_polygon.append(steiner_point)
            upper_polygon.append(steiner_point)
            if lower_index != 0:
                append(upper_polygon, polygon, lower_index, size)
            append(upper_polygon, polygon, 0, index + 1)
        else:
            if index != 0:
                append(lower_polygon, polygon, index, size)
            append(lower_polygon, polygon, 0, upper_index + 1)
            lower_polygon.append(steiner_point)
            upper_polygon.append(steiner_point)
            append(upper_polygon, polygon, lower_index, index + 1)
        return lower_polygon, upper_polygon, steiner_point
    if lower_index > upper_index:
        upper_index += size
    closest_distance = inf
    closest_index = 0
    for other_index in range(lower_index, upper_index + 1):
        candidate = at(polygon, other_index)
        if (is_left_on(previous_vertex, vertex, candidate)
                and is_right_on(next_vertex, vertex, candidate)):
            distance = squared_distance(vertex, candidate)
            if (distance < closest_distance
                    and can_see_strict(polygon, index, other_index)):
                closest_distance = distance
                closest_index = other_index % size
    if index < closest_index:
        append(lower_polygon, polygon, index, closest_index + 1)
        if closest_index != 0:
            append(upper_polygon, polygon, closest_index, size)
        append(upper_polygon, polygon, 0, index + 1)
    else:
        if index != 0:
            append(lower_polygon, polygon, index, size)
        append(lower_polygon, polygon, 0, closest_index + 1)
        append(upper_polygon, polygon, closest_index, index + 1)
    return lower_polygon, upper_polygon, None


def decompose(polygon: Sequence[Point],
              *,
              optimal: bool = False,
              settings: Optional[Settings] = None
              ) -> Optional[List[Polygon]]:
    """
    Removes duplicate and collinear vertices of the polygon,
    orders it counter-clockwise and splits it into convex parts.
    :param polygon: simple polygon, it is not modified
    :param optimal: whether to find the minimal number of parts
    with the exhaustive search instead of the heuristic one
    :param settings: tolerances and limits of the decomposition
    :return: convex parts or `None` if the exhaustive search failed
    """
    if settings is None:
        settings = Settings()
    vertices = normalized(polygon,
                          precision=settings.precision,
                          threshold_angle=settings.collinearity_threshold)
    if optimal:
        return decomp(vertices)
    return quick_decomp(vertices,
                        delta=settings.delta,
                        max_level=settings.max_level).pieces


def to_graph(pieces: Sequence[Sequence[Point]]) -> nx.Graph:
    """
    Returns adjacency graph of polygon parts.
    Nodes are indices of the parts with `polygon` attributes,
    parts touching each other along a segment are connected by an edge
    with a `side` attribute holding that segment.
    """
    graph = nx.Graph()
    graph.add_nodes_from((index, {'polygon': list(piece)})
                         for index, piece in enumerate(pieces))
    parts = [GonPolygon(Contour(list(piece))) for piece in pieces]
    for index, other_index in combinations(range(len(parts)), 2):
        intersection = parts[index] & parts[other_index]
        if isinstance(intersection, Segment):
            graph.add_edge(index, other_index, side=intersection)
    return graph


def to_convex_contours(polygon: GonPolygon,
                       *,
                       extra_points: Sequence[Point] = (),
                       extra_constraints: Sequence[Segment] = (),
                       context: Context) -> List[Contour]:
    """
    Splits `gon` polygon without holes into convex contours.
    Follows `ConvexDivisorType` signature, so extra points
    and constraints are accepted only when empty.
    """
    if polygon.holes:
        raise ValueError("Polygons with holes are not supported.")
    if extra_points or extra_constraints:
        raise ValueError("Extra points and constraints are not supported.")
    pieces = decompose(polygon.border.vertices)
    return [Contour(piece) for piece in pieces]
