from typing import (List,
                    Protocol,
                    Sequence,
                    Tuple)

from gon.base import (Contour,
                      Point,
                      Polygon as GonPolygon,
                      Segment)
from ground.base import Context

Polygon = List[Point]
CutEdge = Tuple[Point, Point]
Line = Tuple[Point, Point]


class ConvexDivisorType(Protocol):
    def __call__(self,
                 polygon: GonPolygon,
                 *,
                 extra_points: Sequence[Point] = (),
                 extra_constraints: Sequence[Segment] = (),
                 context: Context) -> List[Contour]:
        ...
