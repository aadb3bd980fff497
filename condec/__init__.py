"""Convex decomposition of simple polygons"""
__version__ = '0.1.0'

from .condec import (Decomposition,
                     decomp,
                     decompose,
                     get_cut_edges,
                     quick_decomp,
                     slice_polygon,
                     to_convex_contours,
                     to_graph)
from .config import Settings
from .hints import (CutEdge,
                    Point,
                    Polygon)
from .utils import (is_convex,
                    is_simple,
                    make_ccw,
                    normalized,
                    remove_collinear_points,
                    remove_duplicate_points,
                    signed_area)
