from .polygons import (L_SHAPE,
                       NOTCH,
                       Sample,
                       U_SHAPE,
                       rotated_samples,
                       samples)
from .base import (convex_polygons,
                   coordinates,
                   counterclockwise_polygons,
                   indices,
                   points,
                   points_lists,
                   polygons,
                   small_counterclockwise_polygons,
                   threshold_angles,
                   unique_points_pairs)
