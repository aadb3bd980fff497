MAX_COORDINATE = 10 ** 3
MIN_COORDINATE = -MAX_COORDINATE
MIN_CONTOUR_SIZE = 3
MAX_CONTOUR_SIZE = 10
MAX_EXHAUSTIVE_CONTOUR_SIZE = 6
MAX_POINTS_COUNT = 10
ABS_TOL = 1e-9
