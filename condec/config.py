"""Configuration of polygon decomposition."""

from math import pi

from pydantic import (BaseModel,
                      Field)

DEFAULT_DELTA = 25
DEFAULT_MAX_LEVEL = 100


class Settings(BaseModel):
    """Tolerances and limits used by `condec.decompose`."""

    precision: float = Field(
        default=0,
        ge=0,
        description="Coordinate tolerance for duplicate vertices",
    )
    collinearity_threshold: float = Field(
        default=0,
        ge=0,
        lt=pi,
        description="Angle in radians below which adjacent edges "
                    "are considered collinear, zero for exact check",
    )
    delta: float = Field(
        default=DEFAULT_DELTA,
        ge=0,
        description="Tolerance passed to the heuristic decomposer",
    )
    max_level: int = Field(
        default=DEFAULT_MAX_LEVEL,
        ge=1,
        description="Maximal recursion depth of the heuristic decomposer",
    )
