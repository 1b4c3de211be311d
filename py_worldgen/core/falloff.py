"""
Falloff transforms for heightmap grids.

Circular falloffs attenuate cells by their distance from the grid center,
expressed as a fraction of the center row index. The vertical falloff builds
a distance-from-row-band map and ignores the input values.
"""

import numpy as np
from typing import Tuple, Union
import structlog

from .grid import Grid, GridLike, as_grid, max_value, min_value

logger = structlog.get_logger()

ArrayOrFloat = Union[float, np.ndarray]


def grid_center(grid: Grid) -> Tuple[int, int]:
    """Center cell (row, column) using floor division."""
    return grid.height // 2, grid.width // 2


def distance_percentage(
    h: ArrayOrFloat,
    w: ArrayOrFloat,
    center_h: int,
    center_w: int,
    falloff_strength: float,
) -> ArrayOrFloat:
    """
    Fraction of the way from the center towards the border for a cell.

    Euclidean distance from (h, w) to the center, divided by ``center_h``
    (not by a combined radius) and scaled by ``falloff_strength``. The result
    is capped at 1.0; there is no lower cap, so a negative strength gives
    negative percentages.

    On a single-row grid (``center_h == 0``) the center cell is 0 and every
    other cell is infinitely far, so it caps at 1.0 for a positive strength.

    Works on scalars or on broadcastable index arrays.

    Args:
        h: Row index or array of row indices
        w: Column index or array of column indices
        center_h: Center row
        center_w: Center column
        falloff_strength: Multiplier applied to the relative distance

    Returns:
        Distance percentage, a float for scalar input, otherwise an array
    """
    distance = np.sqrt(
        np.square(np.abs(center_h - np.asarray(h, dtype=np.float64)))
        + np.square(np.abs(center_w - np.asarray(w, dtype=np.float64)))
    )
    if center_h > 0:
        ratio = distance / center_h * falloff_strength
    else:
        # Single row: center_h == 0, every off-center cell is infinitely far
        with np.errstate(invalid="ignore"):
            ratio = np.where(distance == 0, 0.0, np.inf * falloff_strength)
    percentage = np.minimum(ratio, 1.0)

    if np.ndim(percentage) == 0:
        return float(percentage)
    return percentage


def _distance_field(grid: Grid, falloff_strength: float) -> np.ndarray:
    """distance_percentage evaluated for every cell of ``grid``."""
    center_h, center_w = grid_center(grid)
    rows, cols = np.ogrid[0:grid.height, 0:grid.width]
    return distance_percentage(rows, cols, center_h, center_w, falloff_strength)


def circular_falloff_percentile(grid: GridLike, falloff_strength: float) -> Grid:
    """
    Scale each cell by its distance percentage and negate it.

    ``out = 0 - v * distance_percentage``. The result does not depend on the
    grid's value range; the center cell always comes out as zero.

    Args:
        grid: Input grid
        falloff_strength: Multiplier for the distance percentage

    Returns:
        Falloff grid
    """
    grid = as_grid(grid)
    field = _distance_field(grid, falloff_strength)

    with np.errstate(invalid="ignore"):
        falloff = 0.0 - grid.values.astype(np.float64) * field

    logger.debug("Applied percentile circular falloff", shape=grid.shape, strength=falloff_strength)
    return Grid(falloff)


def circular_falloff_absolute(grid: GridLike, falloff_strength: float) -> Grid:
    """
    Lower each cell by the grid maximum times its distance percentage.

    ``out = v - max * distance_percentage``, floored at the minimum of the
    input grid. Both the maximum and minimum are taken from the input before
    any cell is changed.

    Args:
        grid: Input grid
        falloff_strength: Multiplier for the distance percentage

    Returns:
        Falloff grid
    """
    grid = as_grid(grid)
    field = _distance_field(grid, falloff_strength)

    max_height = max_value(grid)
    min_height = min_value(grid)

    with np.errstate(invalid="ignore"):
        falloff = grid.values.astype(np.float64) - max_height * field
    falloff = np.maximum(falloff, min_height)

    logger.debug(
        "Applied absolute circular falloff",
        shape=grid.shape,
        strength=falloff_strength,
        floor=min_height,
    )
    return Grid(falloff)


def vertical_falloff_percentile(grid: GridLike, offset: int) -> Grid:
    """
    Build a map of each row's distance from a horizontal band.

    Every cell in row ``h`` becomes ``|h - height // 2 + offset|``. Only the
    grid's shape is used; its values are ignored.
    """
    grid = as_grid(grid)

    rows = np.arange(grid.height, dtype=np.float64)[:, np.newaxis]
    distances = np.abs(rows - grid.height // 2 + offset)
    falloff = np.broadcast_to(distances, grid.shape)

    result = Grid(falloff)
    logger.debug(
        "Applied vertical falloff",
        shape=grid.shape,
        offset=offset,
        min=min_value(result),
        max=max_value(result),
    )
    return result
