"""
Value transforms for heightmap grids.

Blend, range remap, power curve and ridge. Each function takes one or two
grids (or array-likes), leaves them untouched and returns a new Grid of the
same shape. Arithmetic runs in float64 and is stored back as float32.
"""

import numpy as np
import structlog

from .exceptions import OutOfRangeError, ShapeMismatchError
from .grid import Grid, GridLike, as_grid, max_value, min_value

logger = structlog.get_logger()


def merge(a: GridLike, b: GridLike, weight: float) -> Grid:
    """
    Linearly interpolate between two grids of equal shape.

    ``out = a * weight + b * (1 - weight)``, so weight 1.0 returns ``a`` and
    weight 0.0 returns ``b``.

    Args:
        a: First grid
        b: Second grid, same shape as ``a``
        weight: Share of ``a`` in the result, within [0, 1]

    Returns:
        Blended grid

    Raises:
        ShapeMismatchError: If the grids differ in height or width
        OutOfRangeError: If weight is outside [0, 1]
    """
    a = as_grid(a)
    b = as_grid(b)

    if a.shape != b.shape:
        logger.warning("Cannot merge grids of different shapes", expected=a.shape, actual=b.shape)
        raise ShapeMismatchError(a.shape, b.shape)

    if not 0.0 <= weight <= 1.0:
        logger.warning("Merge weight out of range", weight=weight)
        raise OutOfRangeError("weight", weight, "0.0 <= weight <= 1.0")

    merged = a.values.astype(np.float64) * weight + b.values.astype(np.float64) * (1.0 - weight)

    logger.debug("Merged grids", shape=a.shape, weight=weight)
    return Grid(merged)


def remap(grid: GridLike, min_val: float, max_val: float) -> Grid:
    """
    Re-map grid values from their observed range onto [min_val, max_val].

    A flat grid (observed min equals observed max) has no range to stretch,
    so every cell becomes ``min_val``.

    Args:
        grid: Input grid
        min_val: Lower bound of the target range
        max_val: Upper bound of the target range, strictly above min_val

    Returns:
        Remapped grid

    Raises:
        OutOfRangeError: If min_val >= max_val
    """
    grid = as_grid(grid)

    if not min_val < max_val:
        logger.warning("Remap bounds out of order", min_val=min_val, max_val=max_val)
        raise OutOfRangeError("min_val", min_val, f"min_val < max_val ({max_val!r})")

    initial_min = min_value(grid)
    initial_max = max_value(grid)

    if initial_max == initial_min:
        logger.debug("Remapping flat grid", shape=grid.shape, value=initial_min)
        return Grid.filled(grid.height, grid.width, min_val)

    values = grid.values.astype(np.float64)
    mapped = (values - initial_min) * (max_val - min_val) / (initial_max - initial_min) + min_val

    logger.debug(
        "Remapped grid",
        shape=grid.shape,
        initial_range=(initial_min, initial_max),
        target_range=(min_val, max_val),
    )
    return Grid(mapped)


# Alias under the conventional "map range" name
map_range = remap


def curve(grid: GridLike, power: float) -> Grid:
    """
    Raise every cell to ``power``.

    Negative cells with a non-integral power have no real result and come
    out as NaN; no error is raised.
    """
    grid = as_grid(grid)

    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        curved = np.power(grid.values.astype(np.float64), power)

    logger.debug("Curved grid", shape=grid.shape, power=power)
    return Grid(curved)


def ridge(grid: GridLike) -> Grid:
    """
    Fold values about the midpoint of the grid's range and flip them.

    With ``center = (max + min) / 2`` each cell becomes
    ``(max - (|v - center| + center)) * 2``: values at the middle of the
    range end up highest and both extremes end up at 0. A flat grid comes
    out as all zeros.
    """
    grid = as_grid(grid)

    initial_min = min_value(grid)
    initial_max = max_value(grid)
    center = (initial_max + initial_min) / 2

    values = grid.values.astype(np.float64)
    ridged = (initial_max - (np.abs(values - center) + center)) * 2

    logger.debug("Ridged grid", shape=grid.shape, center=center)
    return Grid(ridged)
