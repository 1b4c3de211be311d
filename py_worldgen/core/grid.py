"""
Heightmap grid value type and whole-grid reductions.

A Grid wraps a read-only float32 NumPy array of shape (height, width).
Transforms never write into a Grid; they build a new one from the result.
"""

import numpy as np
from typing import Any, Iterable, List, Sequence, Tuple, Union
from dataclasses import dataclass
import structlog

from ..config import settings
from .exceptions import InvalidGridError

logger = structlog.get_logger()

GridLike = Union["Grid", np.ndarray, Sequence[Sequence[float]]]


@dataclass(frozen=True, eq=False)
class Grid:
    """
    Rectangular 2D heightmap of single-precision floats.

    The values array is copied on construction and marked read-only, so a
    Grid never shares memory with the caller's array.
    """

    values: np.ndarray

    def __post_init__(self):
        try:
            # out-of-range doubles become +-inf, as a float cast would
            with np.errstate(over="ignore"):
                values = np.array(self.values, dtype=np.float32)
        except (TypeError, ValueError) as e:
            raise InvalidGridError(f"Cannot build grid from input: {e}") from e

        _validate_shape(values.shape)
        values.flags.writeable = False
        # frozen dataclass: bypass __setattr__ to store the validated copy
        object.__setattr__(self, "values", values)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Grid":
        """
        Build a grid from a sequence of rows, rejecting jagged input.

        Args:
            rows: Row sequences, all of the same length

        Returns:
            New Grid

        Raises:
            InvalidGridError: If there are no rows, rows are empty, or any
                row's length differs from the first row's
        """
        try:
            rows = [list(row) for row in rows]
        except TypeError as e:
            raise InvalidGridError(f"Rows must be sequences: {e}") from e

        if not rows:
            raise InvalidGridError("Grid must have at least one row", shape=(0,))

        expected = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != expected:
                raise InvalidGridError(
                    f"Jagged grid: row {index} has {len(row)} columns, expected {expected}",
                    row=index,
                )

        return cls(rows)

    @classmethod
    def filled(cls, height: int, width: int, value: float = 0.0) -> "Grid":
        """Create a constant grid."""
        _validate_shape((height, width))
        return cls(np.full((height, width), value, dtype=np.float32))

    @property
    def height(self) -> int:
        return int(self.values.shape[0])

    @property
    def width(self) -> int:
        return int(self.values.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def to_list(self) -> List[List[float]]:
        """Return the values as nested Python lists."""
        return self.values.tolist()

    def allclose(self, other: GridLike, atol: float = 1e-6) -> bool:
        """Check for the same shape and approximately equal values."""
        other = as_grid(other)
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self.values, other.values, atol=atol, equal_nan=True))

    def __array__(self, dtype=None, copy=None):
        if dtype is None and not copy:
            return self.values
        return self.values.astype(dtype or self.values.dtype)

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"


def _validate_shape(shape: Tuple[int, ...]) -> None:
    """Reject shapes that are not 2D, empty, or over the configured limits."""
    if len(shape) != 2:
        raise InvalidGridError(f"Grid must be 2D, got {len(shape)} dimension(s)", shape=tuple(shape))

    rows, cols = shape
    if rows < 1 or cols < 1:
        raise InvalidGridError(f"Grid must be at least 1x1, got {rows}x{cols}", shape=tuple(shape))

    if rows > settings.max_grid_height or cols > settings.max_grid_width:
        raise InvalidGridError(
            f"Grid {rows}x{cols} exceeds limit "
            f"{settings.max_grid_height}x{settings.max_grid_width}",
            shape=tuple(shape),
        )


def as_grid(obj: Any) -> Grid:
    """
    Coerce input to a Grid.

    Grids are returned unchanged. NumPy arrays go through the Grid
    constructor; any other iterable is treated as a sequence of rows.
    """
    if isinstance(obj, Grid):
        return obj
    if isinstance(obj, np.ndarray):
        return Grid(obj)
    try:
        return Grid.from_rows(obj)
    except TypeError as e:
        raise InvalidGridError(f"Cannot build grid from {type(obj).__name__}: {e}") from e


def height(grid: GridLike) -> int:
    """Number of rows."""
    return as_grid(grid).height


def width(grid: GridLike) -> int:
    """Number of columns."""
    return as_grid(grid).width


def max_value(grid: GridLike) -> float:
    """
    Highest value in the grid.

    NaN cells are ignored; a grid with no comparable value yields -inf.
    """
    values = as_grid(grid).values
    comparable = values[~np.isnan(values)]
    if comparable.size == 0:
        return float("-inf")
    return float(comparable.max())


def min_value(grid: GridLike) -> float:
    """
    Lowest value in the grid.

    NaN cells are ignored; a grid with no comparable value yields +inf.
    """
    values = as_grid(grid).values
    comparable = values[~np.isnan(values)]
    if comparable.size == 0:
        return float("inf")
    return float(comparable.min())
