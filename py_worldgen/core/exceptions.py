"""Errors raised by grid construction and transforms."""

from typing import Optional, Tuple


class GridError(ValueError):
    """Base class for heightmap grid errors."""


class InvalidGridError(GridError):
    """Input cannot be turned into a rectangular, non-empty grid."""

    def __init__(self, message: str, shape: Optional[Tuple[int, ...]] = None, row: Optional[int] = None):
        super().__init__(message)
        self.shape = shape
        self.row = row


class ShapeMismatchError(GridError):
    """Two grids that must share a shape do not."""

    def __init__(self, expected: Tuple[int, int], actual: Tuple[int, int]):
        super().__init__(f"Grid shapes differ: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class OutOfRangeError(GridError):
    """A scalar parameter falls outside its allowed range."""

    def __init__(self, name: str, value: float, bound: str):
        super().__init__(f"{name}={value!r} is out of range, expected {bound}")
        self.name = name
        self.value = value
        self.bound = bound
