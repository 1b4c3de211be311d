"""
Core heightmap transforms.
"""

from .exceptions import GridError, InvalidGridError, ShapeMismatchError, OutOfRangeError
from .grid import Grid, as_grid, height, width, min_value, max_value
from .transforms import merge, remap, map_range, curve, ridge
from .falloff import (
    distance_percentage,
    circular_falloff_percentile,
    circular_falloff_absolute,
    vertical_falloff_percentile,
)

__all__ = ['GridError', 'InvalidGridError', 'ShapeMismatchError', 'OutOfRangeError',
           'Grid', 'as_grid', 'height', 'width', 'min_value', 'max_value',
           'merge', 'remap', 'map_range', 'curve', 'ridge',
           'distance_percentage', 'circular_falloff_percentile',
           'circular_falloff_absolute', 'vertical_falloff_percentile']
