"""
py-worldgen: deterministic transforms over heightmap grids.
"""

import structlog

from .utils.log import configure_logging
from .core import (
    GridError, InvalidGridError, ShapeMismatchError, OutOfRangeError,
    Grid, as_grid, height, width, min_value, max_value,
    merge, remap, map_range, curve, ridge,
    distance_percentage, circular_falloff_percentile,
    circular_falloff_absolute, vertical_falloff_percentile,
)

__version__ = "0.1.0"

# Leave logging alone when the host application already set up structlog
if not structlog.is_configured():
    configure_logging()

__all__ = ['configure_logging',
           'GridError', 'InvalidGridError', 'ShapeMismatchError', 'OutOfRangeError',
           'Grid', 'as_grid', 'height', 'width', 'min_value', 'max_value',
           'merge', 'remap', 'map_range', 'curve', 'ridge',
           'distance_percentage', 'circular_falloff_percentile',
           'circular_falloff_absolute', 'vertical_falloff_percentile']
