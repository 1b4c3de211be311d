"""
Tests for merge, remap, curve and ridge.
"""

import math
import warnings

import pytest
import numpy as np
from py_worldgen.core.grid import Grid, min_value, max_value
from py_worldgen.core.transforms import merge, remap, map_range, curve, ridge
from py_worldgen.core.exceptions import OutOfRangeError, ShapeMismatchError


@pytest.fixture
def random_grids():
    """Create two random grids of the same shape."""
    rng = np.random.default_rng(42)
    a = Grid(rng.uniform(-50, 150, size=(16, 24)))
    b = Grid(rng.uniform(0, 1, size=(16, 24)))
    return a, b


@pytest.fixture
def ramp_grid():
    """2x2 grid holding 0..3."""
    return Grid.from_rows([[0, 1], [2, 3]])


class TestMerge:
    """Test linear interpolation of two grids."""

    def test_merge_with_itself(self):
        """Test that blending a grid with itself changes nothing."""
        grid = Grid.filled(3, 3, 1.0)

        merged = merge(grid, grid, 0.5)

        assert merged.shape == (3, 3)
        np.testing.assert_array_equal(merged.values, np.ones((3, 3)))

    def test_weight_extremes(self, random_grids):
        """Test that weight 1.0 returns a and 0.0 returns b."""
        a, b = random_grids

        np.testing.assert_array_equal(merge(a, b, 1.0).values, a.values)
        np.testing.assert_array_equal(merge(a, b, 0.0).values, b.values)

    def test_weighted_blend(self):
        """Test the interpolation formula."""
        a = Grid.from_rows([[10.0, 0.0]])
        b = Grid.from_rows([[0.0, 4.0]])

        merged = merge(a, b, 0.25)

        np.testing.assert_allclose(merged.values, [[2.5, 3.0]])

    def test_returns_new_grid(self, random_grids):
        """Test that inputs are left alone."""
        a, b = random_grids
        before = a.values.copy()

        merged = merge(a, b, 0.3)

        assert merged is not a
        np.testing.assert_array_equal(a.values, before)

    @pytest.mark.parametrize("shape", [(16, 23), (15, 24), (24, 16)])
    @pytest.mark.parametrize("weight", [0.0, 0.5, 1.0, 2.0])
    def test_shape_mismatch(self, random_grids, shape, weight):
        """Test that differently shaped grids are rejected for any weight."""
        a, _ = random_grids
        other = Grid(np.zeros(shape))

        with pytest.raises(ShapeMismatchError) as exc_info:
            merge(a, other, weight)

        assert exc_info.value.expected == (16, 24)
        assert exc_info.value.actual == shape

    @pytest.mark.parametrize("weight", [-0.01, 1.01, -5.0, math.nan])
    def test_weight_out_of_range(self, random_grids, weight):
        """Test that weights outside [0, 1] are rejected, not clamped."""
        a, b = random_grids

        with pytest.raises(OutOfRangeError) as exc_info:
            merge(a, b, weight)

        assert exc_info.value.name == "weight"


class TestRemap:
    """Test range remapping."""

    def test_known_values(self, ramp_grid):
        """Test remapping 0..3 onto 0..10."""
        mapped = remap(ramp_grid, 0.0, 10.0)

        np.testing.assert_allclose(mapped.values, [[0.0, 3.333], [6.667, 10.0]], atol=1e-3)

    def test_output_within_bounds(self, random_grids):
        """Test that the output spans exactly the target range."""
        a, _ = random_grids

        mapped = remap(a, -5.0, 5.0)

        assert np.all(mapped.values >= -5.0 - 1e-4)
        assert np.all(mapped.values <= 5.0 + 1e-4)
        assert min_value(mapped) == pytest.approx(-5.0, abs=1e-4)
        assert max_value(mapped) == pytest.approx(5.0, abs=1e-4)

    def test_flat_grid(self):
        """Test that a flat grid maps every cell to the lower bound."""
        mapped = remap(Grid.filled(4, 4, 7.0), 2.0, 9.0)

        assert not np.any(np.isnan(mapped.values))
        assert np.all(mapped.values == 2.0)

    @pytest.mark.parametrize("bounds", [(1.0, 1.0), (5.0, 0.0), (math.nan, 1.0)])
    def test_bounds_out_of_order(self, ramp_grid, bounds):
        """Test that min >= max is rejected."""
        with pytest.raises(OutOfRangeError):
            remap(ramp_grid, *bounds)

    def test_map_range_alias(self, ramp_grid):
        """Test the map_range alias."""
        assert map_range is remap
        assert map_range(ramp_grid, 0.0, 1.0).allclose([[0.0, 1 / 3], [2 / 3, 1.0]])


class TestCurve:
    """Test power curves."""

    def test_identity_power(self, random_grids):
        """Test that power 1.0 returns the same values."""
        a, _ = random_grids
        np.testing.assert_array_equal(curve(a, 1.0).values, a.values)

    def test_square(self, ramp_grid):
        """Test squaring."""
        np.testing.assert_allclose(curve(ramp_grid, 2.0).values, [[0, 1], [4, 9]])

    def test_negative_base_fractional_power(self):
        """Test that a negative base with a fractional power gives NaN."""
        curved = curve(Grid.from_rows([[-4.0, 4.0]]), 0.5)

        assert math.isnan(curved.values[0, 0])
        assert curved.values[0, 1] == 2.0

    def test_overflow_becomes_inf(self):
        """Test that results past float32 range become inf without warnings."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            curved = curve(Grid.from_rows([[1e30, -1e30]]), 2.0)

        assert curved.values[0, 0] == math.inf
        assert curved.values[0, 1] == math.inf


class TestRidge:
    """Test ridge folding."""

    def test_known_values(self, ramp_grid):
        """Test ridge of 0..3 around center 1.5."""
        np.testing.assert_allclose(ridge(ramp_grid).values, [[0, 2], [2, 0]])

    def test_flat_grid(self):
        """Test that a flat grid ridges to zeros without NaN."""
        ridged = ridge(Grid.filled(3, 5, 42.0))

        assert ridged.shape == (3, 5)
        assert np.all(ridged.values == 0.0)

    def test_extremes_become_lowest(self, random_grids):
        """Test that the original min and max cells end up at zero."""
        a, _ = random_grids
        ridged = ridge(a)

        lowest = np.unravel_index(np.argmin(a.values), a.shape)
        highest = np.unravel_index(np.argmax(a.values), a.shape)

        assert ridged.values[lowest] == pytest.approx(0.0, abs=1e-3)
        assert ridged.values[highest] == pytest.approx(0.0, abs=1e-3)
        assert np.all(ridged.values >= -1e-3)
