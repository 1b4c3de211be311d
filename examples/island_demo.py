"""
Example shaping a synthetic heightmap into an island.

Noise generation is out of scope for the library, so this uses smoothed
random values as a stand-in for an upstream noise generator.
"""

import numpy as np
from py_worldgen import (
    Grid, merge, remap, curve, ridge,
    circular_falloff_absolute, vertical_falloff_percentile,
    min_value, max_value,
)


def fake_noise(height: int, width: int, seed: int) -> Grid:
    """Box-blurred white noise."""
    rng = np.random.default_rng(seed)
    noise = rng.random((height, width))
    for _ in range(4):
        noise = (noise + np.roll(noise, 1, 0) + np.roll(noise, -1, 0)
                 + np.roll(noise, 1, 1) + np.roll(noise, -1, 1)) / 5
    return Grid(noise)


def main():
    height, width = 96, 128

    base = remap(fake_noise(height, width, seed=1), 0.0, 1.0)
    ridges = ridge(remap(fake_noise(height, width, seed=2), 0.0, 1.0))

    # Mostly rolling terrain with some ridge detail
    terrain = merge(base, remap(ridges, 0.0, 1.0), 0.7)
    terrain = curve(terrain, 1.5)

    island = circular_falloff_absolute(terrain, 1.2)
    island = remap(island, 0.0, 100.0)

    # Distance from the equator row, e.g. for a temperature layer
    latitude = vertical_falloff_percentile(island, 0)

    print(f"Island:   {island.height}x{island.width}, "
          f"range {min_value(island):.1f}..{max_value(island):.1f}")
    print(f"Land (>= 20): {np.mean(island.values >= 20):.1%}")
    print(f"Latitude: range {min_value(latitude):.0f}..{max_value(latitude):.0f}")


if __name__ == "__main__":
    main()
