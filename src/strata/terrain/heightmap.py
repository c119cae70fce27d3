"""Per-column terrain heights derived from noise."""

import math

import numpy as np
from numpy.typing import NDArray

from .config import WorldGenConfig
from .noise import NoiseField


def terrain_field(seed: float, config: WorldGenConfig) -> NoiseField:
    """Noise field the heightmap is sliced from.

    The slice is taken at y = seed, so heights vary only with x.
    """
    return NoiseField(config.terrain_frequency, offset_x=seed, offset_y=0.0)


def column_heights(seed: float, config: WorldGenConfig) -> NDArray[np.float64]:
    """Compute the real-valued terrain height of every column.

    Returns:
        Array of shape (world_size,).
    """
    xs = np.arange(config.world_size, dtype=np.float64)
    noise = terrain_field(seed, config).sample(xs, seed)
    return noise * config.height_multiplier + config.height_addition


def column_height(seed: float, config: WorldGenConfig, x: int) -> float:
    """Height of a single column."""
    noise = terrain_field(seed, config).value_at(x, seed)
    return noise * config.height_multiplier + config.height_addition


def column_row_count(height: float) -> int:
    """Number of integer rows y >= 0 with y < height."""
    if height <= 0:
        return 0
    return math.ceil(height)


def grid_depth(heights: NDArray[np.float64]) -> int:
    """Rows needed to hold the tallest column."""
    if heights.size == 0:
        return 0
    return column_row_count(float(heights.max()))
