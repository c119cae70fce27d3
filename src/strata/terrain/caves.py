"""Cave mask: decides which classified cells are solid."""

import numpy as np
from numpy.typing import NDArray

from .config import WorldGenConfig
from .noise import NoiseField


def cave_field(seed: float, config: WorldGenConfig) -> NoiseField:
    return NoiseField(config.cave_frequency, offset_x=seed, offset_y=seed)


def compute_cave_mask(
    seed: float,
    config: WorldGenConfig,
    width: int,
    depth: int,
) -> NDArray[np.bool_]:
    """Compute which cells are solid.

    A cell is solid where the cave noise exceeds ``surface_threshold``.
    With caves disabled every cell is solid. The mask only gates emission;
    it never changes a cell's material.

    Returns:
        Boolean array of shape (depth, width), True = solid.
    """
    if not config.generate_caves:
        return np.ones((depth, width), dtype=bool)
    return cave_field(seed, config).grid(width, depth) > config.surface_threshold
