"""Ore vein masks and fill-material overrides."""

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import Material
from .classification import material_value, ore_value
from .config import OreProfile
from .noise import NoiseField


def ore_field(seed: float, profile: OreProfile) -> NoiseField:
    """Noise field deciding where an ore's veins run."""
    return NoiseField(profile.size, offset_x=seed, offset_y=seed)


def compute_ore_masks(
    seed: float,
    ores: tuple[OreProfile, ...],
    width: int,
    depth: int,
) -> list[NDArray[np.bool_]]:
    """Precompute the vein mask of every ore profile.

    Returns:
        One boolean array of shape (depth, width) per profile, True where
        the profile's noise exceeds its rarity.
    """
    return [ore_field(seed, profile).grid(width, depth) > profile.rarity for profile in ores]


def apply_ores(
    codes: NDArray[np.uint8],
    heights: NDArray[np.float64],
    masks: list[NDArray[np.bool_]],
    ores: tuple[OreProfile, ...],
) -> NDArray[np.uint8]:
    """Replace fill cells with ore where a profile qualifies.

    A fill cell at row y becomes a profile's ore when the profile's mask
    is set there and ``height - y > min_depth``. Profiles are applied in
    order and only ever overwrite fill, so the first qualifying profile
    wins.

    Args:
        codes: Classified code grid, shape (depth, width).
        heights: Per-column heights.
        masks: Vein masks from compute_ore_masks.
        ores: Profiles matching masks.

    Returns:
        New code grid with ore codes applied.
    """
    result = codes.copy()
    depth = codes.shape[0]
    below_surface = heights[np.newaxis, :] - np.arange(depth, dtype=np.float64)[:, np.newaxis]
    fill = material_value(Material.FILL)

    for i, (profile, mask) in enumerate(zip(ores, masks, strict=True)):
        eligible = (result == fill) & mask & (below_surface > profile.min_depth)
        result[eligible] = ore_value(i)

    return result
