"""Material classification of terrain rows: surface, subsurface, fill."""

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import Material

# Grid codes. Ore profiles take consecutive codes from ORE_CODE_BASE in
# configuration order.
EMPTY_CODE = 0
ORE_CODE_BASE = 4

_MATERIAL_CODES = {
    Material.SURFACE: 1,
    Material.SUBSURFACE: 2,
    Material.FILL: 3,
}


def material_value(material: Material) -> int:
    """Convert a non-ore Material to its grid code."""
    return _MATERIAL_CODES[material]


def value_to_material(value: int) -> Material | None:
    """Convert a grid code back to a Material.

    Returns None for EMPTY_CODE; every code at or past ORE_CODE_BASE is ore.
    """
    if value == EMPTY_CODE:
        return None
    if value >= ORE_CODE_BASE:
        return Material.ORE
    for material, code in _MATERIAL_CODES.items():
        if code == value:
            return material
    raise ValueError(f"Unknown material code: {value}")


def ore_value(ore_index: int) -> int:
    """Grid code of the ore at ore_index in the configured profile list."""
    return ORE_CODE_BASE + ore_index


def classify_cell(y: int, height: float, dirt_layer_height: int) -> Material:
    """Classify one row of a column, before ore or cave overrides.

    Boundaries are strict and checked top down, so a row sitting on a
    boundary goes to the category below it. A whole-number height has
    no surface row.
    """
    if y > height - 1:
        return Material.SURFACE
    if y > height - dirt_layer_height:
        return Material.SUBSURFACE
    return Material.FILL


def classify_columns(
    heights: NDArray[np.float64],
    depth: int,
    dirt_layer_height: int,
) -> NDArray[np.uint8]:
    """Classify every row of every column.

    Args:
        heights: Per-column heights, shape (width,).
        depth: Number of rows in the output grid.
        dirt_layer_height: Subsurface depth.

    Returns:
        Code grid of shape (depth, width); rows at or above a column's
        height hold EMPTY_CODE.
    """
    ys = np.arange(depth, dtype=np.float64)[:, np.newaxis]
    h = heights[np.newaxis, :]

    codes = np.where(
        ys > h - 1,
        material_value(Material.SURFACE),
        np.where(
            ys > h - dirt_layer_height,
            material_value(Material.SUBSURFACE),
            material_value(Material.FILL),
        ),
    ).astype(np.uint8)
    codes[~(ys < h)] = EMPTY_CODE
    return codes
