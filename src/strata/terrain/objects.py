"""Decoration placement: trees and tall grass on surface columns."""

import numpy as np

from ..terrain_types import DecorationShape, TilePart
from ..types import Decoration, DecorationTile
from .config import WorldGenConfig

# Outcome of a "1 in N" draw that counts as a hit.
SPAWN_OUTCOME = 1

# Leaf offsets relative to the first tile above the trunk, (dx, dy).
# Layout for a trunk of height 4 anchored at the bottom "d":
#
#       c
#      bcb
#     abcba
#       d
#       d
#       d
#       d
TREE_LEAF_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, 0),
    (0, 1),
    (0, 2),
    (-1, 0),
    (-1, 1),
    (1, 0),
    (1, 1),
    (-2, 0),
    (2, 0),
)


def roll(rng: np.random.Generator, chance: int) -> bool:
    """Draw an integer in [0, chance) and report whether it hit SPAWN_OUTCOME."""
    return int(rng.integers(0, chance)) == SPAWN_OUTCOME


def tree_footprint(height: int) -> list[tuple[int, int, TilePart]]:
    """Tiles of a tree relative to its anchor.

    Args:
        height: Trunk height.

    Returns:
        (dx, dy, part) tuples; logs first, then leaves.
    """
    tiles = [(0, dy, TilePart.LOG) for dy in range(height)]
    tiles.extend((dx, height + dy, TilePart.LEAF) for dx, dy in TREE_LEAF_OFFSETS)
    return tiles


def decoration_tiles(decoration: Decoration) -> list[DecorationTile]:
    """Expand a decoration into world-space tiles.

    Leaves may hang past the world edge; callers clip if they need to.
    """
    if decoration.shape == DecorationShape.GROUND_COVER:
        return [DecorationTile(decoration.x, decoration.y, TilePart.TALL_GRASS)]
    return [
        DecorationTile(decoration.x + dx, decoration.y + dy, part)
        for dx, dy, part in tree_footprint(decoration.height)
    ]


def place_decoration(
    x: int,
    top_row: int,
    supported: bool,
    rng: np.random.Generator,
    config: WorldGenConfig,
) -> Decoration | None:
    """Decide what, if anything, grows on top of a column.

    The tree draw comes first. Only when it does not produce a tree is a
    second, independent draw made for ground cover. Either one needs
    ``supported``: a solid surface cell at (x, top_row). Overlap with
    neighbouring trees is not checked.

    Args:
        x: Column.
        top_row: Highest row of the column.
        supported: Whether a solid surface cell sits at (x, top_row).
        rng: Run random generator.
        config: Generation configuration.

    Returns:
        Decoration anchored at (x, top_row + 1), or None.
    """
    if roll(rng, config.tree_spawn_chance) and supported:
        height = int(rng.integers(config.min_tree_height, config.max_tree_height + 1))
        return Decoration(x=x, y=top_row + 1, shape=DecorationShape.TREE, height=height)

    if roll(rng, config.tall_grass_chance) and supported:
        return Decoration(x=x, y=top_row + 1, shape=DecorationShape.GROUND_COVER)

    return None
