"""Terrain material tags and decoration part types."""

from enum import Enum


class Material(str, Enum):
    """Material a terrain cell can hold."""

    SURFACE = "surface"
    SUBSURFACE = "subsurface"
    FILL = "fill"
    ORE = "ore"

    @property
    def tile_name(self) -> str:
        """Default atlas tile name for this material."""
        return _TILE_NAMES[self]


class TilePart(str, Enum):
    """Single-tile pieces that make up a decoration."""

    LOG = "log"
    LEAF = "leaf"
    TALL_GRASS = "tall_grass"


class DecorationShape(str, Enum):
    """Decoration kinds placed on top of surface cells."""

    TREE = "tree"
    GROUND_COVER = "ground_cover"


_TILE_NAMES = {
    Material.SURFACE: "grass",
    Material.SUBSURFACE: "dirt",
    Material.FILL: "stone",
    Material.ORE: "ore",
}
