"""Core value types produced by world generation."""

from dataclasses import dataclass

from .terrain_types import DecorationShape, Material, TilePart


@dataclass(frozen=True, slots=True)
class Cell:
    """A solid terrain cell emitted by the generator.

    ``ore`` holds the ore profile name when ``material`` is ``Material.ORE``.
    """

    x: int
    y: int
    material: Material
    ore: str | None = None

    @property
    def tag(self) -> str:
        """Tile name a renderer looks up in its atlas."""
        if self.material == Material.ORE and self.ore is not None:
            return self.ore
        return self.material.tile_name


@dataclass(frozen=True, slots=True)
class DecorationTile:
    """One tile of a decoration in world coordinates."""

    x: int
    y: int
    part: TilePart


@dataclass(frozen=True, slots=True)
class Decoration:
    """A tree or ground cover anchored directly above a surface cell."""

    x: int
    y: int
    shape: DecorationShape
    height: int = 0  # trunk height, trees only
