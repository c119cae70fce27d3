"""Main world generation orchestration."""

from collections.abc import Iterator, Mapping
from typing import Any

import numpy as np
import structlog
from numpy.typing import NDArray
from scipy import ndimage

from ..chunks import Chunk, ChunkIndex
from ..terrain_types import DecorationShape, Material
from ..types import Cell, Decoration
from .caves import compute_cave_mask
from .classification import (
    EMPTY_CODE,
    ORE_CODE_BASE,
    classify_columns,
    material_value,
    value_to_material,
)
from .config import OreProfile, WorldGenConfig, validate_config
from .heightmap import column_heights, column_row_count, grid_depth
from .objects import place_decoration
from .ores import apply_ores, compute_ore_masks

logger = structlog.get_logger()

SEED_RANGE = (-1_000_000, 1_000_000)


class GenerationResult:
    """Result of one generation run with its intermediate fields."""

    def __init__(
        self,
        seed: float,
        config: WorldGenConfig,
        chunks: list[Chunk],
        decorations: list[Decoration],
        heights: NDArray[np.float64],
        materials: NDArray[np.uint8],
        solid: NDArray[np.bool_],
    ):
        self.seed = seed
        self.config = config
        self.chunks = chunks
        self.decorations = decorations
        self.heights = heights
        self.materials = materials
        self.solid = solid

    def cells(self) -> Iterator[Cell]:
        """Iterate emitted cells in chunk order."""
        for chunk in self.chunks:
            yield from chunk.cells

    def cell_count(self) -> int:
        return sum(len(chunk) for chunk in self.chunks)

    def cell_at(self, x: int, y: int) -> Cell | None:
        """Return the emitted cell at (x, y), or None for void or out of range."""
        if not 0 <= x < self.config.world_size:
            return None
        chunk = self.chunks[x // self.config.chunk_size]
        for cell in chunk.cells:
            if cell.x == x and cell.y == y:
                return cell
        return None


def make_rng(seed: float) -> np.random.Generator:
    """Derive the decoration random generator from a run seed.

    Integer and float seeds of equal value give the same generator.
    """
    bits = np.array(seed, dtype=np.float64).view(np.uint64).item()
    return np.random.default_rng(np.random.SeedSequence(bits))


def random_seed(rng: np.random.Generator | None = None) -> int:
    """Pick a fresh seed for hosts that do not supply one."""
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.integers(*SEED_RANGE))


def generate_terrain(
    seed: float,
    config: WorldGenConfig | Mapping[str, Any],
    rng: np.random.Generator | None = None,
) -> GenerationResult:
    """Generate a complete world.

    Every call starts from empty state; nothing is carried over between
    runs.

    Args:
        seed: Seed shared by all noise fields of the run.
        config: Generation configuration.
        rng: Random generator for decoration draws. Derived from seed
            when omitted, so identical arguments give identical worlds.

    Returns:
        GenerationResult with chunked cells and decorations.

    Raises:
        ConfigurationError: If config is invalid. Nothing is generated.
    """
    config = validate_config(config)
    if rng is None:
        rng = make_rng(seed)

    width = config.world_size
    log = logger.bind(seed=seed, world_size=width)
    log.info("terrain_generation_started", chunk_size=config.chunk_size)

    heights = column_heights(seed, config)
    depth = grid_depth(heights)

    materials = classify_columns(heights, depth, config.dirt_layer_height)
    ore_masks = compute_ore_masks(seed, config.ores, width, depth)
    materials = apply_ores(materials, heights, ore_masks, config.ores)
    solid = compute_cave_mask(seed, config, width, depth)

    index = ChunkIndex(width, config.chunk_size)
    decorations: list[Decoration] = []
    surface = material_value(Material.SURFACE)

    for chunk in index:
        for x in chunk.columns:
            rows = column_row_count(float(heights[x]))
            for y in range(rows):
                if solid[y, x]:
                    index.add(_make_cell(x, y, int(materials[y, x]), config.ores))

            if rows == 0:
                continue

            top_row = rows - 1
            supported = bool(solid[top_row, x] and materials[top_row, x] == surface)
            decoration = place_decoration(x, top_row, supported, rng, config)
            if decoration is not None:
                decorations.append(decoration)

    result = GenerationResult(
        seed=seed,
        config=config,
        chunks=index.chunks,
        decorations=decorations,
        heights=heights,
        materials=materials,
        solid=solid & (materials != EMPTY_CODE),
    )

    log.info(
        "terrain_generation_finished",
        cells=result.cell_count(),
        decorations=len(decorations),
        chunks=len(index),
    )
    log.debug("terrain_stats", **terrain_stats(result))

    return result


def generate_world(
    seed: float,
    config: WorldGenConfig | Mapping[str, Any],
    rng: np.random.Generator | None = None,
) -> tuple[list[Chunk], list[Decoration]]:
    """Generate a world and return just its chunks and decorations."""
    result = generate_terrain(seed, config, rng)
    return result.chunks, result.decorations


def _make_cell(x: int, y: int, code: int, ores: tuple[OreProfile, ...]) -> Cell:
    material = value_to_material(code)
    if material is None:
        raise ValueError(f"No material at ({x}, {y})")
    if material == Material.ORE:
        return Cell(x=x, y=y, material=material, ore=ores[code - ORE_CODE_BASE].name)
    return Cell(x=x, y=y, material=material)


def terrain_stats(result: GenerationResult) -> dict[str, int]:
    """Summarize a generated world.

    Counts cells per material and per ore, void cells inside the terrain,
    cave pockets (8-connected void regions) and decorations per shape.
    """
    counts: dict[str, int] = {material.value: 0 for material in Material}
    counts.update({f"ore_{profile.name}": 0 for profile in result.config.ores})

    for cell in result.cells():
        counts[cell.material.value] += 1
        if cell.ore is not None:
            counts[f"ore_{cell.ore}"] += 1

    void = (result.materials != EMPTY_CODE) & ~result.solid
    pockets = 0
    if void.size:
        structure = ndimage.generate_binary_structure(2, 2)
        _, pockets = ndimage.label(void, structure=structure)

    counts["void"] = int(np.sum(void))
    counts["cave_pockets"] = int(pockets)
    for shape in DecorationShape:
        counts[shape.value] = sum(1 for d in result.decorations if d.shape == shape)

    return counts
