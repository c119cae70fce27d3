"""Shared test fixtures for generation tests."""

import pytest

from strata.terrain.config import OreProfile, WorldGenConfig


@pytest.fixture
def flat_config() -> WorldGenConfig:
    """Single column of height 9.5: no caves, no ores.

    Frequency 0 flattens the heightmap noise to 0.5, so the column height
    is 0.5 * 1.0 + 9.0.
    """
    return WorldGenConfig(
        world_size=1,
        chunk_size=16,
        terrain_frequency=0.0,
        height_multiplier=1.0,
        height_addition=9.0,
        dirt_layer_height=5,
        generate_caves=False,
        ores=(),
    )


@pytest.fixture
def small_config() -> WorldGenConfig:
    """Default settings on a 64-column world."""
    return WorldGenConfig(world_size=64)


@pytest.fixture
def lush_config() -> WorldGenConfig:
    """World where most surface columns roll a decoration."""
    return WorldGenConfig(world_size=96, tree_spawn_chance=2, tall_grass_chance=2)


@pytest.fixture
def everywhere_ores() -> tuple[OreProfile, OreProfile]:
    """Two ore profiles whose veins cover every cell."""
    return (
        OreProfile(name="copper", rarity=0.0, size=0.0, min_depth=0),
        OreProfile(name="tin", rarity=0.0, size=0.0, min_depth=0),
    )
