"""Procedural side-view terrain generation package.

Implements noise-driven heightmaps, layered material classification,
ore veins, cave carving, chunk indexing and tree/ground-cover placement.
"""

from .config import OreProfile, WorldGenConfig, validate_config
from .generator import (
    GenerationResult,
    generate_terrain,
    generate_world,
    make_rng,
    random_seed,
    terrain_stats,
)
from .validation import ValidationResult, validate_world

__all__ = [
    "GenerationResult",
    "OreProfile",
    "ValidationResult",
    "WorldGenConfig",
    "generate_terrain",
    "generate_world",
    "make_rng",
    "random_seed",
    "terrain_stats",
    "validate_config",
    "validate_world",
]
