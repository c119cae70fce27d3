"""World generation configuration models."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from ..exceptions import ConfigurationError


class OreProfile(BaseModel, frozen=True):
    """Noise-driven ore vein parameters.

    A cell is eligible for the ore where the ore's noise field exceeds
    ``rarity`` and the cell lies more than ``min_depth`` rows below the
    column surface.
    """

    name: str = Field(min_length=1, description="Ore label, e.g. 'coal'")
    rarity: float = Field(ge=0.0, description="Noise threshold a vein must exceed")
    size: float = Field(ge=0.0, description="Vein noise frequency")
    min_depth: int = Field(
        default=0, ge=0, description="Rows below the surface before the ore appears"
    )


DEFAULT_ORES: tuple[OreProfile, ...] = (
    OreProfile(name="coal", rarity=0.70, size=0.18, min_depth=5),
    OreProfile(name="iron", rarity=0.72, size=0.16, min_depth=10),
    OreProfile(name="gold", rarity=0.76, size=0.11, min_depth=15),
    OreProfile(name="diamond", rarity=0.80, size=0.05, min_depth=20),
)


class WorldGenConfig(BaseModel, frozen=True):
    """Complete world generation configuration."""

    world_size: int = Field(default=100, gt=0, description="World width in columns")
    chunk_size: int = Field(default=16, gt=0, description="Columns per chunk")

    terrain_frequency: float = Field(
        default=0.05, description="Heightmap noise frequency (<= 0 gives flat terrain)"
    )
    cave_frequency: float = Field(default=0.05, description="Cave noise frequency")
    surface_threshold: float = Field(
        default=0.25, ge=0.0, le=1.0, description="Cave noise value a solid cell must exceed"
    )
    generate_caves: bool = Field(default=True, description="Hollow out caves")

    height_multiplier: float = Field(default=4.0, description="Heightmap amplitude")
    height_addition: float = Field(default=25.0, description="Base terrain height")
    dirt_layer_height: int = Field(default=5, ge=0, description="Subsurface depth")

    tree_spawn_chance: int = Field(
        default=10, ge=1, description="Trees spawn on 1 in N surface columns"
    )
    tall_grass_chance: int = Field(
        default=10, ge=1, description="Ground cover spawns on 1 in N remaining columns"
    )
    min_tree_height: int = Field(default=4, ge=0, description="Shortest trunk")
    max_tree_height: int = Field(default=6, ge=0, description="Tallest trunk")

    ores: tuple[OreProfile, ...] = Field(
        default=DEFAULT_ORES,
        max_length=250,
        description="Ore profiles in priority order",
    )

    @field_validator("max_tree_height")
    @classmethod
    def _max_not_below_min(cls, value: int, info: ValidationInfo) -> int:
        minimum = info.data.get("min_tree_height")
        if minimum is not None and value < minimum:
            raise ValueError(
                f"max_tree_height ({value}) is below min_tree_height ({minimum})"
            )
        return value


def validate_config(config: WorldGenConfig | Mapping[str, Any]) -> WorldGenConfig:
    """Validate a configuration before a generation run.

    Accepts either a model (re-validated, so instances built with
    ``model_construct`` are checked too) or a plain mapping.

    Args:
        config: Configuration to check.

    Returns:
        A validated WorldGenConfig.

    Raises:
        ConfigurationError: Naming the first offending field.
    """
    if isinstance(config, WorldGenConfig):
        data: Mapping[str, Any] = config.model_dump()
    else:
        data = config

    try:
        return WorldGenConfig.model_validate(dict(data))
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "config"
        raise ConfigurationError(field, error["msg"]) from exc
