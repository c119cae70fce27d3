"""Tests for configuration models and TOML loading."""

import tomllib

import pytest
from pydantic import ValidationError

from strata.config import find_config, list_configs, load_config
from strata.exceptions import ConfigurationError, StrataError
from strata.terrain.config import DEFAULT_ORES, OreProfile, WorldGenConfig, validate_config


class TestWorldGenConfig:
    """Tests for WorldGenConfig."""

    def test_defaults(self) -> None:
        config = WorldGenConfig()
        assert config.world_size == 100
        assert config.chunk_size == 16
        assert config.terrain_frequency == 0.05
        assert config.cave_frequency == 0.05
        assert config.surface_threshold == 0.25
        assert config.generate_caves is True
        assert config.height_multiplier == 4.0
        assert config.height_addition == 25.0
        assert config.dirt_layer_height == 5
        assert config.tree_spawn_chance == 10
        assert config.tall_grass_chance == 10
        assert config.min_tree_height == 4
        assert config.max_tree_height == 6
        assert [ore.name for ore in config.ores] == ["coal", "iron", "gold", "diamond"]

    def test_frozen(self) -> None:
        config = WorldGenConfig()
        with pytest.raises(ValidationError):
            config.world_size = 5  # type: ignore[misc]

    def test_ores_from_dicts(self) -> None:
        config = WorldGenConfig(
            ores=[{"name": "tin", "rarity": 0.5, "size": 0.1, "min_depth": 3}]
        )
        assert config.ores == (OreProfile(name="tin", rarity=0.5, size=0.1, min_depth=3),)

    def test_zero_world_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorldGenConfig(world_size=0)

    def test_equal_tree_heights_allowed(self) -> None:
        config = WorldGenConfig(min_tree_height=5, max_tree_height=5)
        assert config.min_tree_height == config.max_tree_height

    def test_non_positive_frequency_allowed(self) -> None:
        """Flat fields are a valid configuration, not an error."""
        config = WorldGenConfig(terrain_frequency=0.0, cave_frequency=-1.0)
        assert config.terrain_frequency == 0.0


class TestValidateConfig:
    """Tests for validate_config error reporting."""

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"world_size": 0}, "world_size"),
            ({"world_size": -3}, "world_size"),
            ({"chunk_size": 0}, "chunk_size"),
            ({"surface_threshold": 1.5}, "surface_threshold"),
            ({"dirt_layer_height": -1}, "dirt_layer_height"),
            ({"tree_spawn_chance": 0}, "tree_spawn_chance"),
            ({"min_tree_height": 7, "max_tree_height": 5}, "max_tree_height"),
        ],
    )
    def test_names_offending_field(self, overrides: dict, field: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(overrides)
        assert exc_info.value.field == field

    @pytest.mark.parametrize("key", ["rarity", "size", "min_depth"])
    def test_negative_ore_value(self, key: str) -> None:
        ore = {"name": "coal", "rarity": 0.5, "size": 0.1, "min_depth": 2}
        bad = {"name": "iron", "rarity": 0.5, "size": 0.1, "min_depth": 2, key: -1}

        with pytest.raises(ConfigurationError) as exc_info:
            validate_config({"ores": [ore, bad]})
        assert exc_info.value.field == f"ores.1.{key}"

    def test_unnamed_ore(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config({"ores": [{"name": "", "rarity": 0.5, "size": 0.1}]})
        assert exc_info.value.field == "ores.0.name"

    def test_catches_unvalidated_model(self) -> None:
        """Models built without validation are still checked."""
        config = WorldGenConfig.model_construct(chunk_size=-4)
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(config)
        assert exc_info.value.field == "chunk_size"

    def test_valid_model_round_trips(self) -> None:
        config = WorldGenConfig(world_size=12, ores=())
        assert validate_config(config).model_dump() == config.model_dump()

    def test_error_hierarchy(self) -> None:
        with pytest.raises(StrataError):
            validate_config({"world_size": 0})
        with pytest.raises(ValueError):
            validate_config({"world_size": 0})

    def test_message_includes_field(self) -> None:
        with pytest.raises(ConfigurationError, match="chunk_size"):
            validate_config({"chunk_size": 0})


class TestLoadConfig:
    """Tests for TOML config loading."""

    def test_load_terrain_table(self, tmp_path) -> None:
        path = tmp_path / "world.toml"
        path.write_text(
            """
[terrain]
world_size = 40
chunk_size = 8
generate_caves = false

[[terrain.ores]]
name = "ruby"
rarity = 0.9
size = 0.2
min_depth = 4
"""
        )
        config = load_config(path)

        assert config.world_size == 40
        assert config.chunk_size == 8
        assert config.generate_caves is False
        assert config.ores == (OreProfile(name="ruby", rarity=0.9, size=0.2, min_depth=4),)

    def test_load_top_level(self, tmp_path) -> None:
        path = tmp_path / "world.toml"
        path.write_text("world_size = 12\n")
        assert load_config(path).world_size == 12

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_value(self, tmp_path) -> None:
        path = tmp_path / "world.toml"
        path.write_text("[terrain]\nchunk_size = 0\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)
        assert exc_info.value.field == "chunk_size"

    def test_malformed_toml(self, tmp_path) -> None:
        path = tmp_path / "world.toml"
        path.write_text("[terrain\n")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)


class TestFindConfig:
    """Tests for bundled config lookup."""

    def test_bundled_default_matches_model_defaults(self) -> None:
        config = load_config(find_config("default"))
        assert config.model_dump() == WorldGenConfig().model_dump()
        assert config.ores == DEFAULT_ORES

    def test_bundled_flat(self) -> None:
        config = load_config(find_config("flat"))
        assert config.terrain_frequency == 0.0
        assert config.ores == ()

    def test_list_configs(self) -> None:
        assert {"default", "flat"} <= set(list_configs())

    def test_explicit_path(self, tmp_path) -> None:
        path = tmp_path / "mine.toml"
        path.write_text("world_size = 3\n")
        assert find_config(str(path)) == path

    def test_unknown_name(self) -> None:
        with pytest.raises(FileNotFoundError):
            find_config("no-such-config")
