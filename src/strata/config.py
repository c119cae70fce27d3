"""Generation configuration loading from TOML files."""

import tomllib
from pathlib import Path

from .terrain.config import WorldGenConfig, validate_config


def load_config(config_path: Path) -> WorldGenConfig:
    """Load a generation configuration from a TOML file.

    Options are read from the ``[terrain]`` table when present, otherwise
    from the top level. Ore profiles are ``[[terrain.ores]]`` entries.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Validated WorldGenConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        ConfigurationError: If an option is invalid.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return validate_config(data.get("terrain", data))


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends in .toml
    2. configs/{name}.toml
    3. configs/{name}

    Args:
        name: Config name or path.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    configs_dir = Path(__file__).parent.parent.parent / "configs"

    config_path = configs_dir / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = configs_dir / name
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {configs_dir}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    configs_dir = Path(__file__).parent.parent.parent / "configs"
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))
