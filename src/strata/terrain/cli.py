"""Command-line interface for world generation."""

import argparse
import sys
import time
from typing import TYPE_CHECKING

import structlog

from ..exceptions import ConfigurationError
from ..terrain_types import Material, TilePart

if TYPE_CHECKING:
    from .generator import GenerationResult

_CELL_CHARS = {
    Material.SURFACE: '"',
    Material.SUBSURFACE: "%",
    Material.FILL: "#",
    Material.ORE: "*",
}
_TILE_CHARS = {
    TilePart.LOG: "|",
    TilePart.LEAF: "^",
    TilePart.TALL_GRASS: ",",
}


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for world generation."""
    parser = argparse.ArgumentParser(
        description="Generate a side-view world of terrain, caves, ores and trees"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Config name from configs/ or path to a TOML file",
    )
    parser.add_argument(
        "--seed", type=float, default=None, help="World seed (default: random)"
    )
    parser.add_argument(
        "--world-size", type=int, default=None, help="Override world width"
    )
    parser.add_argument(
        "--chunk-size", type=int, default=None, help="Override chunk width"
    )
    parser.add_argument(
        "--no-caves", action="store_true", help="Disable cave generation"
    )
    parser.add_argument(
        "--preview", action="store_true", help="Print an ASCII rendering of the world"
    )
    parser.add_argument(
        "--validate", action="store_true", help="Check invariants after generating"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(10 if args.verbose else 20),
    )

    # Import here to avoid slow startup for --help
    from ..config import find_config, load_config
    from .config import WorldGenConfig, validate_config
    from .generator import generate_terrain, random_seed, terrain_stats
    from .validation import validate_world

    overrides = {
        "world_size": args.world_size,
        "chunk_size": args.chunk_size,
        "generate_caves": False if args.no_caves else None,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}

    try:
        config = load_config(find_config(args.config)) if args.config else WorldGenConfig()
        config = validate_config({**config.model_dump(), **overrides})
    except ConfigurationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    seed = args.seed if args.seed is not None else random_seed()

    print(f"Generating {config.world_size}-column world with seed {seed:g}")

    start_time = time.time()
    result = generate_terrain(seed, config)
    gen_time = time.time() - start_time

    print(f"Generation complete in {gen_time:.2f}s")
    for name, count in terrain_stats(result).items():
        print(f"  {name}: {count:,}")

    if args.preview:
        print()
        print(render_ascii(result))

    if args.validate:
        validation = validate_world(result)
        print()
        print("Validation passed" if validation.passed else "Validation FAILED")
        for error in validation.errors:
            print(f"  error: {error}")
        for warning in validation.warnings:
            print(f"  warning: {warning}")
        if not validation.passed:
            return 1

    return 0


def render_ascii(result: "GenerationResult") -> str:
    """Render a result as text, highest row first.

    Decoration tiles overwrite whatever is beneath them; tiles beyond the
    world edge are dropped.
    """
    from .objects import decoration_tiles

    width = result.config.world_size
    tiles = [
        tile
        for decoration in result.decorations
        for tile in decoration_tiles(decoration)
        if 0 <= tile.x < width
    ]
    top = max([result.materials.shape[0] - 1] + [tile.y for tile in tiles])

    grid = [[" "] * width for _ in range(top + 1)]
    for cell in result.cells():
        grid[cell.y][cell.x] = _CELL_CHARS[cell.material]
    for tile in tiles:
        grid[tile.y][tile.x] = _TILE_CHARS[tile.part]

    return "\n".join("".join(row).rstrip() for row in reversed(grid))


if __name__ == "__main__":
    sys.exit(main())
