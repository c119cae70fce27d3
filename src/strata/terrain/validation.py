"""Post-generation invariant checks."""

import structlog

from ..terrain_types import DecorationShape, Material
from .generator import GenerationResult
from .heightmap import column_row_count

logger = structlog.get_logger()


class ValidationResult:
    """Result of world validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_world(result: GenerationResult) -> ValidationResult:
    """Check a generated world against the generator's invariants.

    Args:
        result: Output of generate_terrain.

    Returns:
        ValidationResult with any errors/warnings.
    """
    validation = ValidationResult()

    _check_chunk_containment(result, validation)
    _check_cells_within_columns(result, validation)
    _check_unique_cells(result, validation)
    _check_decoration_anchors(result, validation)
    _check_tree_heights(result, validation)

    if validation.passed:
        logger.info("terrain_validation_passed", seed=result.seed)
    else:
        logger.warning(
            "terrain_validation_failed", seed=result.seed, errors=len(validation.errors)
        )
        for error in validation.errors:
            logger.error("terrain_validation_error", detail=error)

    for warning in validation.warnings:
        logger.warning("terrain_validation_warning", detail=warning)

    return validation


def _check_chunk_containment(result: GenerationResult, validation: ValidationResult) -> None:
    """Every cell lives in the chunk its column maps to."""
    chunk_size = result.config.chunk_size
    misplaced = 0

    for chunk in result.chunks:
        for cell in chunk.cells:
            if cell.x // chunk_size != chunk.index:
                misplaced += 1

    if misplaced:
        validation.add_error(f"{misplaced} cells stored in the wrong chunk")


def _check_cells_within_columns(result: GenerationResult, validation: ValidationResult) -> None:
    """No cell sits at or above its column's height."""
    outside = 0
    for cell in result.cells():
        if not 0 <= cell.y < column_row_count(float(result.heights[cell.x])):
            outside += 1

    if outside:
        validation.add_error(f"{outside} cells outside their column height")


def _check_unique_cells(result: GenerationResult, validation: ValidationResult) -> None:
    seen: set[tuple[int, int]] = set()
    duplicates = 0
    for cell in result.cells():
        key = (cell.x, cell.y)
        if key in seen:
            duplicates += 1
        seen.add(key)

    if duplicates:
        validation.add_error(f"{duplicates} duplicate cell positions")


def _check_decoration_anchors(result: GenerationResult, validation: ValidationResult) -> None:
    """Every decoration stands on an emitted surface cell."""
    unanchored = 0
    for decoration in result.decorations:
        below = result.cell_at(decoration.x, decoration.y - 1)
        if below is None or below.material != Material.SURFACE:
            unanchored += 1

    if unanchored:
        validation.add_error(f"{unanchored} decorations not resting on a surface cell")

    columns = [d.x for d in result.decorations]
    if len(columns) != len(set(columns)):
        validation.add_error("More than one decoration in a column")


def _check_tree_heights(result: GenerationResult, validation: ValidationResult) -> None:
    config = result.config
    bad = [
        d
        for d in result.decorations
        if d.shape == DecorationShape.TREE
        and not config.min_tree_height <= d.height <= config.max_tree_height
    ]
    if bad:
        validation.add_error(f"{len(bad)} trees outside the configured height range")

    # Trees on adjacent columns share leaf tiles
    tree_columns = sorted(d.x for d in result.decorations if d.shape == DecorationShape.TREE)
    crowded = sum(1 for a, b in zip(tree_columns, tree_columns[1:]) if b - a <= 4)
    if crowded:
        validation.add_warning(f"{crowded} pairs of trees with overlapping crowns")
