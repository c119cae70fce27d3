"""Chunk-based spatial indexing of generated cells."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .types import Cell


def chunk_of(x: int, chunk_size: int) -> int:
    """Return the index of the chunk containing column x."""
    return x // chunk_size


def chunk_count(world_size: int, chunk_size: int) -> int:
    """Number of chunks needed to cover world_size columns."""
    return (world_size + chunk_size - 1) // chunk_size


@dataclass
class Chunk:
    """A run of chunk_size consecutive columns and the cells placed in them."""

    index: int
    start_x: int
    end_x: int  # exclusive
    cells: list[Cell] = field(default_factory=list)

    @property
    def columns(self) -> range:
        """World columns covered by this chunk."""
        return range(self.start_x, self.end_x)

    def contains_column(self, x: int) -> bool:
        return self.start_x <= x < self.end_x

    def __len__(self) -> int:
        return len(self.cells)


class ChunkIndex:
    """Partitions cells into fixed-width column chunks.

    All chunks are created up front so that lookup by column is O(1)
    and teardown is a walk over the chunk list. The last chunk is
    truncated at the world edge.
    """

    def __init__(self, world_size: int, chunk_size: int):
        if world_size <= 0:
            raise ValueError(f"world_size must be positive, got {world_size}")
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self.world_size = world_size
        self.chunk_size = chunk_size
        self._chunks: list[Chunk] = [
            Chunk(
                index=i,
                start_x=i * chunk_size,
                end_x=min((i + 1) * chunk_size, world_size),
            )
            for i in range(chunk_count(world_size, chunk_size))
        ]

    @property
    def chunks(self) -> list[Chunk]:
        """Chunks in increasing column order."""
        return self._chunks

    def chunk_for(self, x: int) -> Chunk:
        """Return the chunk containing column x.

        Raises:
            IndexError: If x is outside the world.
        """
        if not 0 <= x < self.world_size:
            raise IndexError(f"Column {x} outside world of size {self.world_size}")
        return self._chunks[chunk_of(x, self.chunk_size)]

    def add(self, cell: Cell) -> Chunk:
        """Append a cell to the chunk owning its column."""
        chunk = self.chunk_for(cell.x)
        chunk.cells.append(cell)
        return chunk

    def cells(self) -> Iterator[Cell]:
        """Iterate all cells, chunk by chunk."""
        for chunk in self._chunks:
            yield from chunk.cells

    def cell_count(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def clear(self) -> None:
        """Drop every placed cell, keeping the empty chunk layout."""
        for chunk in self._chunks:
            chunk.cells.clear()

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)
