"""Tile data model: a square boolean bitmap with an id."""

import numpy as np
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from features.edges import SIDES, edge_fingerprints


def orientations(grid: np.ndarray) -> Iterator[np.ndarray]:
    """
    Yield the 8 rigid orientations of a square bitmap.
    
    The 4 clockwise rotations come first, then the 4 rotations of the
    column-flipped bitmap. Index 0 is the bitmap itself.
    """
    for flipped in (False, True):
        base = grid[:, ::-1] if flipped else grid
        for turns in range(4):
            yield np.rot90(base, k=-turns)


@dataclass(eq=False)
class Tile:
    """
    A single square tile of the mosaic.
    
    Transforms never mutate the tile; they return a new Tile with the same
    id, so whoever holds a Tile owns that exact orientation.
    
    Attributes:
        id: Tile identifier from the input header
        grid: Square 2D boolean array
        edges: The 8 border encodings (see features.edges.edge_fingerprints)
    """
    id: int
    grid: np.ndarray
    edges: Tuple[int, ...] = field(init=False, repr=False)
    
    def __post_init__(self):
        grid = np.array(self.grid, dtype=bool)
        if grid.ndim != 2 or grid.size == 0:
            raise ValueError(f"Tile {self.id}: grid must be a non-empty 2D array, got shape {grid.shape}")
        if grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Tile {self.id}: grid must be square, got {grid.shape[0]}x{grid.shape[1]}")
        
        grid.flags.writeable = False
        self.grid = grid
        self.edges = edge_fingerprints(grid)
    
    @property
    def size(self) -> int:
        return self.grid.shape[0]
    
    def edge(self, side: str, reverse: bool = False) -> int:
        """Encoding of one border, optionally read backwards."""
        idx = SIDES.index(side)
        return self.edges[idx + 4] if reverse else self.edges[idx]
    
    def rotate(self, n: int = 1) -> 'Tile':
        """Rotate 90 degrees clockwise n times."""
        return Tile(self.id, np.rot90(self.grid, k=-(n % 4)))
    
    def flip_rows(self) -> 'Tile':
        """Reverse the row order (mirror top to bottom)."""
        return Tile(self.id, self.grid[::-1, :])
    
    def flip_cols(self) -> 'Tile':
        """Reverse each row (mirror left to right)."""
        return Tile(self.id, self.grid[:, ::-1])
    
    def orientations(self) -> List['Tile']:
        return [Tile(self.id, g) for g in orientations(self.grid)]
    
    def interior(self) -> np.ndarray:
        """Grid with the outer ring of pixels stripped."""
        return self.grid[1:-1, 1:-1]
    
    def same_pixels(self, other: 'Tile') -> bool:
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))
    
    def to_text(self) -> str:
        """Render back to the input block format."""
        rows = [''.join('#' if px else '.' for px in row) for row in self.grid]
        return '\n'.join([f"Tile {self.id}:"] + rows)
