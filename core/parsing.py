"""Parsing of tile blocks and search patterns from puzzle text."""

import re
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .tile import Tile

HEADER_RE = re.compile(r"^Tile (\d+):$")
BLOCK_SEPARATOR_RE = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class Pattern:
    """
    A search shape given by the offsets of its set pixels.
    
    Offsets are (row, col) relative to the top-left of the pattern block.
    """
    offsets: Tuple[Tuple[int, int], ...]
    
    @property
    def height(self) -> int:
        return max(r for r, _ in self.offsets) + 1
    
    @property
    def width(self) -> int:
        return max(c for _, c in self.offsets) + 1
    
    def __len__(self) -> int:
        return len(self.offsets)
    
    def mask(self) -> np.ndarray:
        """Dense boolean kernel of the pattern."""
        kernel = np.zeros((self.height, self.width), dtype=bool)
        for r, c in self.offsets:
            kernel[r, c] = True
        return kernel


def _normalize(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')


def parse_tile_block(block: str, block_number: int = 1) -> Tile:
    """
    Parse a single 'Tile <id>:' block.
    
    Raises:
        ValueError: On a missing header, ragged rows or unknown characters
    """
    lines = [line.strip() for line in block.strip().split('\n')]
    if not lines or not lines[0]:
        raise ValueError(f"Block {block_number}: empty tile block")
    
    header = HEADER_RE.match(lines[0])
    if header is None:
        raise ValueError(f"Block {block_number}: expected 'Tile <id>:' header, got {lines[0]!r}")
    tile_id = int(header.group(1))
    
    rows = lines[1:]
    if not rows:
        raise ValueError(f"Block {block_number}: tile {tile_id} has no pixel rows")
    
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise ValueError(f"Block {block_number}: tile {tile_id} has ragged rows ({len(row)} != {width})")
        bad = set(row) - {'#', '.'}
        if bad:
            raise ValueError(f"Block {block_number}: tile {tile_id} has unknown characters {sorted(bad)}")
    
    if len(rows) != width:
        raise ValueError(f"Block {block_number}: tile {tile_id} is not square ({len(rows)}x{width})")
    
    grid = np.array([[ch == '#' for ch in row] for row in rows], dtype=bool)
    return Tile(tile_id, grid)


def parse_tiles(text: str, tile_size: Optional[int] = None) -> List[Tile]:
    """
    Parse all tile blocks from puzzle input.
    
    Args:
        text: Raw input, blocks separated by blank lines
        tile_size: Expected side length (inferred from the first tile if None)
    
    Returns:
        Tiles in input order
    
    Raises:
        ValueError: If the input is empty, malformed, has duplicate ids or
            mixed tile sizes
    """
    blocks = [b for b in BLOCK_SEPARATOR_RE.split(_normalize(text).strip()) if b.strip()]
    if not blocks:
        raise ValueError("No tiles found in input")
    
    tiles = []
    seen = set()
    for number, block in enumerate(blocks, start=1):
        tile = parse_tile_block(block, number)
        
        if tile_size is None:
            tile_size = tile.size
        elif tile.size != tile_size:
            raise ValueError(f"Block {number}: tile {tile.id} is {tile.size}x{tile.size}, expected {tile_size}x{tile_size}")
        
        if tile.id in seen:
            raise ValueError(f"Block {number}: duplicate tile id {tile.id}")
        seen.add(tile.id)
        tiles.append(tile)
    
    return tiles


def parse_pattern(text: str) -> Pattern:
    """
    Parse a pattern block; '#' marks a set pixel, anything else is empty.
    
    Leading whitespace is significant, so lines are not stripped on the left.
    Blank lines before and after the shape are dropped.
    """
    lines = _normalize(text).split('\n')
    offsets = [
        (r, c)
        for r, line in enumerate(lines)
        for c, ch in enumerate(line)
        if ch == '#'
    ]
    if not offsets:
        raise ValueError("Pattern has no '#' pixels")
    
    top = min(r for r, _ in offsets)
    left = min(c for _, c in offsets)
    return Pattern(tuple((r - top, c - left) for r, c in offsets))
