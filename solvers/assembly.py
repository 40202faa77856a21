"""
Mosaic assembly.

Greedy graph walk over the tile match graph: start from the first tile at
(0, 0), orient every matching unplaced tile against the tile being
expanded, and place it one step away in the direction of the matched side.
Positions follow from matched sides, so visiting order does not change the
resulting layout.
"""

import numpy as np
from typing import Dict, List, Sequence, Tuple

from core.tile import Tile
from .matching import match_tiles
from .orientation import align

SIDE_OFFSETS = {
    'top': (-1, 0),
    'bottom': (1, 0),
    'left': (0, -1),
    'right': (0, 1)
}

Board = Dict[Tuple[int, int], Tile]


def assemble(tiles: Sequence[Tile], verbose: bool = False) -> Board:
    """
    Place and orient every tile on a square board.
    
    Args:
        tiles: Parsed tiles (not modified)
        verbose: Print progress info
    
    Returns:
        board: Dict mapping (row, col) -> oriented Tile, top-left at (0, 0)
    
    Raises:
        ValueError: If tiles are missing, mixed in size, collide on a
            coordinate or do not form a complete square
    """
    if not tiles:
        raise ValueError("No tiles to assemble")
    
    sizes = {tile.size for tile in tiles}
    if len(sizes) != 1:
        raise ValueError(f"All tiles must have the same size, got {sorted(sizes)}")
    
    # Arena of current orientations, keyed by tile id
    oriented = {tile.id: tile for tile in tiles}
    position = {tiles[0].id: (0, 0)}
    board = {(0, 0): tiles[0].id}
    visited = {tiles[0].id}
    stack = [tiles[0].id]
    
    while stack:
        current_id = stack.pop()
        current = oriented[current_id]
        row, col = position[current_id]
        
        for candidate in tiles:
            if candidate.id in visited:
                continue
            
            found = match_tiles(current, oriented[candidate.id])
            if found is None:
                continue
            
            dr, dc = SIDE_OFFSETS[found.side_a]
            pos = (row + dr, col + dc)
            if pos in board:
                raise ValueError(
                    f"Tile {candidate.id} collides with tile {board[pos]} at {pos}"
                )
            
            oriented[candidate.id] = align(current, oriented[candidate.id], found)
            position[candidate.id] = pos
            board[pos] = candidate.id
            visited.add(candidate.id)
            stack.append(candidate.id)
            
            if verbose:
                print(f"    Placed {candidate.id} {found.side_a} of {current_id} at {pos}")
    
    if len(visited) != len(tiles):
        missing = [tile.id for tile in tiles if tile.id not in visited]
        raise ValueError(f"Could not place {len(missing)} tile(s): {missing}")
    
    placed = recenter({pos: oriented[tid] for pos, tid in board.items()})
    validate_board(placed)
    
    if verbose:
        side = mosaic_side(placed)
        print(f"  Assembled {len(placed)} tiles into a {side}x{side} mosaic")
    
    return placed


def recenter(board: Board) -> Board:
    """Shift coordinates so the smallest row and column are 0."""
    min_r = min(r for r, _ in board)
    min_c = min(c for _, c in board)
    return {(r - min_r, c - min_c): tile for (r, c), tile in board.items()}


def mosaic_side(board: Board) -> int:
    """Side length of a recentred square board, probed along the diagonal."""
    side = 0
    while (side, side) in board:
        side += 1
    return side


def validate_board(board: Board) -> None:
    """
    Check that a recentred board is a complete square with no gaps.
    
    Raises:
        ValueError: If any coordinate is missing or out of range
    """
    side = mosaic_side(board)
    expected = {(r, c) for r in range(side) for c in range(side)}
    if set(board) != expected:
        extra = sorted(set(board) - expected)
        gaps = sorted(expected - set(board))
        raise ValueError(
            f"Board is not a complete {side}x{side} square "
            f"(gaps: {gaps}, out of range: {extra})"
        )


def board_ids(board: Board) -> List[List[int]]:
    """Tile id layout of a square board, row by row."""
    side = mosaic_side(board)
    return [[board[(r, c)].id for c in range(side)] for r in range(side)]


def stitch(board: Board) -> np.ndarray:
    """
    Concatenate tile interiors in row-major coordinate order.
    
    Returns:
        Composite boolean bitmap of side mosaic_side * (tile_size - 2)
    """
    validate_board(board)
    side = mosaic_side(board)
    rows = [
        np.hstack([board[(r, c)].interior() for c in range(side)])
        for r in range(side)
    ]
    return np.vstack(rows)
