"""Edge fingerprinting for square tile bitmaps."""

import numpy as np
from typing import Iterable, Tuple

SIDES = ('top', 'bottom', 'left', 'right')

OPPOSITE = {
    'top': 'bottom',
    'bottom': 'top',
    'left': 'right',
    'right': 'left'
}


def fold_bits(line: Iterable[bool]) -> int:
    """Fold a boolean line into an integer, first pixel as the most significant bit."""
    value = 0
    for pixel in line:
        value = (value << 1) | int(bool(pixel))
    return value


def border_line(grid: np.ndarray, side: str, reverse: bool = False) -> np.ndarray:
    """
    Extract one border line of a square grid.
    
    Top and bottom read left to right, left and right read top to bottom.
    
    Args:
        grid: Square 2D boolean array
        side: 'top', 'bottom', 'left', 'right'
        reverse: Read the line in the opposite direction
    
    Returns:
        1D boolean array
    """
    if side == 'top':
        line = grid[0, :]
    elif side == 'bottom':
        line = grid[-1, :]
    elif side == 'left':
        line = grid[:, 0]
    elif side == 'right':
        line = grid[:, -1]
    else:
        raise ValueError(f"Unknown edge: {side}")
    
    return line[::-1] if reverse else line


def edge_fingerprints(grid: np.ndarray) -> Tuple[int, ...]:
    """
    Compute the 8 integer encodings of a grid's borders.
    
    Order: top, bottom, left, right, then the same four lines reversed.
    Two tiles sharing a border always have at least one value in common.
    
    Args:
        grid: Square 2D boolean array
    
    Returns:
        Tuple of 8 ints
    """
    forward = [fold_bits(border_line(grid, side)) for side in SIDES]
    backward = [fold_bits(border_line(grid, side, reverse=True)) for side in SIDES]
    return tuple(forward + backward)
