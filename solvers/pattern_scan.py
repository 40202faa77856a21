"""
Pattern search over the composite bitmap.

A pattern occurrence is an anchor position where every set pixel of the
pattern lands on a set pixel of the bitmap. The bitmap's orientation is
unknown, so all 8 orientations are tried and the first one with any
occurrence wins.
"""

import numpy as np
from dataclasses import dataclass, field
from scipy.signal import correlate2d
from typing import Optional

from core.parsing import Pattern, parse_pattern
from core.tile import orientations

SEA_MONSTER = (
    "                  # \n"
    "#    ##    ##    ###\n"
    " #  #  #  #  #  #   "
)


@dataclass
class ScanResult:
    """
    Outcome of a pattern scan.
    
    Attributes:
        orientation: Index (0-7) of the matching orientation, None if nothing matched
        bitmap: Composite bitmap in that orientation
        count: Number of occurrences
        positions: (N, 2) array of occurrence anchors (row, col)
        pattern: Pattern that was searched for
    """
    orientation: Optional[int]
    bitmap: np.ndarray
    count: int
    positions: np.ndarray
    pattern: Pattern = field(repr=False)
    
    def coverage(self) -> np.ndarray:
        """Boolean mask of pixels covered by at least one occurrence."""
        covered = np.zeros_like(self.bitmap, dtype=bool)
        for r, c in self.positions:
            for dr, dc in self.pattern.offsets:
                covered[r + dr, c + dc] = True
        return covered
    
    def roughness(self) -> int:
        """Set pixels minus occurrences times pattern size (overlaps not deduplicated)."""
        return int(self.bitmap.sum()) - self.count * len(self.pattern)


def find_occurrences(bitmap: np.ndarray, pattern: Pattern) -> np.ndarray:
    """
    Anchor positions of every occurrence of `pattern` in `bitmap`.
    
    Returns:
        (N, 2) int array of (row, col), row-major order
    """
    height, width = bitmap.shape
    if pattern.height > height or pattern.width > width:
        return np.empty((0, 2), dtype=int)
    
    hits = correlate2d(bitmap.astype(np.int32), pattern.mask().astype(np.int32), mode='valid')
    return np.argwhere(hits == len(pattern))


def count_occurrences(bitmap: np.ndarray, pattern: Pattern) -> int:
    return len(find_occurrences(bitmap, pattern))


def scan(bitmap: np.ndarray, pattern: Pattern, verbose: bool = False) -> ScanResult:
    """
    Search all 8 orientations of `bitmap`, stopping at the first with a match.
    
    Args:
        bitmap: Composite boolean bitmap
        pattern: Shape to look for
        verbose: Print progress info
    
    Returns:
        ScanResult (count 0 and orientation None if no orientation matched)
    """
    for idx, oriented in enumerate(orientations(bitmap)):
        positions = find_occurrences(oriented, pattern)
        if verbose:
            print(f"    Orientation {idx}: {len(positions)} occurrence(s)")
        if len(positions):
            return ScanResult(idx, oriented, len(positions), positions, pattern)
    
    return ScanResult(None, bitmap, 0, np.empty((0, 2), dtype=int), pattern)


def water_roughness(bitmap: np.ndarray, pattern: Optional[Pattern] = None) -> int:
    """Set pixels not accounted for by pattern occurrences (sea monster by default)."""
    if pattern is None:
        pattern = parse_pattern(SEA_MONSTER)
    return scan(bitmap, pattern).roughness()
