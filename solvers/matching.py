"""
Border matching between tiles.

A match pairs one of tile A's four primary borders with any of tile B's
eight encodings. Adjacency is resolved first-match-wins: A's sides are
tried top, bottom, left, right and B's encodings in declared order.
"""

from dataclasses import dataclass
from math import prod
from typing import Dict, List, Optional, Sequence

from core.tile import Tile
from features.edges import SIDES


@dataclass(frozen=True)
class BorderMatch:
    """
    Shared border between two tiles.
    
    Attributes:
        side_a: Side of the first tile
        side_b: Side of the second tile
        reversed: True if the border reads in opposite directions on the two tiles
    """
    side_a: str
    side_b: str
    reversed: bool


def match_tiles(a: Tile, b: Tile) -> Optional[BorderMatch]:
    """
    Find the first border of `a` that equals any border encoding of `b`.
    
    Returns:
        BorderMatch, or None if the tiles share no border
    """
    for i, side_a in enumerate(SIDES):
        value = a.edges[i]
        for j, other in enumerate(b.edges):
            if value == other:
                return BorderMatch(side_a, SIDES[j % 4], j >= 4)
    return None


def build_match_table(tiles: Sequence[Tile]) -> Dict[int, Dict[int, BorderMatch]]:
    """
    Build the pairwise match graph.
    
    Returns:
        Dict mapping tile id -> {neighbour id: BorderMatch seen from that tile}
    """
    table = {tile.id: {} for tile in tiles}
    for a in tiles:
        for b in tiles:
            if a is b:
                continue
            found = match_tiles(a, b)
            if found is not None:
                table[a.id][b.id] = found
    return table


def count_matches(tiles: Sequence[Tile]) -> Dict[int, int]:
    """Number of other tiles each tile shares a border with."""
    return {tid: len(neighbours) for tid, neighbours in build_match_table(tiles).items()}


def find_corners(tiles: Sequence[Tile]) -> List[int]:
    """Ids of tiles with exactly two matching neighbours, in input order."""
    counts = count_matches(tiles)
    return [tile.id for tile in tiles if counts[tile.id] == 2]


def corner_product(tiles: Sequence[Tile]) -> int:
    """
    Multiply the ids of the four mosaic corners.
    
    Raises:
        ValueError: If the tiles do not have exactly four corners
    """
    corners = find_corners(tiles)
    if len(corners) != 4:
        raise ValueError(f"Expected 4 corner tiles, found {len(corners)}: {corners}")
    return prod(corners)
