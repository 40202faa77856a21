"""
Mosaic solvers.

Usage:
    from core import parse_tiles
    from solvers import assemble, stitch, scan, corner_product
    
    tiles = parse_tiles(text)
    corners = corner_product(tiles)
    composite = stitch(assemble(tiles))
"""
from .matching import (
    BorderMatch,
    match_tiles,
    build_match_table,
    count_matches,
    find_corners,
    corner_product
)
from .orientation import align, alignment_steps, ALIGNMENT_CASES
from .assembly import assemble, recenter, mosaic_side, validate_board, board_ids, stitch, SIDE_OFFSETS
from .pattern_scan import (
    ScanResult,
    SEA_MONSTER,
    find_occurrences,
    count_occurrences,
    scan,
    water_roughness
)
