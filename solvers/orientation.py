"""
Orientation resolution for a tile placed next to a fixed reference tile.

The moving tile is turned clockwise until its matched side faces the
reference, then flipped along that border if the two readings disagree.

Each clockwise quarter-turn moves a side one step along
top -> right -> bottom -> left -> top. Steps that start from a vertical
side (right -> bottom, left -> top) reverse the border's reading
direction; the other two preserve it.
"""

from typing import Dict, Tuple

from core.tile import Tile
from features.edges import OPPOSITE
from .matching import BorderMatch, match_tiles

# (reference side, moving side) -> (clockwise quarter-turns, turns reverse the reading)
ALIGNMENT_CASES: Dict[Tuple[str, str], Tuple[int, bool]] = {
    ('top', 'top'): (2, True),
    ('top', 'right'): (1, True),
    ('top', 'bottom'): (0, False),
    ('top', 'left'): (3, False),
    
    ('bottom', 'top'): (0, False),
    ('bottom', 'right'): (3, False),
    ('bottom', 'bottom'): (2, True),
    ('bottom', 'left'): (1, True),
    
    ('left', 'top'): (1, False),
    ('left', 'right'): (0, False),
    ('left', 'bottom'): (3, True),
    ('left', 'left'): (2, True),
    
    ('right', 'top'): (3, True),
    ('right', 'right'): (2, True),
    ('right', 'bottom'): (1, False),
    ('right', 'left'): (0, False),
}


def alignment_steps(match: BorderMatch) -> Tuple[int, str]:
    """
    Transform needed to bring the moving tile into place.
    
    Returns:
        (clockwise quarter-turns, flip to apply afterwards: 'rows', 'cols' or '')
    """
    turns, turn_reverses = ALIGNMENT_CASES[(match.side_a, match.side_b)]
    if match.reversed == turn_reverses:
        return turns, ''
    
    # The moving border now lies on the opposite of side_a
    if match.side_a in ('top', 'bottom'):
        return turns, 'cols'
    return turns, 'rows'


def align(reference: Tile, moving: Tile, match: BorderMatch) -> Tile:
    """
    Orient `moving` so it sits flush against `match.side_a` of `reference`.
    
    Args:
        reference: Already placed tile (not modified)
        moving: Tile to orient
        match: match_tiles(reference, moving)
    
    Returns:
        Transformed copy of `moving`
    
    Raises:
        RuntimeError: If the transformed tile does not line up (logic defect)
    """
    turns, flip = alignment_steps(match)
    
    result = moving.rotate(turns) if turns else moving
    if flip == 'rows':
        result = result.flip_rows()
    elif flip == 'cols':
        result = result.flip_cols()
    
    expected = BorderMatch(match.side_a, OPPOSITE[match.side_a], False)
    actual = match_tiles(reference, result)
    if actual != expected:
        raise RuntimeError(
            f"Orientation failed for tile {moving.id} against {reference.id}: "
            f"{match} -> {actual}, expected {expected}"
        )
    
    return result
