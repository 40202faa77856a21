"""Tests for mosaic assembly and stitching."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from core import Tile, orientations, parse_tiles
from solvers.assembly import assemble, recenter, mosaic_side, validate_board, board_ids, stitch
from sample_tiles import SAMPLE_TILES, SAMPLE_IDS, SAMPLE_CORNERS

ADJACENT = {
    frozenset(pair) for pair in [
        (1951, 2311), (2311, 3079), (1951, 2729), (2311, 1427),
        (3079, 2473), (2729, 1427), (1427, 2473), (2729, 2971),
        (1427, 1489), (2473, 1171), (2971, 1489), (1489, 1171),
    ]
}


def test_assemble_places_every_tile_once():
    board = assemble(parse_tiles(SAMPLE_TILES))
    assert set(board) == {(r, c) for r in range(3) for c in range(3)}
    assert sorted(t.id for t in board.values()) == sorted(SAMPLE_IDS)


def test_assembled_layout_matches_adjacency():
    layout = board_ids(assemble(parse_tiles(SAMPLE_TILES)))
    assert layout[1][1] == 1427
    assert {layout[0][0], layout[0][2], layout[2][0], layout[2][2]} == set(SAMPLE_CORNERS)
    for r in range(3):
        for c in range(2):
            assert frozenset((layout[r][c], layout[r][c + 1])) in ADJACENT
            assert frozenset((layout[c][r], layout[c + 1][r])) in ADJACENT


def test_assembled_borders_line_up():
    board = assemble(parse_tiles(SAMPLE_TILES))
    for (r, c), tile in board.items():
        if (r, c + 1) in board:
            assert np.array_equal(tile.grid[:, -1], board[(r, c + 1)].grid[:, 0])
        if (r + 1, c) in board:
            assert np.array_equal(tile.grid[-1, :], board[(r + 1, c)].grid[0, :])


def test_assemble_keeps_input_tiles_untouched():
    tiles = parse_tiles(SAMPLE_TILES)
    before = [t.grid.copy() for t in tiles]
    assemble(tiles)
    assert all(np.array_equal(t.grid, b) for t, b in zip(tiles, before))


def test_stitch_strips_borders():
    composite = stitch(assemble(parse_tiles(SAMPLE_TILES)))
    assert composite.shape == (24, 24)
    assert composite.dtype == bool
    assert int(composite.sum()) == 303


def test_start_tile_only_changes_orientation():
    tiles = parse_tiles(SAMPLE_TILES)
    first = stitch(assemble(tiles))
    second = stitch(assemble(list(reversed(tiles))))
    assert any(np.array_equal(o, second) for o in orientations(first))


def test_assemble_is_deterministic():
    tiles = parse_tiles(SAMPLE_TILES)
    assert board_ids(assemble(tiles)) == board_ids(assemble(tiles))


def test_recenter_and_side():
    board = {(-1, -2): 'a', (-1, -1): 'b', (0, -2): 'c', (0, -1): 'd'}
    centred = recenter(board)
    assert set(centred) == {(0, 0), (0, 1), (1, 0), (1, 1)}
    assert centred[(1, 1)] == 'd'
    assert mosaic_side(centred) == 2


def test_validate_board_detects_gaps():
    board = {(r, c): None for r in range(3) for c in range(3)}
    validate_board(board)
    del board[(0, 2)]
    with pytest.raises(ValueError, match="gaps"):
        validate_board(board)
    board[(0, 2)] = None
    board[(0, 3)] = None
    with pytest.raises(ValueError, match="out of range"):
        validate_board(board)


def test_assemble_rejects_bad_input():
    with pytest.raises(ValueError, match="No tiles"):
        assemble([])
    
    tiles = parse_tiles(SAMPLE_TILES)
    with pytest.raises(ValueError, match="same size"):
        assemble(tiles + [Tile(7, np.zeros((4, 4), dtype=bool))])
    with pytest.raises(ValueError, match="Could not place"):
        assemble(tiles + [Tile(7, np.zeros((10, 10), dtype=bool))])


def test_assemble_single_tile():
    tile = parse_tiles(SAMPLE_TILES)[0]
    board = assemble([tile])
    assert board_ids(board) == [[tile.id]]
    assert stitch(board).shape == (8, 8)
