"""Tests for border matching and corner extraction."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from core import Tile, parse_tiles
from solvers.matching import BorderMatch, match_tiles, build_match_table, count_matches, find_corners, corner_product
from sample_tiles import SAMPLE_TILES, SAMPLE_CORNERS, SAMPLE_CORNER_PRODUCT


def by_id(tiles):
    return {t.id: t for t in tiles}


def test_match_adjacent_tiles():
    tiles = by_id(parse_tiles(SAMPLE_TILES))
    # 1951's right border equals 2311's left border as given
    assert match_tiles(tiles[1951], tiles[2311]) == BorderMatch('right', 'left', False)


def test_match_reports_reversed_reading():
    tiles = by_id(parse_tiles(SAMPLE_TILES))
    flipped = tiles[2311].flip_rows()
    assert match_tiles(tiles[1951], flipped) == BorderMatch('right', 'left', True)


def test_no_match_for_distant_tiles():
    tiles = by_id(parse_tiles(SAMPLE_TILES))
    assert match_tiles(tiles[1951], tiles[1171]) is None
    assert match_tiles(tiles[1951], Tile(1, np.zeros((10, 10), dtype=bool))) is None


def test_match_symmetry():
    tiles = parse_tiles(SAMPLE_TILES)
    for a in tiles:
        for b in tiles:
            if a is not b:
                assert (match_tiles(a, b) is None) == (match_tiles(b, a) is None)


def test_match_holds_under_any_orientation():
    tiles = by_id(parse_tiles(SAMPLE_TILES))
    for variant in tiles[2311].orientations():
        assert match_tiles(tiles[1427], variant) is not None


def test_match_counts():
    counts = count_matches(parse_tiles(SAMPLE_TILES))
    assert counts[1427] == 4
    assert counts[2311] == 3
    assert sorted(counts.values()) == [2, 2, 2, 2, 3, 3, 3, 3, 4]


def test_match_table_is_symmetric_graph():
    table = build_match_table(parse_tiles(SAMPLE_TILES))
    edges = {frozenset((a, b)) for a, nbrs in table.items() for b in nbrs}
    assert len(edges) == 12
    for a, nbrs in table.items():
        for b in nbrs:
            assert a in table[b]


def test_exactly_four_corners():
    assert find_corners(parse_tiles(SAMPLE_TILES)) == SAMPLE_CORNERS


def test_corner_product():
    assert corner_product(parse_tiles(SAMPLE_TILES)) == SAMPLE_CORNER_PRODUCT


def test_corner_product_rejects_incomplete_mosaic():
    tiles = by_id(parse_tiles(SAMPLE_TILES))
    with pytest.raises(ValueError, match="Expected 4 corner tiles"):
        corner_product([tiles[1951], tiles[2311], tiles[3079]])
