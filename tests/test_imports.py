"""Test that all modules can be imported correctly."""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def test_core_imports():
    """Test core module imports."""
    from core import Tile, orientations, Pattern, parse_tiles, parse_pattern
    from core.parsing import parse_tile_block
    print("✓ core imports OK")


def test_features_imports():
    """Test features module imports."""
    from features import SIDES, OPPOSITE, edge_fingerprints
    from features.edges import fold_bits, border_line
    print("✓ features imports OK")


def test_solvers_imports():
    """Test solvers module imports."""
    from solvers import match_tiles, corner_product, align, assemble, stitch, scan
    from solvers.matching import BorderMatch, build_match_table, find_corners
    from solvers.orientation import ALIGNMENT_CASES, alignment_steps
    from solvers.assembly import recenter, mosaic_side, validate_board
    from solvers.pattern_scan import SEA_MONSTER, find_occurrences, water_roughness
    print("✓ solvers imports OK")


def test_pipeline_imports():
    """Test pipeline module imports."""
    from pipeline import solve_part1, solve_part2, solve_puzzle, solve_file
    from pipeline.solver_pipeline import SolverConfig, render_mosaic
    print("✓ pipeline imports OK")


def test_visualization_imports():
    """Test visualization module imports."""
    from visualization import display_mosaic, save_mosaic_figure
    print("✓ visualization imports OK")


if __name__ == "__main__":
    test_core_imports()
    test_features_imports()
    test_solvers_imports()
    test_pipeline_imports()
    test_visualization_imports()
    print("\n✓ All imports successful!")
