#!/usr/bin/env python
"""
Mosaic Tile Solver

Usage:
    python solve_puzzle.py <input_path> [--output <image_path>] [--part {1,2}]
    
Examples:
    python solve_puzzle.py ./inputs/tiles.txt
    python solve_puzzle.py ./inputs/tiles.txt --part 1 --quiet
    python solve_puzzle.py ./inputs/tiles.txt --output ./debug/mosaic.png --display

Answers:
    Part 1: product of the four corner tile ids
    Part 2: set pixels not covered by pattern occurrences
"""

import argparse
import os
import sys

from pipeline import SolverConfig, solve_file


def main():
    parser = argparse.ArgumentParser(
        description="Square tile mosaic solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Pipeline:
  - Match borders under all 8 orientations
  - Assemble and orient tiles, strip borders, stitch
  - Search the stitched image for the pattern (8 orientations)
        """
    )
    parser.add_argument("input_path", help="Path to the puzzle input")
    parser.add_argument("--output", "-o", help="Output path for the rendered mosaic")
    parser.add_argument("--part", "-p", type=int, choices=[1, 2],
                        help="Print only this part's answer")
    parser.add_argument("--tile-size", "-t", type=int,
                        help="Expected tile size (inferred if not specified)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress progress output")
    parser.add_argument("--display", action="store_true", help="Display the assembled mosaic")
    
    args = parser.parse_args()
    
    if not os.path.exists(args.input_path):
        print(f"Error: Input not found: {args.input_path}")
        sys.exit(1)
    
    try:
        config = SolverConfig(tile_size=args.tile_size)
        solution = solve_file(
            args.input_path,
            output_path=args.output,
            config=config,
            verbose=not args.quiet
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    
    if args.part in (None, 1):
        print(f"Part 1: {solution.corner_product}")
    if args.part in (None, 2):
        print(f"Part 2: {solution.roughness}")
    
    if args.display:
        from visualization import display_mosaic
        display_mosaic(solution)


if __name__ == "__main__":
    main()
