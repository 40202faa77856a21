"""
Solver Pipeline

Orchestrates the mosaic puzzle end to end:
1. Parse tiles from text
2. Part 1: multiply the four corner tile ids
3. Part 2: assemble → stitch → scan for the pattern → roughness
4. Optionally render the composite (pattern pixels highlighted) to disk
"""

import cv2
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path

from core.parsing import Pattern, parse_tiles, parse_pattern
from solvers.matching import corner_product
from solvers.assembly import Board, assemble, board_ids, stitch
from solvers.pattern_scan import SEA_MONSTER, ScanResult, scan

# BGR colours for rendering
COLOR_EMPTY = (64, 32, 16)
COLOR_SET = (200, 160, 60)
COLOR_PATTERN = (40, 200, 240)


@dataclass
class SolverConfig:
    """
    Solver settings.
    
    Attributes:
        tile_size: Expected tile side length (inferred from input if None)
        pattern: Search shape, '#' marks set pixels
    """
    tile_size: Optional[int] = None
    pattern: str = SEA_MONSTER
    
    def __post_init__(self):
        if self.tile_size is not None and self.tile_size < 3:
            raise ValueError(f"tile_size must be at least 3 to leave an interior, got {self.tile_size}")
        if '#' not in self.pattern:
            raise ValueError("pattern must contain at least one '#'")
    
    def compiled_pattern(self) -> Pattern:
        return parse_pattern(self.pattern)


DEFAULT_CONFIG = SolverConfig()


@dataclass
class MosaicSolution:
    """Both answers plus the intermediate products that led to them."""
    corner_product: int
    roughness: int
    board: Board = field(repr=False)
    layout: List[List[int]]
    composite: np.ndarray = field(repr=False)
    scan: ScanResult = field(repr=False)


def solve_part1(text: str, config: SolverConfig = DEFAULT_CONFIG) -> int:
    """Product of the four corner tile ids."""
    tiles = parse_tiles(text, config.tile_size)
    return corner_product(tiles)


def solve_part2(text: str, config: SolverConfig = DEFAULT_CONFIG,
                verbose: bool = False) -> int:
    """Set pixels in the assembled image not covered by pattern occurrences."""
    tiles = parse_tiles(text, config.tile_size)
    composite = stitch(assemble(tiles, verbose=verbose))
    return scan(composite, config.compiled_pattern(), verbose=verbose).roughness()


def solve_puzzle(text: str, config: SolverConfig = DEFAULT_CONFIG,
                 verbose: bool = True) -> MosaicSolution:
    """
    Solve both parts of a mosaic puzzle.
    
    Args:
        text: Raw puzzle input
        config: Solver settings
        verbose: Print progress info
    
    Returns:
        MosaicSolution
    
    Raises:
        ValueError: If the input is malformed or cannot be assembled
    """
    tiles = parse_tiles(text, config.tile_size)
    pattern = config.compiled_pattern()
    
    if verbose:
        print(f"Parsed {len(tiles)} tiles ({tiles[0].size}x{tiles[0].size})")
    
    corners = corner_product(tiles)
    if verbose:
        print(f"Corner product: {corners}")
    
    board = assemble(tiles, verbose=verbose)
    composite = stitch(board)
    if verbose:
        print(f"Composite: {composite.shape[1]}x{composite.shape[0]}, {int(composite.sum())} set pixels")
    
    result = scan(composite, pattern, verbose=verbose)
    roughness = result.roughness()
    if verbose:
        if result.orientation is None:
            print("No pattern occurrences in any orientation")
        else:
            print(f"Found {result.count} occurrence(s) in orientation {result.orientation}")
        print(f"Roughness: {roughness}")
    
    return MosaicSolution(
        corner_product=corners,
        roughness=roughness,
        board=board,
        layout=board_ids(board),
        composite=composite,
        scan=result
    )


def render_mosaic(result: ScanResult, scale: int = 4) -> np.ndarray:
    """
    Render a scanned composite as a BGR image.
    
    Args:
        result: Scan result (its oriented bitmap is rendered)
        scale: Pixels per bitmap cell
    
    Returns:
        uint8 image of shape (H * scale, W * scale, 3)
    """
    if scale < 1:
        raise ValueError(f"scale must be positive, got {scale}")
    
    bitmap = result.bitmap
    image = np.zeros(bitmap.shape + (3,), dtype=np.uint8)
    image[:, :] = COLOR_EMPTY
    image[bitmap] = COLOR_SET
    image[result.coverage()] = COLOR_PATTERN
    
    if scale == 1:
        return image
    h, w = bitmap.shape
    return cv2.resize(image, (w * scale, h * scale), interpolation=cv2.INTER_NEAREST)


def solve_file(input_path: str, output_path: Optional[str] = None,
               config: SolverConfig = DEFAULT_CONFIG,
               verbose: bool = True) -> MosaicSolution:
    """
    Complete pipeline: read input → solve → optionally save rendering.
    
    Args:
        input_path: Path to the puzzle text
        output_path: Optional image path for the rendered composite
        config: Solver settings
        verbose: Print progress info
    
    Returns:
        MosaicSolution
    """
    path = Path(input_path)
    if not path.is_file():
        raise ValueError(f"Could not read input: {input_path}")
    
    if verbose:
        print(f"Loaded: {input_path}")
    
    solution = solve_puzzle(path.read_text(encoding='utf-8'), config, verbose)
    
    if output_path:
        output_dir = Path(output_path).parent
        if output_dir and str(output_dir) != '.':
            output_dir.mkdir(parents=True, exist_ok=True)
        if not cv2.imwrite(str(output_path), render_mosaic(solution.scan)):
            raise ValueError(f"Could not write image: {output_path}")
        if verbose:
            print(f"\nSaved: {output_path}")
    
    return solution
