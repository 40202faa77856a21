"""
Pipeline orchestration modules.

1. solve_part1() - corner tile product
2. solve_part2() - roughness after pattern search
3. solve_puzzle() / solve_file() - both answers plus rendering
"""
from .solver_pipeline import (
    SolverConfig,
    DEFAULT_CONFIG,
    MosaicSolution,
    solve_part1,
    solve_part2,
    solve_puzzle,
    solve_file,
    render_mosaic
)
