"""Display utilities for mosaic visualization."""

import cv2
import matplotlib.pyplot as plt
from pathlib import Path

from pipeline.solver_pipeline import MosaicSolution, render_mosaic


def _draw_solution(solution: MosaicSolution, figsize: tuple = (8, 8)):
    fig, ax = plt.subplots(1, 1, figsize=figsize)
    
    image = cv2.cvtColor(render_mosaic(solution.scan, scale=1), cv2.COLOR_BGR2RGB)
    ax.imshow(image, interpolation='nearest')
    ax.set_title(
        f"Corners: {solution.corner_product}  |  "
        f"Patterns: {solution.scan.count}  |  Roughness: {solution.roughness}"
    )
    ax.axis('off')
    
    plt.tight_layout()
    return fig


def display_mosaic(solution: MosaicSolution, figsize: tuple = (8, 8)):
    """
    Show the assembled composite with pattern occurrences highlighted.
    
    Args:
        solution: Solved mosaic
        figsize: Figure size
    """
    _draw_solution(solution, figsize)
    plt.show()


def save_mosaic_figure(solution: MosaicSolution, output_path: str, dpi: int = 150):
    """
    Save the annotated composite figure to file.
    
    Args:
        solution: Solved mosaic
        output_path: Path to save the figure
        dpi: Output DPI
    """
    fig = _draw_solution(solution)
    
    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)
    
    fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
