"""Visualization utilities for mosaic solving."""
from .display import (
    display_mosaic,
    save_mosaic_figure
)
