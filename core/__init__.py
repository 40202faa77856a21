"""Core data model and input parsing."""
from .tile import Tile, orientations
from .parsing import Pattern, parse_tiles, parse_tile_block, parse_pattern
