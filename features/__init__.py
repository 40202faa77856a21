"""Feature extraction modules."""
from .edges import SIDES, OPPOSITE, fold_bits, border_line, edge_fingerprints
