"""Central configuration constants for the pipeline lineage explorer."""

from __future__ import annotations

# Server --------------------------------------------------------------------

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8050

DEFAULT_LAYOUT_SEED = 42
"""Seed handed to the graph layout so repeated renders look the same."""

# Styling -------------------------------------------------------------------

KIND_SHAPES = {"Code": "box", "Data": "dot"}
KIND_COLORS = {"Code": "#1f77b4", "Data": "#ff7f0e"}

MUTED_COLOR = "#d3d3d3"
EDGE_COLOR = "#848484"
HIGHLIGHT_COLOR = "#d62728"
SOURCE_COLOR = "#2ca02c"
TARGET_COLOR = "#9467bd"

SOURCE_SHAPE = "star"

DEFAULT_NODE_SIZE = 15
HIGHLIGHT_NODE_SIZE = 25
DEFAULT_EDGE_WIDTH = 1
HIGHLIGHT_EDGE_WIDTH = 3
