"""Presentation helpers: graph styling and the node browser."""

from .node_details import NodeDetails, describe_node
from .styles import render_graph, render_lineage, render_paths, render_sinks

__all__ = [
    "NodeDetails",
    "describe_node",
    "render_graph",
    "render_lineage",
    "render_paths",
    "render_sinks",
]
