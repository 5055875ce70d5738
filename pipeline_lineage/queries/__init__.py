"""Graph queries: sinks, simple paths and lineage tracing."""

from .lineage import find_paths, find_sinks, find_sinks_by_kind, trace_lineage

__all__ = [
    "find_paths",
    "find_sinks",
    "find_sinks_by_kind",
    "trace_lineage",
]
