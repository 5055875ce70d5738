"""Value objects returned by the lineage queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple


@dataclass(frozen=True)
class PathQueryResult:
    """Every simple path between two nodes plus the nodes/edges they use."""

    source: str
    target: str
    paths: Tuple[Tuple[str, ...], ...]
    path_nodes: FrozenSet[str]
    path_edges: FrozenSet[str]

    @property
    def found(self) -> bool:
        return bool(self.paths)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "paths": [list(path) for path in self.paths],
            "path_nodes": sorted(self.path_nodes),
            "path_edges": sorted(self.path_edges),
        }


@dataclass(frozen=True)
class LineageResult:
    """Ancestors of a target node, their origins and connecting edges.

    ``sources`` is the subset of ``nodes`` with no incoming edges at all,
    i.e. the places where the lineage genuinely begins.
    """

    target: str
    nodes: FrozenSet[str]
    sources: FrozenSet[str]
    edges: FrozenSet[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "nodes": sorted(self.nodes),
            "sources": sorted(self.sources),
            "edges": sorted(self.edges),
        }
