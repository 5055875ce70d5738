"""Domain model package exports."""

from .graph import Edge, Node, NodeKind
from .results import LineageResult, PathQueryResult
from .tables import AttributeTable

__all__ = [
    "AttributeTable",
    "Edge",
    "LineageResult",
    "Node",
    "NodeKind",
    "PathQueryResult",
]
