"""Errors raised while building or querying a pipeline graph."""

from __future__ import annotations


class GraphError(RuntimeError):
    """Base class for graph construction and query failures."""


class DuplicateIdError(GraphError):
    """Raised when two nodes (or two edges) share an id."""

    def __init__(self, kind: str, item_id: str) -> None:
        super().__init__(f"Duplicate {kind} id '{item_id}'")
        self.kind = kind
        self.item_id = item_id


class InvalidReferenceError(GraphError):
    """Raised when an edge names a node that is not in the node table."""

    def __init__(self, edge_id: str, node_id: str) -> None:
        super().__init__(
            f"Edge '{edge_id}' references missing node '{node_id}'"
        )
        self.edge_id = edge_id
        self.node_id = node_id


class UnknownNodeError(GraphError):
    """Raised when a query names a node id absent from the store."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' does not exist")
        self.node_id = node_id


class UnknownEdgeError(GraphError):
    """Raised when an edge id lookup misses."""

    def __init__(self, edge_id: str) -> None:
        super().__init__(f"Edge '{edge_id}' does not exist")
        self.edge_id = edge_id


class TableFormatError(GraphError):
    """Raised when a node, edge or attribute table cannot be parsed."""
