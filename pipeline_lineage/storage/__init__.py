"""Graph storage, table loading and error types."""

from .errors import (DuplicateIdError, GraphError, InvalidReferenceError,
                     TableFormatError, UnknownEdgeError, UnknownNodeError)
from .graph_store import GraphStore
from .table_loader import (build_store, load_attribute_table, load_edges,
                           load_nodes)

__all__ = [
    "DuplicateIdError",
    "GraphError",
    "GraphStore",
    "InvalidReferenceError",
    "TableFormatError",
    "UnknownEdgeError",
    "UnknownNodeError",
    "build_store",
    "load_attribute_table",
    "load_edges",
    "load_nodes",
]
