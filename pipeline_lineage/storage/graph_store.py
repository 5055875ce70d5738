"""Immutable directed multigraph built once from node and edge tables."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Tuple

from pipeline_lineage.models import Edge, Node

from .errors import (DuplicateIdError, InvalidReferenceError,
                     UnknownEdgeError, UnknownNodeError)

_LOGGER = logging.getLogger(__name__)


class GraphStore:
    """Validated, read-only view over a pipeline graph.

    Nodes and edges keep the order of the tables they were loaded from, so
    adjacency lists (and everything derived from them) iterate
    deterministically. Self-loops and parallel edges are accepted.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        node_list = list(nodes)
        edge_list = list(edges)

        nodes_by_id: Dict[str, Node] = {}
        for node in node_list:
            if node.id in nodes_by_id:
                raise DuplicateIdError("node", node.id)
            nodes_by_id[node.id] = node

        edges_by_id: Dict[str, Edge] = {}
        outgoing: Dict[str, List[Edge]] = {node_id: [] for node_id in nodes_by_id}
        incoming: Dict[str, List[Edge]] = {node_id: [] for node_id in nodes_by_id}
        for edge in edge_list:
            if edge.id in edges_by_id:
                raise DuplicateIdError("edge", edge.id)
            for endpoint in (edge.source, edge.target):
                if endpoint not in nodes_by_id:
                    raise InvalidReferenceError(edge.id, endpoint)
            edges_by_id[edge.id] = edge
            outgoing[edge.source].append(edge)
            incoming[edge.target].append(edge)

        self._nodes: Tuple[Node, ...] = tuple(node_list)
        self._edges: Tuple[Edge, ...] = tuple(edge_list)
        self._nodes_by_id: Mapping[str, Node] = MappingProxyType(nodes_by_id)
        self._edges_by_id: Mapping[str, Edge] = MappingProxyType(edges_by_id)
        self._outgoing: Dict[str, Tuple[Edge, ...]] = {
            node_id: tuple(items) for node_id, items in outgoing.items()
        }
        self._incoming: Dict[str, Tuple[Edge, ...]] = {
            node_id: tuple(items) for node_id, items in incoming.items()
        }
        _LOGGER.debug(
            "Built graph store with %d nodes and %d edges",
            len(self._nodes),
            len(self._edges),
        )

    def __repr__(self) -> str:
        return (
            f"GraphStore(nodes={len(self._nodes)}, edges={len(self._edges)})"
        )

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes_by_id

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def node_ids(self) -> FrozenSet[str]:
        return frozenset(self._nodes_by_id)

    def edge_ids(self) -> FrozenSet[str]:
        return frozenset(self._edges_by_id)

    def node(self, node_id: str) -> Node:
        try:
            return self._nodes_by_id[node_id]
        except KeyError as exc:
            raise UnknownNodeError(node_id) from exc

    def edge(self, edge_id: str) -> Edge:
        try:
            return self._edges_by_id[edge_id]
        except KeyError as exc:
            raise UnknownEdgeError(edge_id) from exc

    def require(self, node_id: str) -> None:
        """Raise ``UnknownNodeError`` unless ``node_id`` is in the store."""
        if node_id not in self._nodes_by_id:
            raise UnknownNodeError(node_id)

    def out_edges(self, node_id: str) -> Tuple[Edge, ...]:
        self.require(node_id)
        return self._outgoing[node_id]

    def in_edges(self, node_id: str) -> Tuple[Edge, ...]:
        self.require(node_id)
        return self._incoming[node_id]

    def out_degree(self, node_id: str) -> int:
        return len(self.out_edges(node_id))

    def in_degree(self, node_id: str) -> int:
        return len(self.in_edges(node_id))

    def edges_between(self, source: str, target: str) -> Tuple[Edge, ...]:
        """Every edge from ``source`` to ``target``, parallel ones included."""
        self.require(target)
        return tuple(
            edge for edge in self.out_edges(source) if edge.target == target
        )

    def reversed(self) -> "GraphStore":
        """Return a new store with every edge flipped, ids unchanged."""
        flipped = [
            Edge(id=edge.id, source=edge.target, target=edge.source)
            for edge in self._edges
        ]
        return GraphStore(self._nodes, flipped)
