"""Read-only lineage queries over a ``GraphStore``.

Every function here is a pure function of the store and its arguments and
returns fresh value objects; nothing is cached between calls.

Path enumeration is an exhaustive depth-first search over simple paths.
Its worst case is exponential in the size of the graph. The graphs this
package targets hold a few hundred nodes, so callers embedding it for
larger graphs must bound the time they allow a query themselves.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterator, List, Set, Tuple

from pipeline_lineage.models import LineageResult, NodeKind, PathQueryResult
from pipeline_lineage.storage import GraphStore

_LOGGER = logging.getLogger(__name__)


def find_sinks(store: GraphStore) -> FrozenSet[str]:
    """Return the ids of nodes that nothing consumes (out-degree zero)."""
    return frozenset(
        node.id for node in store.nodes if store.out_degree(node.id) == 0
    )


def find_sinks_by_kind(
    store: GraphStore, kind: NodeKind | str
) -> FrozenSet[str]:
    """Sinks restricted to one node kind, e.g. unused datasets."""
    wanted = NodeKind.parse(kind)
    return frozenset(
        node_id
        for node_id in find_sinks(store)
        if store.node(node_id).kind is wanted
    )


def _successors(store: GraphStore, node_id: str) -> Iterator[str]:
    # Parallel edges collapse into one step so each node path appears once.
    seen: Set[str] = set()
    for edge in store.out_edges(node_id):
        if edge.target not in seen:
            seen.add(edge.target)
            yield edge.target


def find_paths(store: GraphStore, source: str, target: str) -> PathQueryResult:
    """Enumerate every simple path from ``source`` to ``target``.

    Besides the paths themselves the result carries the union of their
    nodes and the ids of every edge joining consecutive path nodes in path
    direction, parallel edges included.
    """
    store.require(source)
    store.require(target)

    if source == target:
        return PathQueryResult(
            source=source,
            target=target,
            paths=((source,),),
            path_nodes=frozenset({source}),
            path_edges=frozenset(),
        )

    paths: List[Tuple[str, ...]] = []
    path_nodes: Set[str] = set()
    path_edges: Set[str] = set()

    path: List[str] = [source]
    on_path: Set[str] = {source}
    stack: List[Iterator[str]] = [_successors(store, source)]

    while stack:
        next_node = next(stack[-1], None)
        if next_node is None:
            stack.pop()
            on_path.discard(path.pop())
            continue
        if next_node in on_path:
            continue
        if next_node == target:
            found = tuple(path) + (target,)
            paths.append(found)
            path_nodes.update(found)
            for upstream, downstream in zip(found, found[1:]):
                path_edges.update(
                    edge.id
                    for edge in store.edges_between(upstream, downstream)
                )
            continue
        path.append(next_node)
        on_path.add(next_node)
        stack.append(_successors(store, next_node))

    _LOGGER.debug(
        "Found %d path(s) from %s to %s", len(paths), source, target
    )
    return PathQueryResult(
        source=source,
        target=target,
        paths=tuple(paths),
        path_nodes=frozenset(path_nodes),
        path_edges=frozenset(path_edges),
    )


def _ancestors(store: GraphStore, target: str) -> Set[str]:
    reached: Set[str] = set()
    pending = [target]
    while pending:
        current = pending.pop()
        for edge in store.in_edges(current):
            if edge.source != target and edge.source not in reached:
                reached.add(edge.source)
                pending.append(edge.source)
    return reached


def _reaches_avoiding(
    store: GraphStore, start: str, goal: str, blocked: str
) -> bool:
    if start == goal:
        return True
    visited = {start, blocked}
    pending = [start]
    while pending:
        current = pending.pop()
        for edge in store.out_edges(current):
            if edge.target == goal:
                return True
            if edge.target not in visited:
                visited.add(edge.target)
                pending.append(edge.target)
    return False


def trace_lineage(store: GraphStore, target: str) -> LineageResult:
    """Collect every node with a directed path into ``target``.

    ``edges`` holds the edges that lie on at least one simple path ending
    at ``target``: an edge ``u -> v`` qualifies when ``v`` can still reach
    the target without passing back through ``u``.
    """
    store.require(target)

    ancestors = _ancestors(store, target)
    edges = set()
    for edge in store.edges:
        if edge.source not in ancestors or edge.source == edge.target:
            continue
        if edge.target != target and edge.target not in ancestors:
            continue
        if _reaches_avoiding(store, edge.target, target, edge.source):
            edges.add(edge.id)

    sources = {node_id for node_id in ancestors if store.in_degree(node_id) == 0}

    _LOGGER.debug(
        "Lineage of %s spans %d node(s) from %d source(s)",
        target,
        len(ancestors),
        len(sources),
    )
    return LineageResult(
        target=target,
        nodes=frozenset(ancestors),
        sources=frozenset(sources),
        edges=frozenset(edges),
    )
