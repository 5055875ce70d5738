"""Map query results onto visual attributes for the graph view.

Payloads follow the vis-network data shape: a list of node dicts, a list of
edge dicts (``from``/``to``/``arrows``) and an ``options`` block. Every
view starts from the default styling and then greys out or highlights
what the query touched.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from pipeline_lineage import config
from pipeline_lineage.models import LineageResult, Node, PathQueryResult
from pipeline_lineage.storage import GraphStore

GraphPayload = Dict[str, Any]


def _base_node(node: Node) -> Dict[str, Any]:
    kind = node.kind.value
    return {
        "id": node.id,
        "label": node.label,
        "title": f"{node.label} ({kind})",
        "group": node.group,
        "kind": kind,
        "shape": config.KIND_SHAPES[kind],
        "color": config.KIND_COLORS[kind],
        "size": config.DEFAULT_NODE_SIZE,
    }


def _base_edges(store: GraphStore) -> List[Dict[str, Any]]:
    return [
        {
            "id": edge.id,
            "from": edge.source,
            "to": edge.target,
            "arrows": "to",
            "color": config.EDGE_COLOR,
            "width": config.DEFAULT_EDGE_WIDTH,
        }
        for edge in store.edges
    ]


def _options(seed: int) -> Dict[str, Any]:
    return {
        "layout": {"randomSeed": seed},
        "physics": {"stabilization": {"iterations": 200}},
        "interaction": {"hover": True},
    }


def _payload(
    nodes: List[Dict[str, Any]],
    edges: List[Dict[str, Any]],
    seed: int,
) -> GraphPayload:
    return {"nodes": nodes, "edges": edges, "options": _options(seed)}


def _mute_nodes(
    nodes: Iterable[Dict[str, Any]], keep: FrozenSet[str]
) -> None:
    for item in nodes:
        if item["id"] not in keep:
            item["color"] = config.MUTED_COLOR
            item["label"] = ""


def _highlight_edges(
    edges: Iterable[Dict[str, Any]], highlighted: FrozenSet[str]
) -> None:
    for item in edges:
        if item["id"] in highlighted:
            item["color"] = config.HIGHLIGHT_COLOR
            item["width"] = config.HIGHLIGHT_EDGE_WIDTH
        else:
            item["color"] = config.MUTED_COLOR


def render_graph(
    store: GraphStore, seed: int = config.DEFAULT_LAYOUT_SEED
) -> GraphPayload:
    """Default view: colour and shape by node kind, every label shown."""
    return _payload(
        [_base_node(node) for node in store.nodes], _base_edges(store), seed
    )


def render_sinks(
    store: GraphStore,
    sinks: FrozenSet[str],
    seed: int = config.DEFAULT_LAYOUT_SEED,
) -> GraphPayload:
    nodes = [_base_node(node) for node in store.nodes]
    _mute_nodes(nodes, sinks)
    for item in nodes:
        if item["id"] in sinks:
            item["color"] = config.HIGHLIGHT_COLOR
            item["size"] = config.HIGHLIGHT_NODE_SIZE
    edges = _base_edges(store)
    _highlight_edges(edges, frozenset())
    return _payload(nodes, edges, seed)


def render_paths(
    store: GraphStore,
    result: PathQueryResult,
    seed: int = config.DEFAULT_LAYOUT_SEED,
) -> GraphPayload:
    nodes = [_base_node(node) for node in store.nodes]
    _mute_nodes(nodes, result.path_nodes)
    for item in nodes:
        if item["id"] in result.path_nodes:
            item["color"] = config.HIGHLIGHT_COLOR
            item["size"] = config.HIGHLIGHT_NODE_SIZE
    edges = _base_edges(store)
    _highlight_edges(edges, result.path_edges)
    return _payload(nodes, edges, seed)


def render_lineage(
    store: GraphStore,
    result: LineageResult,
    seed: int = config.DEFAULT_LAYOUT_SEED,
) -> GraphPayload:
    """Lineage view: origins drawn as stars, the target in its own colour."""
    nodes = [_base_node(node) for node in store.nodes]
    _mute_nodes(nodes, result.nodes | {result.target})
    for item in nodes:
        node_id = item["id"]
        style: Optional[Dict[str, Any]] = None
        if node_id == result.target:
            style = {"color": config.TARGET_COLOR}
        elif node_id in result.sources:
            style = {
                "color": config.SOURCE_COLOR,
                "shape": config.SOURCE_SHAPE,
            }
        elif node_id in result.nodes:
            style = {"color": config.HIGHLIGHT_COLOR}
        if style is not None:
            item.update(style)
            item["size"] = config.HIGHLIGHT_NODE_SIZE
    edges = _base_edges(store)
    _highlight_edges(edges, result.edges)
    return _payload(nodes, edges, seed)
