"""State shared by the dashboard views and API: one graph, its tables."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Mapping, Optional

from pipeline_lineage import config
from pipeline_lineage.models import AttributeTable, NodeKind
from pipeline_lineage.presentation import (describe_node, render_graph,
                                           render_lineage, render_paths,
                                           render_sinks)
from pipeline_lineage.queries import (find_paths, find_sinks,
                                      find_sinks_by_kind, trace_lineage)
from pipeline_lineage.storage import GraphStore

_LOGGER = logging.getLogger(__name__)


class LineageDataStore:
    """Read-only facade that turns queries into JSON-ready payloads.

    The graph is never mutated; loading new tables means building a new
    data store.
    """

    def __init__(
        self,
        store: GraphStore,
        tables: Optional[Mapping[str, AttributeTable]] = None,
        *,
        layout_seed: int = config.DEFAULT_LAYOUT_SEED,
    ) -> None:
        self._store = store
        self._tables: Dict[str, AttributeTable] = dict(tables or {})
        self._seed = layout_seed

    @property
    def graph(self) -> GraphStore:
        return self._store

    @property
    def table_names(self) -> List[str]:
        return list(self._tables)

    def stats(self) -> Dict[str, Any]:
        kinds = Counter(node.kind.value for node in self._store.nodes)
        return {
            "nodes": len(self._store.nodes),
            "edges": len(self._store.edges),
            "kinds": {kind.value: kinds.get(kind.value, 0) for kind in NodeKind},
            "sinks": len(find_sinks(self._store)),
            "tables": self.table_names,
        }

    def list_nodes(self) -> List[Dict[str, Any]]:
        return [node.to_dict() for node in self._store.nodes]

    def graph_view(self) -> Dict[str, Any]:
        return render_graph(self._store, self._seed)

    def node_details(self, node_id: str) -> Dict[str, Any]:
        return describe_node(self._store, self._tables, node_id).to_dict()

    def sinks(self, kind: Optional[str] = None) -> Dict[str, Any]:
        if kind:
            sinks = find_sinks_by_kind(self._store, kind)
        else:
            sinks = find_sinks(self._store)
        return {
            "kind": NodeKind.parse(kind).value if kind else None,
            "sinks": sorted(sinks),
            "graph": render_sinks(self._store, sinks, self._seed),
        }

    def paths(self, source: str, target: str) -> Dict[str, Any]:
        result = find_paths(self._store, source, target)
        _LOGGER.info(
            "Path query %s -> %s returned %d path(s)",
            source,
            target,
            len(result.paths),
        )
        payload = result.to_dict()
        payload["graph"] = render_paths(self._store, result, self._seed)
        return payload

    def lineage(self, target: str) -> Dict[str, Any]:
        result = trace_lineage(self._store, target)
        _LOGGER.info(
            "Lineage query for %s reached %d node(s)",
            target,
            len(result.nodes),
        )
        payload = result.to_dict()
        payload["graph"] = render_lineage(self._store, result, self._seed)
        return payload


def empty_data_store() -> LineageDataStore:
    return LineageDataStore(GraphStore([], []))
