"""Node browser: the selected node's record plus its lookup-table rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pipeline_lineage.models import AttributeTable
from pipeline_lineage.storage import GraphStore


@dataclass(frozen=True)
class NodeDetails:
    """Response to selecting a node in the dashboard."""

    info: Mapping[str, Any]
    attributes: Mapping[str, Sequence[Mapping[str, Any]]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node": dict(self.info),
            "attributes": {
                name: [dict(row) for row in rows]
                for name, rows in self.attributes.items()
            },
        }


def describe_node(
    store: GraphStore,
    tables: Optional[Mapping[str, AttributeTable]],
    node_id: str,
) -> NodeDetails:
    """Collect the node record, its degrees and its matching table rows.

    Raises ``UnknownNodeError`` when ``node_id`` is not in the store.
    """
    node = store.node(node_id)
    info: Dict[str, Any] = node.to_dict()
    info["in_degree"] = store.in_degree(node_id)
    info["out_degree"] = store.out_degree(node_id)
    info["producers"] = _unique(edge.source for edge in store.in_edges(node_id))
    info["consumers"] = _unique(edge.target for edge in store.out_edges(node_id))

    attributes = {
        name: table.rows_for(node_id) for name, table in (tables or {}).items()
    }
    return NodeDetails(info=info, attributes=attributes)


def _unique(values: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen
