"""Shared fixtures: small pipeline graphs and a clean environment."""

from __future__ import annotations

from typing import Iterable, Tuple

import pytest

from pipeline_lineage.models import Edge, Node, NodeKind
from pipeline_lineage.storage import GraphStore


def make_store(
    node_ids: Iterable[str],
    edges: Iterable[Tuple[str, str, str]],
) -> GraphStore:
    """Build a store from bare ids and ``(edge_id, from, to)`` triples."""
    return GraphStore(
        [Node(id=node_id) for node_id in node_ids],
        [Edge(id=edge_id, source=src, target=dst) for edge_id, src, dst in edges],
    )


@pytest.fixture(autouse=True)
def _quiet_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_LEVEL",
        "LOG_FILE",
        "LINEAGE_NODES_FILE",
        "LINEAGE_EDGES_FILE",
        "LINEAGE_LAYOUT_SEED",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def chain_store() -> GraphStore:
    """Nodes A-D with A->B, B->C and A->D."""
    return make_store(
        "ABCD",
        [("ab", "A", "B"), ("bc", "B", "C"), ("ad", "A", "D")],
    )


@pytest.fixture()
def pipeline_store() -> GraphStore:
    """A small pipeline: raw data feeds programs that write derived data."""
    nodes = [
        Node(id="raw_sales", label="Raw sales", kind=NodeKind.DATA),
        Node(id="raw_stores", label="Raw stores", kind=NodeKind.DATA),
        Node(id="clean.py", label="clean.py", kind=NodeKind.CODE),
        Node(id="sales_clean", label="Clean sales", kind=NodeKind.DATA),
        Node(id="report.py", label="report.py", kind=NodeKind.CODE),
        Node(id="report", label="Report", kind=NodeKind.DATA),
        Node(id="scratch.py", label="scratch.py", kind=NodeKind.CODE),
    ]
    edges = [
        Edge(id="e1", source="raw_sales", target="clean.py"),
        Edge(id="e2", source="raw_stores", target="clean.py"),
        Edge(id="e3", source="clean.py", target="sales_clean"),
        Edge(id="e4", source="sales_clean", target="report.py"),
        Edge(id="e5", source="raw_stores", target="report.py"),
        Edge(id="e6", source="report.py", target="report"),
        Edge(id="e7", source="sales_clean", target="scratch.py"),
    ]
    return GraphStore(nodes, edges)


@pytest.fixture()
def build_graph():
    """Factory fixture wrapping ``make_store`` for ad-hoc graphs."""
    return make_store
