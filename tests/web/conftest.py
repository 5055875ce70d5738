from __future__ import annotations

from typing import Generator

import pytest

from pipeline_lineage.models import AttributeTable, Edge, Node, NodeKind
from pipeline_lineage.storage import GraphStore
from pipeline_lineage.webapp import create_app
from pipeline_lineage.webapp.data_store import LineageDataStore


@pytest.fixture()
def data_store() -> LineageDataStore:
    store = GraphStore(
        [
            Node(id="raw", label="Raw extract", kind=NodeKind.DATA),
            Node(id="clean.py", kind=NodeKind.CODE),
            Node(id="clean", label="Clean table", kind=NodeKind.DATA),
            Node(id="unused", label="Unused extract", kind=NodeKind.DATA),
        ],
        [
            Edge(id="e1", source="raw", target="clean.py"),
            Edge(id="e2", source="clean.py", target="clean"),
        ],
    )
    tables = {
        "variables": AttributeTable(
            name="variables",
            key_column="node_id",
            rows=(
                {"node_id": "clean", "variable": "amount", "type": "float"},
                {"node_id": "raw", "variable": "amount", "type": "str"},
            ),
        )
    }
    return LineageDataStore(store, tables, layout_seed=5)


@pytest.fixture()
def web_app(data_store: LineageDataStore) -> Generator:
    """Provide a configured Flask application."""
    app = create_app({"TESTING": True, "DATA_STORE": data_store})
    yield app


@pytest.fixture()
def client(web_app):
    """Flask test client fixture."""
    return web_app.test_client()
