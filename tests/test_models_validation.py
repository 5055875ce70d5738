from __future__ import annotations

import pytest

from pipeline_lineage.models import AttributeTable, Edge, Node, NodeKind


def test_node_defaults_label_to_id_and_parses_kind() -> None:
    node = Node(id="sales.csv", kind="data")

    assert node.label == "sales.csv"
    assert node.kind is NodeKind.DATA
    assert node.to_dict() == {
        "id": "sales.csv",
        "label": "sales.csv",
        "kind": "Data",
        "subtype": None,
        "group": None,
        "created_at": None,
    }


def test_node_rejects_empty_id_and_unknown_kind() -> None:
    with pytest.raises(ValueError, match="Node id cannot be empty"):
        Node(id="")

    with pytest.raises(ValueError, match="Node kind 'Model' is not recognized"):
        Node(id="x", kind="Model")


def test_edge_validation() -> None:
    with pytest.raises(ValueError, match="Edge id cannot be empty"):
        Edge(id="", source="a", target="b")

    with pytest.raises(ValueError, match="must name both of its endpoints"):
        Edge(id="e1", source="a", target="")

    assert Edge(id="e1", source="a", target="b").to_dict() == {
        "id": "e1",
        "from": "a",
        "to": "b",
    }


def test_nodes_are_immutable() -> None:
    node = Node(id="a")

    with pytest.raises(AttributeError):
        node.id = "b"  # type: ignore[misc]


def test_attribute_table_matches_rows_by_key() -> None:
    table = AttributeTable(
        name="programs",
        key_column="node_id",
        rows=(
            {"node_id": "clean.py", "author": "kim"},
            {"node_id": " report.py ", "author": "lee"},
        ),
    )

    assert table.rows_for("report.py") == ({"node_id": " report.py ", "author": "lee"},)

    with pytest.raises(ValueError, match="name cannot be empty"):
        AttributeTable(name="", key_column="node_id", rows=())
