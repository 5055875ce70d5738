"""Tests for graph styling and the node browser."""

from __future__ import annotations

from typing import Any, Dict

import pytest

from pipeline_lineage import config
from pipeline_lineage.models import AttributeTable
from pipeline_lineage.presentation import (describe_node, render_graph,
                                           render_lineage, render_paths,
                                           render_sinks)
from pipeline_lineage.queries import find_paths, find_sinks, trace_lineage
from pipeline_lineage.storage import GraphStore, UnknownNodeError


def _by_id(items) -> Dict[str, Dict[str, Any]]:
    return {item["id"]: item for item in items}


def test_default_view_styles_by_kind(pipeline_store: GraphStore) -> None:
    payload = render_graph(pipeline_store, seed=7)
    nodes = _by_id(payload["nodes"])

    assert nodes["clean.py"]["shape"] == "box"
    assert nodes["raw_sales"]["shape"] == "dot"
    assert nodes["raw_sales"]["label"] == "Raw sales"
    assert [edge["id"] for edge in payload["edges"]] == [
        "e1", "e2", "e3", "e4", "e5", "e6", "e7",
    ]
    assert payload["edges"][0]["from"] == "raw_sales"
    assert payload["options"]["layout"]["randomSeed"] == 7


def test_same_seed_same_payload(pipeline_store: GraphStore) -> None:
    assert render_graph(pipeline_store, seed=3) == render_graph(
        pipeline_store, seed=3
    )


def test_sinks_view(pipeline_store: GraphStore) -> None:
    payload = render_sinks(pipeline_store, find_sinks(pipeline_store))
    nodes = _by_id(payload["nodes"])

    assert nodes["report"]["color"] == config.HIGHLIGHT_COLOR
    assert nodes["report"]["size"] == config.HIGHLIGHT_NODE_SIZE
    assert nodes["raw_sales"]["color"] == config.MUTED_COLOR
    assert nodes["raw_sales"]["label"] == ""


def test_paths_view_highlights_path_only(pipeline_store: GraphStore) -> None:
    result = find_paths(pipeline_store, "raw_sales", "report")
    payload = render_paths(pipeline_store, result)
    nodes = _by_id(payload["nodes"])
    edges = _by_id(payload["edges"])

    assert nodes["sales_clean"]["color"] == config.HIGHLIGHT_COLOR
    assert nodes["raw_stores"]["color"] == config.MUTED_COLOR
    assert edges["e3"]["color"] == config.HIGHLIGHT_COLOR
    assert edges["e3"]["width"] == config.HIGHLIGHT_EDGE_WIDTH
    assert edges["e7"]["color"] == config.MUTED_COLOR


def test_lineage_view_marks_sources_and_target(
    pipeline_store: GraphStore,
) -> None:
    result = trace_lineage(pipeline_store, "report")
    payload = render_lineage(pipeline_store, result)
    nodes = _by_id(payload["nodes"])

    assert nodes["raw_sales"]["shape"] == config.SOURCE_SHAPE
    assert nodes["raw_sales"]["color"] == config.SOURCE_COLOR
    assert nodes["report"]["color"] == config.TARGET_COLOR
    assert nodes["clean.py"]["color"] == config.HIGHLIGHT_COLOR
    assert nodes["clean.py"]["shape"] == "box"
    assert nodes["scratch.py"]["color"] == config.MUTED_COLOR


def test_describe_node_collects_rows(pipeline_store: GraphStore) -> None:
    tables = {
        "variables": AttributeTable(
            name="variables",
            key_column="node_id",
            rows=(
                {"node_id": "sales_clean", "variable": "amount"},
                {"node_id": "raw_sales", "variable": "amount"},
                {"node_id": "sales_clean", "variable": "store_id"},
            ),
        ),
        "programs": AttributeTable(
            name="programs", key_column="node_id", rows=()
        ),
    }

    details = describe_node(pipeline_store, tables, "sales_clean").to_dict()

    assert details["node"]["label"] == "Clean sales"
    assert details["node"]["in_degree"] == 1
    assert details["node"]["out_degree"] == 2
    assert details["node"]["producers"] == ["clean.py"]
    assert details["node"]["consumers"] == ["report.py", "scratch.py"]
    assert [row["variable"] for row in details["attributes"]["variables"]] == [
        "amount",
        "store_id",
    ]
    assert details["attributes"]["programs"] == []


def test_describe_node_without_tables(pipeline_store: GraphStore) -> None:
    details = describe_node(pipeline_store, None, "report")

    assert details.attributes == {}
    assert details.info["out_degree"] == 0


def test_describe_node_lists_parallel_producer_once(build_graph) -> None:
    store = build_graph("AB", [("p1", "A", "B"), ("p2", "A", "B")])

    details = describe_node(store, None, "B")

    assert details.info["in_degree"] == 2
    assert details.info["producers"] == ["A"]
    assert details.info["consumers"] == []


def test_describe_unknown_node(pipeline_store: GraphStore) -> None:
    with pytest.raises(UnknownNodeError):
        describe_node(pipeline_store, {}, "ghost")
