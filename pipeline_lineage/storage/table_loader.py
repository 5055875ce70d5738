"""Load node, edge and attribute tables from CSV or JSON files.

CSV files need a header row. JSON files hold a list of objects. Rows keep
their file order, which the graph store relies on for deterministic
adjacency.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Set, Union

from pipeline_lineage.models import Edge, Node
from pipeline_lineage.models.tables import AttributeTable

from .errors import TableFormatError
from .graph_store import GraphStore

_LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]

NODE_COLUMNS = ("id", "label", "kind", "subtype", "group", "created_at")
EDGE_COLUMNS = ("id", "from", "to")
_REQUIRED_NODE_COLUMNS = ("id", "kind")
_REQUIRED_EDGE_COLUMNS = ("from", "to")


def read_rows(path: PathLike) -> List[Dict[str, Any]]:
    """Read a table file into a list of row dictionaries."""
    table_path = Path(path)
    if not table_path.exists():
        raise FileNotFoundError(f"Table file not found: {table_path}")

    suffix = table_path.suffix.lower()
    if suffix == ".csv":
        with table_path.open("r", encoding="utf-8-sig", newline="") as handle:
            rows = [dict(row) for row in csv.DictReader(handle)]
    elif suffix == ".json":
        try:
            payload = json.loads(table_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise TableFormatError(
                f"Table {table_path} is not valid JSON: {exc}"
            ) from exc
        if not isinstance(payload, list) or not all(
            isinstance(row, dict) for row in payload
        ):
            raise TableFormatError(
                f"Table {table_path} must contain a list of objects"
            )
        rows = [dict(row) for row in payload]
    else:
        raise TableFormatError(
            f"Unsupported table format '{suffix or table_path.name}'; "
            "expected .csv or .json"
        )

    _LOGGER.debug("Read %d rows from %s", len(rows), table_path)
    return rows


def _check_columns(
    rows: Sequence[Dict[str, Any]],
    required: Sequence[str],
    source: PathLike,
) -> None:
    for index, row in enumerate(rows):
        missing = [column for column in required if column not in row]
        if missing:
            raise TableFormatError(
                f"Row {index} of {source} is missing column(s): "
                f"{', '.join(missing)}"
            )


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _free_edge_id(candidate: str, taken: Set[str]) -> str:
    edge_id = candidate
    suffix = 0
    while edge_id in taken:
        suffix += 1
        edge_id = f"{candidate}_{suffix}"
    return edge_id


def nodes_from_rows(
    rows: Sequence[Dict[str, Any]], source: PathLike = "<rows>"
) -> List[Node]:
    _check_columns(rows, _REQUIRED_NODE_COLUMNS, source)
    nodes: List[Node] = []
    for index, row in enumerate(rows):
        try:
            nodes.append(
                Node(
                    id=_clean(row.get("id")) or "",
                    label=_clean(row.get("label")) or "",
                    kind=_clean(row.get("kind")) or "",
                    subtype=_clean(row.get("subtype")),
                    group=_clean(row.get("group")),
                    created_at=_clean(row.get("created_at")),
                )
            )
        except ValueError as exc:
            raise TableFormatError(
                f"Row {index} of {source} is not a valid node: {exc}"
            ) from exc
    return nodes


def edges_from_rows(
    rows: Sequence[Dict[str, Any]], source: PathLike = "<rows>"
) -> List[Edge]:
    """Build edges, naming blank ids after their row (``e0``, ``e1``...).

    A generated id never collides with an id written in the table; when
    ``e<row>`` is taken, a numeric suffix is added (``e1_1``, ``e1_2``...).
    """
    _check_columns(rows, _REQUIRED_EDGE_COLUMNS, source)
    taken = {_clean(row.get("id")) for row in rows} - {None}
    edges: List[Edge] = []
    for index, row in enumerate(rows):
        edge_id = _clean(row.get("id"))
        if edge_id is None:
            edge_id = _free_edge_id(f"e{index}", taken)
            taken.add(edge_id)
        try:
            edges.append(
                Edge(
                    id=edge_id,
                    source=_clean(row.get("from")) or "",
                    target=_clean(row.get("to")) or "",
                )
            )
        except ValueError as exc:
            raise TableFormatError(
                f"Row {index} of {source} is not a valid edge: {exc}"
            ) from exc
    return edges


def load_nodes(path: PathLike) -> List[Node]:
    nodes = nodes_from_rows(read_rows(path), path)
    _LOGGER.info("Loaded %d nodes from %s", len(nodes), path)
    return nodes


def load_edges(path: PathLike) -> List[Edge]:
    edges = edges_from_rows(read_rows(path), path)
    _LOGGER.info("Loaded %d edges from %s", len(edges), path)
    return edges


def load_attribute_table(
    path: PathLike,
    name: str | None = None,
    key_column: str = "node_id",
) -> AttributeTable:
    """Load a lookup table keyed by node id (defaults to the file stem)."""
    rows = read_rows(path)
    table_name = name or Path(path).stem
    try:
        table = AttributeTable(
            name=table_name, key_column=key_column, rows=tuple(rows)
        )
    except ValueError as exc:
        raise TableFormatError(str(exc)) from exc
    _LOGGER.info(
        "Loaded attribute table '%s' with %d rows from %s",
        table_name,
        len(rows),
        path,
    )
    return table


def build_store(nodes_path: PathLike, edges_path: PathLike) -> GraphStore:
    """Load both tables and build a validated graph store."""
    return GraphStore(load_nodes(nodes_path), load_edges(edges_path))
