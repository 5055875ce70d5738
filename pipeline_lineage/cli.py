"""Command-line entry point: run lineage queries or serve the dashboard."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, TextIO

from . import config
from .logging_config import configure_logging
from .models import AttributeTable
from .queries import find_paths, find_sinks, find_sinks_by_kind, trace_lineage
from .storage import GraphError, GraphStore, build_store, load_attribute_table
from .utils.env import env_path, layout_seed

_LOGGER = logging.getLogger(__name__)


class LineageCLI:
    """Loads the graph tables once and dispatches one subcommand."""

    def __init__(
        self,
        nodes_file: Optional[Path] = None,
        edges_file: Optional[Path] = None,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._nodes_file = nodes_file or env_path("LINEAGE_NODES_FILE")
        self._edges_file = edges_file or env_path("LINEAGE_EDGES_FILE")
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr

    def load_store(self) -> GraphStore:
        if self._nodes_file is None or self._edges_file is None:
            raise ValueError(
                "Node and edge tables are required: pass --nodes/--edges or "
                "set LINEAGE_NODES_FILE and LINEAGE_EDGES_FILE."
            )
        return build_store(self._nodes_file, self._edges_file)

    def run(self, args: argparse.Namespace) -> int:
        try:
            store = self.load_store()
            if args.command == "serve":
                return self._serve(store, args)
            payload = self._query(store, args)
        except (GraphError, ValueError, FileNotFoundError) as error:
            _LOGGER.warning("Command %s failed: %s", args.command, error)
            print(f"error: {error}", file=self._stderr)
            return 1

        print(json.dumps(payload, indent=2), file=self._stdout)
        return 0

    def _query(
        self, store: GraphStore, args: argparse.Namespace
    ) -> Dict[str, Any]:
        if args.command == "sinks":
            if args.kind:
                sinks = find_sinks_by_kind(store, args.kind)
            else:
                sinks = find_sinks(store)
            return {"sinks": sorted(sinks)}
        if args.command == "paths":
            return find_paths(store, args.source, args.target).to_dict()
        if args.command == "lineage":
            return trace_lineage(store, args.target).to_dict()
        raise ValueError(f"Unknown command '{args.command}'")

    def _serve(self, store: GraphStore, args: argparse.Namespace) -> int:
        from .webapp import create_app
        from .webapp.data_store import LineageDataStore

        tables = parse_attribute_specs(args.attributes or [])
        data_store = LineageDataStore(store, tables, layout_seed=layout_seed())
        app = create_app({"DATA_STORE": data_store})
        _LOGGER.info("Serving dashboard on %s:%d", args.host, args.port)
        app.run(host=args.host, port=args.port)
        return 0


def parse_attribute_specs(specs: Sequence[str]) -> Mapping[str, AttributeTable]:
    """Turn ``NAME=PATH`` arguments into loaded attribute tables."""
    tables: Dict[str, AttributeTable] = {}
    for spec in specs:
        name, sep, raw_path = spec.partition("=")
        if not sep or not name.strip() or not raw_path.strip():
            raise ValueError(
                f"Attribute table '{spec}' must look like NAME=PATH"
            )
        tables[name.strip()] = load_attribute_table(
            Path(raw_path.strip()), name.strip()
        )
    return tables


def build_arg_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(
        prog="pipeline-lineage",
        description=(
            "Query a pipeline graph of programs and datasets: unused nodes, "
            "paths between nodes and lineage of a node."
        ),
    )
    argument_parser.add_argument(
        "--nodes",
        type=Path,
        help="Node table (.csv or .json). Defaults to LINEAGE_NODES_FILE.",
    )
    argument_parser.add_argument(
        "--edges",
        type=Path,
        help="Edge table (.csv or .json). Defaults to LINEAGE_EDGES_FILE.",
    )
    commands = argument_parser.add_subparsers(dest="command", required=True)

    sinks_parser = commands.add_parser(
        "sinks", help="List nodes with no outgoing edges."
    )
    sinks_parser.add_argument(
        "--kind", help="Only report nodes of this kind (Code or Data)."
    )

    paths_parser = commands.add_parser(
        "paths", help="List every simple path between two nodes."
    )
    paths_parser.add_argument("source")
    paths_parser.add_argument("target")

    lineage_parser = commands.add_parser(
        "lineage", help="List every ancestor of a node."
    )
    lineage_parser.add_argument("target")

    serve_parser = commands.add_parser("serve", help="Run the dashboard.")
    serve_parser.add_argument("--host", default=config.DEFAULT_HOST)
    serve_parser.add_argument("--port", type=int, default=config.DEFAULT_PORT)
    serve_parser.add_argument(
        "--attributes",
        action="append",
        metavar="NAME=PATH",
        help="Lookup table keyed by node_id; repeatable.",
    )
    return argument_parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    argument_parser = build_arg_parser()
    parsed_args = argument_parser.parse_args(argv)

    app = LineageCLI(parsed_args.nodes, parsed_args.edges)
    return app.run(parsed_args)


if __name__ == "__main__":
    sys.exit(main())
