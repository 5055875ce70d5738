"""JSON API blueprint exposing the lineage queries."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from pipeline_lineage.storage import UnknownNodeError

from . import get_store

api_bp = Blueprint("api", __name__)


def _json_error(message: str, status: int = 400):
    return jsonify({"error": message}), status


@api_bp.errorhandler(UnknownNodeError)
def _unknown_node(exc: UnknownNodeError):
    return _json_error(str(exc), 404)


@api_bp.get("/health")
def healthcheck():
    """Simple readiness probe used by tests or deployment."""
    return jsonify({"status": "ok"}), 200


@api_bp.get("/stats")
def stats():
    """Return aggregate counts for the dashboard header."""
    return jsonify(get_store().stats()), 200


@api_bp.get("/graph")
def graph():
    """Return the default styled graph."""
    return jsonify(get_store().graph_view()), 200


@api_bp.get("/nodes")
def list_nodes():
    return jsonify({"items": get_store().list_nodes()}), 200


@api_bp.get("/nodes/<path:node_id>")
def node_details(node_id: str):
    """Return the node record and its lookup-table rows."""
    return jsonify(get_store().node_details(node_id)), 200


@api_bp.get("/sinks")
def sinks():
    """Return nodes nothing consumes, optionally filtered by kind."""
    kind = request.args.get("kind") or None
    try:
        payload = get_store().sinks(kind)
    except ValueError as exc:
        return _json_error(str(exc), 400)
    return jsonify(payload), 200


@api_bp.get("/paths")
def paths():
    """Return every simple path between two nodes."""
    source = (request.args.get("source") or "").strip()
    target = (request.args.get("target") or "").strip()
    if not source or not target:
        return _json_error("source and target query parameters are required.")
    return jsonify(get_store().paths(source, target)), 200


@api_bp.get("/lineage/<path:node_id>")
def lineage(node_id: str):
    """Return every ancestor of a node and where its lineage begins."""
    return jsonify(get_store().lineage(node_id)), 200
