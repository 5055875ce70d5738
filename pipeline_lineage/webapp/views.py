"""Server-rendered views for the lineage dashboard."""

from __future__ import annotations

from flask import Blueprint, render_template

from . import get_store

ui_bp = Blueprint("ui", __name__)


@ui_bp.route("/")
def dashboard() -> str:
    """Single page: graph canvas, node selector and query forms."""
    store = get_store()
    return render_template(
        "dashboard.html",
        stats=store.stats(),
        nodes=store.list_nodes(),
    )
