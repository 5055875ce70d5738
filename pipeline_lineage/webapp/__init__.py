"""Flask application factory for the lineage dashboard."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from flask import Flask, current_app, g, request

from .data_store import LineageDataStore, empty_data_store

_LOGGER = logging.getLogger(__name__)


def create_app(config: Dict[str, Any] | None = None) -> Flask:
    """Create and configure the Flask application."""

    instance_path = Path(__file__).resolve().parent
    static_folder = instance_path / "static"
    template_folder = instance_path / "templates"

    app = Flask(
        __name__,
        static_folder=str(static_folder),
        template_folder=str(template_folder),
    )
    app.json.sort_keys = False

    if config:
        app.config.update(config)
    if "DATA_STORE" not in app.config:
        app.config["DATA_STORE"] = empty_data_store()

    from .api import api_bp
    from .views import ui_bp

    app.register_blueprint(ui_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        elapsed_ms = (
            (time.perf_counter() - started) * 1000 if started is not None else 0.0
        )
        _LOGGER.info(
            "HTTP request method=%s path=%s query=%s status=%s ms=%.1f",
            request.method,
            request.path,
            request.args.to_dict(),
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.context_processor
    def inject_global_context() -> Dict[str, Any]:
        """Provide template-wide variables."""
        return {
            "app_name": "Pipeline Lineage Explorer",
            "current_year": datetime.now(timezone.utc).year,
        }

    return app


def get_store(app: Flask | None = None) -> LineageDataStore:
    """Retrieve the shared data store. Accepts an optional app override."""
    ctx_app = app or current_app
    store = ctx_app.config.get("DATA_STORE")
    if not isinstance(store, LineageDataStore):
        raise RuntimeError(
            "DATA_STORE config must be a LineageDataStore instance"
        )
    return store
