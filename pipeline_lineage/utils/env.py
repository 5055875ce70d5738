from __future__ import annotations

"""Helpers for loading environment configuration."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from pipeline_lineage.config import DEFAULT_LAYOUT_SEED

_ENV_LOADED = False

_LOGGER = logging.getLogger(__name__)


def load_dotenv(dotenv_path: Union[str, Path] = ".env") -> None:
    """Load environment variables from a simple ``.env`` file if present."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return

    path = Path(dotenv_path)
    if path.exists():
        for line in path.read_text().splitlines():
            parsed = _parse_line(line)
            if parsed:
                key, value = parsed
                os.environ.setdefault(key, value)

    _ENV_LOADED = True


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    if "=" not in stripped:
        return None

    key, value = stripped.split("=", 1)
    return (key.strip(), value.strip().strip("\"'"))


def env_path(name: str) -> Optional[Path]:
    """Return the path stored in ``name`` or None when it is blank."""
    load_dotenv()
    raw = os.environ.get(name, "").strip()
    return Path(raw) if raw else None


def layout_seed() -> int:
    """Seed for the graph layout, from ``LINEAGE_LAYOUT_SEED``."""
    load_dotenv()
    raw = os.environ.get("LINEAGE_LAYOUT_SEED", "").strip()
    if not raw:
        return DEFAULT_LAYOUT_SEED
    try:
        return int(raw)
    except ValueError:
        _LOGGER.warning(
            "Ignoring non-integer LINEAGE_LAYOUT_SEED=%r; using %d",
            raw,
            DEFAULT_LAYOUT_SEED,
        )
        return DEFAULT_LAYOUT_SEED
