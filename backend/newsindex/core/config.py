"""Environment-driven configuration.

Values are read on every call so tests can patch the environment.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_ITEMS_PER_PAGE = 50
DEFAULT_DB_DIR = "/app/db"

logger = logging.getLogger(__name__)


def get_items_per_page() -> int:
    """Default page size, from `ITEMS_PER_PAGE`.

    Non-integer or non-positive values fall back to the default.
    """
    raw = os.getenv("ITEMS_PER_PAGE", "").strip()
    if not raw:
        return DEFAULT_ITEMS_PER_PAGE
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid ITEMS_PER_PAGE=%r, using %s", raw, DEFAULT_ITEMS_PER_PAGE)
        return DEFAULT_ITEMS_PER_PAGE
    if value < 1:
        logger.warning("ITEMS_PER_PAGE must be positive, got %s; using %s", value, DEFAULT_ITEMS_PER_PAGE)
        return DEFAULT_ITEMS_PER_PAGE
    return value


def get_db_dir() -> Path:
    return Path(os.getenv("NEWSINDEX_DB_DIR", "").strip() or DEFAULT_DB_DIR)
