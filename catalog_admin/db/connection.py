"""SQLite connection helper."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from ..config.settings import settings


def connect(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Open the catalog database, creating its parent directory if needed.

    ``":memory:"`` opens a private in-memory database.
    """
    path = Path(db_path) if db_path is not None else settings.db_path
    if str(path) == ":memory:":
        return sqlite3.connect(":memory:")
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn
