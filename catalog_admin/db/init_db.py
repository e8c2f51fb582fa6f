"""Initialise the catalog SQLite schema.

Usage::

    python -m catalog_admin.db.init_db --db data/catalog.sqlite3
"""

from __future__ import annotations

import argparse
import sqlite3
from typing import Sequence

from ..config.settings import settings
from ..logging_config import get_logger
from .connection import connect


def ensure_schema(conn: sqlite3.Connection) -> None:
    # Programmatic schema init via repos so it always matches code
    from ..category.infra.db.sqlite import CategorySqliteRepository

    CategorySqliteRepository(conn)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Initialize SQLite database schema")
    parser.add_argument(
        "--db",
        default=str(settings.db_path),
        help="Path to SQLite DB file (will be created if missing)",
    )
    args = parser.parse_args(argv)

    conn = connect(args.db)
    try:
        ensure_schema(conn)
    finally:
        conn.close()

    get_logger().info("Schema initialized", extra={"db_path": args.db})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
