"""Application settings for the catalog persistence layer.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through an immutable Pydantic settings object.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_DB_PATH = Path("data/catalog.sqlite3")
DEFAULT_LOG_FILE = Path("logs/app.log")
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    db_path: Path = DEFAULT_DB_PATH
    log_file: Path = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(frozen=True)


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    log_level = os.getenv("CATALOG_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"CATALOG_LOG_LEVEL has an unknown level: {log_level}")

    return Settings(
        db_path=Path(os.getenv("CATALOG_DB_PATH", str(DEFAULT_DB_PATH))),
        log_file=Path(os.getenv("CATALOG_LOG_FILE", str(DEFAULT_LOG_FILE))),
        log_level=log_level,
    )


# Public settings instance
settings = _build_settings()
