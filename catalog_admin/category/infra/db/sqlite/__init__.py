"""SQLite adapters for the category module."""

from .category_sqlite_repository import CategorySqliteRepository

__all__ = ["CategorySqliteRepository"]
