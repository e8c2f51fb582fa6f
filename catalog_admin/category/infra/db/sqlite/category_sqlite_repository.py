from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any, Optional, Sequence

from catalog_admin.category.domain.category import Category
from catalog_admin.category.domain.category_repository import (
    CategoryRepository,
    CategorySearchParams,
    CategorySearchResult,
)
from catalog_admin.logging_config import get_logger
from catalog_admin.shared.domain.errors import NotFoundError
from catalog_admin.shared.domain.value_objects.uuid import Uuid

_COLUMNS = "category_id, name, description, is_active, created_at"
# SQLite binds integers as signed 64 bit.
_MAX_SQL_INT = 2**63 - 1


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _lower(value: Optional[str]) -> Optional[str]:
    # Python lowercasing, since SQLite LIKE only folds ASCII letters.
    return value.lower() if value is not None else None


def _to_row(entity: Category) -> tuple[Any, ...]:
    return (
        entity.category_id.id,
        entity.name,
        entity.description,
        int(entity.is_active),
        entity.created_at.isoformat(timespec="microseconds"),
    )


def _to_entity(row: Sequence[Any]) -> Category:
    # row: (category_id, name, description, is_active, created_at)
    return Category(
        category_id=Uuid(row[0]),
        name=row[1],
        description=row[2],
        is_active=bool(row[3]),
        created_at=datetime.fromisoformat(row[4]),
    )


class CategorySqliteRepository(CategoryRepository):
    """SQLite implementation of :class:`CategoryRepository`.

    Filtering, ordering and pagination are pushed down to SQL. Ties are broken
    by insertion order so results line up with the in-memory repository.

    Example:
        >>> import asyncio, sqlite3
        >>> repo = CategorySqliteRepository(sqlite3.connect(":memory:"))
        >>> asyncio.run(repo.insert(Category.create(name="Drama")))
        >>> [c.name for c in asyncio.run(repo.find_all())]
        ['Drama']
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._logger = get_logger()
        self._conn.create_function("py_lower", 1, _lower, deterministic=True)
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS categories (
                category_id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                description TEXT,
                is_active INTEGER NOT NULL DEFAULT 1,
                created_at TEXT NOT NULL
            )
            """
        )
        self._conn.commit()

    def get_entity(self) -> type[Category]:
        return Category

    async def insert(self, entity: Category) -> None:
        self._conn.execute(
            f"INSERT INTO categories ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)", _to_row(entity)
        )
        self._conn.commit()
        self._logger.debug("Category inserted", extra={"entity_id": entity.category_id.id})

    async def bulk_insert(self, entities: Sequence[Category]) -> None:
        self._conn.executemany(
            f"INSERT INTO categories ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
            [_to_row(entity) for entity in entities],
        )
        self._conn.commit()
        self._logger.debug("Categories inserted", extra={"count": len(entities)})

    async def update(self, entity: Category) -> None:
        self._ensure_exists(entity.category_id)
        self._conn.execute(
            """
            UPDATE categories
            SET name = ?, description = ?, is_active = ?, created_at = ?
            WHERE category_id = ?
            """,
            (*_to_row(entity)[1:], entity.category_id.id),
        )
        self._conn.commit()
        self._logger.debug("Category updated", extra={"entity_id": entity.category_id.id})

    async def delete(self, entity_id: Uuid) -> None:
        self._ensure_exists(entity_id)
        self._conn.execute("DELETE FROM categories WHERE category_id = ?", (entity_id.id,))
        self._conn.commit()
        self._logger.debug("Category deleted", extra={"entity_id": entity_id.id})

    async def find_by_id(self, entity_id: Uuid) -> Optional[Category]:
        row = self._fetch_row(entity_id)
        if row:
            return _to_entity(row)
        return None

    async def find_all(self) -> list[Category]:
        cur = self._conn.execute(f"SELECT {_COLUMNS} FROM categories ORDER BY rowid")
        return [_to_entity(row) for row in cur.fetchall()]

    async def search(self, params: CategorySearchParams) -> CategorySearchResult:
        where = ""
        args: list[Any] = []
        if params.filter:
            where = "WHERE py_lower(name) LIKE ? ESCAPE '\\'"
            args.append(f"%{_escape_like(str(params.filter).lower())}%")

        if not params.sort:
            order = "created_at DESC, rowid"
        elif params.sort in self.sortable_fields:
            direction = "DESC" if params.sort_dir == "desc" else "ASC"
            order = f"{params.sort} {direction}, rowid"
        else:
            # Unknown sort fields keep storage order, like the in-memory repository.
            order = "rowid"

        total = self._conn.execute(f"SELECT COUNT(*) FROM categories {where}", args).fetchone()[0]
        limit = min(params.per_page, _MAX_SQL_INT)
        offset = min((params.page - 1) * params.per_page, _MAX_SQL_INT)
        cur = self._conn.execute(
            f"SELECT {_COLUMNS} FROM categories {where} ORDER BY {order} LIMIT ? OFFSET ?",
            (*args, limit, offset),
        )
        items = [_to_entity(row) for row in cur.fetchall()]
        self._logger.debug(
            "Search executed",
            extra={"entity": "Category", "page": params.page, "total": total},
        )
        return CategorySearchResult(
            items=items,
            total=total,
            current_page=params.page,
            per_page=params.per_page,
        )

    def _fetch_row(self, entity_id: Uuid) -> Optional[tuple[Any, ...]]:
        cur = self._conn.execute(
            f"SELECT {_COLUMNS} FROM categories WHERE category_id = ?", (entity_id.id,)
        )
        return cur.fetchone()

    def _ensure_exists(self, entity_id: Uuid) -> None:
        if self._fetch_row(entity_id) is None:
            self._logger.warning(
                "Entity not found", extra={"entity": "Category", "entity_id": entity_id.id}
            )
            raise NotFoundError(entity_id, Category)
