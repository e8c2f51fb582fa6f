from __future__ import annotations

from typing import Any, Callable, Optional

from catalog_admin.category.domain.category import Category
from catalog_admin.category.domain.category_repository import CategoryFilter, CategoryRepository
from catalog_admin.shared.domain.repository import SortDirection
from catalog_admin.shared.domain.value_objects.uuid import Uuid
from catalog_admin.shared.infra.db.in_memory import InMemorySearchableRepository, TextFilter


class CategoryInMemoryRepository(
    InMemorySearchableRepository[Category, Uuid, CategoryFilter], CategoryRepository
):
    """In-memory :class:`CategoryRepository` filtering on ``name``."""

    def __init__(self) -> None:
        super().__init__(filter_strategy=TextFilter("name"))

    def get_entity(self) -> type[Category]:
        return Category

    def _apply_sort(
        self,
        items: list[Category],
        sort: Optional[str],
        sort_dir: Optional[SortDirection],
        custom_getter: Optional[Callable[[str, Category], Any]] = None,
    ) -> list[Category]:
        if sort:
            return super()._apply_sort(items, sort, sort_dir, custom_getter)
        return super()._apply_sort(items, "created_at", "desc")
