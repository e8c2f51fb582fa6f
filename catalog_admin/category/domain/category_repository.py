from __future__ import annotations

from abc import ABC
from typing import ClassVar, Sequence

from ...shared.domain.repository import SearchableRepository, SearchParams, SearchResult
from ...shared.domain.value_objects.uuid import Uuid
from .category import Category

CategoryFilter = str

CategorySearchParams = SearchParams[CategoryFilter]
CategorySearchResult = SearchResult[Category]


class CategoryRepository(SearchableRepository[Category, Uuid, CategoryFilter], ABC):
    """Persistence contract for :class:`Category` entities.

    Implementations filter on ``name`` (case-insensitive substring) and order
    by ``created_at`` descending when the caller does not ask for a sort.
    """

    sortable_fields: ClassVar[Sequence[str]] = ("name", "created_at")
