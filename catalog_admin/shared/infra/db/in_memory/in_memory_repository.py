from __future__ import annotations

from abc import abstractmethod
from operator import attrgetter
from typing import Any, Callable, ClassVar, Generic, Mapping, Optional, Sequence, TypeVar

from catalog_admin.logging_config import get_logger
from catalog_admin.shared.domain.entity import Entity
from catalog_admin.shared.domain.errors import NotFoundError
from catalog_admin.shared.domain.repository import (
    Repository,
    SearchableRepository,
    SearchParams,
    SearchResult,
    SortDirection,
)
from catalog_admin.shared.domain.value_object import ValueObject
from .filters import FilterStrategy

E = TypeVar("E", bound=Entity)
EntityId = TypeVar("EntityId", bound=ValueObject)
FilterT = TypeVar("FilterT")


class InMemoryRepository(Repository[E, EntityId]):
    """List backed :class:`Repository` meant for tests and demos.

    Entities are matched through ``entity_id.equals``. Read operations hand
    out the stored objects themselves, so mutating a returned entity changes
    the stored state without calling :meth:`update`.
    """

    def __init__(self) -> None:
        self.entities: list[E] = []
        self._logger = get_logger()

    async def insert(self, entity: E) -> None:
        self.entities.append(entity)
        self._logger.debug(
            "Entity inserted",
            extra={"entity": self._entity_name, "entity_id": str(entity.entity_id)},
        )

    async def bulk_insert(self, entities: Sequence[E]) -> None:
        self.entities.extend(entities)
        self._logger.debug(
            "Entities inserted", extra={"entity": self._entity_name, "count": len(entities)}
        )

    async def update(self, entity: E) -> None:
        index = self._get_index_or_raise(entity.entity_id)
        self.entities[index] = entity
        self._logger.debug(
            "Entity updated",
            extra={"entity": self._entity_name, "entity_id": str(entity.entity_id)},
        )

    async def delete(self, entity_id: EntityId) -> None:
        index = self._get_index_or_raise(entity_id)
        del self.entities[index]
        self._logger.debug(
            "Entity deleted", extra={"entity": self._entity_name, "entity_id": str(entity_id)}
        )

    async def find_by_id(self, entity_id: EntityId) -> Optional[E]:
        for entity in self.entities:
            if entity.entity_id.equals(entity_id):
                return entity
        return None

    async def find_all(self) -> list[E]:
        return self.entities

    @abstractmethod
    def get_entity(self) -> type[E]:
        """Return the entity class stored by this repository."""

    @property
    def _entity_name(self) -> str:
        return self.get_entity().__name__

    def _get_index_or_raise(self, entity_id: ValueObject) -> int:
        for index, entity in enumerate(self.entities):
            if entity.entity_id.equals(entity_id):
                return index
        self._logger.warning(
            "Entity not found", extra={"entity": self._entity_name, "entity_id": str(entity_id)}
        )
        raise NotFoundError(entity_id, self.get_entity())


class InMemorySearchableRepository(
    InMemoryRepository[E, EntityId],
    SearchableRepository[E, EntityId, FilterT],
    Generic[E, EntityId, FilterT],
):
    """In-memory repository running the filter, sort and paginate pipeline.

    Concrete repositories declare ``sortable_fields`` and, for derived or
    nested values, a ``sort_getters`` mapping of field name to accessor.
    Filtering is delegated to ``filter_strategy`` (see
    :class:`~catalog_admin.shared.infra.db.in_memory.filters.TextFilter`);
    without one the filter value is ignored. Subclasses may override
    :meth:`_apply_filter` instead.

    Example:
        >>> repo = CategoryInMemoryRepository()  # doctest: +SKIP
        >>> await repo.search(SearchParams(filter="drama", sort="name"))  # doctest: +SKIP
        SearchResult(items=[...], total=1, current_page=1, per_page=15)
    """

    sort_getters: ClassVar[Mapping[str, Callable[[Any], Any]]] = {}

    def __init__(self, filter_strategy: Optional[FilterStrategy[E]] = None) -> None:
        super().__init__()
        self._filter_strategy = filter_strategy

    async def search(self, params: SearchParams[FilterT]) -> SearchResult[E]:
        filtered = await self._apply_filter(self.entities, params.filter)
        ordered = self._apply_sort(filtered, params.sort, params.sort_dir)
        page_items = self._apply_paginate(ordered, params.page, params.per_page)
        self._logger.debug(
            "Search executed",
            extra={
                "entity": self._entity_name,
                "page": params.page,
                "per_page": params.per_page,
                "sort": params.sort,
                "sort_dir": params.sort_dir,
                "total": len(filtered),
            },
        )
        return SearchResult(
            items=page_items,
            total=len(filtered),
            current_page=params.page,
            per_page=params.per_page,
        )

    async def _apply_filter(self, items: list[E], filter: Optional[FilterT]) -> list[E]:
        if filter is None or filter == "" or self._filter_strategy is None:
            return items
        return self._filter_strategy(items, filter)

    def _apply_sort(
        self,
        items: list[E],
        sort: Optional[str],
        sort_dir: Optional[SortDirection],
        custom_getter: Optional[Callable[[str, E], Any]] = None,
    ) -> list[E]:
        if not sort or sort not in self.sortable_fields:
            return items

        if custom_getter is not None:
            getter: Callable[[E], Any] = lambda item: custom_getter(sort, item)  # noqa: E731
        else:
            getter = self.sort_getters.get(sort) or attrgetter(sort)

        keyed = [(getter(item), item) for item in items]
        present = [pair for pair in keyed if pair[0] is not None]
        missing = [item for value, item in keyed if value is None]
        # list.sort is stable for reverse=True too, so ties keep insertion order.
        present.sort(key=lambda pair: pair[0], reverse=sort_dir == "desc")
        return [item for _, item in present] + missing

    def _apply_paginate(self, items: list[E], page: int, per_page: int) -> list[E]:
        start = (page - 1) * per_page
        return items[start : start + per_page]
