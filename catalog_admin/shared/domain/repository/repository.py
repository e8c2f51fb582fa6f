from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Optional, Sequence, TypeVar

from ..entity import Entity
from ..value_object import ValueObject
from .search_params import SearchParams
from .search_result import SearchResult

E = TypeVar("E", bound=Entity)
EntityId = TypeVar("EntityId", bound=ValueObject)
FilterT = TypeVar("FilterT")


class Repository(ABC, Generic[E, EntityId]):
    """Storage agnostic persistence contract for a single entity type."""

    @abstractmethod
    async def insert(self, entity: E) -> None:
        """
        Persist a new entity.

        Example:
            >>> await repo.insert(category)  # doctest: +SKIP

        :param entity: Entity instance to persist.
        """

    @abstractmethod
    async def bulk_insert(self, entities: Sequence[E]) -> None:
        """
        Persist several entities, preserving their order.

        The operation is not atomic: entities stored before a failure stay stored.

        :param entities: Entities to persist.
        """

    @abstractmethod
    async def update(self, entity: E) -> None:
        """
        Replace the stored entity sharing ``entity.entity_id``.

        :param entity: Entity instance with updated data.
        :raises NotFoundError: If no stored entity has the same identity.
        """

    @abstractmethod
    async def delete(self, entity_id: EntityId) -> None:
        """
        Remove the entity identified by ``entity_id``.

        :param entity_id: Identity of the entity to delete.
        :raises NotFoundError: If no stored entity has that identity.
        """

    @abstractmethod
    async def find_by_id(self, entity_id: EntityId) -> Optional[E]:
        """
        Fetch an entity by its identity.

        :param entity_id: Identity to look up.
        :return: The entity if found, otherwise None.
        """

    @abstractmethod
    async def find_all(self) -> list[E]:
        """Return every stored entity in storage order."""

    @abstractmethod
    def get_entity(self) -> type[E]:
        """Return the entity class handled by the repository."""


class SearchableRepository(Repository[E, EntityId], Generic[E, EntityId, FilterT]):
    """Repository that additionally supports filtered, sorted and paginated search."""

    sortable_fields: ClassVar[Sequence[str]] = ()

    @abstractmethod
    async def search(self, params: SearchParams[FilterT]) -> SearchResult[E]:
        """
        Run the filter, sort and paginate pipeline described by ``params``.

        Never raises for a valid :class:`SearchParams`; an empty store yields an
        empty result.

        :param params: Normalised search options.
        :return: The requested page and pagination metadata.
        """
