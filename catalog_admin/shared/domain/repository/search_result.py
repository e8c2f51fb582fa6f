from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..entity import Entity

E = TypeVar("E")


class SearchResult(BaseModel, Generic[E]):
    """A page of search results together with its pagination metadata."""

    items: list[E] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Number of matches before pagination")
    current_page: int = Field(..., ge=1)
    per_page: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_page(self) -> int:
        # Integer ceiling division, exact for arbitrarily large per_page.
        return -(-self.total // self.per_page)

    def to_dict(self, force_entity: bool = False) -> dict[str, Any]:
        items: list[Any] = list(self.items)
        if force_entity:
            items = [item.to_dict() if isinstance(item, Entity) else item for item in items]
        return {
            "items": items,
            "total": self.total,
            "current_page": self.current_page,
            "per_page": self.per_page,
            "last_page": self.last_page,
        }
