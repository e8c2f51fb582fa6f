from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import Field, field_validator

from ...shared.domain.entity import Entity
from ...shared.domain.errors import EntityValidationError
from ...shared.domain.value_objects.uuid import Uuid
from .category_validator import CategoryValidator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Category(Entity):
    """A catalog category.

    ``Category(...)`` builds an instance without domain validation (used when
    rehydrating from storage); :meth:`create` and the ``change_*`` mutators run
    :meth:`validate`.
    """

    category_id: Uuid = Field(default_factory=Uuid)
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=_utcnow)

    def __init__(self, **data: Any) -> None:
        # Parse text ids before validation so InvalidUuidError reaches the caller as is.
        if isinstance(data.get("category_id"), str):
            data["category_id"] = Uuid(data["category_id"])
        super().__init__(**data)

    @field_validator("category_id", mode="before")
    @classmethod
    def _ensure_id(cls, v: Any) -> Any:
        if v is None:
            return Uuid()
        if isinstance(v, str):
            return Uuid(v)
        return v

    @field_validator("created_at")
    @classmethod
    def _ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")
        return v.astimezone(timezone.utc)

    @property
    def entity_id(self) -> Uuid:
        return self.category_id

    @classmethod
    def create(
        cls, name: str, description: str | None = None, is_active: bool = True
    ) -> "Category":
        """Build a new category, raising :class:`EntityValidationError` on bad input."""
        cls.validate({"name": name, "description": description, "is_active": is_active})
        return cls(name=name, description=description, is_active=is_active)

    def change_name(self, name: str) -> None:
        self.name = name
        Category.validate(self._fields())

    def change_description(self, description: str | None) -> None:
        self.description = description
        Category.validate(self._fields())

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    @staticmethod
    def validate(data: Mapping[str, Any]) -> None:
        validator = CategoryValidator()
        if not validator.validate(data):
            raise EntityValidationError(validator.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at,
        }

    def _fields(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "is_active": self.is_active}
