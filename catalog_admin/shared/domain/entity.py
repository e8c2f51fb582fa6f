from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from .value_object import ValueObject


class Entity(BaseModel, ABC):
    """Base class for objects identified by ``entity_id`` rather than by value.

    Repositories match entities through ``entity_id.equals``; the remaining
    attributes may change over the lifetime of the entity.
    """

    @property
    @abstractmethod
    def entity_id(self) -> ValueObject:
        """Identity of the entity."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return a primitive representation suitable for persistence."""
