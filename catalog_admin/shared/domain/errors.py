"""Domain level exceptions shared by every module."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from .entity import Entity

FieldsErrors = dict[str, list[str]]


class NotFoundError(Exception):
    """Raised when an entity cannot be located by its identifier.

    ``ids`` may be a single identifier or a sequence of them.
    """

    def __init__(self, ids: Any | Sequence[Any], entity_class: type["Entity"]) -> None:
        if isinstance(ids, (list, tuple)):
            joined = ", ".join(str(i) for i in ids)
        else:
            joined = str(ids)
        self.ids = ids
        self.entity_name = entity_class.__name__
        super().__init__(f"Entity {self.entity_name} Not found using id {joined}")


class InvalidUuidError(ValueError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Invalid uuid format")


class EntityValidationError(ValueError):
    """Aggregated per-field validation messages for an entity."""

    def __init__(self, errors: FieldsErrors, message: str = "Validation Error") -> None:
        super().__init__(message)
        self.errors = errors

    def count(self) -> int:
        return len(self.errors)
