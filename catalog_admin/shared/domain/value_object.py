from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


def _deep_equal(left: Any, right: Any) -> bool:
    if isinstance(left, ValueObject):
        return left.equals(right)
    if isinstance(left, Mapping):
        if not isinstance(right, Mapping) or left.keys() != right.keys():
            return False
        return all(_deep_equal(left[key], right[key]) for key in left)
    if isinstance(left, (list, tuple)):
        if not isinstance(right, (list, tuple)) or len(left) != len(right):
            return False
        return all(_deep_equal(a, b) for a, b in zip(left, right))
    return bool(left == right)


class ValueObject(BaseModel):
    """Immutable value compared by the contents of its declared fields.

    >>> class Name(ValueObject):
    ...     value: str
    >>> Name(value="a").equals(Name(value="a"))
    True
    >>> Name(value="a").equals(None)
    False
    """

    model_config = ConfigDict(frozen=True)

    def equals(self, other: object) -> bool:
        """Return ``True`` when ``other`` is the same class with deep-equal fields."""
        if other is None or type(other) is not type(self):
            return False
        return all(
            _deep_equal(getattr(self, name), getattr(other, name))
            for name in type(self).model_fields
        )

    def __str__(self) -> str:
        fields = type(self).model_fields
        if len(fields) == 1:
            return str(getattr(self, next(iter(fields))))
        return super().__str__()
