from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, TypeVar

E = TypeVar("E")

FilterStrategy = Callable[[Sequence[E], Optional[Any]], list[E]]


class TextFilter:
    """Case-insensitive substring filter over one or more attributes.

    An item matches when any of ``fields`` contains the filter text. An empty
    or missing filter returns the items unchanged.
    """

    def __init__(self, *fields: str) -> None:
        if not fields:
            raise ValueError("TextFilter needs at least one field")
        self.fields = fields

    def __call__(self, items: Sequence[E], filter: Optional[str]) -> list[E]:
        if not filter:
            return list(items)
        needle = str(filter).lower()
        return [item for item in items if self._matches(item, needle)]

    def _matches(self, item: Any, needle: str) -> bool:
        for field in self.fields:
            value = getattr(item, field, None)
            if value is not None and needle in str(value).lower():
                return True
        return False
