"""Canonical search input shared by every searchable repository.

Client supplied pagination and sorting options are normalised eagerly when a
:class:`SearchParams` is built. Invalid values never raise; they fall back to
the defaults below so a malformed request still yields a search.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

FilterT = TypeVar("FilterT")

SortDirection = Literal["asc", "desc"]

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


def _positive_int(value: Any, default: int) -> int:
    """Return ``value`` as a positive integer or ``default`` when it is not one."""
    if value is None or isinstance(value, bool):
        return default
    # Arbitrarily large ints do not fit in a float.
    if isinstance(value, int):
        return value if value > 0 else default
    if isinstance(value, str):
        try:
            number: float = float(value.strip())
        except ValueError:
            return default
    elif isinstance(value, float):
        number = value
    else:
        return default
    if not math.isfinite(number) or number <= 0 or number != int(number):
        return default
    return int(number)


class SearchParams(BaseModel, Generic[FilterT]):
    """Page, sort and filter options of a search.

    >>> params = SearchParams()
    >>> (params.page, params.per_page, params.sort, params.sort_dir)
    (1, 15, None, None)
    >>> SearchParams(page="0", per_page="5", sort=" name ", sort_dir="DESC").model_dump()
    {'page': 1, 'per_page': 5, 'sort': 'name', 'sort_dir': 'desc', 'filter': None}
    """

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    sort: Optional[str] = None
    sort_dir: Optional[SortDirection] = None
    filter: Optional[FilterT] = None

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("page", mode="before")
    @classmethod
    def _normalize_page(cls, v: Any) -> int:
        return _positive_int(v, DEFAULT_PAGE)

    @field_validator("per_page", mode="before")
    @classmethod
    def _normalize_per_page(cls, v: Any) -> int:
        return _positive_int(v, DEFAULT_PER_PAGE)

    @field_validator("sort", mode="before")
    @classmethod
    def _normalize_sort(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @field_validator("sort_dir", mode="before")
    @classmethod
    def _normalize_sort_dir(cls, v: Any, info: ValidationInfo) -> str | None:
        # Direction only makes sense together with a sort field.
        if not info.data.get("sort"):
            return None
        direction = str(v).lower() if v is not None else ""
        return direction if direction in ("asc", "desc") else "asc"

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "SearchParams[Any]":
        """Build params from a client configuration mapping, ignoring unknown keys."""
        known = cls.model_fields
        return cls(**{key: value for key, value in (options or {}).items() if key in known})
