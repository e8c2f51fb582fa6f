"""Repository contracts and the search value types they exchange."""

from .repository import Repository, SearchableRepository
from .search_params import DEFAULT_PAGE, DEFAULT_PER_PAGE, SearchParams, SortDirection
from .search_result import SearchResult

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "Repository",
    "SearchableRepository",
    "SearchParams",
    "SearchResult",
    "SortDirection",
]
