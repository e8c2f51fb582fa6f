from .filters import FilterStrategy, TextFilter
from .in_memory_repository import InMemoryRepository, InMemorySearchableRepository

__all__ = [
    "FilterStrategy",
    "InMemoryRepository",
    "InMemorySearchableRepository",
    "TextFilter",
]
