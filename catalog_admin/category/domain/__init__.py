from .category import Category
from .category_repository import (
    CategoryFilter,
    CategoryRepository,
    CategorySearchParams,
    CategorySearchResult,
)
from .category_validator import CategoryValidator

__all__ = [
    "Category",
    "CategoryFilter",
    "CategoryRepository",
    "CategorySearchParams",
    "CategorySearchResult",
    "CategoryValidator",
]
