from __future__ import annotations

import asyncio
import sqlite3
from datetime import datetime, timedelta, timezone
from typing import Iterator

import pytest

from catalog_admin.category.domain import Category, CategorySearchParams
from catalog_admin.category.infra.db.in_memory import CategoryInMemoryRepository
from catalog_admin.category.infra.db.sqlite import CategorySqliteRepository
from catalog_admin.shared.domain.errors import NotFoundError
from catalog_admin.shared.domain.value_objects.uuid import Uuid

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def conn() -> Iterator[sqlite3.Connection]:
    connection = sqlite3.connect(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def repo(conn: sqlite3.Connection) -> CategorySqliteRepository:
    return CategorySqliteRepository(conn)


def test_insert_and_find_by_id(repo: CategorySqliteRepository) -> None:
    category = Category.create(name="Movie", description="some", is_active=False)
    asyncio.run(repo.insert(category))

    found = asyncio.run(repo.find_by_id(category.category_id))

    assert found == category
    assert found is not category


def test_find_by_id_returns_none_when_missing(repo: CategorySqliteRepository) -> None:
    assert asyncio.run(repo.find_by_id(Uuid())) is None


def test_bulk_insert_and_find_all_keep_order(repo: CategorySqliteRepository) -> None:
    categories = [Category.create(name=f"Movie {i}") for i in range(3)]
    asyncio.run(repo.bulk_insert(categories))

    assert asyncio.run(repo.find_all()) == categories


def test_duplicate_primary_key_is_rejected_by_engine(repo: CategorySqliteRepository) -> None:
    category = Category.create(name="Movie")
    asyncio.run(repo.insert(category))
    with pytest.raises(sqlite3.IntegrityError):
        asyncio.run(repo.insert(category))


def test_update(repo: CategorySqliteRepository) -> None:
    category = Category.create(name="Movie")
    asyncio.run(repo.insert(category))

    category.change_name("Movie updated")
    category.deactivate()
    asyncio.run(repo.update(category))

    found = asyncio.run(repo.find_by_id(category.category_id))
    assert found is not None
    assert found.name == "Movie updated"
    assert found.is_active is False


def test_update_missing_raises(repo: CategorySqliteRepository) -> None:
    category = Category.create(name="Movie")
    with pytest.raises(NotFoundError) as exc_info:
        asyncio.run(repo.update(category))
    assert str(exc_info.value) == f"Entity Category Not found using id {category.category_id.id}"
    assert exc_info.value.ids == category.category_id


def test_delete(repo: CategorySqliteRepository) -> None:
    category = Category.create(name="Movie")
    other = Category.create(name="Other")
    asyncio.run(repo.bulk_insert([category, other]))

    asyncio.run(repo.delete(category.category_id))

    assert asyncio.run(repo.find_all()) == [other]
    with pytest.raises(NotFoundError):
        asyncio.run(repo.delete(category.category_id))


def test_search_defaults_to_newest_first(repo: CategorySqliteRepository) -> None:
    categories = [
        Category(name=f"Movie {i}", created_at=BASE_TIME + timedelta(minutes=i)) for i in range(16)
    ]
    asyncio.run(repo.bulk_insert(categories))

    result = asyncio.run(repo.search(CategorySearchParams()))

    assert result.items == list(reversed(categories))[:15]
    assert result.total == 16
    assert result.last_page == 2


def test_search_escapes_like_wildcards(repo: CategorySqliteRepository) -> None:
    plain, percent = Category(name="100 movies"), Category(name="100% movies")
    asyncio.run(repo.bulk_insert([plain, percent]))

    result = asyncio.run(repo.search(CategorySearchParams(filter="0%")))

    assert result.items == [percent]


@pytest.mark.parametrize(
    "options",
    [
        {},
        {"filter": "test"},
        {"filter": "TEST", "sort": "name", "per_page": 2},
        {"filter": "test", "sort": "name", "sort_dir": "desc", "page": 2, "per_page": 2},
        {"sort": "created_at", "sort_dir": "asc", "per_page": 3, "page": 2},
        {"sort": "description", "per_page": 4},
        {"page": 10},
    ],
)
def test_search_matches_in_memory_repository(
    repo: CategorySqliteRepository, options: dict[str, object]
) -> None:
    names = ["test", "a", "TEST", "e", "TeSt", "same", "same"]
    categories = [
        Category(name=name, created_at=BASE_TIME + timedelta(seconds=i % 3))
        for i, name in enumerate(names)
    ]
    in_memory = CategoryInMemoryRepository()
    asyncio.run(in_memory.bulk_insert(categories))
    asyncio.run(repo.bulk_insert(categories))
    params = CategorySearchParams.from_options(options)

    expected = asyncio.run(in_memory.search(params))
    actual = asyncio.run(repo.search(params))

    assert actual.to_dict(force_entity=True) == expected.to_dict(force_entity=True)


@pytest.mark.parametrize(("search", "expected"), [("éb", ["Ébano"]), ("AÇ", ["Ação"]), ("ÃO", ["Ação"])])
def test_filter_folds_non_ascii_case_like_in_memory(
    repo: CategorySqliteRepository, search: str, expected: list[str]
) -> None:
    categories = [
        Category(name="Ébano", created_at=BASE_TIME),
        Category(name="Ação", created_at=BASE_TIME + timedelta(seconds=1)),
    ]
    in_memory = CategoryInMemoryRepository()
    asyncio.run(in_memory.bulk_insert(categories))
    asyncio.run(repo.bulk_insert(categories))
    params = CategorySearchParams(filter=search)

    in_memory_result = asyncio.run(in_memory.search(params))
    sqlite_result = asyncio.run(repo.search(params))

    assert [c.name for c in sqlite_result.items] == expected
    assert sqlite_result.to_dict(force_entity=True) == in_memory_result.to_dict(force_entity=True)


def test_search_with_huge_page_numbers(repo: CategorySqliteRepository) -> None:
    asyncio.run(repo.insert(Category.create(name="Movie")))

    everything = asyncio.run(repo.search(CategorySearchParams(per_page=10**30)))
    beyond = asyncio.run(repo.search(CategorySearchParams(page=10**30)))

    assert [c.name for c in everything.items] == ["Movie"]
    assert beyond.items == []
    assert beyond.total == 1
