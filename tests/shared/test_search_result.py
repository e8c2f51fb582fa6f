from __future__ import annotations

from typing import Any

import pytest
from pydantic import Field, ValidationError

from catalog_admin.shared.domain.entity import Entity
from catalog_admin.shared.domain.repository import SearchResult
from catalog_admin.shared.domain.value_objects.uuid import Uuid


class StubEntity(Entity):
    stub_id: Uuid = Field(default_factory=Uuid)
    name: str

    @property
    def entity_id(self) -> Uuid:
        return self.stub_id

    def to_dict(self) -> dict[str, Any]:
        return {"stub_id": self.stub_id.id, "name": self.name}


def test_constructor_props() -> None:
    result = SearchResult(items=["entity1", "entity2"], total=4, current_page=1, per_page=2)

    assert result.to_dict() == {
        "items": ["entity1", "entity2"],
        "total": 4,
        "current_page": 1,
        "per_page": 2,
        "last_page": 2,
    }


def test_last_page_is_one_when_per_page_exceeds_total() -> None:
    result = SearchResult(items=[], total=4, current_page=1, per_page=15)
    assert result.last_page == 1


def test_last_page_rounds_up() -> None:
    result = SearchResult(items=[], total=101, current_page=1, per_page=20)
    assert result.last_page == 6


def test_last_page_with_huge_per_page() -> None:
    result = SearchResult(items=[], total=3, current_page=1, per_page=10**400)
    assert result.last_page == 1


def test_items_keep_identity() -> None:
    entity = StubEntity(name="a")
    result = SearchResult(items=[entity], total=1, current_page=1, per_page=15)
    assert result.items[0] is entity


def test_to_dict_can_render_entities() -> None:
    entity = StubEntity(name="a")
    result = SearchResult(items=[entity], total=1, current_page=1, per_page=15)

    assert result.to_dict(force_entity=True)["items"] == [
        {"stub_id": entity.stub_id.id, "name": "a"}
    ]
    assert result.to_dict()["items"] == [entity]


def test_equality_includes_item_order() -> None:
    first, second = StubEntity(name="a"), StubEntity(name="b")
    ordered = SearchResult(items=[first, second], total=2, current_page=1, per_page=15)

    assert ordered == SearchResult(items=[first, second], total=2, current_page=1, per_page=15)
    assert ordered != SearchResult(items=[second, first], total=2, current_page=1, per_page=15)


def test_result_is_immutable() -> None:
    result = SearchResult(items=[], total=0, current_page=1, per_page=15)
    with pytest.raises(ValidationError):
        result.total = 3  # type: ignore[misc]
