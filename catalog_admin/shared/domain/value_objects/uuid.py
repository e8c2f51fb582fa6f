from __future__ import annotations

import re
import uuid
from typing import Any

from pydantic import field_validator

from ..errors import InvalidUuidError
from ..value_object import ValueObject

_UUID_PATTERN = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)$",
    re.IGNORECASE,
)


def is_valid_uuid(value: Any) -> bool:
    return isinstance(value, str) and _UUID_PATTERN.match(value) is not None


class Uuid(ValueObject):
    """Universally unique identifier in canonical hyphenated form.

    >>> Uuid("not a uuid")
    Traceback (most recent call last):
    ...
    catalog_admin.shared.domain.errors.InvalidUuidError: Invalid uuid format
    """

    id: str

    def __init__(self, id: str | None = None, **data: Any) -> None:
        value = id or str(uuid.uuid4())
        if not is_valid_uuid(value):
            raise InvalidUuidError()
        super().__init__(id=value, **data)

    @field_validator("id")
    @classmethod
    def _check_format(cls, v: str) -> str:
        # Reached by model_validate, which bypasses __init__.
        if not is_valid_uuid(v):
            raise InvalidUuidError()
        return v
