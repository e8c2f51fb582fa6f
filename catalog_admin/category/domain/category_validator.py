from __future__ import annotations

from typing import Any, Mapping

from ...shared.domain.errors import FieldsErrors

MAX_NAME_LENGTH = 255


class CategoryValidator:
    """Collects field errors for category data.

    >>> validator = CategoryValidator()
    >>> validator.validate({"name": ""})
    False
    >>> validator.errors
    {'name': ['name should not be empty']}
    """

    def __init__(self) -> None:
        self.errors: FieldsErrors = {}

    def validate(self, data: Mapping[str, Any]) -> bool:
        self.errors = {}
        self._validate_name(data.get("name"))

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            self._add("description", "description must be a string")

        is_active = data.get("is_active", True)
        if not isinstance(is_active, bool):
            self._add("is_active", "is_active must be a boolean value")

        return not self.errors

    def _validate_name(self, name: Any) -> None:
        if name is None or name == "":
            self._add("name", "name should not be empty")
        if not isinstance(name, str):
            self._add("name", "name must be a string")
        if not isinstance(name, str) or len(name) > MAX_NAME_LENGTH:
            self._add("name", f"name must be shorter than or equal to {MAX_NAME_LENGTH} characters")

    def _add(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)
