"""Assertion utilities shared by the test-suite."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping

from catalog_admin.shared.domain.errors import EntityValidationError, FieldsErrors


def assert_contains_error_messages(
    expected: Callable[[], Any] | tuple[Any, Mapping[str, Any]],
    received: FieldsErrors,
) -> None:
    """Assert that validation produced at least the ``received`` field errors.

    ``expected`` is either a callable expected to raise
    :class:`EntityValidationError`, or a ``(validator, data)`` pair whose
    ``validate`` must fail.
    """
    if callable(expected):
        try:
            expected()
        except EntityValidationError as exc:
            errors = exc.errors
        else:
            raise AssertionError("Expected an EntityValidationError but none was raised")
    else:
        validator, data = expected
        if validator.validate(data):
            raise AssertionError("Expected validation to fail but data is valid")
        errors = validator.errors

    for field, messages in received.items():
        assert errors.get(field) == messages, (
            f"The validation errors not contains {json.dumps(received)}. "
            f"Current: {json.dumps(errors)}"
        )
