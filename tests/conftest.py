from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from catalog_admin.logging_config import HANDLER_NAMES, LOG_NAME


def _reset_project_logger() -> None:
    logger = logging.getLogger(LOG_NAME)
    for handler in logger.handlers[:]:
        if handler.get_name() in HANDLER_NAMES:
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_project_logger() -> Generator[None, None, None]:
    """Every test starts and ends with an unconfigured ``catalog_admin`` logger."""
    _reset_project_logger()
    yield
    _reset_project_logger()
