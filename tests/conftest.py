from __future__ import annotations

import logging
from typing import Iterator

import pytest

from tests._fixtures.info_builder import InfoYamlBuilder


@pytest.fixture
def info_builder() -> InfoYamlBuilder:
    """Provide a builder seeded with a valid HDL project."""
    return InfoYamlBuilder()


@pytest.fixture(autouse=True)
def _reset_ttupgrade_logger() -> Iterator[None]:
    """Drop handlers installed by CLI runs so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("ttupgrade")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
