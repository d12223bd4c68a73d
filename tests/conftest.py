#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks.

Fixtures for the tests.
"""

import logging
from collections.abc import Iterator

import pytest

logging.disable(logging.WARNING)  # usu. WARNING


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Remove any handlers added by the client, as their streams may be closed."""

    yield

    logger = logging.getLogger("qalcosonic")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
