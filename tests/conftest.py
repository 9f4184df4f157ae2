import sys

import pytest
from loguru import logger

from fruit_shop.commands import CommandQueue
from fruit_shop.output import CollectingSink
from fruit_shop.stock import InventoryStore


@pytest.fixture(autouse=True)
def reset_loguru():
    """Undo any setup_logging() done by a test so handlers never outlive captured streams."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    try:
        logger.remove(handler_id)
    except ValueError:
        pass


@pytest.fixture
def sink():
    return CollectingSink()


@pytest.fixture
def store(sink):
    return InventoryStore(sink)


@pytest.fixture
def queue():
    return CommandQueue()
