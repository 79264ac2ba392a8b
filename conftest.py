import logging

import pytest

from undoredo.session import Session


@pytest.fixture(autouse=True)
def fresh_session():
    """Every test starts with a default Session."""
    Session.instance = None
    yield
    Session.instance = None


@pytest.fixture(autouse=True)
def restore_undoredo_logger():
    undoredo_logger = logging.getLogger("undoredo")
    handlers = list(undoredo_logger.handlers)
    propagate = undoredo_logger.propagate
    level = undoredo_logger.level
    yield
    undoredo_logger.handlers = handlers
    undoredo_logger.propagate = propagate
    undoredo_logger.setLevel(level)
