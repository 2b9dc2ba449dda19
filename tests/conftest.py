#!/usr/bin/env python3
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_myapp_logger():
    """Entry points configure the `myapp` logger; undo it so streams don't leak between tests."""
    yield
    logger = logging.getLogger("myapp")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
