import logging

import pytest

from named_invoker import log


@pytest.fixture
def restore_verbosity():
    saved = log.SAVED_LEVEL
    level = logging.getLogger("named_invoker").level
    yield
    log.SAVED_LEVEL = saved
    logging.getLogger("named_invoker").setLevel(level)
