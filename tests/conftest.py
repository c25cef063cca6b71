import random

import pytest
from loguru import logger


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    # cli.main() installs a sink bound to the captured stderr
    logger.remove()
    logger.disable("strongpass")
