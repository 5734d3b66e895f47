import pytest
from loguru import logger


# CodeTableBuilder adds sinks bound to the streams of the running test.
@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
