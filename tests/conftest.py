import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture blockmarkup log records (the package is silent by default)."""
    messages: list[str] = []
    logger.enable("blockmarkup")
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("blockmarkup")
