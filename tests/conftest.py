#
# Pytest Fixtures
#

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest
from loguru import logger


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def log_messages():
    """Fixture to collect messages logged by the real package."""
    messages = []
    logger.enable("real")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("real")
