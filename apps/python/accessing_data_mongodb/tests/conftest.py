import pytest
from loguru import logger
from mongomock_motor import AsyncMongoMockClient

from customers_repo import CustomerRepository


@pytest.fixture()
def repository():
    return CustomerRepository(AsyncMongoMockClient()["test"]["customer"])


@pytest.fixture()
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
