import pytest
from fastapi.testclient import TestClient

from main import create_app
from repositories import MemoryStore
from schemas.records import Item, User


@pytest.fixture
def item_store():
    return MemoryStore(Item, "Item")


@pytest.fixture
def user_store():
    return MemoryStore(User, "User")


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
