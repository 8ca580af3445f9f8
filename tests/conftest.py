import pytest
from fastapi.testclient import TestClient

from agenda.core.storage import MemoryStorage
from agenda.server import create_app
from agenda.services.contacts import ContactStore, ContactsController


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return ContactStore(storage, "contacts")


@pytest.fixture
def controller(store):
    return ContactsController(store)


@pytest.fixture
def client(storage):
    app = create_app(storage=storage)
    with TestClient(app) as c:
        yield c
