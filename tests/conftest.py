# tests/conftest.py

import mongomock
import pytest
from fastapi.testclient import TestClient

from subscriber_api.config import Settings
from subscriber_api.db.store import SubscriberStore
from subscriber_api.main import create_app
from subscriber_api.services.subscribers import SubscriberService


@pytest.fixture
def collection():
    return mongomock.MongoClient()["subscribers"]["subscribers"]


@pytest.fixture
def store(collection):
    return SubscriberStore(collection)


@pytest.fixture
def service(store):
    return SubscriberService(store)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(settings, service):
    app = create_app(settings, service)
    with TestClient(app) as c:
        yield c
