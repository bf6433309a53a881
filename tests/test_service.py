# tests/test_service.py

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

from subscriber_api.db.store import SubscriberStore
from subscriber_api.errors import NotFound, StoreFailure, ValidationFailure
from subscriber_api.services.subscribers import SubscriberService


@pytest.fixture
def broken_service():
    collection = MagicMock()
    collection.find.side_effect = PyMongoError("connection refused")
    collection.find_one.side_effect = PyMongoError("connection refused")
    collection.insert_one.side_effect = PyMongoError("not primary")
    return SubscriberService(SubscriberStore(collection))


@pytest.mark.parametrize(
    "name, channel",
    [(None, "X"), ("Ana", None), ("", "X"), ("Ana", ""), (None, None)],
)
def test_create_requires_both_fields(name, channel):
    store = MagicMock()
    service = SubscriberService(store)

    with pytest.raises(ValidationFailure) as exc_info:
        service.create_subscriber(name, channel)

    assert exc_info.value.message == "Name and subscribedChannel are required"
    store.insert.assert_not_called()


def test_create_then_get(service):
    created = service.create_subscriber("Ana", "X")
    fetched = service.get_subscriber(created.id)

    assert fetched == created


def test_duplicates_get_distinct_ids(service):
    first = service.create_subscriber("Ana", "X")
    second = service.create_subscriber("Ana", "X")

    assert first.id != second.id
    assert len(service.list_subscribers()) == 2


def test_get_unknown_id_is_not_found(service):
    with pytest.raises(NotFound):
        service.get_subscriber(str(ObjectId()))


def test_get_malformed_id_is_store_failure(service):
    with pytest.raises(StoreFailure) as exc_info:
        service.get_subscriber("123")

    assert exc_info.value.message == "Error fetching subscriber details"
    assert "123" in exc_info.value.detail


def test_names_match_subscribers(service):
    for name, channel in [("Ana", "X"), ("Bob", "Y"), ("Ana", "Z")]:
        service.create_subscriber(name, channel)

    assert service.list_names() == [s.name for s in service.list_subscribers()]


def test_empty_store(service):
    assert service.list_names() == []
    assert service.list_subscribers() == []


@pytest.mark.parametrize(
    "call, message",
    [
        (lambda s: s.list_names(), "Error retrieving subscriber names"),
        (lambda s: s.list_subscribers(), "Error retrieving subscribers"),
        (lambda s: s.get_subscriber(str(ObjectId())), "Error fetching subscriber details"),
        (lambda s: s.create_subscriber("Ana", "X"), "Error creating subscriber"),
    ],
)
def test_store_errors_become_store_failures(broken_service, call, message):
    with pytest.raises(StoreFailure) as exc_info:
        call(broken_service)

    assert exc_info.value.message == message
    assert isinstance(exc_info.value.cause, PyMongoError)
    assert exc_info.value.__cause__ is exc_info.value.cause
