# tests/test_store.py

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from subscriber_api.db.store import MalformedDocument


def test_insert_returns_subscriber_with_hex_id(store, collection):
    subscriber = store.insert("Ana", "X")

    assert ObjectId.is_valid(subscriber.id)
    doc = collection.find_one({"_id": ObjectId(subscriber.id)})
    assert doc["name"] == "Ana"
    assert doc["subscribedChannel"] == "X"


def test_get_maps_document(store, collection):
    oid = collection.insert_one({"name": "Lucifer", "subscribedChannel": "Sentex"}).inserted_id

    subscriber = store.get(str(oid))

    assert subscriber.id == str(oid)
    assert subscriber.name == "Lucifer"
    assert subscriber.subscribed_channel == "Sentex"


def test_get_missing_returns_none(store):
    assert store.get(str(ObjectId())) is None


def test_get_malformed_id_raises(store):
    with pytest.raises(InvalidId):
        store.get("not-an-object-id")


def test_list_names_and_subscribers(store):
    store.insert("Ana", "X")
    store.insert("Bob", "Y")

    assert store.list_names() == ["Ana", "Bob"]
    assert [s.subscribed_channel for s in store.list_subscribers()] == ["X", "Y"]


def test_insert_many(store, collection):
    ids = store.insert_many([("A", "1"), ("B", "2")])

    assert len(ids) == 2
    assert collection.count_documents({}) == 2


@pytest.mark.parametrize(
    "doc",
    [
        {"name": "Legacy"},
        {"subscribedChannel": "X"},
        {"name": 5, "subscribedChannel": "X"},
        {"name": "", "subscribedChannel": "X"},
    ],
)
def test_malformed_document_raises(store, collection, doc):
    oid = collection.insert_one(doc).inserted_id

    with pytest.raises(MalformedDocument):
        store.list_subscribers()
    with pytest.raises(MalformedDocument):
        store.get(str(oid))


def test_list_names_rejects_document_without_name(store, collection):
    collection.insert_one({"subscribedChannel": "X"})

    with pytest.raises(MalformedDocument) as exc_info:
        store.list_names()

    assert "'name'" in str(exc_info.value)
