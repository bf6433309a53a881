# subscriber_api/db/store.py
"""
Mapping layer between BSON documents in the ``subscribers`` collection and
the typed ``Subscriber`` record.

Nothing outside this module knows the stored document shape. Driver
exceptions (``PyMongoError``, ``bson.errors.InvalidId``) propagate to the
caller unchanged; a stored document that does not fit ``Subscriber`` raises
``MalformedDocument``.
"""

from typing import Iterable, List, Optional, Tuple

from bson import ObjectId
from pymongo.collection import Collection

from subscriber_api.models.subscribers import Subscriber

NAME_FIELD = "name"
CHANNEL_FIELD = "subscribedChannel"


class MalformedDocument(ValueError):
    """A stored document lacks a field or holds a non-text value in it."""


def _require_text(doc: dict, field: str) -> str:
    value = doc.get(field)
    if not isinstance(value, str) or not value:
        raise MalformedDocument(
            f"Subscriber document {doc.get('_id')} has no valid {field!r}"
        )
    return value


def _doc_to_subscriber(doc: dict) -> Subscriber:
    return Subscriber(
        id=str(doc["_id"]),
        name=_require_text(doc, NAME_FIELD),
        subscribed_channel=_require_text(doc, CHANNEL_FIELD),
    )


def _subscriber_doc(name: str, subscribed_channel: str) -> dict:
    return {NAME_FIELD: name, CHANNEL_FIELD: subscribed_channel}


class SubscriberStore:
    def __init__(self, collection: Collection):
        self.collection = collection

    def list_names(self) -> List[str]:
        cursor = self.collection.find({}, {NAME_FIELD: 1})
        return [_require_text(doc, NAME_FIELD) for doc in cursor]

    def list_subscribers(self) -> List[Subscriber]:
        return [_doc_to_subscriber(doc) for doc in self.collection.find()]

    def get(self, subscriber_id: str) -> Optional[Subscriber]:
        """
        Look up one subscriber by its hex id.

        Raises ``bson.errors.InvalidId`` when ``subscriber_id`` is not a
        well-formed ObjectId.
        """
        doc = self.collection.find_one({"_id": ObjectId(subscriber_id)})
        if doc is None:
            return None
        return _doc_to_subscriber(doc)

    def insert(self, name: str, subscribed_channel: str) -> Subscriber:
        doc = _subscriber_doc(name, subscribed_channel)
        result = self.collection.insert_one(doc)
        return Subscriber(
            id=str(result.inserted_id),
            name=name,
            subscribed_channel=subscribed_channel,
        )

    def insert_many(self, records: Iterable[Tuple[str, str]]) -> List[str]:
        docs = [_subscriber_doc(name, channel) for name, channel in records]
        result = self.collection.insert_many(docs)
        return [str(i) for i in result.inserted_ids]
