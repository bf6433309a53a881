# subscriber_api/services/subscribers.py

import logging
from typing import List, Optional

from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from subscriber_api.db.store import MalformedDocument, SubscriberStore
from subscriber_api.errors import NotFound, StoreFailure, ValidationFailure
from subscriber_api.models.subscribers import Subscriber

logger = logging.getLogger(__name__)

STORE_ERRORS = (PyMongoError, InvalidId, MalformedDocument)


class SubscriberService:
    """
    The four subscriber operations.

    Every method either returns a result or raises one of the
    ``subscriber_api.errors`` types; HTTP concerns live in the API layer.
    """

    def __init__(self, store: SubscriberStore):
        self.store = store

    def list_names(self) -> List[str]:
        try:
            return self.store.list_names()
        except STORE_ERRORS as e:
            raise self._store_failure("Error retrieving subscriber names", e) from e

    def list_subscribers(self) -> List[Subscriber]:
        try:
            return self.store.list_subscribers()
        except STORE_ERRORS as e:
            raise self._store_failure("Error retrieving subscribers", e) from e

    def get_subscriber(self, subscriber_id: str) -> Subscriber:
        try:
            subscriber = self.store.get(subscriber_id)
        except STORE_ERRORS as e:
            raise self._store_failure("Error fetching subscriber details", e) from e

        if subscriber is None:
            raise NotFound()
        return subscriber

    def create_subscriber(
        self, name: Optional[str], subscribed_channel: Optional[str]
    ) -> Subscriber:
        # Checked before touching the store; empty strings count as missing.
        if not name or not subscribed_channel:
            raise ValidationFailure()

        try:
            subscriber = self.store.insert(name, subscribed_channel)
        except STORE_ERRORS as e:
            raise self._store_failure("Error creating subscriber", e) from e

        logger.info("Created subscriber %s", subscriber.id)
        return subscriber

    @staticmethod
    def _store_failure(message: str, cause: Exception) -> StoreFailure:
        logger.error("%s: %s", message, cause)
        return StoreFailure(message, cause)
