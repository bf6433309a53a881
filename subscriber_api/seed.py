# subscriber_api/seed.py
"""
One-shot seeding of the subscribers collection.

No duplicate check is made: every run inserts the three records again as
new documents.
"""

import logging
import sys
from typing import List

from pymongo.errors import PyMongoError

from subscriber_api.config import Settings
from subscriber_api.db.client import get_client, get_collection
from subscriber_api.db.store import SubscriberStore
from subscriber_api.logging_config import setup_logging

logger = logging.getLogger(__name__)

SEED_SUBSCRIBERS = [
    ("Jeread Krus", "CNET"),
    ("Lucifer", "Sentex"),
    ("Alice Doe", "Tech Talk"),
]


def seed(store: SubscriberStore) -> List[str]:
    return store.insert_many(SEED_SUBSCRIBERS)


def main() -> int:
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    client = None
    try:
        client = get_client(settings)
        ids = seed(SubscriberStore(get_collection(client, settings)))
    except PyMongoError as e:
        logger.error("Error inserting data: %s", e)
        return 1
    finally:
        if client is not None:
            client.close()

    logger.info("Data inserted successfully (%d subscribers)", len(ids))
    return 0


if __name__ == "__main__":
    sys.exit(main())
