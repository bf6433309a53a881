# subscriber_api/db/client.py

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from subscriber_api.config import DEFAULT_DB_NAME, Settings

COLLECTION_NAME = "subscribers"


def get_client(settings: Settings) -> MongoClient:
    # MongoClient connects lazily; nothing touches the network until the
    # first command, so building one here never blocks startup.
    return MongoClient(settings.mongo_uri)


def get_database(client: MongoClient, settings: Settings) -> Database:
    if settings.mongo_db_name:
        return client[settings.mongo_db_name]
    return client.get_default_database(DEFAULT_DB_NAME)


def get_collection(client: MongoClient, settings: Settings) -> Collection:
    return get_database(client, settings)[COLLECTION_NAME]
