"""
MongoDB access.

Location: core/database.py

Keeps a single MongoClient per process. Repositories call get_database()
instead of building their own clients.
"""
import logging

from django.conf import settings
from pymongo import MongoClient

logger = logging.getLogger(__name__)

_client = None
_database = None


def get_client() -> MongoClient:
    """Returns the process-wide MongoClient, creating it on first use."""
    global _client
    if _client is None:
        _client = MongoClient(
            settings.MONGO_URI,
            tz_aware=False,
            serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
        )
        logger.info("[MONGO] Client created for database '%s'", settings.MONGO_DB_NAME)
    return _client


def get_database():
    """
    Returns the configured database.

    Returns:
        pymongo Database (or whatever was installed with set_database)
    """
    global _database
    if _database is None:
        _database = get_client()[settings.MONGO_DB_NAME]
    return _database


def set_database(database) -> None:
    """
    Replaces the database used by every repository created afterwards.

    Used by tests to install a mongomock database.
    """
    global _database
    _database = database
