"""
MongoDB Connection
==================

Owns the MongoClient for the process. Built once at startup from settings
and handed to the repositories through the DI container.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from salon_crm.core.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB client wrapper.

    Manages the MongoDB connection and provides access to collections.
    """

    def __init__(self, mongo_uri: str, database_name: str, client: Optional[MongoClient] = None):
        """
        Initialize the connection.

        Args:
            mongo_uri: MongoDB connection string
            database_name: Name of the application database
            client: Pre-built client (mainly for tests); created from the URI when omitted
        """
        if not mongo_uri:
            raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
        self._client = client if client is not None else MongoClient(mongo_uri, tz_aware=False)
        self._database = self._client[database_name]
        logger.info(f"MongoDB connection configured for database '{database_name}'")

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        return cls(settings.mongo_uri, settings.mongo_database_name)

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self._database[collection_name]

    def ping(self) -> bool:
        """Check that the server answers."""
        try:
            self._client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info("MongoDB connection closed")
