from typing import TYPE_CHECKING

from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB database in the container.
        A database passed to the container up front (tests) is used as is;
        otherwise a connection is opened from the settings.
        """
        if container.has("mongo_database"):
            return

        connection = MongoConnection.from_settings(container.get("settings"))
        container.register_singleton("mongo_connection", connection)
        container.register_singleton("mongo_database", connection.get_database())
