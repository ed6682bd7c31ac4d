"""
Application Container
=====================

The DIContainer is created once per application by ``create_application``
and kept on ``app.state.container``.
"""
from typing import Optional

from pymongo.database import Database

from salon_crm.core.config import Settings

from .base_container import BaseContainer
from .providers import (
    ClientProvider,
    CustomerProvider,
    DatabaseProvider,
    MenuProvider,
    ProductProvider,
    RepositoryProvider,
)

SETTINGS_KEY = "settings"
DATABASE_KEY = "mongo_database"
CONNECTION_KEY = "mongo_connection"


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (Customer, Product, Client and Menu providers) - depend on repositories
    """

    def __init__(self, settings: Settings, database: Optional[Database] = None) -> None:
        """
        Build the container.

        Args:
            settings: Application settings
            database: Database to use instead of connecting with ``settings.mongo_uri``
        """
        super().__init__()
        self.register_singleton(SETTINGS_KEY, settings)
        if database is not None:
            self.register_singleton(DATABASE_KEY, database)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)

        CustomerProvider.register(self)
        ProductProvider.register(self)
        ClientProvider.register(self)
        MenuProvider.register(self)

    def close(self) -> None:
        """Release the MongoDB connection, if this container opened one."""
        if self.has(CONNECTION_KEY):
            self.get(CONNECTION_KEY).close()
