from typing import TYPE_CHECKING

from ...domain.repositories.client_repository import ClientRepository
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.repositories.menu_item_repository import MenuItemRepository
from ...domain.repositories.product_repository import ProductRepository
from ...infrastructure.db.mongo_client_repository import MongoClientRepository
from ...infrastructure.db.mongo_customer_repository import MongoCustomerRepository
from ...infrastructure.db.mongo_menu_item_repository import MongoMenuItemRepository
from ...infrastructure.db.mongo_product_repository import MongoProductRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Each repository gets its collection from the registered database.
        """
        settings = container.get("settings")
        database = container.get("mongo_database")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            CustomerRepository,
            MongoCustomerRepository(database[settings.customers_collection]),
        )
        container.register_singleton(
            ProductRepository,
            MongoProductRepository(database[settings.products_collection]),
        )
        container.register_singleton(
            ClientRepository,
            MongoClientRepository(database[settings.clients_collection]),
        )
        container.register_singleton(
            MenuItemRepository,
            MongoMenuItemRepository(database[settings.menu_items_collection]),
        )
