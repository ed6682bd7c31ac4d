from typing import TYPE_CHECKING

from ...application.services.product_service import ProductService
from ...domain.repositories.product_repository import ProductRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product service provider - registers product services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register ProductService.
        Service is created with repository from container.
        """
        container.register_singleton(
            ProductService,
            ProductService(container.get(ProductRepository)),
        )
