"""
Restock Product Use Case
========================
"""
import logging

from salon_crm.application.dto.product_dto import ProductResponse
from salon_crm.domain.errors import BusinessRuleViolationError, NotFoundError
from salon_crm.domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class RestockProductUseCase:
    """Use case for adding units to a physical product's stock."""

    def __init__(self, product_repository: ProductRepository):
        self._repository = product_repository

    def execute(self, product_id: str, quantity: int) -> ProductResponse:
        """
        Execute the restock use case.

        Args:
            product_id: Product to restock
            quantity: Units to add

        Returns:
            The restocked product

        Raises:
            NotFoundError: If no product has this id
            BusinessRuleViolationError: If the product is inactive or not a physical product
            ValidationError: If quantity is negative
        """
        product = self._repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        if not product.is_active:
            raise BusinessRuleViolationError("Cannot restock an inactive product")

        product.restock_item(quantity)
        saved = self._repository.update(product)
        logger.info(f"Product {saved.sku} restocked by {quantity} (stock {saved.stock_level})")
        return ProductResponse.from_entity(saved)
