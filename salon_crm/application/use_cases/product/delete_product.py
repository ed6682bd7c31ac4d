"""
Delete Product Use Case
=======================
"""
import logging

from salon_crm.domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Use case for permanently removing a product."""

    def __init__(self, product_repository: ProductRepository):
        self._repository = product_repository

    def execute(self, product_id: str) -> None:
        self._repository.delete(product_id)
        logger.info(f"Product deleted: {product_id}")
