"""
Get Product Use Case
====================
"""
from salon_crm.application.dto.product_dto import ProductResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.repositories.product_repository import ProductRepository


class GetProductByIdUseCase:
    """Use case for fetching a single product."""

    def __init__(self, product_repository: ProductRepository):
        self._repository = product_repository

    def execute(self, product_id: str) -> ProductResponse:
        product = self._repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return ProductResponse.from_entity(product)
