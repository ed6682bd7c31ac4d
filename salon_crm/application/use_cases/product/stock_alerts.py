"""
Stock Alert Use Cases
=====================

Active physical products that are running low or have run out.
"""
from typing import List

from salon_crm.application.dto.product_dto import ProductResponse
from salon_crm.domain.repositories.product_repository import ProductRepository


class GetLowStockProductsUseCase:
    def __init__(self, product_repository: ProductRepository):
        self._repository = product_repository

    def execute(self) -> List[ProductResponse]:
        return [
            ProductResponse.from_entity(product)
            for product in self._repository.find_low_stock_products()
        ]


class GetOutOfStockProductsUseCase:
    def __init__(self, product_repository: ProductRepository):
        self._repository = product_repository

    def execute(self) -> List[ProductResponse]:
        return [
            ProductResponse.from_entity(product)
            for product in self._repository.find_out_of_stock_products()
        ]
