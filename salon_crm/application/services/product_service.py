"""
Product Service
===============

Application service that coordinates product-related operations.
"""
from typing import List

from salon_crm.application.dto.common_dto import ChoiceResponse
from salon_crm.application.dto.product_dto import (
    ProductCreateRequest,
    ProductListRequest,
    ProductListResponse,
    ProductResponse,
)
from salon_crm.application.use_cases.product.create_product import CreateProductUseCase
from salon_crm.application.use_cases.product.delete_product import DeleteProductUseCase
from salon_crm.application.use_cases.product.get_product import GetProductByIdUseCase
from salon_crm.application.use_cases.product.get_products import GetProductsUseCase
from salon_crm.application.use_cases.product.restock_product import RestockProductUseCase
from salon_crm.application.use_cases.product.stock_alerts import (
    GetLowStockProductsUseCase,
    GetOutOfStockProductsUseCase,
)
from salon_crm.domain.repositories.product_repository import ProductRepository
from salon_crm.domain.value_objects import ProductCategory, ProductType


class ProductService:
    """
    Application service for product operations.

    This service coordinates multiple use cases and provides
    a high-level interface for the product and service catalogue.
    """

    def __init__(self, product_repository: ProductRepository):
        """
        Initialize service with repository.

        Args:
            product_repository: Repository for product persistence
        """
        self._repository = product_repository
        self._create_use_case = CreateProductUseCase(product_repository)
        self._get_use_case = GetProductByIdUseCase(product_repository)
        self._list_use_case = GetProductsUseCase(product_repository)
        self._restock_use_case = RestockProductUseCase(product_repository)
        self._delete_use_case = DeleteProductUseCase(product_repository)
        self._low_stock_use_case = GetLowStockProductsUseCase(product_repository)
        self._out_of_stock_use_case = GetOutOfStockProductsUseCase(product_repository)

    def create_product(self, request: ProductCreateRequest) -> ProductResponse:
        return self._create_use_case.execute(request)

    def get_product(self, product_id: str) -> ProductResponse:
        return self._get_use_case.execute(product_id)

    def list_products(self, request: ProductListRequest) -> ProductListResponse:
        return self._list_use_case.execute(request)

    def restock_product(self, product_id: str, quantity: int) -> ProductResponse:
        return self._restock_use_case.execute(product_id, quantity)

    def delete_product(self, product_id: str) -> None:
        self._delete_use_case.execute(product_id)

    def get_low_stock_products(self) -> List[ProductResponse]:
        return self._low_stock_use_case.execute()

    def get_out_of_stock_products(self) -> List[ProductResponse]:
        return self._out_of_stock_use_case.execute()

    @staticmethod
    def list_categories() -> List[ChoiceResponse]:
        return [
            ChoiceResponse(value=category.value, display_name=category.display_name)
            for category in ProductCategory
        ]

    @staticmethod
    def list_types() -> List[ChoiceResponse]:
        return [
            ChoiceResponse(
                value=product_type.value,
                display_name=product_type.display_name,
                description=product_type.description,
            )
            for product_type in ProductType
        ]
