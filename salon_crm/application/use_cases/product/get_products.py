"""
Get Products Use Case
=====================

Paged product listing with text search, category, type, price and stock
filters.
"""
from salon_crm.application.dto.common_dto import PaginationResponse
from salon_crm.application.dto.product_dto import (
    ProductListRequest,
    ProductListResponse,
    ProductResponse,
)
from salon_crm.domain.repositories.product_repository import (
    ProductRepository,
    ProductSearchOptions,
)
from salon_crm.domain.value_objects import ProductCategory, ProductType


class GetProductsUseCase:
    """
    Use case for listing products.

    Products are sorted by name unless another sort is requested.
    """

    def __init__(self, product_repository: ProductRepository):
        self._repository = product_repository

    def execute(self, request: ProductListRequest) -> ProductListResponse:
        options = ProductSearchOptions(
            search=request.search,
            category=ProductCategory.parse(request.category) if request.category else None,
            product_type=ProductType.parse(request.type) if request.type else None,
            is_active=request.is_active,
            min_price=request.min_price,
            max_price=request.max_price,
            in_stock=request.in_stock,
            low_stock=request.low_stock,
        )
        page = self._repository.search_products(options, request.to_page_request())
        return ProductListResponse(
            items=[ProductResponse.from_entity(product) for product in page.items],
            pagination=PaginationResponse.from_page(page),
        )
