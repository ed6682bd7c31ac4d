"""
Product Controller
==================

FastAPI controller for the product and service catalogue.
"""
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from salon_crm.api.v1.dependencies import get_product_service
from salon_crm.application.dto.common_dto import ChoiceResponse
from salon_crm.application.dto.product_dto import (
    ProductCreateRequest,
    ProductListRequest,
    ProductListResponse,
    ProductResponse,
    RestockRequest,
)
from salon_crm.application.services.product_service import ProductService

router = APIRouter(tags=["products"])


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    description="""
    Create a product, service or package.

    The SKU is generated from the category prefix and the next free sequence
    number. Services and packages need a duration; physical products track
    stock instead.
    """,
)
async def create_product(
    request: ProductCreateRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a product."""
    return service.create_product(request)


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
)
async def list_products(
    page: int = Query(1),
    limit: int = Query(10),
    sort_by: Optional[str] = Query(None),
    sort_order: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Matches name, description or SKU"),
    category: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    is_active: Optional[bool] = Query(None),
    min_price: Optional[Decimal] = Query(None),
    max_price: Optional[Decimal] = Query(None),
    in_stock: Optional[bool] = Query(None),
    low_stock: Optional[bool] = Query(None),
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    return service.list_products(
        ProductListRequest(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            search=search,
            category=category,
            type=type,
            is_active=is_active,
            min_price=min_price,
            max_price=max_price,
            in_stock=in_stock,
            low_stock=low_stock,
        )
    )


@router.get("/categories", response_model=List[ChoiceResponse], summary="List product categories")
async def list_categories(
    service: ProductService = Depends(get_product_service),
) -> List[ChoiceResponse]:
    return service.list_categories()


@router.get("/types", response_model=List[ChoiceResponse], summary="List product types")
async def list_types(
    service: ProductService = Depends(get_product_service),
) -> List[ChoiceResponse]:
    return service.list_types()


@router.get(
    "/low-stock",
    response_model=List[ProductResponse],
    summary="Active products at or below their low-stock threshold",
)
async def low_stock_products(
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    return service.get_low_stock_products()


@router.get(
    "/out-of-stock",
    response_model=List[ProductResponse],
    summary="Active products with no stock left",
)
async def out_of_stock_products(
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    return service.get_out_of_stock_products()


@router.get("/{product_id}", response_model=ProductResponse, summary="Get a product")
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return service.get_product(product_id)


@router.post(
    "/{product_id}/restock",
    response_model=ProductResponse,
    summary="Restock a product",
    description="Add units to a physical product. Services, packages and inactive products are rejected with 422.",
)
async def restock_product(
    product_id: str,
    request: RestockRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return service.restock_product(product_id, request.quantity)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Response:
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
