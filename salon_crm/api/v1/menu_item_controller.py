"""
Menu Item Controller
====================

FastAPI controller for the salon menu.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from salon_crm.api.v1.dependencies import get_menu_item_service
from salon_crm.application.dto.common_dto import ChoiceResponse
from salon_crm.application.dto.menu_item_dto import (
    MenuItemCreateRequest,
    MenuItemListRequest,
    MenuItemListResponse,
    MenuItemResponse,
    ReorderMenuItemsRequest,
    UpdateCategoryRequest,
)
from salon_crm.application.services.menu_item_service import MenuItemService

router = APIRouter(tags=["menu"])


@router.post(
    "",
    response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a menu item",
    description="""
    Add an item to the menu.

    The package and advance-booking flags default to what the category
    implies. Without a display order the item goes to the end of its
    category.
    """,
)
async def create_menu_item(
    request: MenuItemCreateRequest,
    service: MenuItemService = Depends(get_menu_item_service),
) -> MenuItemResponse:
    """Create a menu item."""
    return service.create_menu_item(request)


@router.get("", response_model=MenuItemListResponse, summary="List menu items")
async def list_menu_items(
    page: int = Query(1),
    limit: int = Query(10),
    sort_by: Optional[str] = Query(None),
    sort_order: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    is_active: Optional[bool] = Query(None),
    is_package: Optional[bool] = Query(None),
    available_online: Optional[bool] = Query(None),
    seasonal_item: Optional[bool] = Query(None),
    advance_booking_required: Optional[bool] = Query(None),
    min_price: Optional[Decimal] = Query(None),
    max_price: Optional[Decimal] = Query(None),
    min_duration: Optional[int] = Query(None),
    max_duration: Optional[int] = Query(None),
    tags: List[str] = Query([], description="Items must carry every tag"),
    search: Optional[str] = Query(None, description="Matches name, description or tags"),
    service: MenuItemService = Depends(get_menu_item_service),
) -> MenuItemListResponse:
    return service.list_menu_items(
        MenuItemListRequest(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            category=category,
            is_active=is_active,
            is_package=is_package,
            available_online=available_online,
            seasonal_item=seasonal_item,
            advance_booking_required=advance_booking_required,
            min_price=min_price,
            max_price=max_price,
            min_duration=min_duration,
            max_duration=max_duration,
            tags=tags,
            search=search,
        )
    )


@router.get("/categories", response_model=List[ChoiceResponse], summary="List menu categories")
async def list_categories(
    service: MenuItemService = Depends(get_menu_item_service),
) -> List[ChoiceResponse]:
    return service.list_categories()


@router.get(
    "/available",
    response_model=List[MenuItemResponse],
    summary="Items bookable on a date",
    description="Active items whose seasonal window contains the date (today when omitted).",
)
async def available_menu_items(
    date: Optional[datetime] = Query(None),
    service: MenuItemService = Depends(get_menu_item_service),
) -> List[MenuItemResponse]:
    return service.get_available_items(date)


@router.put(
    "/reorder",
    response_model=List[MenuItemResponse],
    summary="Reorder menu items",
    description="Assign display orders to several items at once. Orders must stay unique within each category.",
)
async def reorder_menu_items(
    request: ReorderMenuItemsRequest,
    service: MenuItemService = Depends(get_menu_item_service),
) -> List[MenuItemResponse]:
    return service.reorder(request)


@router.get(
    "/category/{category}",
    response_model=List[MenuItemResponse],
    summary="Items of one category in display order",
)
async def category_menu_items(
    category: str,
    service: MenuItemService = Depends(get_menu_item_service),
) -> List[MenuItemResponse]:
    return service.get_category_items(category)


@router.get("/{menu_item_id}", response_model=MenuItemResponse, summary="Get a menu item")
async def get_menu_item(
    menu_item_id: str,
    service: MenuItemService = Depends(get_menu_item_service),
) -> MenuItemResponse:
    return service.get_menu_item(menu_item_id)


@router.put(
    "/{menu_item_id}/category",
    response_model=MenuItemResponse,
    summary="Move a menu item to another category",
)
async def update_menu_item_category(
    menu_item_id: str,
    request: UpdateCategoryRequest,
    service: MenuItemService = Depends(get_menu_item_service),
) -> MenuItemResponse:
    return service.update_category(menu_item_id, request.category)


@router.delete(
    "/{menu_item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a menu item",
)
async def delete_menu_item(
    menu_item_id: str,
    service: MenuItemService = Depends(get_menu_item_service),
) -> Response:
    service.delete_menu_item(menu_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
