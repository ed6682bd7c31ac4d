"""
Get Menu Items Use Cases
========================

Filtered and paged menu listing, a category's items in display order, and
the items bookable on a given date.
"""
from datetime import datetime
from typing import List, Optional

from salon_crm.application.dto.common_dto import PaginationResponse
from salon_crm.application.dto.menu_item_dto import (
    MenuItemListRequest,
    MenuItemListResponse,
    MenuItemResponse,
)
from salon_crm.domain.repositories.menu_item_repository import (
    MenuItemFilters,
    MenuItemRepository,
)
from salon_crm.domain.value_objects import MenuCategory
from salon_crm.utils.datetime_utils import now


class GetMenuItemsUseCase:
    """
    Use case for listing menu items.

    Items come in display order unless another sort is requested.
    """

    def __init__(self, menu_item_repository: MenuItemRepository):
        self._repository = menu_item_repository

    def execute(self, request: MenuItemListRequest) -> MenuItemListResponse:
        filters = MenuItemFilters(
            category=MenuCategory.parse(request.category) if request.category else None,
            is_active=request.is_active,
            is_package=request.is_package,
            available_online=request.available_online,
            seasonal_item=request.seasonal_item,
            advance_booking_required=request.advance_booking_required,
            min_price=request.min_price,
            max_price=request.max_price,
            min_duration=request.min_duration,
            max_duration=request.max_duration,
            tags=list(request.tags),
            search=request.search,
        )
        page = self._repository.find_by_filters(filters, request.to_page_request())
        return MenuItemListResponse(
            items=[MenuItemResponse.from_entity(item) for item in page.items],
            pagination=PaginationResponse.from_page(page),
        )


class GetMenuItemsByCategoryUseCase:
    def __init__(self, menu_item_repository: MenuItemRepository):
        self._repository = menu_item_repository

    def execute(self, category: str) -> List[MenuItemResponse]:
        menu_category = MenuCategory.parse(category)
        return [
            MenuItemResponse.from_entity(item)
            for item in self._repository.find_by_category(menu_category)
        ]


class GetAvailableMenuItemsUseCase:
    def __init__(self, menu_item_repository: MenuItemRepository):
        self._repository = menu_item_repository

    def execute(self, date: Optional[datetime] = None) -> List[MenuItemResponse]:
        """Active items bookable on ``date`` (today when omitted)."""
        return [
            MenuItemResponse.from_entity(item)
            for item in self._repository.find_available_for_date(date or now())
        ]
