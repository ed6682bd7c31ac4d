"""
Menu Item Service
=================

Application service that coordinates salon menu operations.
"""
from datetime import datetime
from typing import List, Optional

from salon_crm.application.dto.common_dto import ChoiceResponse
from salon_crm.application.dto.menu_item_dto import (
    MenuItemCreateRequest,
    MenuItemListRequest,
    MenuItemListResponse,
    MenuItemResponse,
    ReorderMenuItemsRequest,
)
from salon_crm.application.use_cases.menu.create_menu_item import CreateMenuItemUseCase
from salon_crm.application.use_cases.menu.delete_menu_item import DeleteMenuItemUseCase
from salon_crm.application.use_cases.menu.get_menu_item import GetMenuItemByIdUseCase
from salon_crm.application.use_cases.menu.get_menu_items import (
    GetAvailableMenuItemsUseCase,
    GetMenuItemsByCategoryUseCase,
    GetMenuItemsUseCase,
)
from salon_crm.application.use_cases.menu.reorder_menu_items import ReorderMenuItemsUseCase
from salon_crm.application.use_cases.menu.update_menu_item_category import (
    UpdateMenuItemCategoryUseCase,
)
from salon_crm.domain.repositories.menu_item_repository import MenuItemRepository
from salon_crm.domain.value_objects import MenuCategory


class MenuItemService:
    """Application service for menu item operations."""

    def __init__(self, menu_item_repository: MenuItemRepository):
        """
        Initialize service with repository.

        Args:
            menu_item_repository: Repository for menu item persistence
        """
        self._repository = menu_item_repository
        self._create_use_case = CreateMenuItemUseCase(menu_item_repository)
        self._get_use_case = GetMenuItemByIdUseCase(menu_item_repository)
        self._list_use_case = GetMenuItemsUseCase(menu_item_repository)
        self._by_category_use_case = GetMenuItemsByCategoryUseCase(menu_item_repository)
        self._available_use_case = GetAvailableMenuItemsUseCase(menu_item_repository)
        self._update_category_use_case = UpdateMenuItemCategoryUseCase(menu_item_repository)
        self._reorder_use_case = ReorderMenuItemsUseCase(menu_item_repository)
        self._delete_use_case = DeleteMenuItemUseCase(menu_item_repository)

    def create_menu_item(self, request: MenuItemCreateRequest) -> MenuItemResponse:
        return self._create_use_case.execute(request)

    def get_menu_item(self, menu_item_id: str) -> MenuItemResponse:
        return self._get_use_case.execute(menu_item_id)

    def list_menu_items(self, request: MenuItemListRequest) -> MenuItemListResponse:
        return self._list_use_case.execute(request)

    def get_category_items(self, category: str) -> List[MenuItemResponse]:
        return self._by_category_use_case.execute(category)

    def get_available_items(self, date: Optional[datetime] = None) -> List[MenuItemResponse]:
        return self._available_use_case.execute(date)

    def update_category(self, menu_item_id: str, category: str) -> MenuItemResponse:
        return self._update_category_use_case.execute(menu_item_id, category)

    def reorder(self, request: ReorderMenuItemsRequest) -> List[MenuItemResponse]:
        return self._reorder_use_case.execute(request)

    def delete_menu_item(self, menu_item_id: str) -> None:
        self._delete_use_case.execute(menu_item_id)

    @staticmethod
    def list_categories() -> List[ChoiceResponse]:
        return [
            ChoiceResponse(
                value=category.value,
                display_name=category.display_name,
                description=category.description,
            )
            for category in MenuCategory
        ]
