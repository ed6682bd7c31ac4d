"""
Get Menu Item Use Case
======================
"""
from salon_crm.application.dto.menu_item_dto import MenuItemResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.repositories.menu_item_repository import MenuItemRepository


class GetMenuItemByIdUseCase:
    """Use case for fetching a single menu item."""

    def __init__(self, menu_item_repository: MenuItemRepository):
        self._repository = menu_item_repository

    def execute(self, menu_item_id: str) -> MenuItemResponse:
        menu_item = self._repository.find_by_id(menu_item_id)
        if menu_item is None:
            raise NotFoundError("Menu item", menu_item_id)
        return MenuItemResponse.from_entity(menu_item)
