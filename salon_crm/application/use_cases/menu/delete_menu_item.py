"""
Delete Menu Item Use Case
=========================
"""
import logging

from salon_crm.domain.repositories.menu_item_repository import MenuItemRepository

logger = logging.getLogger(__name__)


class DeleteMenuItemUseCase:
    """Use case for permanently removing a menu item."""

    def __init__(self, menu_item_repository: MenuItemRepository):
        self._repository = menu_item_repository

    def execute(self, menu_item_id: str) -> None:
        self._repository.delete(menu_item_id)
        logger.info(f"Menu item deleted: {menu_item_id}")
