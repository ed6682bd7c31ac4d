"""
Update Menu Item Category Use Case
==================================
"""
import logging

from salon_crm.application.dto.menu_item_dto import MenuItemResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.repositories.menu_item_repository import MenuItemRepository
from salon_crm.domain.value_objects import MenuCategory

logger = logging.getLogger(__name__)


class UpdateMenuItemCategoryUseCase:
    """
    Use case for moving a menu item to another category.

    The package and advance-booking flags follow the new category. If the
    item's display order is taken in the new category, the item moves to
    the end of that category.
    """

    def __init__(self, menu_item_repository: MenuItemRepository):
        self._repository = menu_item_repository

    def execute(self, menu_item_id: str, category: str) -> MenuItemResponse:
        """
        Raises:
            NotFoundError: If no menu item has this id
            ValidationError: If the category is unknown
            BusinessRuleViolationError: If the new category is a package
                category and the item has no included services
        """
        menu_item = self._repository.find_by_id(menu_item_id)
        if menu_item is None:
            raise NotFoundError("Menu item", menu_item_id)

        new_category = MenuCategory.parse(category)
        if new_category is menu_item.category:
            return MenuItemResponse.from_entity(menu_item)

        previous = menu_item.category
        menu_item.update_category(new_category)
        occupant = self._repository.find_by_display_order(menu_item.display_order, new_category)
        if occupant and occupant.id != menu_item.id:
            menu_item.update_display_order(self._repository.get_next_display_order(new_category))

        saved = self._repository.update(menu_item)
        logger.info(f"Menu item {saved.id} moved from {previous.value} to {saved.category.value}")
        return MenuItemResponse.from_entity(saved)
