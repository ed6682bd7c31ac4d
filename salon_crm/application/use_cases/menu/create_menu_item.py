"""
Create Menu Item Use Case
=========================

Adds an item to the salon menu.
"""
import logging

from salon_crm.application.dto.menu_item_dto import MenuItemCreateRequest, MenuItemResponse
from salon_crm.domain.errors import ConflictError
from salon_crm.domain.models.menu_item import MenuItem
from salon_crm.domain.repositories.menu_item_repository import MenuItemRepository
from salon_crm.domain.value_objects import MenuCategory

logger = logging.getLogger(__name__)


class CreateMenuItemUseCase:
    """
    Use case for creating a menu item.

    Without an explicit display order the item is placed after the last item
    of its category.
    """

    def __init__(self, menu_item_repository: MenuItemRepository):
        """
        Initialize use case with repository.

        Args:
            menu_item_repository: Repository for menu item persistence
        """
        self._repository = menu_item_repository

    def execute(self, request: MenuItemCreateRequest) -> MenuItemResponse:
        """
        Execute the create menu item use case.

        Args:
            request: Menu item data

        Returns:
            The created menu item

        Raises:
            ValidationError: If a field fails validation
            BusinessRuleViolationError: If the package flag or included services
                do not fit the category
            ConflictError: If the name or the display order is already taken
        """
        category = MenuCategory.parse(request.category)

        if self._repository.find_by_name(request.name):
            raise ConflictError(f"Menu item with name '{request.name.strip()}' already exists")

        display_order = request.display_order
        if display_order is None:
            display_order = self._repository.get_next_display_order(category)
        elif self._repository.find_by_display_order(display_order, category):
            raise ConflictError(
                f"Display order {display_order} is already used in category {category.value}"
            )

        menu_item = MenuItem.create(
            name=request.name,
            description=request.description,
            category=category,
            duration=request.duration,
            price=request.price,
            is_package=request.is_package,
            included_services=request.included_services,
            requirements=request.requirements,
            benefits=request.benefits,
            advance_booking_required=request.advance_booking_required,
            advance_booking_days=request.advance_booking_days,
            available_online=request.available_online,
            display_order=display_order,
            image_url=request.image_url,
            tags=request.tags,
            seasonal_item=request.seasonal_item,
            valid_from=request.valid_from,
            valid_to=request.valid_to,
            max_bookings_per_day=request.max_bookings_per_day,
            metadata=request.metadata,
        )
        saved = self._repository.create(menu_item)
        logger.info(f"Menu item created: {saved.id} ({saved.name})")
        return MenuItemResponse.from_entity(saved)
