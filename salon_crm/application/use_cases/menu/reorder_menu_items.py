"""
Reorder Menu Items Use Case
===========================
"""
import logging
from typing import List

from salon_crm.application.dto.menu_item_dto import MenuItemResponse, ReorderMenuItemsRequest
from salon_crm.domain.errors import ValidationError
from salon_crm.domain.repositories.menu_item_repository import MenuItemRepository

logger = logging.getLogger(__name__)


class ReorderMenuItemsUseCase:
    """Use case for assigning new display orders to several menu items."""

    def __init__(self, menu_item_repository: MenuItemRepository):
        self._repository = menu_item_repository

    def execute(self, request: ReorderMenuItemsRequest) -> List[MenuItemResponse]:
        """
        Execute the reorder use case.

        Args:
            request: ``(id, display_order)`` entries

        Returns:
            The reordered items

        Raises:
            ValidationError: If the list is empty, repeats an id or holds a negative order
            NotFoundError: If any id is unknown
            ConflictError: If two items would share a display order in one category
        """
        if not request.items:
            raise ValidationError("At least one menu item is required", "items")

        ids = [entry.id for entry in request.items]
        if len(set(ids)) != len(ids):
            raise ValidationError("Each menu item may appear only once", "items")
        for entry in request.items:
            if entry.display_order < 0:
                raise ValidationError("Display order must be a non-negative number", "displayOrder")

        reordered = self._repository.reorder_menu_items(
            [(entry.id, entry.display_order) for entry in request.items]
        )
        logger.info(f"Menu reordered: {len(reordered)} items")
        return [MenuItemResponse.from_entity(item) for item in reordered]
