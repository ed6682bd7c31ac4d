"""
Menu Item Repository Interface
==============================

Abstract interface for menu item data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from salon_crm.domain.models.menu_item import MenuItem
from salon_crm.domain.repositories.pagination import Page, PageRequest
from salon_crm.domain.value_objects import MenuCategory


@dataclass
class MenuItemFilters:
    """Filters for menu listing. Unset filters are ignored."""
    category: Optional[MenuCategory] = None
    is_active: Optional[bool] = None
    is_package: Optional[bool] = None
    available_online: Optional[bool] = None
    seasonal_item: Optional[bool] = None
    advance_booking_required: Optional[bool] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_duration: Optional[int] = None
    max_duration: Optional[int] = None
    tags: List[str] = field(default_factory=list)
    search: Optional[str] = None


class MenuItemRepository(ABC):
    """
    Abstract repository for menu item persistence operations.

    Names are unique (case-insensitive) and display orders are unique within
    a category.
    """

    @abstractmethod
    def create(self, menu_item: MenuItem) -> MenuItem:
        """
        Persist a new menu item.

        Args:
            menu_item: MenuItem entity to create

        Returns:
            Created menu item

        Raises:
            ConflictError: If the name or the display order in its category is taken
        """
        pass

    @abstractmethod
    def update(self, menu_item: MenuItem) -> MenuItem:
        """
        Update an existing menu item.

        Raises:
            NotFoundError: If no menu item has this id
            ConflictError: If the change collides with another item's name or display order
        """
        pass

    @abstractmethod
    def delete(self, menu_item_id: str) -> None:
        """
        Delete a menu item.

        Raises:
            NotFoundError: If no menu item has this id
        """
        pass

    @abstractmethod
    def find_by_id(self, menu_item_id: str) -> Optional[MenuItem]:
        pass

    @abstractmethod
    def exists(self, menu_item_id: str) -> bool:
        pass

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page[MenuItem]:
        """List menu items by display order unless another sort is requested."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[MenuItem]:
        """Case-insensitive name lookup."""
        pass

    @abstractmethod
    def find_by_category(self, category: MenuCategory) -> List[MenuItem]:
        """All items of a category in display order."""
        pass

    @abstractmethod
    def find_by_display_order(self, display_order: int, category: MenuCategory) -> Optional[MenuItem]:
        pass

    @abstractmethod
    def find_by_filters(self, filters: MenuItemFilters, page_request: PageRequest) -> Page[MenuItem]:
        """
        List menu items matching the filters.

        Args:
            filters: Category, flags, price/duration ranges, tags and text search
            page_request: Page, page size and sort

        Returns:
            Page of matching menu items
        """
        pass

    @abstractmethod
    def find_available_for_date(self, date: datetime) -> List[MenuItem]:
        """Active items whose seasonal window (if any) contains ``date``."""
        pass

    @abstractmethod
    def get_next_display_order(self, category: MenuCategory) -> int:
        """Highest display order in the category plus one (0 if empty)."""
        pass

    @abstractmethod
    def reorder_menu_items(self, orders: List[Tuple[str, int]]) -> List[MenuItem]:
        """
        Assign new display orders.

        Args:
            orders: ``(menu_item_id, display_order)`` pairs

        Returns:
            The reordered items

        Raises:
            NotFoundError: If any id is unknown
            ConflictError: If the result would repeat a display order within a category
        """
        pass
