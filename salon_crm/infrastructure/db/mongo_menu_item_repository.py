"""
MongoDB Menu Item Repository
============================

Concrete implementation of MenuItemRepository using MongoDB.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING

from salon_crm.domain.constants.menu_item_fields import MenuItemFields
from salon_crm.domain.errors import ConflictError, NotFoundError
from salon_crm.domain.models.menu_item import MenuItem, normalize_tag
from salon_crm.domain.repositories.menu_item_repository import (
    MenuItemFilters,
    MenuItemRepository,
)
from salon_crm.domain.repositories.pagination import Page, PageRequest, SortOrder
from salon_crm.domain.value_objects import MenuCategory, Price, ServiceDuration
from salon_crm.infrastructure.db.mongo_base_repository import (
    MongoRepository,
    combine,
    field_condition,
    from_money_field,
    range_filter,
    sortable,
    text_search,
    to_money_field,
)
from salon_crm.utils.datetime_utils import from_storage, to_storage

logger = logging.getLogger(__name__)

SORT_FIELDS = sortable(
    MenuItemFields.NAME,
    MenuItemFields.CATEGORY,
    MenuItemFields.PRICE,
    MenuItemFields.DURATION,
    MenuItemFields.DISPLAY_ORDER,
    MenuItemFields.CREATED_AT,
    MenuItemFields.UPDATED_AT,
)

DISPLAY_SORT = [
    (MenuItemFields.DISPLAY_ORDER, ASCENDING),
    (MenuItemFields.NAME, ASCENDING),
    (MenuItemFields.ID, ASCENDING),
]


def _flag(name: str, value: Optional[bool]) -> Optional[Dict[str, Any]]:
    return {name: value} if value is not None else None


class MongoMenuItemRepository(MongoRepository[MenuItem], MenuItemRepository):
    """
    MongoDB implementation of MenuItemRepository.

    Names are unique case-insensitively and ``(category, display_order)``
    is unique, both through indexes.
    """

    RESOURCE_NAME = "Menu item"

    def _ensure_indexes(self) -> None:
        super()._ensure_indexes()
        self._collection.create_index(MenuItemFields.NAME_NORMALIZED, unique=True)
        self._collection.create_index(
            [(MenuItemFields.CATEGORY, ASCENDING), (MenuItemFields.DISPLAY_ORDER, ASCENDING)],
            unique=True,
        )
        self._collection.create_index(MenuItemFields.TAGS)

    def _to_entity(self, doc: dict) -> MenuItem:
        """Convert MongoDB document to MenuItem entity."""
        return MenuItem(
            id=doc[MenuItemFields.ID],
            name=doc[MenuItemFields.NAME],
            description=doc[MenuItemFields.DESCRIPTION],
            category=MenuCategory(doc[MenuItemFields.CATEGORY]),
            duration=ServiceDuration(int(doc[MenuItemFields.DURATION])),
            price=Price(from_money_field(doc[MenuItemFields.PRICE])),
            is_package=doc.get(MenuItemFields.IS_PACKAGE, False),
            included_services=doc.get(MenuItemFields.INCLUDED_SERVICES) or [],
            requirements=doc.get(MenuItemFields.REQUIREMENTS) or [],
            benefits=doc.get(MenuItemFields.BENEFITS) or [],
            advance_booking_required=doc.get(MenuItemFields.ADVANCE_BOOKING_REQUIRED, False),
            advance_booking_days=doc.get(MenuItemFields.ADVANCE_BOOKING_DAYS),
            available_online=doc.get(MenuItemFields.AVAILABLE_ONLINE, True),
            display_order=int(doc.get(MenuItemFields.DISPLAY_ORDER, 0)),
            image_url=doc.get(MenuItemFields.IMAGE_URL),
            tags=doc.get(MenuItemFields.TAGS) or [],
            seasonal_item=doc.get(MenuItemFields.SEASONAL_ITEM, False),
            valid_from=from_storage(doc.get(MenuItemFields.VALID_FROM)),
            valid_to=from_storage(doc.get(MenuItemFields.VALID_TO)),
            max_bookings_per_day=doc.get(MenuItemFields.MAX_BOOKINGS_PER_DAY),
            metadata=doc.get(MenuItemFields.METADATA) or {},
            is_active=doc.get(MenuItemFields.IS_ACTIVE, True),
            created_at=from_storage(doc[MenuItemFields.CREATED_AT]),
            updated_at=from_storage(doc[MenuItemFields.UPDATED_AT]),
        )

    def _to_document(self, item: MenuItem) -> dict:
        """Convert MenuItem entity to MongoDB document."""
        return {
            MenuItemFields.ID: item.id,
            MenuItemFields.NAME: item.name,
            MenuItemFields.NAME_NORMALIZED: item.name.lower(),
            MenuItemFields.DESCRIPTION: item.description,
            MenuItemFields.CATEGORY: item.category.value,
            MenuItemFields.DURATION: item.duration.minutes,
            MenuItemFields.PRICE: to_money_field(item.price.value),
            MenuItemFields.IS_PACKAGE: item.is_package,
            MenuItemFields.INCLUDED_SERVICES: list(item.included_services),
            MenuItemFields.REQUIREMENTS: list(item.requirements),
            MenuItemFields.BENEFITS: list(item.benefits),
            MenuItemFields.ADVANCE_BOOKING_REQUIRED: item.advance_booking_required,
            MenuItemFields.ADVANCE_BOOKING_DAYS: item.advance_booking_days,
            MenuItemFields.AVAILABLE_ONLINE: item.available_online,
            MenuItemFields.DISPLAY_ORDER: item.display_order,
            MenuItemFields.IMAGE_URL: item.image_url,
            MenuItemFields.TAGS: list(item.tags),
            MenuItemFields.SEASONAL_ITEM: item.seasonal_item,
            MenuItemFields.VALID_FROM: to_storage(item.valid_from),
            MenuItemFields.VALID_TO: to_storage(item.valid_to),
            MenuItemFields.MAX_BOOKINGS_PER_DAY: item.max_bookings_per_day,
            MenuItemFields.METADATA: item.metadata,
            MenuItemFields.IS_ACTIVE: item.is_active,
            MenuItemFields.CREATED_AT: to_storage(item.created_at),
            MenuItemFields.UPDATED_AT: to_storage(item.updated_at),
        }

    def _page(self, query: Dict[str, Any], page_request: PageRequest) -> Page[MenuItem]:
        return self._find_page(
            query, page_request, SORT_FIELDS, MenuItemFields.DISPLAY_ORDER, SortOrder.ASC
        )

    def create(self, menu_item: MenuItem) -> MenuItem:
        """Create a new menu item."""
        return self._insert(menu_item)

    def update(self, menu_item: MenuItem) -> MenuItem:
        """Update an existing menu item."""
        return self._replace(menu_item.id, menu_item)

    def delete(self, menu_item_id: str) -> None:
        self._delete(menu_item_id)

    def find_by_id(self, menu_item_id: str) -> Optional[MenuItem]:
        """Find a menu item by its ID."""
        return self._find_one({MenuItemFields.ID: menu_item_id})

    def exists(self, menu_item_id: str) -> bool:
        return self._exists(menu_item_id)

    def find_all(self, page_request: PageRequest) -> Page[MenuItem]:
        return self._page({}, page_request)

    def find_by_name(self, name: str) -> Optional[MenuItem]:
        return self._find_one({MenuItemFields.NAME_NORMALIZED: name.strip().lower()})

    def find_by_category(self, category: MenuCategory) -> List[MenuItem]:
        return self._find_many({MenuItemFields.CATEGORY: category.value}, DISPLAY_SORT)

    def find_by_display_order(self, display_order: int, category: MenuCategory) -> Optional[MenuItem]:
        return self._find_one({
            MenuItemFields.CATEGORY: category.value,
            MenuItemFields.DISPLAY_ORDER: display_order,
        })

    def find_by_filters(self, filters: MenuItemFilters, page_request: PageRequest) -> Page[MenuItem]:
        """List menu items matching category, flags, ranges, tags and text."""
        price_range = range_filter(
            to_money_field(filters.min_price) if filters.min_price is not None else None,
            to_money_field(filters.max_price) if filters.max_price is not None else None,
        )
        tags = [normalize_tag(tag) for tag in filters.tags if normalize_tag(tag)]
        query = combine(
            {MenuItemFields.CATEGORY: filters.category.value} if filters.category else None,
            _flag(MenuItemFields.IS_ACTIVE, filters.is_active),
            _flag(MenuItemFields.IS_PACKAGE, filters.is_package),
            _flag(MenuItemFields.AVAILABLE_ONLINE, filters.available_online),
            _flag(MenuItemFields.SEASONAL_ITEM, filters.seasonal_item),
            _flag(MenuItemFields.ADVANCE_BOOKING_REQUIRED, filters.advance_booking_required),
            field_condition(MenuItemFields.PRICE, price_range),
            field_condition(
                MenuItemFields.DURATION, range_filter(filters.min_duration, filters.max_duration)
            ),
            {MenuItemFields.TAGS: {"$all": tags}} if tags else None,
            text_search(
                filters.search,
                (MenuItemFields.NAME, MenuItemFields.DESCRIPTION, MenuItemFields.TAGS),
            ),
        )
        return self._page(query, page_request)

    def find_available_for_date(self, date: datetime) -> List[MenuItem]:
        items = self._find_many({MenuItemFields.IS_ACTIVE: True}, DISPLAY_SORT)
        return [item for item in items if item.is_available_on_date(date)]

    def get_next_display_order(self, category: MenuCategory) -> int:
        doc = self._collection.find_one(
            {MenuItemFields.CATEGORY: category.value},
            sort=[(MenuItemFields.DISPLAY_ORDER, DESCENDING)],
        )
        if not doc:
            return 0
        return int(doc[MenuItemFields.DISPLAY_ORDER]) + 1

    def reorder_menu_items(self, orders: List[Tuple[str, int]]) -> List[MenuItem]:
        """
        Assign new display orders to several items.

        Items are first parked on negative orders so that swapping two
        positions does not trip the unique index, then given their final
        orders. Every target order is validated before the first write, and a
        failed write restores the original orders before the error propagates.

        Args:
            orders: ``(menu_item_id, display_order)`` pairs

        Returns:
            The reordered items, in request order

        Raises:
            NotFoundError: If any id is unknown
            ConflictError: If a target order is taken or assigned twice
            ValidationError: If a target order is negative
        """
        items: List[MenuItem] = []
        for menu_item_id, _ in orders:
            item = self.find_by_id(menu_item_id)
            if item is None:
                raise NotFoundError(self.RESOURCE_NAME, menu_item_id)
            items.append(item)

        moving_ids = {item.id for item in items}
        final_orders: Dict[str, set] = {}
        for item, (_, order) in zip(items, orders):
            taken = final_orders.setdefault(item.category.value, set())
            if order in taken:
                raise ConflictError(
                    f"Display order {order} is assigned twice in category {item.category.value}"
                )
            taken.add(order)

        for category, taken in final_orders.items():
            occupied = self._collection.find_one(
                {
                    MenuItemFields.CATEGORY: category,
                    MenuItemFields.ID: {"$nin": list(moving_ids)},
                    MenuItemFields.DISPLAY_ORDER: {"$in": list(taken)},
                },
                {MenuItemFields.DISPLAY_ORDER: 1},
            )
            if occupied:
                raise ConflictError(
                    f"Display order {occupied[MenuItemFields.DISPLAY_ORDER]} is already used "
                    f"in category {category}"
                )

        original_orders = {item.id: item.display_order for item in items}
        for item, (_, order) in zip(items, orders):
            item.update_display_order(order)

        try:
            for index, item in enumerate(items):
                self._collection.update_one(
                    {MenuItemFields.ID: item.id},
                    {"$set": {MenuItemFields.DISPLAY_ORDER: -(index + 1)}},
                )
            reordered = [self._replace(item.id, item) for item in items]
        except Exception:
            self._restore_display_orders(original_orders)
            raise

        logger.debug(f"Reordered {len(reordered)} menu items")
        return reordered

    def _restore_display_orders(self, original_orders: Dict[str, int]) -> None:
        # Park first so restoring a partial swap cannot collide with itself
        for index, menu_item_id in enumerate(original_orders):
            self._collection.update_one(
                {MenuItemFields.ID: menu_item_id},
                {"$set": {MenuItemFields.DISPLAY_ORDER: -(index + 1)}},
            )
        for menu_item_id, order in original_orders.items():
            self._collection.update_one(
                {MenuItemFields.ID: menu_item_id},
                {"$set": {MenuItemFields.DISPLAY_ORDER: order}},
            )
        logger.warning(f"Reorder failed; restored display orders of {len(original_orders)} menu items")
