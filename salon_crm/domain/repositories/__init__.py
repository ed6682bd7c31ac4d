"""
Repository Interfaces
=====================

Abstract persistence contracts. The MongoDB implementations live in
salon_crm.infrastructure.db.
"""
from .client_repository import ClientFilters, ClientRepository
from .customer_repository import CustomerRepository, CustomerSearchOptions
from .menu_item_repository import MenuItemFilters, MenuItemRepository
from .pagination import MAX_LIMIT, Page, PageRequest, SortOrder
from .product_repository import ProductRepository, ProductSearchOptions

__all__ = [
    "ClientFilters",
    "ClientRepository",
    "CustomerRepository",
    "CustomerSearchOptions",
    "MAX_LIMIT",
    "MenuItemFilters",
    "MenuItemRepository",
    "Page",
    "PageRequest",
    "ProductRepository",
    "ProductSearchOptions",
    "SortOrder",
]
