"""
Product Repository Interface
============================

Abstract interface for product data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from salon_crm.domain.models.product import Product
from salon_crm.domain.repositories.pagination import Page, PageRequest
from salon_crm.domain.value_objects import SKU, ProductCategory, ProductType


@dataclass
class ProductSearchOptions:
    """Filters for product search. Unset filters are ignored."""
    search: Optional[str] = None
    category: Optional[ProductCategory] = None
    product_type: Optional[ProductType] = None
    is_active: Optional[bool] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    in_stock: Optional[bool] = None
    low_stock: Optional[bool] = None


class ProductRepository(ABC):
    """
    Abstract repository for product persistence operations.

    SKUs are unique, and so are names within a category (case-insensitive).
    """

    @abstractmethod
    def create(self, product: Product) -> Product:
        """
        Persist a new product.

        Args:
            product: Product entity to create

        Returns:
            Created product entity

        Raises:
            ConflictError: If the SKU, or the name within its category, is taken
        """
        pass

    @abstractmethod
    def update(self, product: Product) -> Product:
        """
        Update an existing product.

        Raises:
            NotFoundError: If no product has this id
        """
        pass

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """
        Delete a product.

        Raises:
            NotFoundError: If no product has this id
        """
        pass

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        pass

    @abstractmethod
    def exists(self, product_id: str) -> bool:
        pass

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page[Product]:
        """List products, by name ascending unless another sort is requested."""
        pass

    @abstractmethod
    def find_by_sku(self, sku: SKU) -> Optional[Product]:
        pass

    @abstractmethod
    def find_by_name_in_category(self, name: str, category: ProductCategory) -> Optional[Product]:
        """Case-insensitive name lookup within one category."""
        pass

    @abstractmethod
    def get_next_sequence_for_category(self, prefix: str) -> int:
        """
        Next free SKU sequence number for a category prefix.

        Args:
            prefix: Two-letter SKU prefix (e.g., "HS")

        Returns:
            Highest sequence used with this prefix plus one (1 if none)
        """
        pass

    @abstractmethod
    def find_by_category(self, category: ProductCategory, page_request: PageRequest) -> Page[Product]:
        pass

    @abstractmethod
    def find_by_type(self, product_type: ProductType, page_request: PageRequest) -> Page[Product]:
        pass

    @abstractmethod
    def search_products(self, options: ProductSearchOptions, page_request: PageRequest) -> Page[Product]:
        """
        Search products.

        Args:
            options: Text search (name, description, SKU) and filters
            page_request: Page, page size and sort

        Returns:
            Page of matching products
        """
        pass

    @abstractmethod
    def find_low_stock_products(self) -> List[Product]:
        """Active physical products with 0 < stock <= threshold."""
        pass

    @abstractmethod
    def find_out_of_stock_products(self) -> List[Product]:
        """Active physical products with no stock."""
        pass
