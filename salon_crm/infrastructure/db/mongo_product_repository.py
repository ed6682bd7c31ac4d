"""
MongoDB Product Repository
==========================

Concrete implementation of ProductRepository using MongoDB.
"""
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from salon_crm.domain.constants.product_fields import ProductFields
from salon_crm.domain.models.product import Product
from salon_crm.domain.repositories.pagination import Page, PageRequest, SortOrder
from salon_crm.domain.repositories.product_repository import (
    ProductRepository,
    ProductSearchOptions,
)
from salon_crm.domain.value_objects import SKU, Price, ProductCategory, ProductType
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

SORT_FIELDS = sortable(
    ProductFields.NAME,
    ProductFields.PRICE,
    ProductFields.CATEGORY,
    ProductFields.SKU,
    ProductFields.STOCK_LEVEL,
    ProductFields.CREATED_AT,
    ProductFields.UPDATED_AT,
)

NAME_SORT = [(ProductFields.NAME, ASCENDING), (ProductFields.ID, ASCENDING)]


class MongoProductRepository(MongoRepository[Product], ProductRepository):
    """
    MongoDB implementation of ProductRepository.

    The SKU prefix and sequence are stored as separate fields so the next
    sequence for a category is a single sorted lookup. Stock flags are
    stored alongside the stock level for filtering.
    """

    RESOURCE_NAME = "Product"

    def _ensure_indexes(self) -> None:
        super()._ensure_indexes()
        self._collection.create_index(ProductFields.SKU, unique=True)
        self._collection.create_index(
            [(ProductFields.CATEGORY, ASCENDING), (ProductFields.NAME_NORMALIZED, ASCENDING)],
            unique=True,
        )
        self._collection.create_index(
            [(ProductFields.SKU_PREFIX, ASCENDING), (ProductFields.SKU_SEQUENCE, DESCENDING)]
        )

    def _to_entity(self, doc: dict) -> Product:
        """Convert MongoDB document to Product entity."""
        return Product(
            id=doc[ProductFields.ID],
            name=doc[ProductFields.NAME],
            description=doc[ProductFields.DESCRIPTION],
            price=Price(from_money_field(doc[ProductFields.PRICE])),
            category=ProductCategory(doc[ProductFields.CATEGORY]),
            product_type=ProductType(doc[ProductFields.TYPE]),
            sku=SKU(doc[ProductFields.SKU]),
            is_active=doc.get(ProductFields.IS_ACTIVE, True),
            duration_minutes=doc.get(ProductFields.DURATION_MINUTES),
            stock_level=doc.get(ProductFields.STOCK_LEVEL),
            low_stock_threshold=doc.get(ProductFields.LOW_STOCK_THRESHOLD),
            metadata=doc.get(ProductFields.METADATA) or {},
            created_at=from_storage(doc[ProductFields.CREATED_AT]),
            updated_at=from_storage(doc[ProductFields.UPDATED_AT]),
        )

    def _to_document(self, product: Product) -> dict:
        """Convert Product entity to MongoDB document."""
        return {
            ProductFields.ID: product.id,
            ProductFields.NAME: product.name,
            ProductFields.NAME_NORMALIZED: product.name.lower(),
            ProductFields.DESCRIPTION: product.description,
            ProductFields.PRICE: to_money_field(product.price.value),
            ProductFields.CATEGORY: product.category.value,
            ProductFields.TYPE: product.product_type.value,
            ProductFields.SKU: product.sku.value,
            ProductFields.SKU_PREFIX: product.sku.category_prefix,
            ProductFields.SKU_SEQUENCE: product.sku.sequence_number,
            ProductFields.IS_ACTIVE: product.is_active,
            ProductFields.DURATION_MINUTES: product.duration_minutes,
            ProductFields.STOCK_LEVEL: product.stock_level,
            ProductFields.LOW_STOCK_THRESHOLD: product.low_stock_threshold,
            ProductFields.IS_LOW_STOCK: product.is_low_stock(),
            ProductFields.IS_OUT_OF_STOCK: product.is_out_of_stock(),
            ProductFields.METADATA: product.metadata,
            ProductFields.CREATED_AT: to_storage(product.created_at),
            ProductFields.UPDATED_AT: to_storage(product.updated_at),
        }

    def _page(self, query: Dict[str, Any], page_request: PageRequest) -> Page[Product]:
        return self._find_page(query, page_request, SORT_FIELDS, ProductFields.NAME, SortOrder.ASC)

    def create(self, product: Product) -> Product:
        """Create a new product."""
        return self._insert(product)

    def update(self, product: Product) -> Product:
        """Update an existing product."""
        return self._replace(product.id, product)

    def delete(self, product_id: str) -> None:
        self._delete(product_id)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find a product by its ID."""
        return self._find_one({ProductFields.ID: product_id})

    def exists(self, product_id: str) -> bool:
        return self._exists(product_id)

    def find_all(self, page_request: PageRequest) -> Page[Product]:
        return self._page({}, page_request)

    def find_by_sku(self, sku: SKU) -> Optional[Product]:
        return self._find_one({ProductFields.SKU: sku.value})

    def find_by_name_in_category(self, name: str, category: ProductCategory) -> Optional[Product]:
        return self._find_one({
            ProductFields.CATEGORY: category.value,
            ProductFields.NAME_NORMALIZED: name.strip().lower(),
        })

    def get_next_sequence_for_category(self, prefix: str) -> int:
        doc = self._collection.find_one(
            {ProductFields.SKU_PREFIX: prefix.upper()},
            sort=[(ProductFields.SKU_SEQUENCE, DESCENDING)],
        )
        if not doc:
            return 1
        return int(doc[ProductFields.SKU_SEQUENCE]) + 1

    def find_by_category(self, category: ProductCategory, page_request: PageRequest) -> Page[Product]:
        return self._page({ProductFields.CATEGORY: category.value}, page_request)

    def find_by_type(self, product_type: ProductType, page_request: PageRequest) -> Page[Product]:
        return self._page({ProductFields.TYPE: product_type.value}, page_request)

    def search_products(self, options: ProductSearchOptions, page_request: PageRequest) -> Page[Product]:
        """Search products by text and filters."""
        price_range = range_filter(
            to_money_field(options.min_price) if options.min_price is not None else None,
            to_money_field(options.max_price) if options.max_price is not None else None,
        )
        query = combine(
            text_search(
                options.search,
                (ProductFields.NAME, ProductFields.DESCRIPTION, ProductFields.SKU),
            ),
            {ProductFields.CATEGORY: options.category.value} if options.category else None,
            {ProductFields.TYPE: options.product_type.value} if options.product_type else None,
            {ProductFields.IS_ACTIVE: options.is_active} if options.is_active is not None else None,
            field_condition(ProductFields.PRICE, price_range),
            {ProductFields.IS_OUT_OF_STOCK: not options.in_stock} if options.in_stock is not None else None,
            {ProductFields.IS_LOW_STOCK: options.low_stock} if options.low_stock is not None else None,
        )
        return self._page(query, page_request)

    def find_low_stock_products(self) -> List[Product]:
        return self._find_many(
            {ProductFields.IS_LOW_STOCK: True, ProductFields.IS_ACTIVE: True}, NAME_SORT
        )

    def find_out_of_stock_products(self) -> List[Product]:
        return self._find_many(
            {ProductFields.IS_OUT_OF_STOCK: True, ProductFields.IS_ACTIVE: True}, NAME_SORT
        )
