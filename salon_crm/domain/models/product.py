"""
Product Model
=============

Catalogue entry: a salon service, a physical retail product or a package.
This is a pure domain object with no infrastructure dependencies.

Services and packages carry a duration and no stock; physical products carry
stock and no duration. Breaking that pairing is a business-rule violation.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union

from salon_crm.domain.errors import BusinessRuleViolationError, ValidationError
from salon_crm.domain.models.base import Entity, new_id, validate_text
from salon_crm.domain.value_objects import SKU, Price, ProductCategory, ProductType
from salon_crm.domain.value_objects.price import Number
from salon_crm.utils.datetime_utils import now, to_iso

MIN_DURATION_MINUTES = 5
MAX_DURATION_MINUTES = 480
DURATION_STEP_MINUTES = 5


def _validate_duration(minutes: int) -> int:
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise ValidationError("Service duration must be a whole number of minutes", "durationMinutes")
    if minutes < MIN_DURATION_MINUTES:
        raise ValidationError(
            f"Service duration must be at least {MIN_DURATION_MINUTES} minutes", "durationMinutes"
        )
    if minutes > MAX_DURATION_MINUTES:
        raise ValidationError(
            f"Service duration cannot exceed 8 hours ({MAX_DURATION_MINUTES} minutes)",
            "durationMinutes",
        )
    if minutes % DURATION_STEP_MINUTES != 0:
        raise ValidationError(
            f"Service duration must be in {DURATION_STEP_MINUTES}-minute increments",
            "durationMinutes",
        )
    return minutes


def _validate_count(value: int, field: str, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be a whole number", field)
    if value < 0:
        raise ValidationError(f"{label} cannot be negative", field)
    return value


@dataclass(eq=False)
class Product(Entity):
    """
    Product domain model.

    Every mutating method validates its input and stamps ``updated_at``.
    """
    id: str
    name: str
    description: str
    price: Price
    category: ProductCategory
    product_type: ProductType
    sku: SKU
    is_active: bool = True
    duration_minutes: Optional[int] = None
    stock_level: Optional[int] = None
    low_stock_threshold: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __post_init__(self) -> None:
        self.name = validate_text(self.name, "name", "Product name", 2, 100)
        self.description = validate_text(
            self.description, "description", "Product description", 10, 500
        )
        if not isinstance(self.price, Price):
            self.price = Price(self.price)
        self.category = ProductCategory.parse(self.category)
        self.product_type = ProductType.parse(self.product_type)
        if not isinstance(self.sku, SKU):
            self.sku = SKU(self.sku)
        self.metadata = dict(self.metadata or {})
        self._validate_business_rules()

    def _validate_business_rules(self) -> None:
        if self.product_type.requires_duration():
            if self.duration_minutes is None:
                raise BusinessRuleViolationError("Services and packages must have a duration")
            _validate_duration(self.duration_minutes)
        elif self.duration_minutes is not None:
            raise BusinessRuleViolationError("Only services and packages can have duration")

        if self.product_type.requires_inventory():
            # Stock fields default to zero for physical products
            self.stock_level = _validate_count(
                0 if self.stock_level is None else self.stock_level, "stockLevel", "Stock level"
            )
            self.low_stock_threshold = _validate_count(
                0 if self.low_stock_threshold is None else self.low_stock_threshold,
                "lowStockThreshold",
                "Low stock threshold",
            )
        elif self.stock_level is not None or self.low_stock_threshold is not None:
            raise BusinessRuleViolationError("Only physical products can have stock tracking")

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: Union[Price, Number],
        category: Union[ProductCategory, str],
        product_type: Union[ProductType, str],
        sku: Union[SKU, str],
        duration_minutes: Optional[int] = None,
        stock_level: Optional[int] = None,
        low_stock_threshold: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "Product":
        return cls(
            id=new_id(),
            name=name,
            description=description,
            price=price if isinstance(price, Price) else Price(price),
            category=category,
            product_type=product_type,
            sku=sku,
            duration_minutes=duration_minutes,
            stock_level=stock_level,
            low_stock_threshold=low_stock_threshold,
            metadata=metadata or {},
        )

    # Mutations

    def update_name(self, name: str) -> None:
        self.name = validate_text(name, "name", "Product name", 2, 100)
        self.updated_at = now()

    def update_description(self, description: str) -> None:
        self.description = validate_text(
            description, "description", "Product description", 10, 500
        )
        self.updated_at = now()

    def update_price(self, price: Union[Price, Number]) -> None:
        self.price = price if isinstance(price, Price) else Price(price)
        self.updated_at = now()

    def update_duration(self, minutes: int) -> None:
        if not self.product_type.requires_duration():
            raise BusinessRuleViolationError("Only services and packages can have duration")
        self.duration_minutes = _validate_duration(minutes)
        self.updated_at = now()

    def restock_item(self, quantity: int) -> None:
        """
        Add units to the stock level.

        Raises:
            BusinessRuleViolationError: If the product does not track inventory
            ValidationError: If quantity is negative
        """
        if not self.product_type.requires_inventory():
            raise BusinessRuleViolationError("Only physical products can be restocked")
        _validate_count(quantity, "quantity", "Restock quantity")
        self.stock_level = (self.stock_level or 0) + quantity
        self.updated_at = now()

    def reduce_stock(self, quantity: int) -> None:
        if not self.product_type.requires_inventory():
            raise BusinessRuleViolationError("Only physical products have stock")
        _validate_count(quantity, "quantity", "Stock reduction quantity")
        current = self.stock_level or 0
        if quantity > current:
            raise BusinessRuleViolationError("Cannot reduce stock below zero")
        self.stock_level = current - quantity
        self.updated_at = now()

    def mark_as_out_of_stock(self) -> None:
        if not self.product_type.requires_inventory():
            raise BusinessRuleViolationError("Only physical products can be out of stock")
        self.stock_level = 0
        self.updated_at = now()

    def update_stock_threshold(self, threshold: int) -> None:
        if not self.product_type.requires_inventory():
            raise BusinessRuleViolationError("Only physical products have stock thresholds")
        self.low_stock_threshold = _validate_count(
            threshold, "lowStockThreshold", "Stock threshold"
        )
        self.updated_at = now()

    def update_metadata(self, metadata: Dict[str, Any]) -> None:
        self.metadata = {**self.metadata, **(metadata or {})}
        self.updated_at = now()

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = now()

    def reactivate(self) -> None:
        self.is_active = True
        self.updated_at = now()

    # Queries

    def is_out_of_stock(self) -> bool:
        if not self.product_type.requires_inventory():
            return False
        return (self.stock_level or 0) == 0

    def is_low_stock(self) -> bool:
        if not self.product_type.requires_inventory():
            return False
        stock = self.stock_level or 0
        return 0 < stock <= (self.low_stock_threshold or 0)

    def can_be_ordered(self) -> bool:
        return self.is_active and not self.is_out_of_stock()

    def get_discounted_price(self, discount_percent: Number) -> Price:
        return self.price.apply_discount(discount_percent)

    @property
    def formatted_duration(self) -> Optional[str]:
        """``45 min``, ``2h`` or ``1h 30m``."""
        if self.duration_minutes is None:
            return None
        hours, minutes = divmod(self.duration_minutes, 60)
        if hours == 0:
            return f"{minutes} min"
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h {minutes}m"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price.value),
            "formatted_price": self.price.to_currency(),
            "category": self.category.value,
            "category_display_name": self.category.display_name,
            "type": self.product_type.value,
            "type_display_name": self.product_type.display_name,
            "sku": self.sku.value,
            "is_active": self.is_active,
            "duration_minutes": self.duration_minutes,
            "formatted_duration": self.formatted_duration,
            "stock_level": self.stock_level,
            "low_stock_threshold": self.low_stock_threshold,
            "is_out_of_stock": self.is_out_of_stock(),
            "is_low_stock": self.is_low_stock(),
            "can_be_ordered": self.can_be_ordered(),
            "metadata": dict(self.metadata),
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }
