"""
Menu Item DTO
=============

Pydantic models for menu item API requests and responses.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from salon_crm.application.dto.common_dto import PageQuery, PaginationResponse
from salon_crm.domain.models.menu_item import MenuItem


class MenuItemCreateRequest(BaseModel):
    """
    DTO for creating a menu item.

    ``is_package`` and ``advance_booking_required`` follow the category when
    omitted; ``display_order`` defaults to the end of the category.
    """
    name: str = Field(..., description="Unique name (3-100 characters)")
    description: str = Field(..., description="Description (10-1000 characters)")
    category: str = Field(..., description="Menu category, e.g. HAIR_CARE")
    duration: int = Field(..., description="Minutes, 15-480 in steps of 15")
    price: Decimal = Field(..., description="Price, at most two decimals")
    is_package: Optional[bool] = None
    included_services: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    advance_booking_required: Optional[bool] = None
    advance_booking_days: Optional[int] = None
    available_online: bool = True
    display_order: Optional[int] = None
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    seasonal_item: bool = False
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    max_bookings_per_day: Optional[int] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Bridal Glow Package",
                "description": "Full bridal preparation with hair, makeup and nails",
                "category": "BRIDAL_PACKAGES",
                "duration": 240,
                "price": 350.00,
                "included_services": ["Bridal hair styling", "Bridal makeup", "Manicure"],
                "advance_booking_days": 14,
                "tags": ["bridal", "premium"],
            }
        }
    )


class UpdateCategoryRequest(BaseModel):
    """DTO for moving a menu item to another category."""
    category: str


class DisplayOrderEntry(BaseModel):
    id: str
    display_order: int


class ReorderMenuItemsRequest(BaseModel):
    """DTO for assigning display orders to several menu items at once."""
    items: List[DisplayOrderEntry]


class MenuItemListRequest(PageQuery):
    """Filters for menu listing."""
    category: Optional[str] = None
    is_active: Optional[bool] = None
    is_package: Optional[bool] = None
    available_online: Optional[bool] = None
    seasonal_item: Optional[bool] = None
    advance_booking_required: Optional[bool] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_duration: Optional[int] = None
    max_duration: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    search: Optional[str] = None


class MenuItemResponse(BaseModel):
    """DTO for menu item data."""
    id: str
    name: str
    description: str
    category: str
    category_display_name: str
    duration: int
    duration_display: str
    price: float
    price_display: str
    is_package: bool
    included_services: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    advance_booking_required: bool
    advance_booking_days: Optional[int] = None
    available_online: bool
    can_book_online: bool
    display_order: int
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    seasonal_item: bool
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    is_available_today: bool
    max_bookings_per_day: Optional[int] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, menu_item: MenuItem) -> "MenuItemResponse":
        return cls(**menu_item.to_dict())


class MenuItemListResponse(BaseModel):
    """DTO for a page of menu items."""
    items: List[MenuItemResponse]
    pagination: PaginationResponse
