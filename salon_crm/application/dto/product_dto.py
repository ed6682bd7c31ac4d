"""
Product DTO
===========

Pydantic models for product API requests and responses.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from salon_crm.application.dto.common_dto import PageQuery, PaginationResponse
from salon_crm.domain.models.product import Product


class ProductCreateRequest(BaseModel):
    """DTO for creating a product. The SKU is generated from the category."""
    name: str = Field(..., description="Product name (2-100 characters)")
    description: str = Field(..., description="Description (10-500 characters)")
    price: Decimal = Field(..., description="Unit price, at most two decimals")
    category: str = Field(..., description="Product category, e.g. HAIR_SERVICES")
    type: str = Field(..., description="SERVICE, PHYSICAL_PRODUCT or PACKAGE")
    duration_minutes: Optional[int] = Field(None, description="Required for services and packages")
    stock_level: Optional[int] = Field(None, description="Physical products only")
    low_stock_threshold: Optional[int] = Field(None, description="Physical products only")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Signature Haircut",
                "description": "Wash, cut and blow-dry with a senior stylist",
                "price": 45.00,
                "category": "HAIR_SERVICES",
                "type": "SERVICE",
                "duration_minutes": 45,
            }
        }
    )


class RestockRequest(BaseModel):
    """DTO for restocking a physical product."""
    quantity: int = Field(..., description="Units to add to the stock level")


class ProductListRequest(PageQuery):
    """Filters for product listing."""
    search: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    is_active: Optional[bool] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    in_stock: Optional[bool] = None
    low_stock: Optional[bool] = None


class ProductResponse(BaseModel):
    """DTO for product data."""
    id: str
    name: str
    description: str
    price: float
    formatted_price: str
    category: str
    category_display_name: str
    type: str
    type_display_name: str
    sku: str
    is_active: bool
    duration_minutes: Optional[int] = None
    formatted_duration: Optional[str] = None
    stock_level: Optional[int] = None
    low_stock_threshold: Optional[int] = None
    is_out_of_stock: bool
    is_low_stock: bool
    can_be_ordered: bool
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "5d1c0e58-7a0b-4c61-8f0e-0b1d2b3c4d5e",
                "name": "Signature Haircut",
                "description": "Wash, cut and blow-dry with a senior stylist",
                "price": 45.0,
                "formatted_price": "$45.00",
                "category": "HAIR_SERVICES",
                "category_display_name": "Hair Services",
                "type": "SERVICE",
                "type_display_name": "Service",
                "sku": "HS-001",
                "is_active": True,
                "duration_minutes": 45,
                "formatted_duration": "45 min",
                "is_out_of_stock": False,
                "is_low_stock": False,
                "can_be_ordered": True,
                "created_at": "2025-01-10T09:00:00Z",
                "updated_at": "2025-01-10T09:00:00Z",
            }
        }
    )

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(**product.to_dict())


class ProductListResponse(BaseModel):
    """DTO for a page of products."""
    items: List[ProductResponse]
    pagination: PaginationResponse
