"""
Customer DTO
============

Pydantic models for customer API requests and responses.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from salon_crm.application.dto.common_dto import PageQuery, PaginationResponse
from salon_crm.domain.models.customer import Customer


class CustomerCreateRequest(BaseModel):
    """DTO for registering a customer."""
    name: str = Field(..., description="Customer full name (2-100 characters)")
    email: str = Field(..., description="Unique email address")
    phone: str = Field(..., description="Unique phone number")
    whatsapp_id: Optional[str] = Field(None, description="WhatsApp identifier")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    preferences: Optional[str] = Field(None, description="Free-text service preferences")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "phone": "+15551234567",
                "preferences": "Prefers morning appointments",
            }
        }
    )


class CustomerUpdateRequest(BaseModel):
    """DTO for updating a customer. Only the fields sent are changed."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    whatsapp_id: Optional[str] = None
    avatar: Optional[str] = None
    preferences: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class LoyaltyPointsRequest(BaseModel):
    """DTO for adding or redeeming loyalty points."""
    points: int = Field(..., description="Number of points")


class CustomerListRequest(PageQuery):
    """Filters for customer listing."""
    search: Optional[str] = None
    is_active: Optional[bool] = None
    loyalty_tier: Optional[str] = None
    min_points: Optional[int] = None
    max_points: Optional[int] = None
    last_visit_after: Optional[datetime] = None
    last_visit_before: Optional[datetime] = None
    vip_only: bool = False


class CustomerResponse(BaseModel):
    """DTO for customer data."""
    id: str
    name: str
    email: str
    phone: str
    whatsapp_id: Optional[str] = None
    avatar: Optional[str] = None
    loyalty_points: int
    loyalty_tier: str
    discount_percentage: int
    total_visits: int
    last_visit: Optional[datetime] = None
    days_since_last_visit: Optional[int] = None
    preferences: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    is_vip: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0b6f7d1e-3c52-4d2a-9a6e-2f7a1c9d8e41",
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "phone": "+15551234567",
                "loyalty_points": 750,
                "loyalty_tier": "SILVER",
                "discount_percentage": 5,
                "total_visits": 4,
                "last_visit": "2025-03-02T10:15:00Z",
                "is_vip": False,
                "is_active": True,
                "created_at": "2025-01-10T09:00:00Z",
                "updated_at": "2025-03-02T10:15:00Z",
            }
        }
    )

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        return cls(**customer.to_dict())


class CustomerListResponse(BaseModel):
    """DTO for a page of customers."""
    items: List[CustomerResponse]
    pagination: PaginationResponse


class CustomerStatsResponse(BaseModel):
    """DTO for customer base statistics."""
    active_customers: int
    customers_by_tier: Dict[str, int]
    average_loyalty_points: float
