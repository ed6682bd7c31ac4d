"""
Client DTO
==========

Pydantic models for B2B client API requests and responses.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from salon_crm.application.dto.common_dto import PageQuery, PaginationResponse
from salon_crm.domain.models.client import Client


class ContactPersonRequest(BaseModel):
    """DTO for a client contact."""
    name: str
    position: str
    email: str
    phone: str


class CreditTermsRequest(BaseModel):
    """DTO for the credit terms of a new client. The balance always starts at zero."""
    payment_terms: str = Field(..., description="NET_15, NET_30, NET_45, NET_60, IMMEDIATE, PREPAID or CUSTOM")
    credit_limit: Decimal = Field(Decimal("0"), description="Maximum outstanding balance")
    discount_percent: Decimal = Field(Decimal("0"), description="Negotiated discount (0-100)")
    custom_terms_days: Optional[int] = Field(None, description="Required for CUSTOM terms")


class ClientCreateRequest(BaseModel):
    """DTO for registering a B2B client."""
    company_name: str = Field(..., description="Unique company name (2-200 characters)")
    business_type: str = Field(..., description="Business type, e.g. CORPORATE")
    primary_contact: ContactPersonRequest
    billing_address: str = Field(..., description="Billing address (10-500 characters)")
    credit_terms: CreditTermsRequest
    secondary_contacts: List[ContactPersonRequest] = Field(default_factory=list)
    registration_number: Optional[str] = None
    tax_id: Optional[str] = None
    website: Optional[str] = None
    shipping_address: Optional[str] = None
    contract_start_date: Optional[datetime] = None
    contract_end_date: Optional[datetime] = None
    notes: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "company_name": "Acme Corporation",
                "business_type": "CORPORATE",
                "primary_contact": {
                    "name": "John Smith",
                    "position": "HR Manager",
                    "email": "john.smith@acme.example",
                    "phone": "+15559876543",
                },
                "billing_address": "100 Market Street, Springfield",
                "credit_terms": {
                    "payment_terms": "NET_30",
                    "credit_limit": 5000,
                    "discount_percent": 10,
                },
                "contract_start_date": "2025-01-01T00:00:00Z",
                "contract_end_date": "2026-01-01T00:00:00Z",
            }
        }
    )


class AmountRequest(BaseModel):
    """DTO for a charge or payment on a client account."""
    amount: Decimal = Field(..., description="Positive amount, at most two decimals")


class ExtendContractRequest(BaseModel):
    """DTO for moving a client's contract end date."""
    contract_end_date: datetime


class ClientListRequest(PageQuery):
    """Filters for client listing."""
    business_type: Optional[str] = None
    is_active: Optional[bool] = None
    has_active_contract: Optional[bool] = None
    contract_expiring_within_days: Optional[int] = None
    search: Optional[str] = None


class ContactPersonResponse(BaseModel):
    name: str
    position: str
    email: str
    phone: str
    is_primary: bool


class CreditTermsResponse(BaseModel):
    payment_terms: str
    credit_limit: float
    current_balance: float
    available_credit: float
    discount_percent: float
    custom_terms_days: Optional[int] = None
    is_active: bool
    terms_description: str
    payment_due_days: int


class ClientResponse(BaseModel):
    """DTO for client data."""
    id: str
    company_name: str
    business_type: str
    business_type_display_name: str
    registration_number: Optional[str] = None
    tax_id: Optional[str] = None
    website: Optional[str] = None
    primary_contact: ContactPersonResponse
    secondary_contacts: List[ContactPersonResponse] = Field(default_factory=list)
    billing_address: str
    shipping_address: Optional[str] = None
    credit_terms: CreditTermsResponse
    contract_start_date: Optional[datetime] = None
    contract_end_date: Optional[datetime] = None
    notes: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool
    has_active_contract: bool
    is_contract_expiring: bool
    available_credit: float
    current_balance: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, client: Client) -> "ClientResponse":
        return cls(**client.to_dict())


class ClientListResponse(BaseModel):
    """DTO for a page of clients."""
    items: List[ClientResponse]
    pagination: PaginationResponse


class CreditOutstandingResponse(BaseModel):
    """DTO for the total balance owed by all clients."""
    total_outstanding: float
