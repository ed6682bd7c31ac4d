"""
Customer Controller
===================

FastAPI controller for customer endpoints.
"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from salon_crm.api.v1.dependencies import get_customer_service
from salon_crm.application.dto.customer_dto import (
    CustomerCreateRequest,
    CustomerListRequest,
    CustomerListResponse,
    CustomerResponse,
    CustomerStatsResponse,
    CustomerUpdateRequest,
    LoyaltyPointsRequest,
)
from salon_crm.application.services.customer_service import CustomerService

router = APIRouter(tags=["customers"])


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer",
    description="""
    Register a new customer.

    Email and phone must not belong to another customer. The customer starts
    in the Bronze tier with zero points and no visits.
    """,
)
async def create_customer(
    request: CustomerCreateRequest,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    """Register a customer."""
    return service.create_customer(request)


@router.get(
    "",
    response_model=CustomerListResponse,
    summary="List customers",
    description="Paged customer listing with text search and loyalty filters. Newest first by default.",
)
async def list_customers(
    page: int = Query(1),
    limit: int = Query(10),
    sort_by: Optional[str] = Query(None),
    sort_order: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Matches name, email or phone"),
    is_active: Optional[bool] = Query(None),
    loyalty_tier: Optional[str] = Query(None),
    min_points: Optional[int] = Query(None),
    max_points: Optional[int] = Query(None),
    last_visit_after: Optional[datetime] = Query(None),
    last_visit_before: Optional[datetime] = Query(None),
    vip_only: bool = Query(False, description="Only active customers with 10+ visits or 1000+ points"),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerListResponse:
    return service.list_customers(
        CustomerListRequest(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            search=search,
            is_active=is_active,
            loyalty_tier=loyalty_tier,
            min_points=min_points,
            max_points=max_points,
            last_visit_after=last_visit_after,
            last_visit_before=last_visit_before,
            vip_only=vip_only,
        )
    )


@router.get(
    "/stats",
    response_model=CustomerStatsResponse,
    summary="Customer statistics",
)
async def customer_stats(
    service: CustomerService = Depends(get_customer_service),
) -> CustomerStatsResponse:
    return service.get_stats()


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Get a customer",
)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    return service.get_customer(customer_id)


@router.patch(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Update a customer",
    description="Change only the fields sent. A new email or phone must not belong to another customer.",
)
async def update_customer(
    customer_id: str,
    request: CustomerUpdateRequest,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    return service.update_customer(customer_id, request)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a customer",
)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{customer_id}/loyalty/add",
    response_model=CustomerResponse,
    summary="Add loyalty points",
)
async def add_loyalty_points(
    customer_id: str,
    request: LoyaltyPointsRequest,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    return service.add_loyalty_points(customer_id, request.points)


@router.post(
    "/{customer_id}/loyalty/redeem",
    response_model=CustomerResponse,
    summary="Redeem loyalty points",
    description="Fails with 422 when the customer does not have enough points.",
)
async def redeem_loyalty_points(
    customer_id: str,
    request: LoyaltyPointsRequest,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    return service.redeem_loyalty_points(customer_id, request.points)


@router.post(
    "/{customer_id}/visits",
    response_model=CustomerResponse,
    summary="Record a visit",
)
async def record_visit(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    return service.record_visit(customer_id)
