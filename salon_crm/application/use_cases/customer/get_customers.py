"""
Get Customers Use Case
======================

Paged customer listing with text search and loyalty filters.
"""
from salon_crm.application.dto.common_dto import PaginationResponse
from salon_crm.application.dto.customer_dto import (
    CustomerListRequest,
    CustomerListResponse,
    CustomerResponse,
)
from salon_crm.domain.repositories.customer_repository import (
    CustomerRepository,
    CustomerSearchOptions,
)
from salon_crm.domain.value_objects import LoyaltyTier
from salon_crm.utils.datetime_utils import ensure_aware


class GetCustomersUseCase:
    """
    Use case for listing customers.

    Newest customers come first unless another sort is requested.
    """

    def __init__(self, customer_repository: CustomerRepository):
        self._repository = customer_repository

    def execute(self, request: CustomerListRequest) -> CustomerListResponse:
        page_request = request.to_page_request()
        if request.vip_only:
            page = self._repository.find_vip_customers(page_request)
        else:
            options = CustomerSearchOptions(
                search=request.search,
                is_active=request.is_active,
                loyalty_tier=LoyaltyTier.parse(request.loyalty_tier) if request.loyalty_tier else None,
                min_points=request.min_points,
                max_points=request.max_points,
                last_visit_after=ensure_aware(request.last_visit_after),
                last_visit_before=ensure_aware(request.last_visit_before),
            )
            page = self._repository.search(options, page_request)

        return CustomerListResponse(
            items=[CustomerResponse.from_entity(customer) for customer in page.items],
            pagination=PaginationResponse.from_page(page),
        )
