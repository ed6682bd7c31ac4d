"""
Get Clients Use Case
====================
"""
from salon_crm.application.dto.client_dto import (
    ClientListRequest,
    ClientListResponse,
    ClientResponse,
)
from salon_crm.application.dto.common_dto import PaginationResponse
from salon_crm.domain.errors import ValidationError
from salon_crm.domain.repositories.client_repository import ClientFilters, ClientRepository
from salon_crm.domain.value_objects import BusinessType


class GetClientsUseCase:
    """
    Use case for listing clients.

    Clients are sorted by company name unless another sort is requested.
    """

    def __init__(self, client_repository: ClientRepository):
        self._repository = client_repository

    def execute(self, request: ClientListRequest) -> ClientListResponse:
        expiring = request.contract_expiring_within_days
        if expiring is not None and expiring < 0:
            raise ValidationError(
                "Contract expiry window must be a non-negative number of days",
                "contractExpiringWithinDays",
            )
        filters = ClientFilters(
            business_type=BusinessType.parse(request.business_type) if request.business_type else None,
            is_active=request.is_active,
            has_active_contract=request.has_active_contract,
            contract_expiring_within_days=expiring,
            search=request.search,
        )
        page = self._repository.find_by_filters(filters, request.to_page_request())
        return ClientListResponse(
            items=[ClientResponse.from_entity(client) for client in page.items],
            pagination=PaginationResponse.from_page(page),
        )
