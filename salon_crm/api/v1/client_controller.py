"""
Client Controller
=================

FastAPI controller for B2B client accounts.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from salon_crm.api.v1.dependencies import get_client_service
from salon_crm.application.dto.client_dto import (
    AmountRequest,
    ClientCreateRequest,
    ClientListRequest,
    ClientListResponse,
    ClientResponse,
    CreditOutstandingResponse,
    ExtendContractRequest,
)
from salon_crm.application.services.client_service import ClientService

router = APIRouter(tags=["clients"])


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a client",
    description="""
    Register a B2B client account.

    Company name, registration number, tax ID and primary contact email must
    be unused. Up to 5 secondary contacts are allowed and every contact email
    must be different. The account balance starts at zero.
    """,
)
async def create_client(
    request: ClientCreateRequest,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Register a client."""
    return service.create_client(request)


@router.get("", response_model=ClientListResponse, summary="List clients")
async def list_clients(
    page: int = Query(1),
    limit: int = Query(10),
    sort_by: Optional[str] = Query(None),
    sort_order: Optional[str] = Query(None),
    business_type: Optional[str] = Query(None),
    is_active: Optional[bool] = Query(None),
    has_active_contract: Optional[bool] = Query(None),
    contract_expiring_within_days: Optional[int] = Query(None),
    search: Optional[str] = Query(None, description="Matches company, primary contact, registration number or tax ID"),
    service: ClientService = Depends(get_client_service),
) -> ClientListResponse:
    return service.list_clients(
        ClientListRequest(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            business_type=business_type,
            is_active=is_active,
            has_active_contract=has_active_contract,
            contract_expiring_within_days=contract_expiring_within_days,
            search=search,
        )
    )


@router.get(
    "/expiring-contracts",
    response_model=List[ClientResponse],
    summary="Active clients whose contract ends soon",
)
async def expiring_contracts(
    days_ahead: int = Query(30),
    service: ClientService = Depends(get_client_service),
) -> List[ClientResponse]:
    return service.get_expiring_contracts(days_ahead)


@router.get(
    "/credit-outstanding",
    response_model=CreditOutstandingResponse,
    summary="Total balance owed by all clients",
)
async def credit_outstanding(
    service: ClientService = Depends(get_client_service),
) -> CreditOutstandingResponse:
    return service.get_credit_outstanding()


@router.get("/{client_id}", response_model=ClientResponse, summary="Get a client")
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    return service.get_client(client_id)


@router.post(
    "/{client_id}/charges",
    response_model=ClientResponse,
    summary="Charge a client account",
    description="Rejected with 422 when the account is inactive or the charge exceeds the available credit.",
)
async def charge_client(
    client_id: str,
    request: AmountRequest,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    return service.charge(client_id, request.amount)


@router.post(
    "/{client_id}/payments",
    response_model=ClientResponse,
    summary="Record a payment",
)
async def record_payment(
    client_id: str,
    request: AmountRequest,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    return service.record_payment(client_id, request.amount)


@router.put(
    "/{client_id}/contract",
    response_model=ClientResponse,
    summary="Extend a client's contract",
)
async def extend_contract(
    client_id: str,
    request: ExtendContractRequest,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    return service.extend_contract(client_id, request.contract_end_date)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a client",
)
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> Response:
    service.delete_client(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
