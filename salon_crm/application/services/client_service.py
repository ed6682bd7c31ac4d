"""
Client Service
==============

Application service that coordinates B2B client operations.
"""
from datetime import datetime
from decimal import Decimal
from typing import List

from salon_crm.application.dto.client_dto import (
    ClientCreateRequest,
    ClientListRequest,
    ClientListResponse,
    ClientResponse,
    CreditOutstandingResponse,
)
from salon_crm.application.use_cases.client.client_account import (
    ProcessClientChargeUseCase,
    ProcessClientPaymentUseCase,
)
from salon_crm.application.use_cases.client.client_reports import (
    GetCreditOutstandingUseCase,
    GetExpiringContractsUseCase,
)
from salon_crm.application.use_cases.client.create_client import CreateClientUseCase
from salon_crm.application.use_cases.client.delete_client import DeleteClientUseCase
from salon_crm.application.use_cases.client.extend_contract import ExtendClientContractUseCase
from salon_crm.application.use_cases.client.get_client import GetClientByIdUseCase
from salon_crm.application.use_cases.client.get_clients import GetClientsUseCase
from salon_crm.domain.repositories.client_repository import ClientRepository


class ClientService:
    """
    Application service for client operations.

    Covers account registration, charges and payments against credit terms,
    and contract management.
    """

    def __init__(self, client_repository: ClientRepository):
        """
        Initialize service with repository.

        Args:
            client_repository: Repository for client persistence
        """
        self._repository = client_repository
        self._create_use_case = CreateClientUseCase(client_repository)
        self._get_use_case = GetClientByIdUseCase(client_repository)
        self._list_use_case = GetClientsUseCase(client_repository)
        self._charge_use_case = ProcessClientChargeUseCase(client_repository)
        self._payment_use_case = ProcessClientPaymentUseCase(client_repository)
        self._extend_contract_use_case = ExtendClientContractUseCase(client_repository)
        self._delete_use_case = DeleteClientUseCase(client_repository)
        self._expiring_use_case = GetExpiringContractsUseCase(client_repository)
        self._outstanding_use_case = GetCreditOutstandingUseCase(client_repository)

    def create_client(self, request: ClientCreateRequest) -> ClientResponse:
        return self._create_use_case.execute(request)

    def get_client(self, client_id: str) -> ClientResponse:
        return self._get_use_case.execute(client_id)

    def list_clients(self, request: ClientListRequest) -> ClientListResponse:
        return self._list_use_case.execute(request)

    def charge(self, client_id: str, amount: Decimal) -> ClientResponse:
        """
        Charge a client account.

        Args:
            client_id: Client to charge
            amount: Charge amount

        Returns:
            The client with its updated balance
        """
        return self._charge_use_case.execute(client_id, amount)

    def record_payment(self, client_id: str, amount: Decimal) -> ClientResponse:
        return self._payment_use_case.execute(client_id, amount)

    def extend_contract(self, client_id: str, new_end_date: datetime) -> ClientResponse:
        return self._extend_contract_use_case.execute(client_id, new_end_date)

    def delete_client(self, client_id: str) -> None:
        self._delete_use_case.execute(client_id)

    def get_expiring_contracts(self, days_ahead: int = 30) -> List[ClientResponse]:
        return self._expiring_use_case.execute(days_ahead)

    def get_credit_outstanding(self) -> CreditOutstandingResponse:
        return self._outstanding_use_case.execute()
