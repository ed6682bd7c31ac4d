"""
Client Report Use Cases
=======================

Contract renewals coming up and credit owed across all accounts.
"""
from typing import List

from salon_crm.application.dto.client_dto import ClientResponse, CreditOutstandingResponse
from salon_crm.domain.errors import ValidationError
from salon_crm.domain.repositories.client_repository import ClientRepository


class GetExpiringContractsUseCase:
    def __init__(self, client_repository: ClientRepository):
        self._repository = client_repository

    def execute(self, days_ahead: int = 30) -> List[ClientResponse]:
        if days_ahead < 0:
            raise ValidationError("Days ahead must be a non-negative number", "daysAhead")
        return [
            ClientResponse.from_entity(client)
            for client in self._repository.find_expiring_contracts(days_ahead)
        ]


class GetCreditOutstandingUseCase:
    def __init__(self, client_repository: ClientRepository):
        self._repository = client_repository

    def execute(self) -> CreditOutstandingResponse:
        total = self._repository.get_total_credit_outstanding()
        return CreditOutstandingResponse(total_outstanding=float(total))
