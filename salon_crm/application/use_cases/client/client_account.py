"""
Client Account Use Cases
========================

Charges and payments against a client's credit terms.
"""
import logging
from decimal import Decimal

from salon_crm.application.dto.client_dto import ClientResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.models.client import Client
from salon_crm.domain.repositories.client_repository import ClientRepository

logger = logging.getLogger(__name__)


def _load_client(repository: ClientRepository, client_id: str) -> Client:
    client = repository.find_by_id(client_id)
    if client is None:
        raise NotFoundError("Client", client_id)
    return client


class ProcessClientChargeUseCase:
    """Use case for charging a client account."""

    def __init__(self, client_repository: ClientRepository):
        self._repository = client_repository

    def execute(self, client_id: str, amount: Decimal) -> ClientResponse:
        """
        Charge a client account.

        Args:
            client_id: Client to charge
            amount: Positive charge amount

        Returns:
            The client with its new balance

        Raises:
            NotFoundError: If no client has this id
            ValidationError: If the amount is not a positive money value
            BusinessRuleViolationError: If the account or its credit terms are
                inactive, or the charge exceeds the available credit
        """
        client = _load_client(self._repository, client_id)
        client.add_charge(amount)
        saved = self._repository.update(client)
        logger.info(f"Client {saved.id} charged {amount} (balance {saved.current_balance})")
        return ClientResponse.from_entity(saved)


class ProcessClientPaymentUseCase:
    """Use case for recording a payment on a client account."""

    def __init__(self, client_repository: ClientRepository):
        self._repository = client_repository

    def execute(self, client_id: str, amount: Decimal) -> ClientResponse:
        """
        Raises:
            NotFoundError: If no client has this id
            ValidationError: If the amount is not a positive money value
            BusinessRuleViolationError: If the payment exceeds the current balance
        """
        client = _load_client(self._repository, client_id)
        client.process_payment(amount)
        saved = self._repository.update(client)
        logger.info(f"Client {saved.id} paid {amount} (balance {saved.current_balance})")
        return ClientResponse.from_entity(saved)
