"""
Extend Client Contract Use Case
===============================
"""
import logging
from datetime import datetime

from salon_crm.application.dto.client_dto import ClientResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.repositories.client_repository import ClientRepository
from salon_crm.utils.datetime_utils import to_iso

logger = logging.getLogger(__name__)


class ExtendClientContractUseCase:
    """Use case for moving a client's contract end date."""

    def __init__(self, client_repository: ClientRepository):
        self._repository = client_repository

    def execute(self, client_id: str, new_end_date: datetime) -> ClientResponse:
        """
        Raises:
            NotFoundError: If no client has this id
            ValidationError: If the new end date is in the past or not after the start date
        """
        client = self._repository.find_by_id(client_id)
        if client is None:
            raise NotFoundError("Client", client_id)
        client.extend_contract(new_end_date)
        saved = self._repository.update(client)
        logger.info(f"Client {saved.id} contract extended to {to_iso(saved.contract_end_date)}")
        return ClientResponse.from_entity(saved)
