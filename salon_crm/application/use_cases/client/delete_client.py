"""
Delete Client Use Case
======================
"""
import logging

from salon_crm.domain.repositories.client_repository import ClientRepository

logger = logging.getLogger(__name__)


class DeleteClientUseCase:
    """Use case for permanently removing a client."""

    def __init__(self, client_repository: ClientRepository):
        self._repository = client_repository

    def execute(self, client_id: str) -> None:
        self._repository.delete(client_id)
        logger.info(f"Client deleted: {client_id}")
