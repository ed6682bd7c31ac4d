"""
Get Client Use Case
===================
"""
from salon_crm.application.dto.client_dto import ClientResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.repositories.client_repository import ClientRepository


class GetClientByIdUseCase:
    """Use case for fetching a single client."""

    def __init__(self, client_repository: ClientRepository):
        self._repository = client_repository

    def execute(self, client_id: str) -> ClientResponse:
        client = self._repository.find_by_id(client_id)
        if client is None:
            raise NotFoundError("Client", client_id)
        return ClientResponse.from_entity(client)
