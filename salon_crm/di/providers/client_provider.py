from typing import TYPE_CHECKING

from ...application.services.client_service import ClientService
from ...domain.repositories.client_repository import ClientRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ClientProvider:
    """Client service provider - registers client services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register ClientService.
        Service is created with repository from container.
        """
        container.register_singleton(
            ClientService,
            ClientService(container.get(ClientRepository)),
        )
