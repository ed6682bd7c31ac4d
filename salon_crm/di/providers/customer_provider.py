from typing import TYPE_CHECKING

from ...application.services.customer_service import CustomerService
from ...domain.repositories.customer_repository import CustomerRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CustomerProvider:
    """Customer service provider - registers customer services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register CustomerService.
        Service is created with repository from container.
        """
        container.register_singleton(
            CustomerService,
            CustomerService(container.get(CustomerRepository)),
        )
