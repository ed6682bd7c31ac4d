"""
Delete Customer Use Case
========================
"""
import logging

from salon_crm.domain.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class DeleteCustomerUseCase:
    """Use case for permanently removing a customer."""

    def __init__(self, customer_repository: CustomerRepository):
        self._repository = customer_repository

    def execute(self, customer_id: str) -> None:
        """
        Raises:
            NotFoundError: If no customer has this id
        """
        self._repository.delete(customer_id)
        logger.info(f"Customer deleted: {customer_id}")
