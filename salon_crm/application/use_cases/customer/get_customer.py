"""
Get Customer Use Case
=====================
"""
from salon_crm.application.dto.customer_dto import CustomerResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.repositories.customer_repository import CustomerRepository


class GetCustomerByIdUseCase:
    """Use case for fetching a single customer."""

    def __init__(self, customer_repository: CustomerRepository):
        self._repository = customer_repository

    def execute(self, customer_id: str) -> CustomerResponse:
        """
        Raises:
            NotFoundError: If no customer has this id
        """
        customer = self._repository.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return CustomerResponse.from_entity(customer)
