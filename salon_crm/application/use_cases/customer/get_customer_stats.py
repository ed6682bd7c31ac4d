"""
Customer Statistics Use Case
============================
"""
from salon_crm.application.dto.customer_dto import CustomerStatsResponse
from salon_crm.domain.repositories.customer_repository import CustomerRepository


class GetCustomerStatsUseCase:
    """Use case for summary figures over the customer base."""

    def __init__(self, customer_repository: CustomerRepository):
        self._repository = customer_repository

    def execute(self) -> CustomerStatsResponse:
        return CustomerStatsResponse(
            active_customers=self._repository.count_active(),
            customers_by_tier=self._repository.count_by_tier(),
            average_loyalty_points=self._repository.average_loyalty_points(),
        )
