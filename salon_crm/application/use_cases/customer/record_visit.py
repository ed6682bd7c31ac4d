"""
Record Visit Use Case
=====================
"""
import logging

from salon_crm.application.dto.customer_dto import CustomerResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class RecordVisitUseCase:
    """Use case for counting a salon visit."""

    def __init__(self, customer_repository: CustomerRepository):
        self._repository = customer_repository

    def execute(self, customer_id: str) -> CustomerResponse:
        customer = self._repository.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        customer.record_visit()
        saved = self._repository.update(customer)
        logger.info(f"Visit recorded for customer {saved.id} (total {saved.total_visits})")
        return CustomerResponse.from_entity(saved)
