"""
Loyalty Points Use Cases
========================

Earning and redeeming loyalty points on a customer account.
"""
import logging

from salon_crm.application.dto.customer_dto import CustomerResponse
from salon_crm.domain.errors import NotFoundError
from salon_crm.domain.models.customer import Customer
from salon_crm.domain.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


def _load_customer(repository: CustomerRepository, customer_id: str) -> Customer:
    customer = repository.find_by_id(customer_id)
    if customer is None:
        raise NotFoundError("Customer", customer_id)
    return customer


class AddLoyaltyPointsUseCase:
    """Use case for crediting points to a customer."""

    def __init__(self, customer_repository: CustomerRepository):
        self._repository = customer_repository

    def execute(self, customer_id: str, points: int) -> CustomerResponse:
        """
        Credit points to a customer.

        Raises:
            NotFoundError: If no customer has this id
            BusinessRuleViolationError: If points is negative
            ValidationError: If the balance would exceed the maximum
        """
        customer = _load_customer(self._repository, customer_id)
        previous_tier = customer.loyalty_tier
        customer.add_loyalty_points(points)
        saved = self._repository.update(customer)
        logger.info(f"Customer {saved.id} earned {points} points (balance {saved.loyalty_points.value})")
        if saved.loyalty_tier != previous_tier:
            logger.info(f"Customer {saved.id} moved from {previous_tier.value} to {saved.loyalty_tier.value}")
        return CustomerResponse.from_entity(saved)


class RedeemLoyaltyPointsUseCase:
    """Use case for debiting points from a customer."""

    def __init__(self, customer_repository: CustomerRepository):
        self._repository = customer_repository

    def execute(self, customer_id: str, points: int) -> CustomerResponse:
        """
        Redeem points from a customer's balance.

        Raises:
            NotFoundError: If no customer has this id
            BusinessRuleViolationError: If points is negative or exceeds the balance
        """
        customer = _load_customer(self._repository, customer_id)
        customer.redeem_loyalty_points(points)
        saved = self._repository.update(customer)
        logger.info(f"Customer {saved.id} redeemed {points} points (balance {saved.loyalty_points.value})")
        return CustomerResponse.from_entity(saved)
