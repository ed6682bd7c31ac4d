"""
Customer Service
================

Application service that coordinates customer-related operations.
This service orchestrates multiple use cases.
"""
from salon_crm.application.dto.customer_dto import (
    CustomerCreateRequest,
    CustomerListRequest,
    CustomerListResponse,
    CustomerResponse,
    CustomerStatsResponse,
    CustomerUpdateRequest,
)
from salon_crm.application.use_cases.customer.create_customer import CreateCustomerUseCase
from salon_crm.application.use_cases.customer.delete_customer import DeleteCustomerUseCase
from salon_crm.application.use_cases.customer.get_customer import GetCustomerByIdUseCase
from salon_crm.application.use_cases.customer.get_customer_stats import GetCustomerStatsUseCase
from salon_crm.application.use_cases.customer.get_customers import GetCustomersUseCase
from salon_crm.application.use_cases.customer.loyalty_points import (
    AddLoyaltyPointsUseCase,
    RedeemLoyaltyPointsUseCase,
)
from salon_crm.application.use_cases.customer.record_visit import RecordVisitUseCase
from salon_crm.application.use_cases.customer.update_customer import UpdateCustomerUseCase
from salon_crm.domain.repositories.customer_repository import CustomerRepository


class CustomerService:
    """
    Application service for customer operations.

    This service coordinates multiple use cases and provides
    a high-level interface for customer management.
    """

    def __init__(self, customer_repository: CustomerRepository):
        """
        Initialize service with repository.

        Args:
            customer_repository: Repository for customer persistence
        """
        self._repository = customer_repository
        self._create_use_case = CreateCustomerUseCase(customer_repository)
        self._get_use_case = GetCustomerByIdUseCase(customer_repository)
        self._list_use_case = GetCustomersUseCase(customer_repository)
        self._update_use_case = UpdateCustomerUseCase(customer_repository)
        self._delete_use_case = DeleteCustomerUseCase(customer_repository)
        self._add_points_use_case = AddLoyaltyPointsUseCase(customer_repository)
        self._redeem_points_use_case = RedeemLoyaltyPointsUseCase(customer_repository)
        self._record_visit_use_case = RecordVisitUseCase(customer_repository)
        self._stats_use_case = GetCustomerStatsUseCase(customer_repository)

    def create_customer(self, request: CustomerCreateRequest) -> CustomerResponse:
        """
        Register a customer.

        Args:
            request: Customer registration data

        Returns:
            The created customer
        """
        return self._create_use_case.execute(request)

    def get_customer(self, customer_id: str) -> CustomerResponse:
        return self._get_use_case.execute(customer_id)

    def list_customers(self, request: CustomerListRequest) -> CustomerListResponse:
        return self._list_use_case.execute(request)

    def update_customer(self, customer_id: str, request: CustomerUpdateRequest) -> CustomerResponse:
        return self._update_use_case.execute(customer_id, request)

    def delete_customer(self, customer_id: str) -> None:
        self._delete_use_case.execute(customer_id)

    def add_loyalty_points(self, customer_id: str, points: int) -> CustomerResponse:
        return self._add_points_use_case.execute(customer_id, points)

    def redeem_loyalty_points(self, customer_id: str, points: int) -> CustomerResponse:
        return self._redeem_points_use_case.execute(customer_id, points)

    def record_visit(self, customer_id: str) -> CustomerResponse:
        return self._record_visit_use_case.execute(customer_id)

    def get_stats(self) -> CustomerStatsResponse:
        return self._stats_use_case.execute()
