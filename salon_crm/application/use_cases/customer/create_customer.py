"""
Create Customer Use Case
========================

Registers a new customer after checking that the email and phone are free.
"""
import logging

from salon_crm.application.dto.customer_dto import CustomerCreateRequest, CustomerResponse
from salon_crm.domain.errors import ConflictError
from salon_crm.domain.models.customer import Customer
from salon_crm.domain.repositories.customer_repository import CustomerRepository
from salon_crm.domain.value_objects import Email, Phone

logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """
    Use case for registering a customer.

    New customers start with zero loyalty points and no visits.
    """

    def __init__(self, customer_repository: CustomerRepository):
        """
        Initialize use case with repository.

        Args:
            customer_repository: Repository for customer persistence
        """
        self._repository = customer_repository

    def execute(self, request: CustomerCreateRequest) -> CustomerResponse:
        """
        Execute the create customer use case.

        Args:
            request: Customer registration data

        Returns:
            The created customer

        Raises:
            ValidationError: If a field fails validation
            ConflictError: If the email or phone is already registered
        """
        email = Email.create(request.email)
        phone = Phone.create(request.phone)

        if self._repository.find_by_email(email):
            raise ConflictError("Customer with this email already exists")
        if self._repository.find_by_phone(phone):
            raise ConflictError("Customer with this phone number already exists")

        customer = Customer.create(
            name=request.name,
            email=email.value,
            phone=phone.value,
            whatsapp_id=request.whatsapp_id,
            avatar=request.avatar,
            preferences=request.preferences,
            metadata=request.metadata,
        )
        saved = self._repository.create(customer)
        logger.info(f"Customer created: {saved.id} ({saved.email})")
        return CustomerResponse.from_entity(saved)
