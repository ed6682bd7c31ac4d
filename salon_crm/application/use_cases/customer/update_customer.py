"""
Update Customer Use Case
========================

Applies a partial update to a customer profile.
"""
import logging

from salon_crm.application.dto.customer_dto import CustomerResponse, CustomerUpdateRequest
from salon_crm.domain.errors import ConflictError, NotFoundError
from salon_crm.domain.repositories.customer_repository import CustomerRepository
from salon_crm.domain.value_objects import Email, Phone

logger = logging.getLogger(__name__)


class UpdateCustomerUseCase:
    """Use case for updating a customer. Only the fields sent are changed."""

    def __init__(self, customer_repository: CustomerRepository):
        self._repository = customer_repository

    def execute(self, customer_id: str, request: CustomerUpdateRequest) -> CustomerResponse:
        """
        Execute the update customer use case.

        Args:
            customer_id: Customer to update
            request: Fields to change

        Returns:
            The updated customer

        Raises:
            NotFoundError: If no customer has this id
            ConflictError: If the new email or phone belongs to another customer
        """
        customer = self._repository.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)

        changes = request.model_dump(exclude_unset=True)

        if changes.get("email") is not None:
            email = Email.create(changes["email"])
            if email != customer.email:
                existing = self._repository.find_by_email(email)
                if existing and existing.id != customer.id:
                    raise ConflictError("Customer with this email already exists")
                customer.update_email(email)

        if changes.get("phone") is not None:
            phone = Phone.create(changes["phone"])
            if phone.clean_value != customer.phone.clean_value:
                existing = self._repository.find_by_phone(phone)
                if existing and existing.id != customer.id:
                    raise ConflictError("Customer with this phone number already exists")
            customer.update_phone(phone)

        if changes.get("name") is not None:
            customer.update_name(changes["name"])
        if "whatsapp_id" in changes:
            customer.update_whatsapp_id(changes["whatsapp_id"])
        if "avatar" in changes:
            customer.update_avatar(changes["avatar"])
        if "preferences" in changes:
            customer.update_preferences(changes["preferences"])
        if changes.get("metadata") is not None:
            customer.update_metadata(changes["metadata"])
        if changes.get("is_active") is True:
            customer.reactivate()
        elif changes.get("is_active") is False:
            customer.deactivate()

        saved = self._repository.update(customer)
        logger.info(f"Customer updated: {saved.id}")
        return CustomerResponse.from_entity(saved)
