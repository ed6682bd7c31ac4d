"""
Create Client Use Case
======================

Registers a B2B client account.
"""
import logging

from salon_crm.application.dto.client_dto import (
    ClientCreateRequest,
    ClientResponse,
    ContactPersonRequest,
)
from salon_crm.domain.errors import ConflictError
from salon_crm.domain.models.client import Client
from salon_crm.domain.repositories.client_repository import ClientRepository
from salon_crm.domain.value_objects import ContactPerson, CreditTerms

logger = logging.getLogger(__name__)


def _contact(data: ContactPersonRequest, is_primary: bool) -> ContactPerson:
    return ContactPerson.create(
        name=data.name,
        position=data.position,
        email=data.email,
        phone=data.phone,
        is_primary=is_primary,
    )


class CreateClientUseCase:
    """
    Use case for registering a client.

    The account starts with a zero balance on the requested credit terms.
    """

    def __init__(self, client_repository: ClientRepository):
        """
        Initialize use case with repository.

        Args:
            client_repository: Repository for client persistence
        """
        self._repository = client_repository

    def execute(self, request: ClientCreateRequest) -> ClientResponse:
        """
        Execute the create client use case.

        Args:
            request: Client registration data

        Returns:
            The created client

        Raises:
            ValidationError: If a field fails validation or the contract dates are invalid
            BusinessRuleViolationError: If the contacts break the contact rules
            ConflictError: If the company name, registration number, tax id or
                primary contact email is already registered
        """
        primary_contact = _contact(request.primary_contact, is_primary=True)
        secondary_contacts = [_contact(c, is_primary=False) for c in request.secondary_contacts]
        credit_terms = CreditTerms(
            payment_terms=request.credit_terms.payment_terms,
            credit_limit=request.credit_terms.credit_limit,
            discount_percent=request.credit_terms.discount_percent,
            custom_terms_days=request.credit_terms.custom_terms_days,
        )

        client = Client.create(
            company_name=request.company_name,
            business_type=request.business_type,
            primary_contact=primary_contact,
            billing_address=request.billing_address,
            credit_terms=credit_terms,
            secondary_contacts=secondary_contacts,
            registration_number=request.registration_number,
            tax_id=request.tax_id,
            website=request.website,
            shipping_address=request.shipping_address,
            contract_start_date=request.contract_start_date,
            contract_end_date=request.contract_end_date,
            notes=request.notes,
            metadata=request.metadata,
        )

        self._check_duplicates(client)
        saved = self._repository.create(client)
        logger.info(f"Client created: {saved.id} ({saved.company_name})")
        return ClientResponse.from_entity(saved)

    def _check_duplicates(self, client: Client) -> None:
        if self._repository.find_by_company_name(client.company_name):
            raise ConflictError(f"Client with company name '{client.company_name}' already exists")
        if client.registration_number and self._repository.find_by_registration_number(
            client.registration_number
        ):
            raise ConflictError("Client with this registration number already exists")
        if client.tax_id and self._repository.find_by_tax_id(client.tax_id):
            raise ConflictError("Client with this tax ID already exists")
        if self._repository.find_by_contact_email(client.primary_contact.email.value):
            raise ConflictError("Primary contact email is already used by another client")
