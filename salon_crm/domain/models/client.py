"""
Client Model
============

B2B account (corporate client, salon chain, hotel spa, ...) with contacts,
credit terms and an optional service contract.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from salon_crm.domain.errors import BusinessRuleViolationError, ValidationError
from salon_crm.domain.models.base import Entity, clean_optional, new_id, validate_text
from salon_crm.domain.value_objects import BusinessType, ContactPerson, CreditTerms
from salon_crm.domain.value_objects.price import Number
from salon_crm.utils.datetime_utils import ensure_aware, now, to_iso

MAX_SECONDARY_CONTACTS = 5


def _validate_contract_dates(
    start: Optional[datetime],
    end: Optional[datetime],
    allow_past_end: bool,
) -> None:
    if start is not None and end is not None and start >= end:
        raise ValidationError("Contract start date must be before end date", "contractDates")
    if not allow_past_end and end is not None and end < now():
        raise ValidationError("Contract end date cannot be in the past", "contractEndDate")


@dataclass(eq=False)
class Client(Entity):
    """
    Client domain model.

    Exactly one contact is primary; every contact email is unique within the
    client. Every mutating method validates its input and stamps
    ``updated_at``.

    The constructor accepts stored clients whose contract has already
    expired; ``create`` and ``extend_contract`` reject end dates in the past.
    """
    id: str
    company_name: str
    business_type: BusinessType
    primary_contact: ContactPerson
    billing_address: str
    credit_terms: CreditTerms
    secondary_contacts: List[ContactPerson] = field(default_factory=list)
    registration_number: Optional[str] = None
    tax_id: Optional[str] = None
    website: Optional[str] = None
    shipping_address: Optional[str] = None
    contract_start_date: Optional[datetime] = None
    contract_end_date: Optional[datetime] = None
    notes: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __post_init__(self) -> None:
        self.company_name = validate_text(
            self.company_name, "companyName", "Company name", 2, 200
        )
        self.business_type = BusinessType.parse(self.business_type)
        self.billing_address = validate_text(
            self.billing_address, "billingAddress", "Billing address", 10, 500
        )
        if not isinstance(self.credit_terms, CreditTerms):
            raise ValidationError("Credit terms data is required", "creditTerms")

        self.secondary_contacts = list(self.secondary_contacts or [])
        if len(self.secondary_contacts) > MAX_SECONDARY_CONTACTS:
            raise BusinessRuleViolationError(
                f"Cannot have more than {MAX_SECONDARY_CONTACTS} secondary contacts"
            )
        if any(contact.is_primary for contact in self.secondary_contacts):
            raise BusinessRuleViolationError("Secondary contact cannot be marked as primary")
        self._validate_primary_contact(self.primary_contact, self.secondary_contacts)
        secondary_emails = [contact.email for contact in self.secondary_contacts]
        if len(set(secondary_emails)) != len(secondary_emails):
            raise BusinessRuleViolationError("Contact email already exists")

        self.registration_number = clean_optional(self.registration_number)
        self.tax_id = clean_optional(self.tax_id)
        self.website = clean_optional(self.website)
        self.shipping_address = clean_optional(self.shipping_address)
        self.notes = clean_optional(self.notes)
        self.metadata = dict(self.metadata or {})

        self.contract_start_date = ensure_aware(self.contract_start_date)
        self.contract_end_date = ensure_aware(self.contract_end_date)
        _validate_contract_dates(
            self.contract_start_date, self.contract_end_date, allow_past_end=True
        )

    @staticmethod
    def _validate_primary_contact(
        primary_contact: ContactPerson, secondary_contacts: List[ContactPerson]
    ) -> None:
        if not isinstance(primary_contact, ContactPerson):
            raise ValidationError("Primary contact is required", "primaryContact")
        if not primary_contact.is_primary:
            raise ValidationError("Primary contact must be marked as primary", "primaryContact")
        if primary_contact.email in [contact.email for contact in secondary_contacts]:
            raise BusinessRuleViolationError(
                "Primary contact email cannot match secondary contact email"
            )

    @classmethod
    def create(
        cls,
        company_name: str,
        business_type: Union[BusinessType, str],
        primary_contact: ContactPerson,
        billing_address: str,
        credit_terms: CreditTerms,
        secondary_contacts: Optional[List[ContactPerson]] = None,
        registration_number: Optional[str] = None,
        tax_id: Optional[str] = None,
        website: Optional[str] = None,
        shipping_address: Optional[str] = None,
        contract_start_date: Optional[datetime] = None,
        contract_end_date: Optional[datetime] = None,
        notes: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "Client":
        """Create a new active client. The contract may not already be over."""
        _validate_contract_dates(
            ensure_aware(contract_start_date),
            ensure_aware(contract_end_date),
            allow_past_end=False,
        )
        return cls(
            id=new_id(),
            company_name=company_name,
            business_type=business_type,
            primary_contact=primary_contact,
            billing_address=billing_address,
            credit_terms=credit_terms,
            secondary_contacts=secondary_contacts or [],
            registration_number=registration_number,
            tax_id=tax_id,
            website=website,
            shipping_address=shipping_address,
            contract_start_date=contract_start_date,
            contract_end_date=contract_end_date,
            notes=notes,
            metadata=metadata or {},
        )

    # Mutations

    def update_company_name(self, name: str) -> None:
        self.company_name = validate_text(name, "companyName", "Company name", 2, 200)
        self.updated_at = now()

    def update_business_type(self, business_type: Union[BusinessType, str]) -> None:
        self.business_type = BusinessType.parse(business_type)
        self.updated_at = now()

    def update_primary_contact(self, contact: ContactPerson) -> None:
        self._validate_primary_contact(contact, self.secondary_contacts)
        self.primary_contact = contact
        self.updated_at = now()

    def add_secondary_contact(self, contact: ContactPerson) -> None:
        """
        Add a secondary contact.

        Raises:
            BusinessRuleViolationError: If the client already has 5 secondary
                contacts, the contact is marked primary, or its email is
                already used by another contact
        """
        if len(self.secondary_contacts) >= MAX_SECONDARY_CONTACTS:
            raise BusinessRuleViolationError(
                f"Cannot have more than {MAX_SECONDARY_CONTACTS} secondary contacts"
            )
        if contact.is_primary:
            raise BusinessRuleViolationError("Secondary contact cannot be marked as primary")
        if contact.email in [existing.email for existing in self.all_contacts]:
            raise BusinessRuleViolationError("Contact email already exists")

        self.secondary_contacts.append(contact)
        self.updated_at = now()

    def _secondary_index(self, email: str) -> int:
        for index, contact in enumerate(self.secondary_contacts):
            if contact.email.value == email.strip().lower():
                return index
        raise ValidationError("Secondary contact not found", "secondaryContacts")

    def remove_secondary_contact(self, email: str) -> None:
        del self.secondary_contacts[self._secondary_index(email)]
        self.updated_at = now()

    def update_secondary_contact(self, email: str, contact: ContactPerson) -> None:
        index = self._secondary_index(email)
        if contact.is_primary:
            raise BusinessRuleViolationError("Secondary contact cannot be marked as primary")
        others = [c.email for i, c in enumerate(self.secondary_contacts) if i != index]
        if contact.email == self.primary_contact.email or contact.email in others:
            raise BusinessRuleViolationError("Contact email already exists")
        self.secondary_contacts[index] = contact
        self.updated_at = now()

    def update_credit_terms(self, credit_terms: CreditTerms) -> None:
        self.credit_terms = credit_terms
        self.updated_at = now()

    def add_charge(self, amount: Number) -> None:
        """
        Charge the account against its credit terms.

        Raises:
            BusinessRuleViolationError: If the account is inactive, the credit
                terms are suspended, or the charge exceeds the credit limit
        """
        if not self.is_active:
            raise BusinessRuleViolationError("Cannot charge an inactive client account")
        self.credit_terms = self.credit_terms.add_charge(amount)
        self.updated_at = now()

    def process_payment(self, amount: Number) -> None:
        self.credit_terms = self.credit_terms.process_payment(amount)
        self.updated_at = now()

    def extend_contract(self, new_end_date: datetime) -> None:
        new_end_date = ensure_aware(new_end_date)
        _validate_contract_dates(self.contract_start_date, new_end_date, allow_past_end=False)
        self.contract_end_date = new_end_date
        self.updated_at = now()

    def update_billing_address(self, address: str) -> None:
        self.billing_address = validate_text(
            address, "billingAddress", "Billing address", 10, 500
        )
        self.updated_at = now()

    def update_shipping_address(self, address: Optional[str]) -> None:
        self.shipping_address = clean_optional(address)
        self.updated_at = now()

    def update_notes(self, notes: Optional[str]) -> None:
        self.notes = clean_optional(notes)
        self.updated_at = now()

    def update_metadata(self, metadata: Dict[str, Any]) -> None:
        self.metadata = {**self.metadata, **(metadata or {})}
        self.updated_at = now()

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = now()

    def reactivate(self) -> None:
        self.is_active = True
        self.updated_at = now()

    # Queries

    @property
    def all_contacts(self) -> List[ContactPerson]:
        return [self.primary_contact, *self.secondary_contacts]

    def get_contact_by_email(self, email: str) -> Optional[ContactPerson]:
        normalized = email.strip().lower()
        for contact in self.all_contacts:
            if contact.email.value == normalized:
                return contact
        return None

    def has_active_contract(self) -> bool:
        if self.contract_start_date is None or self.contract_end_date is None:
            return False
        return self.contract_start_date <= now() <= self.contract_end_date

    def is_contract_expiring(self, days_ahead: int = 30) -> bool:
        """True iff the contract ends within ``[now, now + days_ahead]``."""
        if self.contract_end_date is None:
            return False
        current = now()
        return current <= self.contract_end_date <= current + timedelta(days=days_ahead)

    def days_until_contract_expiry(self) -> Optional[int]:
        if self.contract_end_date is None:
            return None
        return (self.contract_end_date - now()).days

    def can_process_charge(self, amount: Number) -> bool:
        return self.is_active and self.credit_terms.can_process_charge(amount)

    @property
    def available_credit(self) -> Decimal:
        return self.credit_terms.available_credit

    @property
    def current_balance(self) -> Decimal:
        return self.credit_terms.current_balance

    @property
    def discount_percent(self) -> Decimal:
        return self.credit_terms.discount_percent

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "company_name": self.company_name,
            "business_type": self.business_type.value,
            "business_type_display_name": self.business_type.display_name,
            "registration_number": self.registration_number,
            "tax_id": self.tax_id,
            "website": self.website,
            "primary_contact": self.primary_contact.to_dict(),
            "secondary_contacts": [contact.to_dict() for contact in self.secondary_contacts],
            "billing_address": self.billing_address,
            "shipping_address": self.shipping_address,
            "credit_terms": self.credit_terms.to_dict(),
            "contract_start_date": to_iso(self.contract_start_date),
            "contract_end_date": to_iso(self.contract_end_date),
            "notes": self.notes,
            "metadata": dict(self.metadata),
            "is_active": self.is_active,
            "has_active_contract": self.has_active_contract(),
            "is_contract_expiring": self.is_contract_expiring(),
            "available_credit": float(self.available_credit),
            "current_balance": float(self.current_balance),
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }
