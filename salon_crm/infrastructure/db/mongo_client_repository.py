"""
MongoDB Client Repository
=========================

Concrete implementation of ClientRepository using MongoDB.

Contacts and credit terms are embedded in the client document. Every contact
email is also copied into a flat ``contact_emails`` array for lookups.
"""
from datetime import timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING

from salon_crm.domain.constants.client_fields import ClientFields
from salon_crm.domain.models.client import Client
from salon_crm.domain.repositories.client_repository import ClientFilters, ClientRepository
from salon_crm.domain.repositories.pagination import Page, PageRequest, SortOrder
from salon_crm.domain.value_objects import BusinessType, ContactPerson, CreditTerms
from salon_crm.infrastructure.db.mongo_base_repository import (
    MongoRepository,
    combine,
    from_money_field,
    sortable,
    text_search,
    to_money_field,
)
from salon_crm.utils.datetime_utils import from_storage, now, to_storage

SORT_FIELDS = sortable(
    ClientFields.COMPANY_NAME,
    ClientFields.BUSINESS_TYPE,
    ClientFields.CONTRACT_END_DATE,
    ClientFields.CREATED_AT,
    ClientFields.UPDATED_AT,
)

CURRENT_BALANCE_PATH = f"{ClientFields.CREDIT_TERMS}.{ClientFields.CURRENT_BALANCE}"


def _contact_to_document(contact: ContactPerson) -> Dict[str, Any]:
    return {
        ClientFields.CONTACT_NAME: contact.name,
        ClientFields.CONTACT_POSITION: contact.position,
        ClientFields.CONTACT_EMAIL: contact.email.value,
        ClientFields.CONTACT_PHONE: contact.phone.value,
        ClientFields.CONTACT_IS_PRIMARY: contact.is_primary,
    }


def _contact_from_document(doc: Dict[str, Any]) -> ContactPerson:
    return ContactPerson(
        name=doc[ClientFields.CONTACT_NAME],
        position=doc[ClientFields.CONTACT_POSITION],
        email=doc[ClientFields.CONTACT_EMAIL],
        phone=doc[ClientFields.CONTACT_PHONE],
        is_primary=doc.get(ClientFields.CONTACT_IS_PRIMARY, False),
    )


def _credit_terms_to_document(terms: CreditTerms) -> Dict[str, Any]:
    return {
        ClientFields.PAYMENT_TERMS: terms.payment_terms.value,
        ClientFields.CREDIT_LIMIT: to_money_field(terms.credit_limit),
        ClientFields.CURRENT_BALANCE: to_money_field(terms.current_balance),
        ClientFields.DISCOUNT_PERCENT: float(terms.discount_percent),
        ClientFields.CUSTOM_TERMS_DAYS: terms.custom_terms_days,
        ClientFields.TERMS_ACTIVE: terms.is_active,
    }


def _credit_terms_from_document(doc: Dict[str, Any]) -> CreditTerms:
    return CreditTerms(
        payment_terms=doc[ClientFields.PAYMENT_TERMS],
        credit_limit=from_money_field(doc.get(ClientFields.CREDIT_LIMIT, 0)),
        current_balance=from_money_field(doc.get(ClientFields.CURRENT_BALANCE, 0)),
        discount_percent=Decimal(str(doc.get(ClientFields.DISCOUNT_PERCENT, 0))),
        custom_terms_days=doc.get(ClientFields.CUSTOM_TERMS_DAYS),
        is_active=doc.get(ClientFields.TERMS_ACTIVE, True),
    )


class MongoClientRepository(MongoRepository[Client], ClientRepository):
    """MongoDB implementation of ClientRepository."""

    RESOURCE_NAME = "Client"

    def _ensure_indexes(self) -> None:
        super()._ensure_indexes()
        self._collection.create_index(ClientFields.COMPANY_NAME_NORMALIZED, unique=True)
        self._collection.create_index(ClientFields.CONTACT_EMAILS)
        self._collection.create_index(ClientFields.REGISTRATION_NUMBER)
        self._collection.create_index(ClientFields.TAX_ID)
        self._collection.create_index([(ClientFields.CONTRACT_END_DATE, ASCENDING)])

    def _to_entity(self, doc: dict) -> Client:
        """Convert MongoDB document to Client entity."""
        return Client(
            id=doc[ClientFields.ID],
            company_name=doc[ClientFields.COMPANY_NAME],
            business_type=BusinessType(doc[ClientFields.BUSINESS_TYPE]),
            primary_contact=_contact_from_document(doc[ClientFields.PRIMARY_CONTACT]),
            billing_address=doc[ClientFields.BILLING_ADDRESS],
            credit_terms=_credit_terms_from_document(doc[ClientFields.CREDIT_TERMS]),
            secondary_contacts=[
                _contact_from_document(contact)
                for contact in doc.get(ClientFields.SECONDARY_CONTACTS) or []
            ],
            registration_number=doc.get(ClientFields.REGISTRATION_NUMBER),
            tax_id=doc.get(ClientFields.TAX_ID),
            website=doc.get(ClientFields.WEBSITE),
            shipping_address=doc.get(ClientFields.SHIPPING_ADDRESS),
            contract_start_date=from_storage(doc.get(ClientFields.CONTRACT_START_DATE)),
            contract_end_date=from_storage(doc.get(ClientFields.CONTRACT_END_DATE)),
            notes=doc.get(ClientFields.NOTES),
            metadata=doc.get(ClientFields.METADATA) or {},
            is_active=doc.get(ClientFields.IS_ACTIVE, True),
            created_at=from_storage(doc[ClientFields.CREATED_AT]),
            updated_at=from_storage(doc[ClientFields.UPDATED_AT]),
        )

    def _to_document(self, client: Client) -> dict:
        """Convert Client entity to MongoDB document."""
        return {
            ClientFields.ID: client.id,
            ClientFields.COMPANY_NAME: client.company_name,
            ClientFields.COMPANY_NAME_NORMALIZED: client.company_name.lower(),
            ClientFields.BUSINESS_TYPE: client.business_type.value,
            ClientFields.REGISTRATION_NUMBER: client.registration_number,
            ClientFields.TAX_ID: client.tax_id,
            ClientFields.WEBSITE: client.website,
            ClientFields.PRIMARY_CONTACT: _contact_to_document(client.primary_contact),
            ClientFields.SECONDARY_CONTACTS: [
                _contact_to_document(contact) for contact in client.secondary_contacts
            ],
            ClientFields.CONTACT_EMAILS: [contact.email.value for contact in client.all_contacts],
            ClientFields.BILLING_ADDRESS: client.billing_address,
            ClientFields.SHIPPING_ADDRESS: client.shipping_address,
            ClientFields.CREDIT_TERMS: _credit_terms_to_document(client.credit_terms),
            ClientFields.CONTRACT_START_DATE: to_storage(client.contract_start_date),
            ClientFields.CONTRACT_END_DATE: to_storage(client.contract_end_date),
            ClientFields.NOTES: client.notes,
            ClientFields.METADATA: client.metadata,
            ClientFields.IS_ACTIVE: client.is_active,
            ClientFields.CREATED_AT: to_storage(client.created_at),
            ClientFields.UPDATED_AT: to_storage(client.updated_at),
        }

    def _page(self, query: Dict[str, Any], page_request: PageRequest) -> Page[Client]:
        return self._find_page(
            query, page_request, SORT_FIELDS, ClientFields.COMPANY_NAME, SortOrder.ASC
        )

    def create(self, client: Client) -> Client:
        """Create a new client."""
        return self._insert(client)

    def update(self, client: Client) -> Client:
        """Update an existing client."""
        return self._replace(client.id, client)

    def delete(self, client_id: str) -> None:
        self._delete(client_id)

    def find_by_id(self, client_id: str) -> Optional[Client]:
        """Find a client by its ID."""
        return self._find_one({ClientFields.ID: client_id})

    def exists(self, client_id: str) -> bool:
        return self._exists(client_id)

    def find_all(self, page_request: PageRequest) -> Page[Client]:
        return self._page({}, page_request)

    def find_by_company_name(self, company_name: str) -> Optional[Client]:
        return self._find_one({ClientFields.COMPANY_NAME_NORMALIZED: company_name.strip().lower()})

    def find_by_registration_number(self, registration_number: str) -> Optional[Client]:
        return self._find_one({ClientFields.REGISTRATION_NUMBER: registration_number.strip()})

    def find_by_tax_id(self, tax_id: str) -> Optional[Client]:
        return self._find_one({ClientFields.TAX_ID: tax_id.strip()})

    def find_by_contact_email(self, email: str) -> Optional[Client]:
        return self._find_one({ClientFields.CONTACT_EMAILS: email.strip().lower()})

    def _contract_condition(self, has_active_contract: Optional[bool]) -> Optional[Dict[str, Any]]:
        if has_active_contract is None:
            return None
        current = to_storage(now())
        active = {
            ClientFields.CONTRACT_START_DATE: {"$ne": None, "$lte": current},
            ClientFields.CONTRACT_END_DATE: {"$ne": None, "$gte": current},
        }
        if has_active_contract:
            return active
        return {"$nor": [active]}

    def _expiring_condition(self, days_ahead: Optional[int]) -> Optional[Dict[str, Any]]:
        if days_ahead is None:
            return None
        current = now()
        return {
            ClientFields.CONTRACT_END_DATE: {
                "$gte": to_storage(current),
                "$lte": to_storage(current + timedelta(days=days_ahead)),
            }
        }

    def find_by_filters(self, filters: ClientFilters, page_request: PageRequest) -> Page[Client]:
        """List clients matching business type, status, contract and text filters."""
        query = combine(
            {ClientFields.BUSINESS_TYPE: filters.business_type.value} if filters.business_type else None,
            {ClientFields.IS_ACTIVE: filters.is_active} if filters.is_active is not None else None,
            self._contract_condition(filters.has_active_contract),
            self._expiring_condition(filters.contract_expiring_within_days),
            text_search(
                filters.search,
                (
                    ClientFields.COMPANY_NAME,
                    f"{ClientFields.PRIMARY_CONTACT}.{ClientFields.CONTACT_NAME}",
                    f"{ClientFields.PRIMARY_CONTACT}.{ClientFields.CONTACT_EMAIL}",
                    ClientFields.REGISTRATION_NUMBER,
                    ClientFields.TAX_ID,
                ),
            ),
        )
        return self._page(query, page_request)

    def find_expiring_contracts(self, days_ahead: int = 30) -> List[Client]:
        query = combine(
            {ClientFields.IS_ACTIVE: True},
            self._expiring_condition(days_ahead),
        )
        return self._find_many(
            query,
            [(ClientFields.CONTRACT_END_DATE, ASCENDING), (ClientFields.ID, ASCENDING)],
        )

    def get_total_credit_outstanding(self) -> Decimal:
        pipeline = [
            {"$group": {"_id": None, "total": {"$sum": f"${CURRENT_BALANCE_PATH}"}}},
        ]
        rows = list(self._collection.aggregate(pipeline))
        if not rows or rows[0]["total"] is None:
            return Decimal("0.00")
        return from_money_field(rows[0]["total"])
