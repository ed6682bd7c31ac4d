"""
MongoDB Customer Repository
===========================

Concrete implementation of CustomerRepository using MongoDB.
"""
from typing import Any, Dict, Optional

from pymongo import ASCENDING

from salon_crm.domain.constants.customer_fields import CustomerFields
from salon_crm.domain.models.customer import Customer
from salon_crm.domain.repositories.customer_repository import (
    CustomerRepository,
    CustomerSearchOptions,
)
from salon_crm.domain.repositories.pagination import Page, PageRequest, SortOrder
from salon_crm.domain.value_objects import Email, LoyaltyPoints, LoyaltyTier, Phone
from salon_crm.infrastructure.db.mongo_base_repository import (
    MongoRepository,
    combine,
    field_condition,
    range_filter,
    sortable,
    text_search,
)
from salon_crm.utils.datetime_utils import from_storage, to_storage

SORT_FIELDS = sortable(
    CustomerFields.NAME,
    CustomerFields.EMAIL,
    CustomerFields.LOYALTY_POINTS,
    CustomerFields.TOTAL_VISITS,
    CustomerFields.LAST_VISIT,
    CustomerFields.CREATED_AT,
    CustomerFields.UPDATED_AT,
)

VIP_QUERY = {
    "$or": [
        {CustomerFields.TOTAL_VISITS: {"$gte": 10}},
        {CustomerFields.LOYALTY_POINTS: {"$gte": 1000}},
    ]
}


class MongoCustomerRepository(MongoRepository[Customer], CustomerRepository):
    """
    MongoDB implementation of CustomerRepository.

    Email and phone digits carry unique indexes. The loyalty tier is stored
    next to the point balance so it can be filtered on.
    """

    RESOURCE_NAME = "Customer"

    def _ensure_indexes(self) -> None:
        super()._ensure_indexes()
        self._collection.create_index(CustomerFields.EMAIL, unique=True)
        self._collection.create_index(CustomerFields.PHONE_CLEAN, unique=True)
        self._collection.create_index(CustomerFields.WHATSAPP_ID)
        self._collection.create_index([(CustomerFields.LOYALTY_TIER, ASCENDING)])

    def _to_entity(self, doc: dict) -> Customer:
        """Convert MongoDB document to Customer entity."""
        return Customer(
            id=doc[CustomerFields.ID],
            name=doc[CustomerFields.NAME],
            email=Email(doc[CustomerFields.EMAIL]),
            phone=Phone(doc[CustomerFields.PHONE]),
            loyalty_points=LoyaltyPoints(int(doc.get(CustomerFields.LOYALTY_POINTS, 0))),
            total_visits=int(doc.get(CustomerFields.TOTAL_VISITS, 0)),
            last_visit=from_storage(doc.get(CustomerFields.LAST_VISIT)),
            whatsapp_id=doc.get(CustomerFields.WHATSAPP_ID),
            avatar=doc.get(CustomerFields.AVATAR),
            preferences=doc.get(CustomerFields.PREFERENCES),
            metadata=doc.get(CustomerFields.METADATA) or {},
            is_active=doc.get(CustomerFields.IS_ACTIVE, True),
            created_at=from_storage(doc[CustomerFields.CREATED_AT]),
            updated_at=from_storage(doc[CustomerFields.UPDATED_AT]),
        )

    def _to_document(self, customer: Customer) -> dict:
        """Convert Customer entity to MongoDB document."""
        return {
            CustomerFields.ID: customer.id,
            CustomerFields.NAME: customer.name,
            CustomerFields.EMAIL: customer.email.value,
            CustomerFields.PHONE: customer.phone.value,
            CustomerFields.PHONE_CLEAN: customer.phone.clean_value,
            CustomerFields.WHATSAPP_ID: customer.whatsapp_id,
            CustomerFields.AVATAR: customer.avatar,
            CustomerFields.LOYALTY_POINTS: customer.loyalty_points.value,
            CustomerFields.LOYALTY_TIER: customer.loyalty_tier.value,
            CustomerFields.TOTAL_VISITS: customer.total_visits,
            CustomerFields.LAST_VISIT: to_storage(customer.last_visit),
            CustomerFields.PREFERENCES: customer.preferences,
            CustomerFields.METADATA: customer.metadata,
            CustomerFields.IS_ACTIVE: customer.is_active,
            CustomerFields.CREATED_AT: to_storage(customer.created_at),
            CustomerFields.UPDATED_AT: to_storage(customer.updated_at),
        }

    def _page(self, query: Dict[str, Any], page_request: PageRequest) -> Page[Customer]:
        return self._find_page(
            query, page_request, SORT_FIELDS, CustomerFields.CREATED_AT, SortOrder.DESC
        )

    def create(self, customer: Customer) -> Customer:
        """Create a new customer."""
        return self._insert(customer)

    def update(self, customer: Customer) -> Customer:
        """Update an existing customer."""
        return self._replace(customer.id, customer)

    def delete(self, customer_id: str) -> None:
        """Delete a customer."""
        self._delete(customer_id)

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Find a customer by its ID."""
        return self._find_one({CustomerFields.ID: customer_id})

    def exists(self, customer_id: str) -> bool:
        return self._exists(customer_id)

    def find_all(self, page_request: PageRequest) -> Page[Customer]:
        return self._page({}, page_request)

    def find_by_email(self, email: Email) -> Optional[Customer]:
        return self._find_one({CustomerFields.EMAIL: email.value})

    def find_by_phone(self, phone: Phone) -> Optional[Customer]:
        return self._find_one({CustomerFields.PHONE_CLEAN: phone.clean_value})

    def find_by_whatsapp_id(self, whatsapp_id: str) -> Optional[Customer]:
        return self._find_one({CustomerFields.WHATSAPP_ID: whatsapp_id.strip()})

    def search(self, options: CustomerSearchOptions, page_request: PageRequest) -> Page[Customer]:
        """Search customers by text and filters."""
        query = combine(
            text_search(
                options.search,
                (CustomerFields.NAME, CustomerFields.EMAIL, CustomerFields.PHONE),
            ),
            {CustomerFields.IS_ACTIVE: options.is_active} if options.is_active is not None else None,
            {CustomerFields.LOYALTY_TIER: options.loyalty_tier.value} if options.loyalty_tier else None,
            field_condition(CustomerFields.LOYALTY_POINTS, range_filter(options.min_points, options.max_points)),
            field_condition(
                CustomerFields.LAST_VISIT,
                range_filter(
                    to_storage(options.last_visit_after), to_storage(options.last_visit_before)
                ),
            ),
        )
        return self._page(query, page_request)

    def find_vip_customers(self, page_request: PageRequest) -> Page[Customer]:
        return self._page(combine(VIP_QUERY, {CustomerFields.IS_ACTIVE: True}), page_request)

    def find_by_loyalty_tier(self, tier: LoyaltyTier, page_request: PageRequest) -> Page[Customer]:
        return self._page({CustomerFields.LOYALTY_TIER: tier.value}, page_request)

    def count_active(self) -> int:
        return self._collection.count_documents({CustomerFields.IS_ACTIVE: True})

    def count_by_tier(self) -> Dict[str, int]:
        counts = {tier.value: 0 for tier in LoyaltyTier}
        pipeline = [
            {"$group": {"_id": f"${CustomerFields.LOYALTY_TIER}", "count": {"$sum": 1}}},
        ]
        for row in self._collection.aggregate(pipeline):
            if row["_id"] in counts:
                counts[row["_id"]] = row["count"]
        return counts

    def average_loyalty_points(self) -> float:
        pipeline = [
            {"$group": {"_id": None, "average": {"$avg": f"${CustomerFields.LOYALTY_POINTS}"}}},
        ]
        rows = list(self._collection.aggregate(pipeline))
        if not rows or rows[0]["average"] is None:
            return 0.0
        return round(float(rows[0]["average"]), 2)
