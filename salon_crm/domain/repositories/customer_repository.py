"""
Customer Repository Interface
=============================

Abstract interface for customer data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from salon_crm.domain.models.customer import Customer
from salon_crm.domain.repositories.pagination import Page, PageRequest
from salon_crm.domain.value_objects import Email, LoyaltyTier, Phone


@dataclass
class CustomerSearchOptions:
    """Filters for customer search. Unset filters are ignored."""
    search: Optional[str] = None
    is_active: Optional[bool] = None
    loyalty_tier: Optional[LoyaltyTier] = None
    min_points: Optional[int] = None
    max_points: Optional[int] = None
    last_visit_after: Optional[datetime] = None
    last_visit_before: Optional[datetime] = None


class CustomerRepository(ABC):
    """
    Abstract repository for customer persistence operations.

    Email and phone are unique across customers; a write that would break
    either raises ConflictError.
    """

    @abstractmethod
    def create(self, customer: Customer) -> Customer:
        """
        Persist a new customer.

        Args:
            customer: Customer entity to create

        Returns:
            Created customer entity

        Raises:
            ConflictError: If the email or phone is already registered
        """
        pass

    @abstractmethod
    def update(self, customer: Customer) -> Customer:
        """
        Update an existing customer.

        Args:
            customer: Customer entity with updated data

        Returns:
            Updated customer entity

        Raises:
            NotFoundError: If no customer has this id
            ConflictError: If the new email or phone belongs to another customer
        """
        pass

    @abstractmethod
    def delete(self, customer_id: str) -> None:
        """
        Delete a customer.

        Args:
            customer_id: Customer identifier

        Raises:
            NotFoundError: If no customer has this id
        """
        pass

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find a customer by id.

        Args:
            customer_id: Customer identifier

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    def exists(self, customer_id: str) -> bool:
        """Check if a customer exists."""
        pass

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page[Customer]:
        """
        List customers, newest first unless another sort is requested.

        Args:
            page_request: Page, page size and sort

        Returns:
            Page of customers (empty page when there are none)
        """
        pass

    @abstractmethod
    def find_by_email(self, email: Email) -> Optional[Customer]:
        """Find the customer registered with this email."""
        pass

    @abstractmethod
    def find_by_phone(self, phone: Phone) -> Optional[Customer]:
        """Find the customer registered with this phone number (digits compared)."""
        pass

    @abstractmethod
    def find_by_whatsapp_id(self, whatsapp_id: str) -> Optional[Customer]:
        """Find the customer linked to this WhatsApp id."""
        pass

    @abstractmethod
    def search(self, options: CustomerSearchOptions, page_request: PageRequest) -> Page[Customer]:
        """
        Search customers.

        Args:
            options: Text search (name, email, phone) and filters
            page_request: Page, page size and sort

        Returns:
            Page of matching customers
        """
        pass

    @abstractmethod
    def find_vip_customers(self, page_request: PageRequest) -> Page[Customer]:
        """Customers with at least 10 visits or at least 1000 points."""
        pass

    @abstractmethod
    def find_by_loyalty_tier(self, tier: LoyaltyTier, page_request: PageRequest) -> Page[Customer]:
        pass

    @abstractmethod
    def count_active(self) -> int:
        pass

    @abstractmethod
    def count_by_tier(self) -> Dict[str, int]:
        """Number of customers per loyalty tier (every tier present)."""
        pass

    @abstractmethod
    def average_loyalty_points(self) -> float:
        pass
