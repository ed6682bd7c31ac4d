"""
Client Repository Interface
===========================

Abstract interface for B2B client data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from salon_crm.domain.models.client import Client
from salon_crm.domain.repositories.pagination import Page, PageRequest
from salon_crm.domain.value_objects import BusinessType


@dataclass
class ClientFilters:
    """Filters for client listing. Unset filters are ignored."""
    business_type: Optional[BusinessType] = None
    is_active: Optional[bool] = None
    has_active_contract: Optional[bool] = None
    contract_expiring_within_days: Optional[int] = None
    search: Optional[str] = None


class ClientRepository(ABC):
    """
    Abstract repository for client persistence operations.

    Company names are unique (case-insensitive).
    """

    @abstractmethod
    def create(self, client: Client) -> Client:
        """
        Persist a new client.

        Args:
            client: Client entity to create

        Returns:
            Created client entity

        Raises:
            ConflictError: If the company name is already registered
        """
        pass

    @abstractmethod
    def update(self, client: Client) -> Client:
        """
        Update an existing client.

        Raises:
            NotFoundError: If no client has this id
        """
        pass

    @abstractmethod
    def delete(self, client_id: str) -> None:
        """
        Delete a client.

        Raises:
            NotFoundError: If no client has this id
        """
        pass

    @abstractmethod
    def find_by_id(self, client_id: str) -> Optional[Client]:
        pass

    @abstractmethod
    def exists(self, client_id: str) -> bool:
        pass

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page[Client]:
        """List clients, by company name unless another sort is requested."""
        pass

    @abstractmethod
    def find_by_company_name(self, company_name: str) -> Optional[Client]:
        """Case-insensitive company name lookup."""
        pass

    @abstractmethod
    def find_by_registration_number(self, registration_number: str) -> Optional[Client]:
        pass

    @abstractmethod
    def find_by_tax_id(self, tax_id: str) -> Optional[Client]:
        pass

    @abstractmethod
    def find_by_contact_email(self, email: str) -> Optional[Client]:
        """Find the client with a primary or secondary contact using this email."""
        pass

    @abstractmethod
    def find_by_filters(self, filters: ClientFilters, page_request: PageRequest) -> Page[Client]:
        """
        List clients matching the filters.

        Args:
            filters: Business type, status, contract and text filters
            page_request: Page, page size and sort

        Returns:
            Page of matching clients
        """
        pass

    @abstractmethod
    def find_expiring_contracts(self, days_ahead: int = 30) -> List[Client]:
        """Active clients whose contract ends within the next ``days_ahead`` days."""
        pass

    @abstractmethod
    def get_total_credit_outstanding(self) -> Decimal:
        """Sum of current balances over all clients."""
        pass
