"""
Common DTOs
===========

Pagination and listing models shared by every resource.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from salon_crm.domain.repositories.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    Page,
    PageRequest,
)


class PageQuery(BaseModel):
    """Paging and sorting parameters of a list request."""
    page: int = Field(DEFAULT_PAGE, description="1-indexed page number")
    limit: int = Field(DEFAULT_LIMIT, description="Page size (capped at 100)")
    sort_by: Optional[str] = Field(None, description="Field to sort by")
    sort_order: Optional[str] = Field(None, description="'asc' or 'desc'")

    def to_page_request(self) -> PageRequest:
        return PageRequest(
            page=self.page,
            limit=self.limit,
            sort_by=self.sort_by,
            sort_order=self.sort_order,
        )


class PaginationResponse(BaseModel):
    """DTO for pagination details of a list response."""
    page: int
    limit: int
    total: int
    pages: int
    has_next: bool
    has_previous: bool

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "page": 1,
                "limit": 10,
                "total": 42,
                "pages": 5,
                "has_next": True,
                "has_previous": False,
            }
        }
    )

    @classmethod
    def from_page(cls, page: Page) -> "PaginationResponse":
        return cls(
            **page.pagination(),
            has_next=page.has_next,
            has_previous=page.has_previous,
        )


class ChoiceResponse(BaseModel):
    """DTO for one value of a fixed choice list (category, type, ...)."""
    value: str
    display_name: str
    description: Optional[str] = None
