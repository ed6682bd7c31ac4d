"""
Pagination
==========

Page requests and page results shared by every repository.

Pages are 1-indexed. The page size defaults to 10 and is capped at 100;
``pages`` is ``ceil(total / limit)`` (0 for an empty result).
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from salon_crm.domain.errors import ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

T = TypeVar("T")


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value) -> "SortOrder":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValidationError("Sort order must be 'asc' or 'desc'", "sortOrder")


@dataclass
class PageRequest:
    """
    Requested page, page size and sort.

    ``sort_by`` / ``sort_order`` left as None fall back to the repository
    default for the entity.
    """
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None

    def __post_init__(self) -> None:
        if self.page is None:
            self.page = DEFAULT_PAGE
        if self.limit is None:
            self.limit = DEFAULT_LIMIT
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            raise ValidationError("Page must be a positive integer", "page")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise ValidationError("Limit must be a positive integer", "limit")
        self.limit = min(self.limit, MAX_LIMIT)
        if self.sort_order is not None:
            self.sort_order = SortOrder.parse(self.sort_order)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def resolve_sort(
    request: PageRequest,
    allowed_fields: Dict[str, str],
    default_field: str,
    default_order: SortOrder,
) -> List[tuple]:
    """
    Translate a request's sort into ``(field, direction)`` pairs.

    Args:
        request: Page request carrying the caller's sort choice
        allowed_fields: Whitelist mapping public sort names to stored fields
        default_field: Public sort name used when the request has none
        default_order: Direction used when the request has none

    Returns:
        Sort specification ending with the ``id`` tie-breaker, so paging
        through every page yields each record exactly once

    Raises:
        ValidationError: If the requested sort field is not whitelisted
    """
    sort_by = request.sort_by or default_field
    if sort_by not in allowed_fields:
        raise ValidationError(
            f"Cannot sort by '{sort_by}'. Allowed fields: {', '.join(sorted(allowed_fields))}",
            "sortBy",
        )
    order = request.sort_order or default_order
    direction = 1 if order is SortOrder.ASC else -1
    stored_field = allowed_fields[sort_by]
    spec = [(stored_field, direction)]
    if stored_field != "id":
        spec.append(("id", direction))
    return spec


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    total: int = 0

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, func: Callable[[T], Any]) -> "Page":
        return Page(items=[func(item) for item in self.items], page=self.page,
                    limit=self.limit, total=self.total)

    @classmethod
    def of(cls, items: Iterable[T], request: PageRequest, total: int) -> "Page[T]":
        return cls(items=list(items), page=request.page, limit=request.limit, total=total)

    def pagination(self) -> Dict[str, int]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "pages": self.pages,
        }
