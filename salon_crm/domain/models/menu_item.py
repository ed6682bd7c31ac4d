"""
Menu Item Model
===============

Bookable entry on the salon menu: a service, package, membership or offer.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Union

from salon_crm.domain.errors import BusinessRuleViolationError, ValidationError
from salon_crm.domain.models.base import Entity, clean_optional, new_id, validate_text
from salon_crm.domain.value_objects import MenuCategory, Price, ServiceDuration
from salon_crm.domain.value_objects.price import Number
from salon_crm.utils.datetime_utils import ensure_aware, now, to_iso

MAX_ADVANCE_BOOKING_DAYS = 365


def normalize_tag(tag: str) -> str:
    return tag.strip().lower() if isinstance(tag, str) else ""


def _normalize_tags(tags: Optional[List[str]]) -> List[str]:
    result: List[str] = []
    for tag in tags or []:
        normalized = normalize_tag(tag)
        if normalized and normalized not in result:
            result.append(normalized)
    return result


def _clean_list(values: Optional[List[str]]) -> List[str]:
    return [value.strip() for value in values or [] if isinstance(value, str) and value.strip()]


def _validate_advance_booking_days(days: Optional[int]) -> Optional[int]:
    if days is None:
        return None
    if isinstance(days, bool) or not isinstance(days, int) \
            or not 1 <= days <= MAX_ADVANCE_BOOKING_DAYS:
        raise ValidationError(
            f"Advance booking days must be between 1 and {MAX_ADVANCE_BOOKING_DAYS}",
            "advanceBookingDays",
        )
    return days


def _validate_seasonal_window(
    valid_from: Optional[datetime], valid_to: Optional[datetime]
) -> None:
    if valid_from is not None and valid_to is not None and valid_from >= valid_to:
        raise ValidationError(
            "Valid from date must be before valid to date", "seasonalValidity"
        )


def _validate_max_bookings(max_bookings: Optional[int]) -> Optional[int]:
    if max_bookings is None:
        return None
    if isinstance(max_bookings, bool) or not isinstance(max_bookings, int) or max_bookings < 1:
        raise ValidationError("Max bookings per day must be at least 1", "maxBookingsPerDay")
    return max_bookings


def _validate_display_order(order: int) -> int:
    if isinstance(order, bool) or not isinstance(order, int) or order < 0:
        raise ValidationError("Display order must be a non-negative number", "displayOrder")
    return order


@dataclass(eq=False)
class MenuItem(Entity):
    """
    Menu item domain model.

    ``is_package`` must match the category; package items list at least one
    included service. Tags are stored trimmed, lower-cased and unique.
    Every mutating method validates its input and stamps ``updated_at``.
    """
    id: str
    name: str
    description: str
    category: MenuCategory
    duration: ServiceDuration
    price: Price
    is_package: bool
    included_services: List[str] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)
    benefits: List[str] = field(default_factory=list)
    advance_booking_required: bool = False
    advance_booking_days: Optional[int] = None
    available_online: bool = True
    display_order: int = 0
    image_url: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    seasonal_item: bool = False
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    max_bookings_per_day: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __post_init__(self) -> None:
        self.name = validate_text(self.name, "name", "Menu item name", 3, 100)
        self.description = validate_text(
            self.description, "description", "Menu item description", 10, 1000
        )
        self.category = MenuCategory.parse(self.category)
        if not isinstance(self.duration, ServiceDuration):
            self.duration = ServiceDuration(self.duration)
        if not isinstance(self.price, Price):
            self.price = Price(self.price)
        self.display_order = _validate_display_order(self.display_order)

        self.included_services = _clean_list(self.included_services)
        self.requirements = _clean_list(self.requirements)
        self.benefits = _clean_list(self.benefits)
        self.tags = _normalize_tags(self.tags)
        self.image_url = clean_optional(self.image_url)
        self.metadata = dict(self.metadata or {})

        if self.advance_booking_required:
            self.advance_booking_days = _validate_advance_booking_days(self.advance_booking_days)
        else:
            self.advance_booking_days = None

        self.valid_from = ensure_aware(self.valid_from)
        self.valid_to = ensure_aware(self.valid_to)
        if self.seasonal_item:
            _validate_seasonal_window(self.valid_from, self.valid_to)
        self.max_bookings_per_day = _validate_max_bookings(self.max_bookings_per_day)

        if self.is_package != self.category.is_package():
            raise BusinessRuleViolationError("Package flag must match category type")
        if self.is_package and not self.included_services:
            raise BusinessRuleViolationError(
                "Package menu items must have at least one included service"
            )

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        category: Union[MenuCategory, str],
        duration: Union[ServiceDuration, int],
        price: Union[Price, Number],
        is_package: Optional[bool] = None,
        included_services: Optional[List[str]] = None,
        requirements: Optional[List[str]] = None,
        benefits: Optional[List[str]] = None,
        advance_booking_required: Optional[bool] = None,
        advance_booking_days: Optional[int] = None,
        available_online: bool = True,
        display_order: int = 0,
        image_url: Optional[str] = None,
        tags: Optional[List[str]] = None,
        seasonal_item: bool = False,
        valid_from: Optional[datetime] = None,
        valid_to: Optional[datetime] = None,
        max_bookings_per_day: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "MenuItem":
        """
        Create a new active menu item.

        ``is_package`` and ``advance_booking_required`` default to what the
        category implies when not given.
        """
        menu_category = MenuCategory.parse(category)
        return cls(
            id=new_id(),
            name=name,
            description=description,
            category=menu_category,
            duration=duration if isinstance(duration, ServiceDuration) else ServiceDuration(duration),
            price=price if isinstance(price, Price) else Price(price),
            is_package=menu_category.is_package() if is_package is None else is_package,
            included_services=included_services or [],
            requirements=requirements or [],
            benefits=benefits or [],
            advance_booking_required=(
                menu_category.requires_advance_booking()
                if advance_booking_required is None
                else advance_booking_required
            ),
            advance_booking_days=advance_booking_days,
            available_online=available_online,
            display_order=display_order,
            image_url=image_url,
            tags=tags or [],
            seasonal_item=seasonal_item,
            valid_from=valid_from,
            valid_to=valid_to,
            max_bookings_per_day=max_bookings_per_day,
            metadata=metadata or {},
        )

    # Mutations

    def update_name(self, name: str) -> None:
        self.name = validate_text(name, "name", "Menu item name", 3, 100)
        self.updated_at = now()

    def update_description(self, description: str) -> None:
        self.description = validate_text(
            description, "description", "Menu item description", 10, 1000
        )
        self.updated_at = now()

    def update_price(self, price: Union[Price, Number]) -> None:
        self.price = price if isinstance(price, Price) else Price(price)
        self.updated_at = now()

    def update_duration(self, duration: Union[ServiceDuration, int]) -> None:
        self.duration = duration if isinstance(duration, ServiceDuration) else ServiceDuration(duration)
        self.updated_at = now()

    def update_category(self, category: Union[MenuCategory, str]) -> None:
        """
        Move the item to another category.

        Recomputes ``is_package`` and ``advance_booking_required`` from the
        new category.

        Raises:
            BusinessRuleViolationError: If the new category is a package
                category and the item has no included services
        """
        new_category = MenuCategory.parse(category)
        if new_category.is_package() and not self.included_services:
            raise BusinessRuleViolationError(
                "Package menu items must have at least one included service"
            )
        self.category = new_category
        self.is_package = new_category.is_package()
        self.advance_booking_required = new_category.requires_advance_booking()
        if not self.advance_booking_required:
            self.advance_booking_days = None
        self.updated_at = now()

    def update_display_order(self, order: int) -> None:
        self.display_order = _validate_display_order(order)
        self.updated_at = now()

    def add_included_service(self, service: str) -> None:
        service = service.strip()
        if not service:
            raise ValidationError("Service cannot be empty", "includedServices")
        if service in self.included_services:
            raise ValidationError("Service already included", "includedServices")
        self.included_services.append(service)
        self.updated_at = now()

    def remove_included_service(self, service: str) -> None:
        if service not in self.included_services:
            raise ValidationError("Service not found in included services", "includedServices")
        if self.is_package and len(self.included_services) == 1:
            raise BusinessRuleViolationError(
                "Package menu items must have at least one included service"
            )
        self.included_services.remove(service)
        self.updated_at = now()

    def add_requirement(self, requirement: str) -> None:
        requirement = requirement.strip()
        if not requirement:
            raise ValidationError("Requirement cannot be empty", "requirements")
        if requirement in self.requirements:
            raise ValidationError("Requirement already exists", "requirements")
        self.requirements.append(requirement)
        self.updated_at = now()

    def remove_requirement(self, requirement: str) -> None:
        if requirement not in self.requirements:
            raise ValidationError("Requirement not found", "requirements")
        self.requirements.remove(requirement)
        self.updated_at = now()

    def add_benefit(self, benefit: str) -> None:
        benefit = benefit.strip()
        if not benefit:
            raise ValidationError("Benefit cannot be empty", "benefits")
        if benefit in self.benefits:
            raise ValidationError("Benefit already exists", "benefits")
        self.benefits.append(benefit)
        self.updated_at = now()

    def remove_benefit(self, benefit: str) -> None:
        if benefit not in self.benefits:
            raise ValidationError("Benefit not found", "benefits")
        self.benefits.remove(benefit)
        self.updated_at = now()

    def add_tag(self, tag: str) -> None:
        normalized = normalize_tag(tag)
        if not normalized:
            raise ValidationError("Tag cannot be empty", "tags")
        if normalized not in self.tags:
            self.tags.append(normalized)
            self.updated_at = now()

    def remove_tag(self, tag: str) -> None:
        normalized = normalize_tag(tag)
        if normalized in self.tags:
            self.tags.remove(normalized)
            self.updated_at = now()

    def update_advance_booking_requirement(self, required: bool, days: Optional[int] = None) -> None:
        self.advance_booking_days = _validate_advance_booking_days(days) if required else None
        self.advance_booking_required = required
        self.updated_at = now()

    def update_seasonal_validity(
        self, valid_from: Optional[datetime] = None, valid_to: Optional[datetime] = None
    ) -> None:
        """Set the validity window; an item with any bound is seasonal."""
        valid_from = ensure_aware(valid_from)
        valid_to = ensure_aware(valid_to)
        _validate_seasonal_window(valid_from, valid_to)
        self.valid_from = valid_from
        self.valid_to = valid_to
        self.seasonal_item = valid_from is not None or valid_to is not None
        self.updated_at = now()

    def set_online_availability(self, available: bool) -> None:
        self.available_online = available
        self.updated_at = now()

    def set_max_bookings_per_day(self, max_bookings: Optional[int]) -> None:
        self.max_bookings_per_day = _validate_max_bookings(max_bookings)
        self.updated_at = now()

    def update_image_url(self, image_url: Optional[str]) -> None:
        self.image_url = clean_optional(image_url)
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

    def is_available_on_date(self, date: datetime) -> bool:
        if not self.is_active:
            return False
        if self.seasonal_item:
            date = ensure_aware(date)
            if self.valid_from is not None and date < self.valid_from:
                return False
            if self.valid_to is not None and date > self.valid_to:
                return False
        return True

    def is_available_today(self) -> bool:
        return self.is_available_on_date(now())

    def can_book_online(self) -> bool:
        return self.is_active and self.available_online

    def minimum_advance_booking_date(self) -> Optional[datetime]:
        if not self.advance_booking_required or not self.advance_booking_days:
            return None
        return now() + timedelta(days=self.advance_booking_days)

    def calculate_discounted_price(self, discount_percent: Number) -> Price:
        return self.price.apply_discount(discount_percent)

    def estimated_end_time(self, start_time: datetime) -> datetime:
        return start_time + timedelta(minutes=self.duration.minutes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "category_display_name": self.category.display_name,
            "duration": self.duration.minutes,
            "duration_display": self.duration.display_time,
            "price": float(self.price.value),
            "price_display": self.price.to_currency(),
            "is_package": self.is_package,
            "included_services": list(self.included_services),
            "requirements": list(self.requirements),
            "benefits": list(self.benefits),
            "advance_booking_required": self.advance_booking_required,
            "advance_booking_days": self.advance_booking_days,
            "available_online": self.available_online,
            "can_book_online": self.can_book_online(),
            "display_order": self.display_order,
            "image_url": self.image_url,
            "tags": list(self.tags),
            "seasonal_item": self.seasonal_item,
            "valid_from": to_iso(self.valid_from),
            "valid_to": to_iso(self.valid_to),
            "is_available_today": self.is_available_today(),
            "max_bookings_per_day": self.max_bookings_per_day,
            "metadata": dict(self.metadata),
            "is_active": self.is_active,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }
