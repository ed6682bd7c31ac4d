"""
Customer Model
==============

Retail salon customer with a loyalty point balance and visit history.
This is a pure domain object with no infrastructure dependencies.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from salon_crm.domain.errors import ValidationError
from salon_crm.domain.models.base import Entity, clean_optional, new_id, validate_text
from salon_crm.domain.value_objects import Email, LoyaltyPoints, LoyaltyTier, Phone
from salon_crm.utils.datetime_utils import ensure_aware, now, to_iso

VIP_VISIT_THRESHOLD = 10
VIP_POINTS_THRESHOLD = 1000


@dataclass(eq=False)
class Customer(Entity):
    """
    Customer domain model.

    Every mutating method validates its input and stamps ``updated_at``.
    Loyalty tier, discount and VIP status are derived from the point
    balance and visit count, never stored independently.
    """
    id: str
    name: str
    email: Email
    phone: Phone
    loyalty_points: LoyaltyPoints = field(default_factory=LoyaltyPoints.zero)
    total_visits: int = 0
    last_visit: Optional[datetime] = None
    whatsapp_id: Optional[str] = None
    avatar: Optional[str] = None
    preferences: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __post_init__(self) -> None:
        self.name = validate_text(self.name, "name", "Customer name", 2, 100)
        if not isinstance(self.email, Email):
            self.email = Email(self.email)
        if not isinstance(self.phone, Phone):
            self.phone = Phone(self.phone)
        if not isinstance(self.loyalty_points, LoyaltyPoints):
            self.loyalty_points = LoyaltyPoints(self.loyalty_points)
        if isinstance(self.total_visits, bool) or not isinstance(self.total_visits, int) \
                or self.total_visits < 0:
            raise ValidationError("Total visits must be a non-negative integer", "totalVisits")
        self.whatsapp_id = clean_optional(self.whatsapp_id)
        self.avatar = clean_optional(self.avatar)
        self.preferences = clean_optional(self.preferences)
        self.metadata = dict(self.metadata or {})
        self.last_visit = ensure_aware(self.last_visit)

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        phone: str,
        whatsapp_id: Optional[str] = None,
        avatar: Optional[str] = None,
        preferences: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "Customer":
        """Create a new active customer with zero points and no visits."""
        return cls(
            id=new_id(),
            name=name,
            email=Email(email),
            phone=Phone(phone),
            whatsapp_id=whatsapp_id,
            avatar=avatar,
            preferences=preferences,
            metadata=metadata or {},
        )

    # Mutations

    def update_name(self, name: str) -> None:
        self.name = validate_text(name, "name", "Customer name", 2, 100)
        self.updated_at = now()

    def update_email(self, email: Email) -> None:
        self.email = email if isinstance(email, Email) else Email(email)
        self.updated_at = now()

    def update_phone(self, phone: Phone) -> None:
        self.phone = phone if isinstance(phone, Phone) else Phone(phone)
        self.updated_at = now()

    def update_whatsapp_id(self, whatsapp_id: Optional[str]) -> None:
        self.whatsapp_id = clean_optional(whatsapp_id)
        self.updated_at = now()

    def update_avatar(self, avatar: Optional[str]) -> None:
        self.avatar = clean_optional(avatar)
        self.updated_at = now()

    def update_preferences(self, preferences: Optional[str]) -> None:
        self.preferences = clean_optional(preferences)
        self.updated_at = now()

    def update_metadata(self, metadata: Dict[str, Any]) -> None:
        """Merge keys into the existing metadata."""
        self.metadata = {**self.metadata, **(metadata or {})}
        self.updated_at = now()

    def add_loyalty_points(self, points: int) -> None:
        self.loyalty_points = self.loyalty_points.add(points)
        self.updated_at = now()

    def redeem_loyalty_points(self, points: int) -> None:
        """
        Debit points from the balance.

        Raises:
            BusinessRuleViolationError: If points exceed the current balance
        """
        self.loyalty_points = self.loyalty_points.subtract(points)
        self.updated_at = now()

    def record_visit(self) -> None:
        """Increment the visit count and stamp the last visit."""
        self.total_visits += 1
        self.last_visit = now()
        self.updated_at = self.last_visit

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = now()

    def reactivate(self) -> None:
        self.is_active = True
        self.updated_at = now()

    # Queries

    @property
    def loyalty_tier(self) -> LoyaltyTier:
        return self.loyalty_points.tier

    @property
    def discount_percentage(self) -> int:
        return self.loyalty_points.discount_percentage

    def is_vip(self) -> bool:
        return (
            self.total_visits >= VIP_VISIT_THRESHOLD
            or self.loyalty_points.value >= VIP_POINTS_THRESHOLD
        )

    def days_since_last_visit(self) -> Optional[int]:
        if self.last_visit is None:
            return None
        elapsed = abs((now() - self.last_visit).total_seconds())
        return math.ceil(elapsed / 86400)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email.value,
            "phone": self.phone.value,
            "whatsapp_id": self.whatsapp_id,
            "avatar": self.avatar,
            "loyalty_points": self.loyalty_points.value,
            "loyalty_tier": self.loyalty_tier.value,
            "discount_percentage": self.discount_percentage,
            "total_visits": self.total_visits,
            "last_visit": to_iso(self.last_visit),
            "days_since_last_visit": self.days_since_last_visit(),
            "preferences": self.preferences,
            "metadata": dict(self.metadata),
            "is_vip": self.is_vip(),
            "is_active": self.is_active,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }
