"""
Loyalty Points Value Object
===========================

Customer point balance and the tier / discount derived from it.
"""
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from salon_crm.domain.errors import BusinessRuleViolationError, ValidationError
from salon_crm.domain.value_objects.choice import ChoiceEnum

MAX_POINTS = 999999


class LoyaltyTier(ChoiceEnum):
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"

    @classmethod
    def for_points(cls, points: int) -> "LoyaltyTier":
        if points >= 2000:
            return cls.PLATINUM
        if points >= 1000:
            return cls.GOLD
        if points >= 500:
            return cls.SILVER
        return cls.BRONZE

    @property
    def min_points(self) -> int:
        return _TIER_MIN_POINTS[self]

    @property
    def max_points(self) -> int:
        """Inclusive upper bound of the tier."""
        return _TIER_MAX_POINTS[self]

    @property
    def discount_percentage(self) -> int:
        return _TIER_DISCOUNTS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


_TIER_MIN_POINTS = {
    LoyaltyTier.BRONZE: 0,
    LoyaltyTier.SILVER: 500,
    LoyaltyTier.GOLD: 1000,
    LoyaltyTier.PLATINUM: 2000,
}

_TIER_MAX_POINTS = {
    LoyaltyTier.BRONZE: 499,
    LoyaltyTier.SILVER: 999,
    LoyaltyTier.GOLD: 1999,
    LoyaltyTier.PLATINUM: MAX_POINTS,
}

_TIER_DISCOUNTS = {
    LoyaltyTier.BRONZE: 0,
    LoyaltyTier.SILVER: 5,
    LoyaltyTier.GOLD: 10,
    LoyaltyTier.PLATINUM: 15,
}


@dataclass(frozen=True)
class LoyaltyPoints:
    """Integer point balance in [0, 999999]."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError("Loyalty points must be a whole number", "loyaltyPoints")
        if self.value < 0:
            raise ValidationError("Loyalty points cannot be negative", "loyaltyPoints")
        if self.value > MAX_POINTS:
            raise ValidationError(f"Loyalty points cannot exceed {MAX_POINTS}", "loyaltyPoints")

    @classmethod
    def create(cls, points: int) -> "LoyaltyPoints":
        return cls(points)

    @classmethod
    def zero(cls) -> "LoyaltyPoints":
        return cls(0)

    @classmethod
    def from_amount(cls, amount: Union[Decimal, int, float]) -> "LoyaltyPoints":
        """One point per whole currency unit spent."""
        if amount < 0:
            raise ValidationError("Amount cannot be negative", "amount")
        return cls(math.floor(amount))

    def add(self, points: int) -> "LoyaltyPoints":
        if points < 0:
            raise BusinessRuleViolationError("Cannot add negative loyalty points")
        return LoyaltyPoints(self.value + points)

    def subtract(self, points: int) -> "LoyaltyPoints":
        if points < 0:
            raise BusinessRuleViolationError("Cannot subtract negative loyalty points")
        if points > self.value:
            raise BusinessRuleViolationError(
                f"Insufficient loyalty points: requested {points}, available {self.value}"
            )
        return LoyaltyPoints(self.value - points)

    def can_redeem(self, points: int) -> bool:
        return 0 <= points <= self.value

    @property
    def tier(self) -> LoyaltyTier:
        return LoyaltyTier.for_points(self.value)

    @property
    def discount_percentage(self) -> int:
        return self.tier.discount_percentage

    def __int__(self) -> int:
        return self.value
