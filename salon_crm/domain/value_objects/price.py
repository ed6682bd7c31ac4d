"""
Price Value Object
==================

Monetary amounts are ``Decimal`` values capped at 999,999.99 with at most
two fractional digits.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from salon_crm.domain.errors import ValidationError

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("999999.99")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number, field: str) -> Decimal:
    """Convert a number to Decimal without binary float artifacts."""
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number", field)
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise ValidationError(f"{field} must be a number", field)
    if not result.is_finite():
        raise ValidationError(f"{field} must be a finite number", field)
    return result


def to_money(value: Number, field: str, allow_zero: bool = True) -> Decimal:
    """
    Validate a monetary amount and return it quantized to cents.

    Args:
        value: Amount to validate
        field: Field name reported in validation errors
        allow_zero: Whether 0 is an acceptable amount

    Returns:
        Decimal with exactly two fractional digits

    Raises:
        ValidationError: If the amount is negative (or zero when not allowed),
            exceeds 999,999.99, or has more than two decimal places
    """
    amount = to_decimal(value, field)
    if amount < 0 or (amount == 0 and not allow_zero):
        qualifier = "non-negative" if allow_zero else "greater than 0"
        raise ValidationError(f"{field} must be {qualifier}", field)
    if amount > MAX_AMOUNT:
        raise ValidationError(f"{field} cannot exceed {MAX_AMOUNT}", field)
    if amount != amount.quantize(CENT):
        raise ValidationError(f"{field} cannot have more than 2 decimal places", field)
    return amount.quantize(CENT)


@dataclass(frozen=True, order=True)
class Price:
    """Strictly positive price."""

    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_money(self.value, "price", allow_zero=False))

    @classmethod
    def create(cls, value: Number) -> "Price":
        return cls(value)

    def apply_discount(self, percent: Number) -> "Price":
        """
        Return a new Price reduced by ``percent`` and rounded to the cent.

        Raises:
            ValidationError: If percent is outside [0, 100]
        """
        pct = to_decimal(percent, "discountPercent")
        if pct < 0 or pct > 100:
            raise ValidationError("Discount percent must be between 0 and 100", "discountPercent")
        discounted = self.value * (Decimal(100) - pct) / Decimal(100)
        return Price(discounted.quantize(CENT, rounding=ROUND_HALF_UP))

    def add(self, other: "Price") -> "Price":
        return Price(self.value + other.value)

    def multiply(self, factor: Number) -> "Price":
        multiplier = to_decimal(factor, "factor")
        if multiplier < 0:
            raise ValidationError("Multiplication factor cannot be negative", "factor")
        return Price((self.value * multiplier).quantize(CENT, rounding=ROUND_HALF_UP))

    def to_currency(self) -> str:
        return f"${self.value:.2f}"

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{self.value:.2f}"
