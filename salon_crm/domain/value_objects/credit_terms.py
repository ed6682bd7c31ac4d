"""
Credit Terms Value Object
=========================

A client's payment schedule and spending-limit policy.

PREPAID and IMMEDIATE terms settle every charge on the spot, so they always
accept charges and never carry a balance. All other terms accumulate a
balance that may not exceed the credit limit.
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Dict, Optional

from salon_crm.domain.errors import BusinessRuleViolationError, ValidationError
from salon_crm.domain.value_objects.choice import ChoiceEnum
from salon_crm.domain.value_objects.price import Number, to_decimal, to_money


class PaymentTerms(ChoiceEnum):
    NET_15 = "NET_15"
    NET_30 = "NET_30"
    NET_45 = "NET_45"
    NET_60 = "NET_60"
    IMMEDIATE = "IMMEDIATE"
    PREPAID = "PREPAID"
    CUSTOM = "CUSTOM"

    def bypasses_balance(self) -> bool:
        return self in (PaymentTerms.PREPAID, PaymentTerms.IMMEDIATE)


_NET_DAYS = {
    PaymentTerms.NET_15: 15,
    PaymentTerms.NET_30: 30,
    PaymentTerms.NET_45: 45,
    PaymentTerms.NET_60: 60,
    PaymentTerms.IMMEDIATE: 0,
    PaymentTerms.PREPAID: 0,
}


def _to_percent(value: Number, field: str) -> Decimal:
    percent = to_decimal(value, field)
    if percent < 0 or percent > 100:
        raise ValidationError("Discount percent must be between 0 and 100", field)
    return percent


@dataclass(frozen=True)
class CreditTerms:
    payment_terms: PaymentTerms
    credit_limit: Decimal = Decimal("0.00")
    current_balance: Decimal = Decimal("0.00")
    discount_percent: Decimal = Decimal("0")
    custom_terms_days: Optional[int] = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.payment_terms is None:
            raise ValidationError("Payment terms are required", "creditTerms.paymentTerms")
        payment_terms = PaymentTerms.parse(self.payment_terms)

        if self.custom_terms_days is not None and (
            isinstance(self.custom_terms_days, bool) or not isinstance(self.custom_terms_days, int)
        ):
            raise ValidationError(
                "Custom terms days must be a whole number", "creditTerms.customTermsDays"
            )
        if payment_terms is PaymentTerms.CUSTOM and (
            self.custom_terms_days is None or self.custom_terms_days <= 0
        ):
            raise ValidationError(
                "Custom terms days must be provided and greater than 0 for CUSTOM payment terms",
                "creditTerms.customTermsDays",
            )

        credit_limit = to_money(self.credit_limit, "creditTerms.creditLimit")
        current_balance = to_money(self.current_balance, "creditTerms.currentBalance")
        if current_balance > credit_limit:
            raise ValidationError(
                "Current balance cannot exceed credit limit", "creditTerms.currentBalance"
            )
        discount_percent = _to_percent(self.discount_percent, "creditTerms.discountPercent")

        if not isinstance(self.is_active, bool):
            raise ValidationError(
                "Credit terms active status must be a boolean", "creditTerms.isActive"
            )

        object.__setattr__(self, "payment_terms", payment_terms)
        object.__setattr__(self, "credit_limit", credit_limit)
        object.__setattr__(self, "current_balance", current_balance)
        object.__setattr__(self, "discount_percent", discount_percent)

    @classmethod
    def immediate(cls) -> "CreditTerms":
        return cls(payment_terms=PaymentTerms.IMMEDIATE)

    @classmethod
    def net30(cls, credit_limit: Number, discount_percent: Number = 0) -> "CreditTerms":
        return cls(
            payment_terms=PaymentTerms.NET_30,
            credit_limit=credit_limit,
            discount_percent=discount_percent,
        )

    @classmethod
    def prepaid(cls) -> "CreditTerms":
        return cls(payment_terms=PaymentTerms.PREPAID)

    @property
    def available_credit(self) -> Decimal:
        return max(self.credit_limit - self.current_balance, Decimal("0.00"))

    def is_over_limit(self) -> bool:
        return self.current_balance > self.credit_limit

    def is_near_limit(self, threshold: float = 0.9) -> bool:
        return self.current_balance >= self.credit_limit * to_decimal(threshold, "threshold")

    def can_process_charge(self, amount: Number) -> bool:
        if not self.is_active:
            return False
        if self.payment_terms.bypasses_balance():
            return True
        return self.current_balance + to_decimal(amount, "amount") <= self.credit_limit

    def add_charge(self, amount: Number) -> "CreditTerms":
        """
        Record a charge against the account.

        Returns:
            New CreditTerms with the increased balance (unchanged for
            PREPAID / IMMEDIATE terms)

        Raises:
            ValidationError: If the amount is not a positive money value
            BusinessRuleViolationError: If the terms are suspended or the
                charge would exceed the credit limit
        """
        charge = to_money(amount, "amount", allow_zero=False)
        if not self.is_active:
            raise BusinessRuleViolationError("Credit terms are suspended")
        if self.payment_terms.bypasses_balance():
            return self
        if not self.can_process_charge(charge):
            raise BusinessRuleViolationError(
                f"Charge of {charge} would exceed credit limit "
                f"(available credit: {self.available_credit})"
            )
        return replace(self, current_balance=self.current_balance + charge)

    def process_payment(self, amount: Number) -> "CreditTerms":
        payment = to_money(amount, "amount", allow_zero=False)
        if payment > self.current_balance:
            raise BusinessRuleViolationError(
                f"Payment amount {payment} exceeds current balance {self.current_balance}"
            )
        return replace(self, current_balance=self.current_balance - payment)

    def update_credit_limit(self, new_limit: Number) -> "CreditTerms":
        return replace(self, credit_limit=to_money(new_limit, "creditLimit"))

    def update_discount_percent(self, new_percent: Number) -> "CreditTerms":
        return replace(self, discount_percent=_to_percent(new_percent, "discountPercent"))

    def suspend(self) -> "CreditTerms":
        return replace(self, is_active=False)

    def reactivate(self) -> "CreditTerms":
        return replace(self, is_active=True)

    @property
    def payment_due_days(self) -> int:
        if self.payment_terms is PaymentTerms.CUSTOM:
            return self.custom_terms_days or 0
        return _NET_DAYS[self.payment_terms]

    @property
    def terms_description(self) -> str:
        if self.payment_terms is PaymentTerms.IMMEDIATE:
            return "Payment Due Immediately"
        if self.payment_terms is PaymentTerms.PREPAID:
            return "Prepaid Services Only"
        return f"Net {self.payment_due_days} Days"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "payment_terms": self.payment_terms.value,
            "credit_limit": float(self.credit_limit),
            "current_balance": float(self.current_balance),
            "available_credit": float(self.available_credit),
            "discount_percent": float(self.discount_percent),
            "custom_terms_days": self.custom_terms_days,
            "is_active": self.is_active,
            "terms_description": self.terms_description,
            "payment_due_days": self.payment_due_days,
        }
